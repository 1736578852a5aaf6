"""Event scripts: event sequences stored as JSON or YAML.

A script is either a list of event objects or an object with an ``events``
list. Every event object carries a ``kind`` tag::

    [
      {"kind": "start_many", "tracks": [0, 1, 2]},
      {"kind": "station", "track": 1, "text": "Hello World"},
      {"kind": "split", "from": 1, "new": 4},
      {"kind": "join", "from": 4, "to": 0},
      {"kind": "stop", "track": 2},
      {"kind": "tick"}
    ]

A station without a ``track`` (or with ``null``) is detached.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError

from .errors import ScriptError
from .events import (
    DETACHED_TRACK,
    Event,
    JoinTrack,
    NoEvent,
    SplitTrack,
    StartTrack,
    StartTracks,
    Station,
    StopTrack,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class StartSpec(BaseModel):
    kind: Literal["start"]
    track: NonNegativeInt

    model_config = ConfigDict(extra="forbid")

    def to_event(self) -> Event:
        return StartTrack(self.track)


class StartManySpec(BaseModel):
    kind: Literal["start_many"]
    tracks: list[NonNegativeInt] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_event(self) -> Event:
        return StartTracks(tuple(self.tracks))


class StopSpec(BaseModel):
    kind: Literal["stop"]
    track: NonNegativeInt

    model_config = ConfigDict(extra="forbid")

    def to_event(self) -> Event:
        return StopTrack(self.track)


class StationSpec(BaseModel):
    kind: Literal["station"]
    track: NonNegativeInt | None = None  # None = detached
    text: str = ""

    model_config = ConfigDict(extra="forbid")

    def to_event(self) -> Event:
        track = DETACHED_TRACK if self.track is None else self.track
        return Station(track, self.text)


class SplitSpec(BaseModel):
    kind: Literal["split"]
    from_track: NonNegativeInt = Field(alias="from")
    new_track: NonNegativeInt = Field(alias="new")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_event(self) -> Event:
        return SplitTrack(self.from_track, self.new_track)


class JoinSpec(BaseModel):
    kind: Literal["join"]
    from_track: NonNegativeInt = Field(alias="from")
    to_track: NonNegativeInt = Field(alias="to")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_event(self) -> Event:
        return JoinTrack(self.from_track, self.to_track)


class TickSpec(BaseModel):
    kind: Literal["tick"]

    model_config = ConfigDict(extra="forbid")

    def to_event(self) -> Event:
        return NoEvent()


EventSpec = Annotated[
    Union[StartSpec, StartManySpec, StopSpec, StationSpec, SplitSpec, JoinSpec, TickSpec],
    Field(discriminator="kind"),
]


class EventScript(BaseModel):
    """A validated event script."""
    events: list[EventSpec] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_events(self) -> list[Event]:
        return [spec.to_event() for spec in self.events]


def parse_script(data: Any, source: str | Path = "<data>") -> list[Event]:
    """Validate already-decoded script data and convert it to events.

    Raises:
        ScriptError: If the data is not a valid script
    """
    if isinstance(data, list):
        data = {"events": data}
    if not isinstance(data, dict):
        raise ScriptError(source, "expected a list of events or an object with 'events'")

    try:
        script = EventScript.model_validate(data)
    except ValidationError as e:
        raise ScriptError(source, str(e)) from e

    return script.to_events()


def load_script(path: str | Path) -> list[Event]:
    """Load events from a JSON or YAML script file.

    Args:
        path: Script file; ``.yaml``/``.yml`` files are read as YAML,
              anything else as JSON

    Returns:
        The events in file order

    Raises:
        ScriptError: If the file cannot be read, decoded or validated
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ScriptError(path, f"cannot read file: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ScriptError(path, f"cannot decode file: {e}") from e

    events = parse_script(data, path)
    logger.info(f"Loaded {len(events)} events from {path}")
    return events


def _event_to_dict(event: Event) -> dict[str, Any]:
    match event:
        case StartTrack(track_id):
            return {"kind": event.kind.value, "track": track_id}
        case StartTracks(track_ids):
            return {"kind": event.kind.value, "tracks": list(track_ids)}
        case StopTrack(track_id):
            return {"kind": event.kind.value, "track": track_id}
        case Station(track_id, text):
            track = None if track_id == DETACHED_TRACK else track_id
            return {"kind": event.kind.value, "track": track, "text": text}
        case SplitTrack(from_track_id, new_track_id):
            return {"kind": event.kind.value, "from": from_track_id, "new": new_track_id}
        case JoinTrack(from_track_id, to_track_id):
            return {"kind": event.kind.value, "from": from_track_id, "to": to_track_id}
        case NoEvent():
            return {"kind": event.kind.value}
    raise TypeError(f"Unknown event: {event!r}")


def dump_events(events: list[Event]) -> dict[str, Any]:
    """Serialize events into the script structure accepted by ``parse_script``."""
    return {"events": [_event_to_dict(event) for event in events]}
