"""Event types consumed by the interpreter.

Each dataclass is one kind of graph mutation. ``Event`` is their union; the
interpreter matches on it exhaustively.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

# Track id used for stations that are not attached to any track
DETACHED_TRACK = 2**64 - 1


class EventKind(str, Enum):
    """Event kinds, also used as the ``kind`` tag in event scripts."""
    START = "start"
    START_MANY = "start_many"
    STOP = "stop"
    STATION = "station"
    SPLIT = "split"
    JOIN = "join"
    TICK = "tick"


@dataclass(frozen=True)
class StartTrack:
    """Add ``track_id`` as the rightmost track unless it is already live."""
    kind: ClassVar[EventKind] = EventKind.START

    track_id: int


@dataclass(frozen=True)
class StartTracks:
    """Batch form of StartTrack. Renders a single row."""
    kind: ClassVar[EventKind] = EventKind.START_MANY

    track_ids: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # accept any iterable, store an immutable copy
        object.__setattr__(self, "track_ids", tuple(self.track_ids))


@dataclass(frozen=True)
class StopTrack:
    """Remove ``track_id``; rails to its right are pulled left."""
    kind: ClassVar[EventKind] = EventKind.STOP

    track_id: int


@dataclass(frozen=True)
class Station:
    """A labeled waypoint on ``track_id``.

    If the track is not live the text is still rendered, with no rail
    highlighted. ``text`` may span several lines.
    """
    kind: ClassVar[EventKind] = EventKind.STATION

    track_id: int
    text: str = ""


@dataclass(frozen=True)
class SplitTrack:
    """Branch ``new_track_id`` off to the right of ``from_track_id``."""
    kind: ClassVar[EventKind] = EventKind.SPLIT

    from_track_id: int
    new_track_id: int


@dataclass(frozen=True)
class JoinTrack:
    """Merge ``from_track_id`` into ``to_track_id``, removing the former."""
    kind: ClassVar[EventKind] = EventKind.JOIN

    from_track_id: int
    to_track_id: int


@dataclass(frozen=True)
class NoEvent:
    """One row of unchanged rails."""
    kind: ClassVar[EventKind] = EventKind.TICK


Event = Union[StartTrack, StartTracks, StopTrack, Station, SplitTrack, JoinTrack, NoEvent]
