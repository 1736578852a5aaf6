"""Event interpreter: folds events into diagram rows.

Every event is handled in two phases. ``plan`` rewrites edge cases into
simpler events and computes a ``Step`` holding the rows to draw and the
registry change to make. ``feed`` writes the rows and only then applies the
change, so a failing sink never leaves an event half-applied.
"""

import io
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol

from . import rows
from .errors import SinkError
from .events import (
    Event,
    JoinTrack,
    NoEvent,
    SplitTrack,
    StartTrack,
    StartTracks,
    Station,
    StopTrack,
)
from .tracks import TrackRegistry

logger = logging.getLogger(__name__)


class Writer(Protocol):
    def write(self, text: str, /) -> object: ...


@dataclass
class Step:
    """Rows produced by one event and the registry change that follows them."""
    rows: list[str] = field(default_factory=list)
    mutate: Callable[[TrackRegistry], None] | None = None

    def apply(self, tracks: TrackRegistry) -> None:
        if self.mutate is not None:
            self.mutate(tracks)


def normalize(event: Event, tracks: TrackRegistry) -> Event | None:
    """Rewrite degenerate splits and joins.

    Returns the event to render in place of ``event``, or None when the
    event does nothing against the current ``tracks``.
    """
    match event:
        case SplitTrack(from_track_id, new_track_id):
            if new_track_id in tracks:
                return None
            if from_track_id not in tracks:
                return StartTrack(new_track_id)
        case JoinTrack(from_track_id, to_track_id):
            if from_track_id == to_track_id:
                return StopTrack(from_track_id)
            if from_track_id not in tracks:
                return None
            if to_track_id not in tracks:
                return StopTrack(from_track_id)
    return event


class Interpreter:
    """Owns a track registry and renders events against it."""

    def __init__(self, tracks: TrackRegistry | None = None):
        self.tracks = tracks if tracks is not None else TrackRegistry.seeded()

    def plan(self, event: Event) -> Step:
        """Compute the rows and registry change for ``event``.

        Nothing is mutated here.
        """
        normalized = normalize(event, self.tracks)
        if normalized != event:
            logger.debug(f"Rewrote {event!r} as {normalized!r}")
        if normalized is None:
            return Step()

        tracks = self.tracks
        width = len(tracks)

        match normalized:
            case StartTrack(track_id):
                if track_id in tracks:
                    return Step()
                return Step([rows.rails_row(width + 1)], lambda t: t.append(track_id))

            case StartTracks(track_ids):
                added = []
                for track_id in track_ids:
                    if track_id not in tracks and track_id not in added:
                        added.append(track_id)
                if not added:
                    return Step()

                def start_all(t: TrackRegistry) -> None:
                    for track_id in added:
                        t.append(track_id)

                return Step([rows.rails_row(width + len(added))], start_all)

            case StopTrack(track_id):
                column = tracks.position_of(track_id)
                if column is None:
                    return Step()
                return Step(rows.stop_rows(width, column), lambda t: t.remove_at(column))

            case Station(track_id, text):
                return Step(rows.station_rows(width, tracks.position_of(track_id), text))

            case SplitTrack(from_track_id, new_track_id):
                column = tracks.position_of(from_track_id)
                return Step(
                    [rows.split_row(width, column)],
                    lambda t: t.insert_after(column, new_track_id),
                )

            case JoinTrack(from_track_id, to_track_id):
                from_column = tracks.position_of(from_track_id)
                to_column = tracks.position_of(to_track_id)
                left, right = sorted((from_column, to_column))
                return Step(
                    rows.join_rows(width, left, right),
                    lambda t: t.remove_at(from_column),
                )

            case NoEvent():
                return Step([rows.rails_row(width)])

        raise TypeError(f"Unknown event: {event!r}")

    def feed(self, event: Event, writer: Writer) -> int:
        """Render one event to ``writer``. Returns the number of rows written."""
        step = self.plan(event)
        for row in step.rows:
            _write_row(writer, row)
        step.apply(self.tracks)
        return len(step.rows)

    def run(self, events: Iterable[Event], writer: Writer) -> int:
        """Render all ``events`` in order. Returns the number of rows written."""
        count = 0
        total = 0
        for event in events:
            total += self.feed(event, writer)
            count += 1
        logger.debug(f"Rendered {count} events into {total} rows, {len(self.tracks)} tracks live")
        return total

    def iter_rows(self, events: Iterable[Event]) -> Iterator[str]:
        """Yield rows lazily.

        An event's registry change is applied once all of its rows have been
        consumed.
        """
        for event in events:
            step = self.plan(event)
            yield from step.rows
            step.apply(self.tracks)


def _write_row(writer: Writer, row: str) -> None:
    try:
        writer.write(row + "\n")
    except Exception as e:
        raise SinkError(row, e) from e


def to_writer(writer: Writer, events: Iterable[Event]) -> TrackRegistry:
    """Write the diagram for ``events`` to ``writer``.

    The registry starts with track ``0``. Returns the final registry.
    """
    interpreter = Interpreter()
    interpreter.run(events, writer)
    return interpreter.tracks


def to_lines(events: Iterable[Event]) -> list[str]:
    """Diagram rows for ``events``, without line breaks."""
    return list(Interpreter().iter_rows(events))


def to_string(events: Iterable[Event]) -> str:
    """The diagram for ``events`` as one string; every row ends in a newline."""
    buffer = io.StringIO()
    to_writer(buffer, events)
    return buffer.getvalue()


def to_bytes(events: Iterable[Event], encoding: str = "utf-8") -> bytes:
    """The diagram for ``events`` encoded with ``encoding``."""
    return to_string(events).encode(encoding)
