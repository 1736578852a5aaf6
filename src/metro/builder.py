"""Handle-based builder for event sequences.

``Metro`` records events while ``Track`` handles are split, joined and
stopped. It never renders anything itself; rendering goes through the
interpreter exactly as for a hand-written event list.

Example::

    metro = Metro()
    main = metro.new_track()
    main.add_station("Initial commit")
    with main.split() as feature:
        feature.add_station("Work in progress")
    main.add_station("Release")
    print(metro.to_string())
"""

import logging
from collections.abc import Iterator

from .errors import DanglingTrackError
from .events import (
    DETACHED_TRACK,
    Event,
    JoinTrack,
    SplitTrack,
    StartTrack,
    Station,
    StopTrack,
)
from .interpreter import Writer, to_bytes, to_lines, to_string, to_writer
from .tracks import TrackRegistry

logger = logging.getLogger(__name__)


class Metro:
    """Records events for a diagram."""

    def __init__(self):
        self._events: list[Event] = []
        self._live: list[int] = []
        self._next_id = 0

    def _record(self, event: Event) -> None:
        self._events.append(event)

    def _allocate_id(self) -> int:
        track_id = self._next_id
        self._next_id += 1
        return track_id

    def is_live(self, track_id: int) -> bool:
        return track_id in self._live

    def new_track(self) -> "Track":
        """Start a track with the next unused id."""
        return self.new_track_with_id(self._allocate_id())

    def new_track_with_id(self, track_id: int) -> "Track":
        """Start a track with a specific id.

        If ``track_id`` is already live this returns a handle to it and
        records nothing.
        """
        if not self.is_live(track_id):
            self._live.append(track_id)
            self._record(StartTrack(track_id))
        return Track(self, track_id)

    def get_track(self, track_id: int) -> "Track | None":
        if self.is_live(track_id):
            return Track(self, track_id)
        return None

    def add_station(self, text: str) -> None:
        """Add a station that is not attached to any track."""
        self._record(Station(DETACHED_TRACK, text))

    @property
    def events(self) -> list[Event]:
        return list(self._events)

    def to_writer(self, writer: Writer) -> TrackRegistry:
        return to_writer(writer, self._events)

    def to_lines(self) -> list[str]:
        return to_lines(self._events)

    def to_string(self) -> str:
        return to_string(self._events)

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return to_bytes(self._events, encoding)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)


class Track:
    """A handle to one track of a ``Metro``.

    Several handles may share an id. Once the track is stopped or joined
    every handle to it is dangling until the id is started again.
    """

    def __init__(self, metro: Metro, track_id: int):
        self._metro = metro
        self._id = track_id

    def __repr__(self) -> str:
        return f"Track(id={self._id})"

    def __enter__(self) -> "Track":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    @property
    def id(self) -> int:
        return self._id

    @property
    def is_dangling(self) -> bool:
        return not self._metro.is_live(self._id)

    def _ensure_live(self) -> None:
        if self.is_dangling:
            raise DanglingTrackError(self._id)

    def add_station(self, text: str) -> None:
        self._ensure_live()
        self._metro._record(Station(self._id, text))

    def split(self) -> "Track":
        """Branch off a new track with the next unused id."""
        self._ensure_live()
        return self.split_with_id(self._metro._allocate_id())

    def split_with_id(self, new_track_id: int) -> "Track":
        """Branch off a track with a specific id.

        If ``new_track_id`` is already live, its existing handle is returned
        and nothing is recorded.
        """
        self._ensure_live()
        metro = self._metro
        if not metro.is_live(new_track_id):
            position = metro._live.index(self._id)
            metro._live.insert(position + 1, new_track_id)
            metro._record(SplitTrack(self._id, new_track_id))
        return Track(metro, new_track_id)

    def join(self, to_track: "Track") -> None:
        """Merge this track into ``to_track``; this track stops."""
        self._ensure_live()
        metro = self._metro
        metro._record(JoinTrack(self._id, to_track.id))
        metro._live.remove(self._id)
        logger.debug(f"Joined track {self._id} into {to_track.id}")

    def stop(self) -> None:
        """Stop the track. Does nothing if it is already dangling."""
        if self.is_dangling:
            return
        self._metro._record(StopTrack(self._id))
        self._metro._live.remove(self._id)
