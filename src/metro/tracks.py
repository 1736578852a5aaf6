"""Ordered registry of live track ids."""

from collections.abc import Iterable, Iterator

from .errors import RegistryError


class TrackRegistry:
    """Live track ids in column order (leftmost = column 0)."""

    def __init__(self, track_ids: Iterable[int] = ()):
        self._ids: list[int] = []
        for track_id in track_ids:
            self.append(track_id)

    @classmethod
    def seeded(cls) -> "TrackRegistry":
        """Registry holding the default track ``0``."""
        return cls([0])

    def __contains__(self, track_id: object) -> bool:
        return track_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __repr__(self) -> str:
        return f"TrackRegistry({self._ids!r})"

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(self._ids)

    def position_of(self, track_id: int) -> int | None:
        """Column of ``track_id``, or None if it is not live."""
        try:
            return self._ids.index(track_id)
        except ValueError:
            return None

    def append(self, track_id: int) -> None:
        if track_id in self._ids:
            raise RegistryError(f"track {track_id} is already live")
        self._ids.append(track_id)

    def insert_after(self, column: int, track_id: int) -> None:
        if not 0 <= column < len(self._ids):
            raise RegistryError(f"cannot insert after column {column} of {len(self._ids)}")
        if track_id in self._ids:
            raise RegistryError(f"track {track_id} is already live")
        self._ids.insert(column + 1, track_id)

    def remove_at(self, column: int) -> int:
        if not 0 <= column < len(self._ids):
            raise RegistryError(f"cannot remove column {column} of {len(self._ids)}")
        return self._ids.pop(column)
