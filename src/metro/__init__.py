"""metro - Render graph-mutation events as metro-style text diagrams.

A sequence of events (start, split, join and stop tracks, stations) is turned
into rows of ASCII rails resembling a commit-history graph.
"""

__version__ = "0.1.0"
__description__ = "Render graph-mutation events as metro-style text diagrams"

from metro.builder import Metro, Track
from metro.config import MetroConfig
from metro.errors import (
    DanglingTrackError,
    MetroError,
    RegistryError,
    ScriptError,
    SinkError,
)
from metro.events import (
    DETACHED_TRACK,
    Event,
    EventKind,
    JoinTrack,
    NoEvent,
    SplitTrack,
    StartTrack,
    StartTracks,
    Station,
    StopTrack,
)
from metro.interpreter import Interpreter, to_bytes, to_lines, to_string, to_writer
from metro.tracks import TrackRegistry

__all__ = [
    "__version__",
    "__description__",
    "DETACHED_TRACK",
    "DanglingTrackError",
    "Event",
    "EventKind",
    "Interpreter",
    "JoinTrack",
    "Metro",
    "MetroConfig",
    "MetroError",
    "NoEvent",
    "RegistryError",
    "ScriptError",
    "SinkError",
    "SplitTrack",
    "StartTrack",
    "StartTracks",
    "Station",
    "StopTrack",
    "Track",
    "TrackRegistry",
    "to_bytes",
    "to_lines",
    "to_string",
    "to_writer",
]
