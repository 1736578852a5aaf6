"""Exception types raised by metro."""


class MetroError(Exception):
    """Base class for all metro errors."""
    pass


class SinkError(MetroError):
    """Writing a rendered row to the output sink failed.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, row: str, cause: BaseException):
        self.row = row
        self.cause = cause
        super().__init__(f"Failed to write row {row!r}: {cause}")


class RegistryError(MetroError):
    """The track registry was asked to do something impossible.

    This always indicates a bug in the interpreter, never bad input.
    """
    pass


class ScriptError(MetroError):
    """An event script could not be read or validated."""

    def __init__(self, path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid event script {path}: {detail}")


class DanglingTrackError(MetroError):
    """A builder handle was used after its track was stopped or joined."""

    def __init__(self, track_id: int):
        self.track_id = track_id
        super().__init__(f"Track {track_id} is no longer live")
