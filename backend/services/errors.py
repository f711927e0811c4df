"""Exceptions raised by the scoring core."""


class ScanError(Exception):
    """Base class for scan failures surfaced to API callers."""


class MalformedSignalError(ScanError):
    """A signal group was supplied with a shape the engine cannot read."""

    def __init__(self, group: str, detail: str = ""):
        self.group = group
        self.detail = detail
        message = f"Malformed signal group '{group}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SignalUnavailableError(ScanError):
    """A signal source could not produce its group for this scan."""
