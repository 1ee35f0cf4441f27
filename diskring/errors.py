"""Exceptions raised by diskring."""


class DiskringError(Exception):
    """Base class for diskring errors."""


class ScanError(DiskringError):
    """Raised when the filesystem walk hits an I/O error.

    The scan is aborted; there is no skip-and-continue.
    """

    def __init__(self, path: str, error: OSError):
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"{reason}: {path}")
