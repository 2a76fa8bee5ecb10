"""
Exception types for the directory splitter.

All failures surface to the caller as subclasses of SplitError.
"""

from pathlib import Path


class SplitError(Exception):
    """Base class for every failure raised by the splitter."""


class InvalidConfigurationError(SplitError):
    """Raised before any filesystem access when the configuration is unusable."""


class _PathError(SplitError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class DirectoryAccessError(_PathError):
    """The root directory cannot be listed."""


class DestinationConflictError(_PathError):
    """A destination path exists but is not a directory."""


class RelocationError(_PathError):
    """Moving a file (or creating its destination directory) failed."""
