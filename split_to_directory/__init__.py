"""
Directory Splitter
==================

Splits the regular files of a large flat directory into fixed-size groups,
each moved into its own numbered (or custom-named) subdirectory.
"""

__version__ = "0.1.0"

from .errors import (
    SplitError,
    InvalidConfigurationError,
    DirectoryAccessError,
    DestinationConflictError,
    RelocationError,
)
from .ordering import (
    ORDERINGS,
    natural_compare,
    name_compare,
    reverse_natural_compare,
    size_compare,
    mtime_compare,
    default_directory_name,
)
from .planning import Chunk
from .splitter import DEFAULT_CHUNK_SIZE, FileSplitToDirectory, FileSplitToDirectoryBuilder

__all__ = [
    "SplitError",
    "InvalidConfigurationError",
    "DirectoryAccessError",
    "DestinationConflictError",
    "RelocationError",
    "ORDERINGS",
    "natural_compare",
    "name_compare",
    "reverse_natural_compare",
    "size_compare",
    "mtime_compare",
    "default_directory_name",
    "Chunk",
    "DEFAULT_CHUNK_SIZE",
    "FileSplitToDirectory",
    "FileSplitToDirectoryBuilder",
]
