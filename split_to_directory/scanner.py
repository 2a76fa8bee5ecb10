"""
Directory enumeration.

Lists the immediate regular files of a root directory.
"""

import os
from pathlib import Path

from .errors import DirectoryAccessError


def is_regular_file(entry: os.DirEntry) -> bool:
    """
    Check whether a directory entry is a regular file.

    Symlinks are never followed, so a link to a file is not a regular file.
    An entry whose type cannot be determined counts as "not a file".
    """
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False


def scan_directory(root: Path) -> list[os.DirEntry]:
    """
    Enumerate the regular files directly under root.

    Args:
        root: The directory to list. Subdirectories are not descended into.

    Returns:
        Entries in filesystem order, which is unspecified.

    Raises:
        DirectoryAccessError: If root cannot be opened for listing.
    """
    try:
        with os.scandir(root) as it:
            return [entry for entry in it if is_regular_file(entry)]
    except OSError as e:
        raise DirectoryAccessError(f"Cannot list directory ({e.strerror or e})", root) from e
