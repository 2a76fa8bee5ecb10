"""
Partitioning of ordered entries into named chunks.
"""

import os
from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidConfigurationError
from .ordering import DirectoryNameFn

_SEPARATORS = {"/", os.sep, os.altsep} - {None}


@dataclass(frozen=True)
class Chunk:
    """A contiguous group of ordered entries bound for one directory."""
    index: int
    directory_name: str
    entries: tuple[os.DirEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)


def partition(entries: Sequence, chunk_size: int) -> list[Sequence]:
    """
    Slice an ordered sequence into contiguous groups of at most chunk_size.

    Group i holds positions [i * chunk_size, min((i + 1) * chunk_size, n)).
    An empty sequence yields no groups.
    """
    return [entries[i:i + chunk_size] for i in range(0, len(entries), chunk_size)]


def check_directory_name(name, index: int) -> str:
    """
    Validate a generated directory name.

    The name must be a single non-empty path component so the destination
    sits directly under root.
    """
    if not isinstance(name, str) or not name:
        raise InvalidConfigurationError(
            f"Directory name for chunk {index} must be a non-empty string, got {name!r}"
        )
    if name in (".", "..") or any(sep in name for sep in _SEPARATORS):
        raise InvalidConfigurationError(
            f"Directory name for chunk {index} is not a single path component: {name!r}"
        )
    if "\x00" in name:
        raise InvalidConfigurationError(
            f"Directory name for chunk {index} contains a null byte: {name!r}"
        )
    return name


def build_chunks(
    entries: Sequence[os.DirEntry],
    chunk_size: int,
    directory_name: DirectoryNameFn,
) -> list[Chunk]:
    """
    Partition ordered entries and name every chunk.

    All names are computed and checked up front, so a bad naming function
    is reported before anything is moved.

    Args:
        entries: Entries already in their final order.
        chunk_size: Positive maximum number of entries per chunk.
        directory_name: Maps a chunk index to its directory name.

    Returns:
        Chunks in ascending index order.

    Raises:
        InvalidConfigurationError: If a name is unusable or two chunks share a name.
    """
    chunks: list[Chunk] = []
    seen: dict[str, int] = {}

    for index, group in enumerate(partition(entries, chunk_size)):
        name = check_directory_name(directory_name(index), index)
        if name in seen:
            raise InvalidConfigurationError(
                f"Chunks {seen[name]} and {index} map to the same directory: {name!r}"
            )
        seen[name] = index
        chunks.append(Chunk(index=index, directory_name=name, entries=tuple(group)))

    return chunks
