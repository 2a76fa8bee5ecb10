"""
Configuration and execution of a directory split.

FileSplitToDirectoryBuilder accumulates settings and validates them once;
FileSplitToDirectory is the immutable, ready-to-run operation.
"""

from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidConfigurationError
from .executor import relocate
from .ordering import (
    DirectoryNameFn,
    SortCmp,
    default_directory_name,
    natural_compare,
    sort_entries,
)
from .planning import Chunk, build_chunks
from .scanner import scan_directory

DEFAULT_CHUNK_SIZE = 4400


@dataclass(frozen=True)
class FileSplitToDirectory:
    path: Path
    chunk: int
    sort_cmp: SortCmp
    directory_name: DirectoryNameFn

    def plan(self) -> list[Chunk]:
        """
        Enumerate, order and partition the files under path without moving anything.

        Raises:
            DirectoryAccessError: If path cannot be listed.
            InvalidConfigurationError: If the naming function yields unusable names.
        """
        entries = sort_entries(scan_directory(self.path), self.sort_cmp)
        return build_chunks(entries, self.chunk, self.directory_name)

    def execute(self, progress: bool = False) -> None:
        """
        Run the split once.

        Files already moved stay moved if a later step fails.
        """
        relocate(self.path, self.plan(), progress=progress)


class FileSplitToDirectoryBuilder:
    """
    Mutable configuration for a FileSplitToDirectory.

    Usage:
        FileSplitToDirectoryBuilder().with_path(root).with_chunk(100).build().execute()
    """

    def __init__(self):
        self.path: Path | str | None = None
        self.chunk: int = DEFAULT_CHUNK_SIZE
        self.sort_cmp: SortCmp = natural_compare
        self.directory_name: DirectoryNameFn = default_directory_name

    def with_path(self, path: Path | str) -> "FileSplitToDirectoryBuilder":
        self.path = path
        return self

    def with_chunk(self, chunk: int) -> "FileSplitToDirectoryBuilder":
        self.chunk = chunk
        return self

    def with_sort_cmp(self, sort_cmp: SortCmp) -> "FileSplitToDirectoryBuilder":
        self.sort_cmp = sort_cmp
        return self

    def with_directory_name(self, directory_name: DirectoryNameFn) -> "FileSplitToDirectoryBuilder":
        self.directory_name = directory_name
        return self

    def build(self) -> FileSplitToDirectory:
        """
        Validate the settings and freeze them into an operation.

        No filesystem access happens here.

        Raises:
            InvalidConfigurationError: If the path is unset, the chunk size is not
                a positive integer, or a strategy is not callable.
        """
        if self.path is None or self.path == "":
            raise InvalidConfigurationError("path is not set")
        try:
            path = Path(self.path)
        except TypeError as e:
            raise InvalidConfigurationError(f"path must be a str or os.PathLike, got {self.path!r}") from e

        # bool is an int subclass but never a meaningful chunk size
        if isinstance(self.chunk, bool) or not isinstance(self.chunk, int):
            raise InvalidConfigurationError(f"chunk must be an integer, got {self.chunk!r}")
        if self.chunk <= 0:
            raise InvalidConfigurationError(f"chunk must be positive, got {self.chunk}")

        if not callable(self.sort_cmp):
            raise InvalidConfigurationError("sort_cmp must be callable")
        if not callable(self.directory_name):
            raise InvalidConfigurationError("directory_name must be callable")

        return FileSplitToDirectory(
            path=path,
            chunk=self.chunk,
            sort_cmp=self.sort_cmp,
            directory_name=self.directory_name,
        )
