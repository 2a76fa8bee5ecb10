"""
Relocation of planned chunks into their destination directories.

Moves are same-filesystem renames. Nothing is copied, deleted or rolled back:
a failed run leaves every file either in root or in its final directory.
"""

import os
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from .errors import DestinationConflictError, RelocationError
from .planning import Chunk


def ensure_directory(path: Path) -> bool:
    """
    Make sure a destination directory exists.

    An existing directory is reused as-is. Symlinks are not followed.

    Returns:
        True if the directory was created, False if it already existed.

    Raises:
        DestinationConflictError: If path is a symlink or exists but is not a directory.
        RelocationError: If the directory cannot be created.
    """
    if path.is_symlink():
        raise DestinationConflictError("Destination is a symlink", path)
    if path.is_dir():
        return False
    if path.exists():
        raise DestinationConflictError("Destination exists and is not a directory", path)
    try:
        path.mkdir()
    except OSError as e:
        raise RelocationError(f"Failed to create directory ({e.strerror or e})", path) from e
    return True


def move_file(src: Path, dst_dir: Path) -> Path:
    """
    Move src into dst_dir keeping its base name.

    A same-named file already in dst_dir is overwritten.
    """
    dst = dst_dir / src.name
    try:
        os.replace(src, dst)
    except OSError as e:
        raise RelocationError(f"Failed to move file ({e.strerror or e})", src) from e
    return dst


def relocate(root: Path, chunks: Sequence[Chunk], progress: bool = False) -> dict:
    """
    Move every chunk into its directory under root, in ascending index order.

    Args:
        root: Directory the entries were enumerated from.
        chunks: Planned chunks from build_chunks.
        progress: Show a tqdm progress bar over files.

    Returns:
        Counts of created directories and moved files.

    Raises:
        DestinationConflictError: Stops at the conflicting chunk.
        RelocationError: Stops at the first file that cannot be moved.
    """
    root = Path(root)
    total = sum(len(chunk) for chunk in chunks)
    created = 0
    moved = 0

    with tqdm(total=total, unit="file", disable=not progress) as pbar:
        for chunk in chunks:
            target = root / chunk.directory_name
            if ensure_directory(target):
                created += 1
                if progress:
                    tqdm.write(f"[INFO] Created {target}")

            for entry in chunk.entries:
                move_file(Path(entry.path), target)
                moved += 1
                pbar.update(1)

    return {"created_directories": created, "moved_files": moved}
