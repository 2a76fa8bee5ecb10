"""
Ordering and naming strategies.

A comparison takes two directory entries and returns a negative number, zero
or a positive number. A naming function maps a zero-based chunk index to a
directory name.
"""

import os
from functools import cmp_to_key
from typing import Callable, Iterable

from natsort import natsort_keygen

SortCmp = Callable[[os.DirEntry, os.DirEntry], int]
DirectoryNameFn = Callable[[int], str]

_natural_key = natsort_keygen()


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def natural_compare(a: os.DirEntry, b: os.DirEntry) -> int:
    """Compare base names with digit runs taken by numeric value."""
    return _cmp(_natural_key(a.name), _natural_key(b.name))


def reverse_natural_compare(a: os.DirEntry, b: os.DirEntry) -> int:
    return natural_compare(b, a)


def name_compare(a: os.DirEntry, b: os.DirEntry) -> int:
    """Plain character-by-character comparison of base names."""
    return _cmp(a.name, b.name)


def _stat_field(entry: os.DirEntry, field: str) -> float:
    # Unreadable metadata sorts as zero
    try:
        return getattr(entry.stat(follow_symlinks=False), field)
    except OSError:
        return 0


def size_compare(a: os.DirEntry, b: os.DirEntry) -> int:
    """Largest file first."""
    return _cmp(_stat_field(b, "st_size"), _stat_field(a, "st_size"))


def mtime_compare(a: os.DirEntry, b: os.DirEntry) -> int:
    """Oldest modification time first."""
    return _cmp(_stat_field(a, "st_mtime"), _stat_field(b, "st_mtime"))


# Comparisons selectable by name from the command line
ORDERINGS: dict[str, SortCmp] = {
    "natural": natural_compare,
    "name": name_compare,
    "reverse": reverse_natural_compare,
    "size": size_compare,
    "mtime": mtime_compare,
}

DEFAULT_ORDERING = "natural"


def sort_entries(entries: Iterable[os.DirEntry], compare: SortCmp) -> list[os.DirEntry]:
    """
    Sort entries using a two-argument comparison.

    The sort is stable: entries that compare equal keep their relative order.
    """
    return sorted(entries, key=cmp_to_key(compare))


def default_directory_name(index: int) -> str:
    return str(index)
