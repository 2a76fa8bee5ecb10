import math
import unittest
from types import SimpleNamespace

from split_to_directory.errors import InvalidConfigurationError
from split_to_directory.ordering import default_directory_name
from split_to_directory.planning import build_chunks, partition


def fake_entries(n):
    return [SimpleNamespace(name=f"{i}.tmp", path=f"/root/{i}.tmp") for i in range(n)]


class TestPartition(unittest.TestCase):
    def test_chunk_count_is_ceiling(self):
        for n in (0, 1, 2, 3, 7, 10, 11):
            for c in (1, 2, 3, 5, 10, 4400):
                groups = partition(list(range(n)), c)
                self.assertEqual(len(groups), math.ceil(n / c), (n, c))

    def test_groups_cover_sequence_exactly(self):
        items = list(range(11))
        groups = partition(items, 4)
        self.assertEqual(groups, [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10]])
        self.assertEqual([x for g in groups for x in g], items)

    def test_empty_input_gives_no_groups(self):
        self.assertEqual(partition([], 3), [])


class TestBuildChunks(unittest.TestCase):
    def test_default_names_and_indices(self):
        chunks = build_chunks(fake_entries(5), 2, default_directory_name)
        self.assertEqual([c.index for c in chunks], [0, 1, 2])
        self.assertEqual([c.directory_name for c in chunks], ["0", "1", "2"])
        self.assertEqual([len(c) for c in chunks], [2, 2, 1])
        self.assertEqual([e.name for e in chunks[2].entries], ["4.tmp"])

    def test_custom_names(self):
        chunks = build_chunks(fake_entries(4), 2, lambda i: chr(ord("a") + i))
        self.assertEqual([c.directory_name for c in chunks], ["a", "b"])

    def test_duplicate_names_rejected(self):
        with self.assertRaises(InvalidConfigurationError):
            build_chunks(fake_entries(4), 2, lambda i: "same")

    def test_unusable_names_rejected(self):
        for bad in ("", ".", "..", "a/b", "a\x00b", 3, None):
            with self.subTest(name=bad):
                with self.assertRaises(InvalidConfigurationError):
                    build_chunks(fake_entries(1), 1, lambda i, bad=bad: bad)

    def test_naming_not_called_without_files(self):
        def explode(i):
            raise AssertionError("should not be called")
        self.assertEqual(build_chunks([], 3, explode), [])


if __name__ == "__main__":
    unittest.main()
