import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from split_to_directory.__main__ import build_parser, main


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _touch(self, n):
        for i in range(n):
            (self.root / f"{i}.tmp").write_text(str(i))

    def test_defaults(self):
        args = build_parser().parse_args([str(self.root)])
        self.assertEqual(args.chunk, 4400)
        self.assertEqual(args.order, "natural")
        self.assertFalse(args.dry_run)

    def test_chunk_must_be_positive(self):
        parser = build_parser()
        for bad in ("0", "-3", "abc"):
            with self.subTest(chunk=bad):
                with patch("sys.stderr"):
                    with self.assertRaises(SystemExit) as ctx:
                        parser.parse_args([str(self.root), "-c", bad])
                self.assertEqual(ctx.exception.code, 2)

    def test_path_required(self):
        with patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_run_splits_directory(self):
        self._touch(5)
        code = main([str(self.root), "--chunk", "2", "--quiet"])

        self.assertEqual(code, 0)
        self.assertEqual(set(os.listdir(self.root)), {"0", "1", "2"})
        self.assertEqual(set(os.listdir(self.root / "2")), {"4.tmp"})

    def test_run_with_order(self):
        self._touch(4)
        code = main([str(self.root), "-c", "2", "--order", "reverse", "-q"])

        self.assertEqual(code, 0)
        self.assertEqual(set(os.listdir(self.root / "0")), {"3.tmp", "2.tmp"})

    def test_run_with_output(self):
        self._touch(3)
        code = main([str(self.root), "-c", "2"])
        self.assertEqual(code, 0)
        self.assertEqual(set(os.listdir(self.root)), {"0", "1"})

    def test_dry_run_moves_nothing(self):
        self._touch(3)
        code = main([str(self.root), "-c", "2", "--dry-run"])

        self.assertEqual(code, 0)
        self.assertEqual(set(os.listdir(self.root)), {"0.tmp", "1.tmp", "2.tmp"})

    def test_empty_directory(self):
        self.assertEqual(main([str(self.root)]), 0)
        self.assertEqual(os.listdir(self.root), [])

    @patch("split_to_directory.__main__.print_error")
    def test_missing_directory_exits_non_zero(self, mock_print_error):
        code = main([str(self.root / "missing")])

        self.assertEqual(code, 1)
        mock_print_error.assert_called_once()
        self.assertIn("missing", mock_print_error.call_args[0][0])

    @patch("split_to_directory.__main__.print_error")
    def test_conflict_exits_non_zero(self, mock_print_error):
        (self.root / "0").write_text("in the way")
        (self.root / "a.tmp").write_text("a")

        code = main([str(self.root), "-q"])

        self.assertEqual(code, 1)
        mock_print_error.assert_called_once()

    @patch("split_to_directory.__main__.run", side_effect=KeyboardInterrupt)
    @patch("split_to_directory.__main__.print_error")
    def test_keyboard_interrupt(self, mock_print_error, mock_run):
        self.assertEqual(main([str(self.root)]), 130)


if __name__ == "__main__":
    unittest.main()
