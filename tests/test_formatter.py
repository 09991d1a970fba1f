"""Tests for unreal_log_parser.formatter"""

import os
import tempfile
import unittest

from unreal_log_parser.formatter import format_entry, write_entries
from unreal_log_parser.models import LogEntry, Timestamp, Verbosity

ENTRY = LogEntry(
    timestamp=Timestamp(2024, 4, 27, 12, 34, 56, 789),
    frame_num=1,
    category="LogTemp",
    verbosity=Verbosity.WARNING,
    message="This is a warning message.",
)


class TestFormatEntry(unittest.TestCase):
    def test_wrapped_in_brackets(self):
        text = format_entry(ENTRY)
        self.assertTrue(text.startswith("[\nTimestamp: Date: 2024.04.27 Time: 12.34.56 789ms \n"))
        self.assertTrue(text.endswith("Message: This is a warning message.\n]"))

    def test_block_has_seven_lines(self):
        self.assertEqual(len(format_entry(ENTRY).split("\n")), 7)


class TestWriteEntries(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.filepath = os.path.join(self.tmpdir, "out.txt")

    def test_writes_each_block(self):
        count = write_entries([ENTRY, ENTRY], self.filepath)
        self.assertEqual(count, 2)
        with open(self.filepath) as f:
            content = f.read()
        self.assertEqual(content, (format_entry(ENTRY) + "\n") * 2)

    def test_overwrites_existing_file(self):
        with open(self.filepath, "w") as f:
            f.write("stale\n")
        write_entries([ENTRY], self.filepath)
        with open(self.filepath) as f:
            self.assertNotIn("stale", f.read())

    def test_accepts_generator(self):
        count = write_entries((e for e in [ENTRY]), self.filepath)
        self.assertEqual(count, 1)


if __name__ == "__main__":
    unittest.main()
