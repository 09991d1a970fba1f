"""Tests for unreal_log_parser.log_file."""

from __future__ import annotations

import logging

import pytest

from unreal_log_parser.errors import (
    InvalidFrameNumber,
    NoLogEntriesFound,
    NoSuchFile,
    ParseError,
)
from unreal_log_parser.log_file import LineFailure, LogFile, parse_file
from unreal_log_parser.models import LogEntry, Timestamp, Verbosity


class TestSampleFile:
    def test_first_entry(self, sample_log) -> None:
        log_file = LogFile(sample_log).parse()
        assert log_file.entries[0] == LogEntry(
            timestamp=Timestamp(2024, 10, 4, 19, 9, 47, 74),
            frame_num=0,
            category="LogAssetRegistry",
            verbosity=Verbosity.DISPLAY,
            message="Triggering cache save on discovery complete",
        )

    def test_counts(self, sample_log) -> None:
        log_file = parse_file(sample_log)
        assert len(log_file) == 11
        assert [f.line_number for f in log_file.failures] == [6, 8, 9, 11]

    def test_failure_kinds(self, sample_log) -> None:
        failures = parse_file(sample_log).failures
        assert [type(f.error) for f in failures] == [
            ParseError, ParseError, InvalidFrameNumber, ParseError,
        ]
        assert failures[0].line == "This is not a log line"

    def test_entries_in_line_order(self, sample_log) -> None:
        categories = [e.category for e in parse_file(sample_log)]
        assert categories[:3] == ["LogAssetRegistry", "LogTemp", "LogInit"]
        assert categories[-1] == "LogWindows"


class TestTerminalErrors:
    def test_missing_file(self, tmp_path) -> None:
        log_file = LogFile(str(tmp_path / "NonExistentFile.log"))
        with pytest.raises(NoSuchFile):
            log_file.parse()
        assert log_file.entries == []

    def test_empty_file(self, write_log) -> None:
        reports = []
        with pytest.raises(NoLogEntriesFound):
            LogFile(write_log("", name="EmptyFile.log")).parse(on_error=reports.append)
        assert reports == []

    def test_all_gibberish(self, write_log) -> None:
        path = write_log("gibberish\nmore gibberish\n\n")
        log_file = LogFile(path)
        with pytest.raises(NoLogEntriesFound):
            log_file.parse(on_error=lambda failure: None)
        assert len(log_file.failures) == 3

    def test_only_blank_lines(self, write_log) -> None:
        with pytest.raises(NoLogEntriesFound):
            parse_file(write_log("\n\n"), on_error=lambda failure: None)


class TestFailureReporting:
    def test_custom_reporter_receives_each_failure(self, write_log) -> None:
        path = write_log("LogCore: ok\nnope\nLogCore: also ok\n[bad]LogCore: x\n")
        reports: list[LineFailure] = []
        log_file = parse_file(path, on_error=reports.append)
        assert len(log_file) == 2
        assert [(r.line_number, r.line) for r in reports] == [(2, "nope"), (4, "[bad]LogCore: x")]
        assert reports == log_file.failures

    def test_default_reporter_logs_warning(self, write_log, caplog) -> None:
        path = write_log("LogCore: ok\nnot a log line\n")
        with caplog.at_level(logging.WARNING, logger="unreal_log_parser.log_file"):
            parse_file(path)
        assert "Error parsing line 2: not a log line" in caplog.text

    def test_crlf_file(self, write_log) -> None:
        log_file = parse_file(write_log("LogCore: Warning: one\r\nLogCore: two\r\n"))
        assert [e.message for e in log_file] == ["one", "two"]
        assert log_file.entries[0].verbosity is Verbosity.WARNING

    def test_encoding_is_used(self, tmp_path) -> None:
        path = tmp_path / "latin.log"
        path.write_bytes("LogCore: café\n".encode("latin-1"))
        log_file = LogFile(str(path), encoding="latin-1").parse()
        assert log_file.entries[0].message == "café"
