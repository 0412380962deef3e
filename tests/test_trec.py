"""Tests for grdeval.trec module."""

from pathlib import Path

import pytest

from grdeval.config import MAX_GRADE
from grdeval.trec import (
    Judgment,
    ParseError,
    RunEntry,
    parse_qrel_line,
    parse_qrels,
    parse_run_line,
    read_qrels,
    read_run,
)


class TestParseQrelLine:
    def test_valid(self):
        assert parse_qrel_line("T1 0 d1 3") == Judgment("T1", "d1", 3)

    def test_negative_relevance(self):
        assert parse_qrel_line("T1 0 d1 -2").relevance == -2

    def test_tabs_and_extra_spaces(self):
        assert parse_qrel_line("T1\t0  d1\t1") == Judgment("T1", "d1", 1)

    def test_too_few_fields(self):
        with pytest.raises(ParseError, match="qrel fields not 4"):
            parse_qrel_line("T1 0 d1")

    def test_too_many_fields(self):
        with pytest.raises(ParseError):
            parse_qrel_line("T1 0 d1 1 extra")

    def test_non_integer_relevance(self):
        with pytest.raises(ParseError, match="not an integer"):
            parse_qrel_line("T1 0 d1 1.5")

    def test_relevance_above_max_grade(self):
        with pytest.raises(ParseError, match="max grade"):
            parse_qrel_line(f"T1 0 d1 {MAX_GRADE + 1}")

    def test_blank_line(self):
        with pytest.raises(ParseError):
            parse_qrel_line("")


class TestParseRunLine:
    def test_valid(self):
        entry = parse_run_line("T1 Q0 d1 1 12.5 bm25")
        assert entry == RunEntry("T1", "d1", 12.5, "bm25")

    def test_scientific_score(self):
        assert parse_run_line("T1 Q0 d1 1 -1e-3 r").score == pytest.approx(-0.001)

    def test_wrong_field_count(self):
        with pytest.raises(ParseError, match="run fields not 6"):
            parse_run_line("T1 Q0 d1 1 12.5")

    def test_non_numeric_score(self):
        with pytest.raises(ParseError, match="not numeric"):
            parse_run_line("T1 Q0 d1 1 high r")

    def test_nan_score(self):
        with pytest.raises(ParseError, match="not numeric"):
            parse_run_line("T1 Q0 d1 1 nan r")


class TestParseFiles:
    def test_line_number_in_error(self):
        lines = ["T1 0 d1 1", "T1 0 d2 2", "broken"]
        with pytest.raises(ParseError) as exc:
            parse_qrels(lines, "qrels.txt")
        assert exc.value.line_no == 3
        assert str(exc.value).startswith("qrels.txt:3: ")

    def test_read_qrels(self, tmp_path: Path):
        path = tmp_path / "qrels"
        path.write_text("T1 0 d1 3\nT1 0 d2 0\n")
        assert read_qrels(path) == [Judgment("T1", "d1", 3), Judgment("T1", "d2", 0)]

    def test_read_run_keeps_file_order(self, tmp_path: Path):
        path = tmp_path / "run"
        path.write_text("T2 Q0 a 1 1.0 r\nT1 Q0 b 1 2.0 r\n")
        assert [e.topic for e in read_run(path)] == ["T2", "T1"]

    def test_read_run_error_names_file(self, tmp_path: Path):
        path = tmp_path / "run"
        path.write_text("T1 Q0 a 1 1.0 r\nT1 Q0 b 1 x r\n")
        with pytest.raises(ParseError) as exc:
            read_run(path)
        assert exc.value.path == path
        assert exc.value.line_no == 2

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_qrels(tmp_path / "nope")
