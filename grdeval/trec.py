"""TREC qrels and run file formats.

qrels: ``topic iter docid relevance``
run:   ``topic Q0 docid rank score runid``

Fields are whitespace-separated. Any line with the wrong shape is fatal.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from grdeval.config import MAX_GRADE, QREL_FIELDS, RUN_FIELDS


class ParseError(ValueError):
    """Raised for a qrels/run line that does not match its format."""

    def __init__(self, reason: str, *, path: Path | str | None = None, line_no: int | None = None):
        self.reason = reason
        self.path = path
        self.line_no = line_no
        where = ""
        if path is not None:
            where = f"{path}"
            if line_no is not None:
                where += f":{line_no}"
            where += ": "
        elif line_no is not None:
            where = f"line {line_no}: "
        super().__init__(f"{where}{reason}")


@dataclass(frozen=True)
class Judgment:
    topic: str
    docid: str
    relevance: int


@dataclass(frozen=True)
class RunEntry:
    topic: str
    docid: str
    score: float
    runid: str


def parse_qrel_line(line: str) -> Judgment:
    fields = line.split()
    if len(fields) != QREL_FIELDS:
        raise ParseError(f"qrel fields not {QREL_FIELDS} (got {len(fields)})")
    topic, _, docid, raw = fields
    try:
        relevance = int(raw)
    except ValueError:
        raise ParseError(f"relevance is not an integer: {raw!r}") from None
    if relevance > MAX_GRADE:
        raise ParseError(f"relevance {relevance} above max grade {MAX_GRADE}")
    return Judgment(topic, docid, relevance)


def parse_run_line(line: str) -> RunEntry:
    fields = line.split()
    if len(fields) != RUN_FIELDS:
        raise ParseError(f"run fields not {RUN_FIELDS} (got {len(fields)})")
    topic, _, docid, _, raw, runid = fields
    try:
        score = float(raw)
    except ValueError:
        raise ParseError(f"score is not numeric: {raw!r}") from None
    if math.isnan(score):
        raise ParseError(f"score is not numeric: {raw!r}")
    return RunEntry(topic, docid, score, runid)


def _parse_lines(lines: Iterable[str], parse, path: Path | str | None) -> Iterator:
    for line_no, line in enumerate(lines, 1):
        try:
            yield parse(line)
        except ParseError as e:
            raise ParseError(e.reason, path=path, line_no=line_no) from None


def parse_qrels(lines: Iterable[str], path: Path | str | None = None) -> list[Judgment]:
    """Parse qrels lines; errors carry the 1-based line number."""
    return list(_parse_lines(lines, parse_qrel_line, path))


def parse_run(lines: Iterable[str], path: Path | str | None = None) -> list[RunEntry]:
    """Parse run lines in file order; errors carry the 1-based line number."""
    return list(_parse_lines(lines, parse_run_line, path))


def read_qrels(path: Path) -> list[Judgment]:
    with open(path, encoding="utf-8") as f:
        return parse_qrels(f, path)


def read_run(path: Path) -> list[RunEntry]:
    with open(path, encoding="utf-8") as f:
        return parse_run(f, path)
