"""Per-topic nDCG@k / ERR@k evaluation of a run and its CSV report."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from grdeval.config import MEAN_ROW_LABEL, REPORT_DECIMALS
from grdeval.metrics import err, ndcg
from grdeval.qrels import JudgmentStore
from grdeval.ranking import group_by_topic, order_run
from grdeval.trec import RunEntry


class EmptyRunError(ValueError):
    """Raised when a run has no entries to evaluate."""


@dataclass(frozen=True)
class TopicResult:
    topic: str
    ndcg: float
    err: float


@dataclass
class EvaluationReport:
    """Topic rows in report order plus their arithmetic means."""

    runid: str
    cutoff: int
    topics: list[TopicResult] = field(default_factory=list)

    @property
    def mean_ndcg(self) -> float:
        return sum(t.ndcg for t in self.topics) / len(self.topics)

    @property
    def mean_err(self) -> float:
        return sum(t.err for t in self.topics) / len(self.topics)

    @property
    def mean(self) -> TopicResult:
        return TopicResult(MEAN_ROW_LABEL, self.mean_ndcg, self.mean_err)


def evaluate_topic(store: JudgmentStore, topic: str, docids: Sequence[str]) -> TopicResult:
    """Score one topic's ranked docids against the store."""
    gains = [store.relevance(topic, docid) for docid in docids]
    return TopicResult(
        topic=topic,
        ndcg=ndcg(store.cutoff, gains, store.ideal(topic)),
        err=err(store.cutoff, gains, store.max_judgment),
    )


def evaluate(store: JudgmentStore, entries: Sequence[RunEntry]) -> EvaluationReport:
    """Evaluate every topic present in the run.

    Topics missing from the qrels are still reported (nDCG 0). The run id of
    the first entry in file order labels the report.
    """
    if not entries:
        raise EmptyRunError("run has no entries")

    report = EvaluationReport(runid=entries[0].runid, cutoff=store.cutoff)
    for topic, docids in group_by_topic(order_run(entries)).items():
        report.topics.append(evaluate_topic(store, topic, docids))
    return report


def _fmt(value: float) -> str:
    return f"{value:.{REPORT_DECIMALS}f}"


def format_csv(report: EvaluationReport) -> list[str]:
    """Render header, topic rows and the mean row as CSV lines."""
    k = report.cutoff
    lines = [f"runid,topic,ndcg@{k},err@{k}"]
    for row in [*report.topics, report.mean]:
        lines.append(f"{report.runid},{row.topic},{_fmt(row.ndcg)},{_fmt(row.err)}")
    return lines


def write_report(report: EvaluationReport, stream: TextIO) -> None:
    for line in format_csv(report):
        stream.write(line + "\n")
