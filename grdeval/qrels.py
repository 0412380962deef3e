"""Judgment store: ideal gains and relevance lookup per topic."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from grdeval.metrics import dcg
from grdeval.trec import Judgment, read_qrels


@dataclass(frozen=True)
class JudgmentStore:
    """Read-only view over loaded qrels.

    ideal_gain holds DCG@cutoff of the ideal ordering for every judged topic.
    lookup only keeps judgments with relevance >= 0, so a negative judgment
    scores like an unjudged document.
    """

    cutoff: int
    ideal_gain: dict[str, float] = field(default_factory=dict)
    lookup: dict[tuple[str, str], int] = field(default_factory=dict)
    max_judgment: int = 0

    def relevance(self, topic: str, docid: str) -> int:
        return self.lookup.get((topic, docid), 0)

    def ideal(self, topic: str) -> float:
        return self.ideal_gain.get(topic, 0.0)

    @property
    def topics(self) -> list[str]:
        return sorted(self.ideal_gain)


def build_store(judgments: Iterable[Judgment], cutoff: int) -> JudgmentStore:
    """Group judgments by topic and compute each topic's ideal DCG."""
    by_topic: dict[str, list[int]] = {}
    lookup: dict[tuple[str, str], int] = {}
    max_judgment = 0

    for j in judgments:
        max_judgment = max(max_judgment, j.relevance)
        grades = by_topic.setdefault(j.topic, [])
        if j.relevance < 0:
            continue
        grades.append(j.relevance)
        lookup[(j.topic, j.docid)] = j.relevance

    ideal_gain = {
        topic: dcg(cutoff, sorted(grades, reverse=True))
        for topic, grades in by_topic.items()
    }
    return JudgmentStore(
        cutoff=cutoff,
        ideal_gain=ideal_gain,
        lookup=lookup,
        max_judgment=max_judgment,
    )


def load_store(path: Path, cutoff: int) -> JudgmentStore:
    return build_store(read_qrels(path), cutoff)
