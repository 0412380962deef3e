"""Deterministic ordering of run entries.

Rank position drives both metric discounts, so ties must resolve the same
way every time: topic ascending, score descending, docid descending.
"""

from collections.abc import Iterable

from grdeval.trec import RunEntry


def order_run(entries: Iterable[RunEntry]) -> list[RunEntry]:
    """Sort entries by topic asc, then score desc, then docid desc."""
    # Stable sort: secondary keys first, then topic.
    ordered = sorted(entries, key=lambda e: (e.score, e.docid), reverse=True)
    ordered.sort(key=lambda e: e.topic)
    return ordered


def group_by_topic(ordered: Iterable[RunEntry]) -> dict[str, list[str]]:
    """Map topic -> docids in rank order, keeping first-appearance topic order."""
    groups: dict[str, list[str]] = {}
    for entry in ordered:
        groups.setdefault(entry.topic, []).append(entry.docid)
    return groups
