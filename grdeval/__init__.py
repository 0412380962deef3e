"""Graded relevance evaluation of TREC runs.

Modules:
- trec: qrels/run line formats
- qrels: judgment store and ideal gains
- ranking: run ordering and topic grouping
- metrics: DCG, nDCG, ERR
- evaluate: per-topic evaluation and CSV report
"""

__version__ = "0.1.0"
