"""Command-line interface."""

import argparse
import sys
import time
from pathlib import Path

from grdeval import config
from grdeval.evaluate import EmptyRunError, EvaluationReport, evaluate, write_report
from grdeval.metrics import GradeError
from grdeval.qrels import build_store
from grdeval.trec import ParseError, read_qrels, read_run
from grdeval.ui import (
    fmt_duration,
    make_table,
    render_table,
    report,
    report_error,
    report_step,
)


def _cutoff(value: str) -> int:
    try:
        k = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid cutoff: {value!r}") from None
    if k < 0:
        raise argparse.ArgumentTypeError(f"cutoff must be >= 0: {k}")
    return k


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grdeval",
        description="nDCG@k and ERR@k of a TREC run against graded qrels",
    )
    parser.add_argument("qrels", type=Path, help="Qrels file (topic iter docid rel)")
    parser.add_argument("run", type=Path, help="Run file (topic Q0 docid rank score runid)")
    parser.add_argument(
        "-k",
        type=_cutoff,
        default=config.get_default_cutoff(),
        metavar="K",
        help="Depth of ranking to evaluate to (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=("csv", "table"),
        default="csv",
        help="Report format (default: csv)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print load/evaluate steps to stderr",
    )
    return parser


def _classify_error(exc: Exception) -> tuple[str, str | None, str | None]:
    if isinstance(exc, FileNotFoundError):
        return ("input file not found", str(exc.filename or exc), "check the qrels/run paths")
    if isinstance(exc, ParseError):
        return ("malformed input line", str(exc), "fix the line and retry")
    if isinstance(exc, EmptyRunError):
        return ("nothing to evaluate", str(exc), "pass a run file with at least one line")
    if isinstance(exc, GradeError):
        return ("relevance grade out of range", str(exc), None)
    if isinstance(exc, OSError):
        return ("cannot read input", str(exc), None)
    return ("evaluation failed", str(exc), None)


def _render_report_table(result: EvaluationReport) -> None:
    k = result.cutoff
    table = make_table(title=result.runid)
    table.add_column("topic")
    table.add_column(f"ndcg@{k}", justify="right")
    table.add_column(f"err@{k}", justify="right")
    d = config.REPORT_DECIMALS
    for row in result.topics:
        table.add_row(row.topic, f"{row.ndcg:.{d}f}", f"{row.err:.{d}f}")
    mean = result.mean
    table.add_section()
    table.add_row(mean.topic, f"{mean.ndcg:.{d}f}", f"{mean.err:.{d}f}", style="bold")
    render_table(table)


def run_evaluation(qrels: Path, run: Path, cutoff: int, *, verbose: bool = False) -> EvaluationReport:
    """Load both files and evaluate. Errors propagate to the caller."""
    for path in (qrels, run):
        if not path.is_file():
            raise FileNotFoundError(2, "no such file", str(path))

    t0 = time.perf_counter()
    judgments = read_qrels(qrels)
    store = build_store(judgments, cutoff)
    if verbose:
        report_step(
            "qrels",
            f"{len(judgments)} judgments | {len(store.topics)} topics | "
            f"max grade {store.max_judgment}",
        )

    entries = read_run(run)
    if verbose:
        report_step("run", f"{len(entries)} entries")

    result = evaluate(store, entries)
    if verbose:
        report_step(
            "evaluate",
            f"{len(result.topics)} topics @{cutoff} | {fmt_duration(time.perf_counter() - t0).strip()}",
        )
    return result


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        result = run_evaluation(args.qrels, args.run, args.k, verbose=args.verbose)
    except (OSError, ValueError) as e:
        summary, cause, action = _classify_error(e)
        report_error(summary, cause=cause, action=action)
        sys.exit(1)
    except KeyboardInterrupt:
        report("status", "interrupted")
        sys.exit(130)

    if args.format == "table":
        _render_report_table(result)
    else:
        write_report(result, sys.stdout)


if __name__ == "__main__":
    main()
