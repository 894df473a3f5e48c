# --------------------------- Command line ---------------------------
import argparse
import logging
import sys
from typing import List, Optional

from benchmark import run_benchmark
from data_loader import SelectionSettings, load_settings
from input_loader import load_catalog
from inputvalidations import validate_exhaustive_size
from item_filter import filter_items
from optimizer import exhaustive_select, greedy_select
from solver import cpsat_select
from utilities import benchmark_markdown_table, selection_markdown_table, summarize_selection

logger = logging.getLogger("main")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ALGORITHMS = ("greedy", "exhaustive", "cpsat", "all")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pick catalog items maximizing total benefit within a budget")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Filter the catalog and run one or more solvers")
    solve.add_argument("--catalog", required=True, help="Path to the ^-delimited catalog file")
    solve.add_argument("--settings", help="Path to a settings JSON file")
    solve.add_argument("--budget", type=float, help="Maximum total cost")
    solve.add_argument("--min-benefit", type=float, help="Inclusive lower benefit bound")
    solve.add_argument("--max-benefit", type=float, help="Inclusive upper benefit bound")
    solve.add_argument("--max-count", type=int, default=16, help="Keep at most this many catalog items")
    solve.add_argument("--algorithm", choices=ALGORITHMS, default="all")

    bench = sub.add_parser("benchmark", help="Time greedy vs exhaustive over growing input sizes")
    bench.add_argument("--catalog", required=True, help="Path to the ^-delimited catalog file")
    bench.add_argument("--settings", help="Path to a settings JSON file")
    bench.add_argument("--budget", type=float)
    bench.add_argument("--max-size", type=int, help="Number of size steps (exhaustive n at the last step)")
    bench.add_argument("--repeats", type=int, help="Timed runs averaged per step")
    return parser


def _settings(args: argparse.Namespace) -> SelectionSettings:
    base = load_settings(args.settings) if args.settings else SelectionSettings()
    return base.with_overrides(
        budget=args.budget,
        min_benefit=getattr(args, "min_benefit", None),
        max_benefit=getattr(args, "max_benefit", None),
        max_size=getattr(args, "max_size", None),
        repeats=getattr(args, "repeats", None),
    )


def _report(name: str, picks, budget: float) -> None:
    summary = summarize_selection(name, picks, budget)
    logger.info(
        "%s: %d item(s), cost %s, benefit %s, unused %s",
        name, summary["items_selected"], summary["total_cost"], summary["total_benefit"], summary["unused_budget"],
    )
    print(selection_markdown_table(picks, name, budget))


def _run_solve(args: argparse.Namespace) -> None:
    settings = _settings(args)
    catalog = load_catalog(args.catalog)
    items = filter_items(catalog, settings.min_benefit, settings.max_benefit, args.max_count)
    logger.info("solving over %d of %d catalog item(s), budget %s", len(items), len(catalog), settings.budget)

    if args.algorithm in ("exhaustive", "all"):
        validate_exhaustive_size(items)

    if args.algorithm in ("greedy", "all"):
        _report("Greedy", greedy_select(items, settings.budget), settings.budget)
    if args.algorithm in ("exhaustive", "all"):
        _report("Exhaustive", exhaustive_select(items, settings.budget), settings.budget)
    if args.algorithm in ("cpsat", "all"):
        res = cpsat_select(items, settings.budget)
        print(f"solver status: {res['status']}")
        _report("CP-SAT", res["items"], settings.budget)


def _run_benchmark(args: argparse.Namespace) -> None:
    settings = _settings(args)
    catalog = load_catalog(args.catalog)
    rows = run_benchmark(
        catalog,
        budget=settings.budget,
        min_benefit=settings.min_benefit,
        max_benefit=settings.max_benefit,
        max_size=settings.max_size,
        repeats=settings.repeats,
        greedy_size_step=settings.greedy_size_step,
    )
    print(benchmark_markdown_table(rows))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING), format=LOG_FORMAT)

    try:
        if args.command == "solve":
            _run_solve(args)
        else:
            _run_benchmark(args)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
