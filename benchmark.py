"""
Timing harness comparing greedy_select and exhaustive_select as input grows.

For each step i in 1..max_size:
  - exhaustive_select runs on the first i qualifying catalog items,
  - greedy_select runs on the first greedy_size_step * i qualifying items,
each ``repeats`` times with a fixed budget. Filtering is part of the timed
call. Times are averaged and reported in milliseconds.
"""
import logging
import time
from typing import Callable, List, Sequence, Tuple

from datatypes import Item, ItemCollection
from inputvalidations import validate_settings
from item_filter import filter_items
from optimizer import exhaustive_select, greedy_select
from selection_types import BenchmarkRow
from utilities import sum_items

logger = logging.getLogger(__name__)

SelectorFn = Callable[[Sequence[Item], float], ItemCollection]


def time_solver(
    solver: SelectorFn,
    catalog: Sequence[Item],
    *,
    budget: float,
    min_benefit: float,
    max_benefit: float,
    size: int,
    repeats: int,
) -> Tuple[float, ItemCollection]:
    """Average wall-clock milliseconds of filter + ``solver`` over ``repeats`` runs.

    Returns the average time and the picks of the last run.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")
    total_ms = 0.0
    result: ItemCollection = []
    for _ in range(repeats):
        start = time.perf_counter()
        filtered = filter_items(catalog, min_benefit, max_benefit, size)
        result = solver(filtered, budget)
        total_ms += (time.perf_counter() - start) * 1000.0
    return total_ms / repeats, result


def run_benchmark(
    catalog: Sequence[Item],
    *,
    budget: float = 2500.0,
    min_benefit: float = 1.0,
    max_benefit: float = 2500.0,
    max_size: int = 20,
    repeats: int = 10,
    greedy_size_step: int = 200,
) -> List[BenchmarkRow]:
    """Time both solvers over increasing input sizes; one BenchmarkRow per step."""
    validate_settings(
        budget=budget,
        min_benefit=min_benefit,
        max_benefit=max_benefit,
        max_size=max_size,
        repeats=repeats,
        greedy_size_step=greedy_size_step,
    )

    rows: List[BenchmarkRow] = []
    for step in range(1, max_size + 1):
        greedy_size = greedy_size_step * step
        ex_ms, ex_picks = time_solver(
            exhaustive_select, catalog,
            budget=budget, min_benefit=min_benefit, max_benefit=max_benefit,
            size=step, repeats=repeats,
        )
        gr_ms, gr_picks = time_solver(
            greedy_select, catalog,
            budget=budget, min_benefit=min_benefit, max_benefit=max_benefit,
            size=greedy_size, repeats=repeats,
        )
        row: BenchmarkRow = {
            "step": step,
            "exhaustive_size": step,
            "exhaustive_ms": ex_ms,
            "exhaustive_benefit": sum_items(ex_picks)[1],
            "greedy_size": greedy_size,
            "greedy_ms": gr_ms,
            "greedy_benefit": sum_items(gr_picks)[1],
        }
        logger.info(
            "step %d: exhaustive n=%d %.4f ms, greedy n=%d %.4f ms",
            step, step, ex_ms, greedy_size, gr_ms,
        )
        rows.append(row)
    return rows


__all__ = ["time_solver", "run_benchmark"]
