"""
Type definitions for selection summaries and benchmark output.
"""
from __future__ import annotations

from typing import TypedDict


class SelectionSummary(TypedDict):
    """Totals for one solver's picks against a budget."""
    solver: str
    items_selected: int
    total_cost: float
    total_benefit: float
    budget: float
    unused_budget: float


class BenchmarkRow(TypedDict):
    """One size step of the benchmark.

    ``exhaustive_size`` / ``greedy_size`` are the filter caps used for the
    step; the filtered catalog may hold fewer items when it runs out.
    Times are averages over all repeats, in milliseconds.
    """
    step: int
    exhaustive_size: int
    exhaustive_ms: float
    exhaustive_benefit: float
    greedy_size: int
    greedy_ms: float
    greedy_benefit: float
