# --------------------------- Utilities ---------------------------
from typing import Iterable, List, Sequence, Tuple

from datatypes import Item
from selection_types import BenchmarkRow, SelectionSummary


def sum_items(items: Iterable[Item]) -> Tuple[float, float]:
    """Return ``(total_cost, total_benefit)`` of ``items``."""
    total_cost = 0.0
    total_benefit = 0.0
    for it in items:
        total_cost += it.cost
        total_benefit += it.benefit
    return total_cost, total_benefit


def summarize_selection(name: str, items: Sequence[Item], budget: float) -> SelectionSummary:
    """Build a SelectionSummary for one solver's picks."""
    total_cost, total_benefit = sum_items(items)
    return {
        "solver": name,
        "items_selected": len(items),
        "total_cost": total_cost,
        "total_benefit": total_benefit,
        "budget": float(budget),
        "unused_budget": float(budget) - total_cost,
    }


def _fmt(v: float) -> str:
    return f"{v:g}"


def selection_markdown_table(items: Sequence[Item], title: str, budget: float) -> str:
    """
    Render picks as a Markdown table (Item | Cost | Benefit) under a totals header.

    An empty selection renders a single ``*(none)*`` row.
    """
    total_cost, total_benefit = sum_items(items)
    header = (
        f"### {title} — selected items: {len(items)} | total cost: {_fmt(total_cost)} | "
        f"total benefit: {_fmt(total_benefit)} | budget: {_fmt(budget)} | unused budget: {_fmt(budget - total_cost)}"
        "\n\n| Item | Cost | Benefit |\n|---|---|---|\n"
    )
    rows: List[str] = [f"| {it.label} | {_fmt(it.cost)} | {_fmt(it.benefit)} |" for it in items]
    if not rows:
        rows.append("| *(none)* | — | — |")
    return header + "\n".join(rows) + "\n"


def benchmark_markdown_table(rows: Sequence[BenchmarkRow]) -> str:
    """Render benchmark rows as a Markdown table, one line per size step."""
    header = (
        "### Benchmark (average milliseconds per call)\n\n"
        "| Step | Exhaustive n | Exhaustive ms | Exhaustive benefit | Greedy n | Greedy ms | Greedy benefit |\n"
        "|---|---|---|---|---|---|---|\n"
    )
    lines = [
        f"| {r['step']} | {r['exhaustive_size']} | {r['exhaustive_ms']:.4f} | {_fmt(r['exhaustive_benefit'])} "
        f"| {r['greedy_size']} | {r['greedy_ms']:.4f} | {_fmt(r['greedy_benefit'])} |"
        for r in rows
    ]
    if not lines:
        lines.append("| *(none)* | — | — | — | — | — | — |")
    return header + "\n".join(lines) + "\n"
