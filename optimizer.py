"""
Budget-constrained item selection (0/1 knapsack) with two solvers:
  • greedy_select     : benefit/cost ratio heuristic, O(n²), not optimal
  • exhaustive_select : enumerate every subset mask, O(2ⁿ·n), exact

Both solvers
------------
- Take a collection of Item (possibly empty) and a budget.
- Never modify the input; return a new list of the chosen Item objects.
- Return picks in input order (relative order of the source is preserved).
- Always satisfy: Σ cost(picked) ≤ budget.
- Are deterministic: same input and budget give the same picks.

Tie-breaks
----------
- Greedy: among equal ratios the item met first in the working order wins.
- Exhaustive: among equal total benefits the smallest mask wins (masks are
  scanned in increasing numeric order; bit j set means item j is picked).

Example
-------
A(cost 10, benefit 60), B(20, 100), C(30, 120), budget 50:
    greedy     → [A, B]  benefit 160   (ratios 6.0, 5.0, 4.0; C no longer fits)
    exhaustive → [B, C]  benefit 220
"""

import logging
from typing import Iterable, List

from datatypes import Item, ItemCollection
from inputvalidations import validate_items, validate_exhaustive_size

logger = logging.getLogger(__name__)


# --------------------------- Greedy ---------------------------

def greedy_select(items: Iterable[Item], budget: float) -> ItemCollection:
    """
    Repeatedly take the remaining item with the highest benefit/cost ratio.

    Each item is considered exactly once: if it fits in what is left of the
    budget it is accepted, otherwise it is dropped and never revisited.

    Parameters
    ----------
    items : Iterable[Item]
        Candidate items (may be empty).
    budget : float
        Maximum total cost. A budget of 0 (or less) selects nothing.

    Returns
    -------
    ItemCollection
        Accepted items, in input order.

    Raises
    ------
    TypeError
        If ``items`` holds anything other than Item.
    """
    source = validate_items(items)

    # (input index, item) pairs still under consideration
    remaining = list(enumerate(source))
    picked_idx: List[int] = []
    total_cost = 0.0

    while remaining:
        best_pos = 0
        best_ratio = remaining[0][1].ratio
        for pos in range(1, len(remaining)):
            r = remaining[pos][1].ratio
            if r > best_ratio:
                best_ratio = r
                best_pos = pos

        idx, it = remaining.pop(best_pos)
        if total_cost + it.cost <= budget:
            total_cost += it.cost
            picked_idx.append(idx)

    picked_idx.sort()
    out = [source[i] for i in picked_idx]
    logger.debug("greedy picked %d of %d item(s), cost %.4f / %s", len(out), len(source), total_cost, budget)
    return out


# --------------------------- Exhaustive ---------------------------

def exhaustive_select(items: Iterable[Item], budget: float) -> ItemCollection:
    """
    Return the subset with the greatest total benefit whose total cost fits the budget.

    Every mask in ``[0, 2**n)`` is evaluated; bit ``j`` of the mask selects
    ``items[j]``. The empty subset (mask 0) is feasible for any budget >= 0,
    so the result is always well defined there. With a negative budget no
    subset fits and the result is empty.

    Parameters
    ----------
    items : Iterable[Item]
        Candidate items; fewer than 64 of them.
    budget : float
        Maximum total cost.

    Returns
    -------
    ItemCollection
        The optimal subset in input order. Among equally good subsets, the
        one with the smallest mask.

    Raises
    ------
    InputTooLarge
        If there are 64 or more items.
    TypeError
        If ``items`` holds anything other than Item.
    """
    source = validate_items(items)
    validate_exhaustive_size(source)

    n = len(source)
    costs = [it.cost for it in source]
    benefits = [it.benefit for it in source]

    best_mask = 0
    best_benefit = -1.0
    for mask in range(1 << n):
        cost = 0.0
        benefit = 0.0
        for j in range(n):
            if mask >> j & 1:
                cost += costs[j]
                benefit += benefits[j]
        if cost <= budget and benefit > best_benefit:
            best_benefit = benefit
            best_mask = mask

    out = [source[j] for j in range(n) if best_mask >> j & 1]
    logger.debug("exhaustive picked %d of %d item(s), benefit %s", len(out), n, max(best_benefit, 0.0))
    return out


__all__ = ["greedy_select", "exhaustive_select"]
