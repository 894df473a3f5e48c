"""
Exact 0/1 selection with Google OR-Tools CP-SAT.

Used as a reference (oracle) for inputs too large for exhaustive_select:
one Boolean per item, one budget constraint, maximize total benefit.

Integer scaling
---------------
CP-SAT only accepts integer coefficients:
  - cost_i    → ceil(cost_i * scale)
  - budget    → floor(budget * scale)
  - benefit_i → round(benefit_i * scale)
Rounding costs up and the budget down keeps every reported selection
feasible against the real-valued budget. With data carrying at most
log10(scale) decimals the scaled model is exact.
"""
import logging
import math
from typing import Any, Dict, Iterable, Optional

from ortools.sat.python import cp_model

from datatypes import Item
from inputvalidations import validate_items
from utilities import sum_items

logger = logging.getLogger(__name__)


def _scaled(value: float, scale: int) -> float:
    # drop float noise such as 0.3 * 1000 == 300.00000000000006 before ceil/floor
    return round(value * scale, 6)


def cpsat_select(
    items: Iterable[Item],
    budget: float,
    *,
    scale: int = 1000,
    time_limit_s: float = 10.0,
    log: bool = False,
    random_seed: Optional[int] = None,
    num_search_workers: Optional[int] = None,
) -> Dict[str, Any]:
    """Solve the selection problem exactly with CP-SAT.

    Returns
    -------
    dict
        - items: chosen Item objects in input order
        - total_cost, total_benefit: real-valued totals of the chosen items
        - status: CP-SAT status name ("OPTIMAL", "FEASIBLE", ...) or "NOT_SOLVED"
        - optimal: True when CP-SAT proved optimality
    """
    source = validate_items(items)
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    if not source or not (budget >= 0):
        return {"items": [], "total_cost": 0.0, "total_benefit": 0.0, "status": "NOT_SOLVED", "optimal": False}

    n = len(source)
    int_costs = [max(1, math.ceil(_scaled(it.cost, scale))) for it in source]
    int_benefits = [int(round(_scaled(it.benefit, scale))) for it in source]
    int_budget = math.floor(_scaled(budget, scale))

    m = cp_model.CpModel()
    x = [m.NewBoolVar(f"x_i{i}") for i in range(n)]
    m.Add(sum(int_costs[i] * x[i] for i in range(n)) <= int_budget)
    m.Maximize(sum(int_benefits[i] * x[i] for i in range(n)))

    s = cp_model.CpSolver()
    s.parameters.max_time_in_seconds = float(time_limit_s)
    s.parameters.log_search_progress = bool(log)
    if random_seed is not None:
        s.parameters.random_seed = int(random_seed)
    if num_search_workers is not None:
        s.parameters.num_search_workers = int(num_search_workers)
    status = s.Solve(m)

    chosen = []
    if status in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        chosen = [source[i] for i in range(n) if s.Value(x[i])]
    total_cost, total_benefit = sum_items(chosen)

    logger.debug("cpsat status %s, picked %d of %d item(s), benefit %s", s.StatusName(status), len(chosen), n, total_benefit)
    return {
        "items": chosen,
        "total_cost": total_cost,
        "total_benefit": total_benefit,
        "status": s.StatusName(status),
        "optimal": status == cp_model.OPTIMAL,
    }


__all__ = ["cpsat_select"]
