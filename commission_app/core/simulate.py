"""Simulation routines for a team of AEs on one plan."""
from typing import Any, Dict, Mapping

from .payout import ConfigLike, InputLike, as_plan_config, compute


def run_simulation(config: ConfigLike, performance: Mapping[str, InputLike]) -> Dict[str, Any]:
    """Compute payouts for every rep under the plan.

    Each rep is computed independently; ``total_payout`` is the sum of the
    rep totals rounded to cents.
    """
    plan = as_plan_config(config)
    payouts = {rep: compute(plan, sales) for rep, sales in performance.items()}
    total = round(sum(b.total for b in payouts.values()), 2)
    return {"config": plan, "payouts": payouts, "total_payout": total}
