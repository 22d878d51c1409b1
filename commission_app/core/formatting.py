"""Display helpers for payout breakdowns."""
from typing import List, Tuple

from ..models.payout_schemas import PayoutBreakdown, PlanConfig

BUNDLE_DEFINITION = "SMS + at least 1 Marketing Package with minimum $1,560 ARR ($130 MRR)."


def format_money(amount: float, currency_symbol: str = "$") -> str:
    """Render ``amount`` as currency with 2 decimals, e.g. ``-$1,250.50``."""
    rounded = round(amount, 2)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol}{abs(rounded):,.2f}"


def format_pct(ratio: float, decimals: int = 2) -> str:
    return f"{ratio * 100:.{decimals}f}%"


def summary_lines(breakdown: PayoutBreakdown, currency_symbol: str = "$") -> List[Tuple[str, str]]:
    """Ordered (label, value) pairs for the payout summary panel."""
    def money(x: float) -> str:
        return format_money(x, currency_symbol)

    return [
        ("ARR Sold", money(breakdown.arr)),
        ("Quota Attainment", format_pct(breakdown.attainment, 2)),
        ("Over-Quota ARR", money(breakdown.over_arr)),
        ("Base Payout", money(breakdown.base_payout)),
        (f"Bundling Bonus ({format_pct(breakdown.bundle_pct, 0)})", money(breakdown.bundle_bonus)),
        ("Accelerator", money(breakdown.accelerator)),
        ("Pre-Paid Kicker", money(breakdown.kicker)),
        ("Clawbacks", f"- {money(breakdown.clawbacks)}"),
        ("Total Payout", money(breakdown.total)),
    ]


def explain(config: PlanConfig, currency_symbol: str = "$") -> List[str]:
    """Plain-language description of how the payout is calculated."""
    low = format_money(config.bundle20_bonus, currency_symbol)
    high = format_money(config.bundle35_bonus, currency_symbol)
    return [
        "Base: Pro-rated up to 100% -> min(1, ARR/Quota) x Base@100%",
        f"Bundling bonus: +{low} at >=20% bundles, +{high} at >=35%.",
        "Accelerator: (Over-quota ARR / 12) x $1.25. "
        "Optional +$0.25 for the bundled share of over-quota.",
        "Total: Base + Bonus + Accelerator + Pre-Paid - Clawbacks.",
    ]
