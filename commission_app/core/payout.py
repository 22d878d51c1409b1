"""AE payout calculation.

Base payout is pro-rated up to 100% attainment and capped there. Bundling
bonus is a single tier (highest qualifying wins). ARR above quota earns an
accelerator on its monthly equivalent, with an optional extra rate on the
bundled share of that over-quota volume.
"""
import logging
from typing import Any, Mapping, Union

from ..models.payout_schemas import PayoutBreakdown, PlanConfig, SalesInput

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
ACCELERATOR_RATE = 1.25
BUNDLED_SHARE_EXTRA_RATE = 0.25
BUNDLE_TIER_LOW = 0.20
BUNDLE_TIER_HIGH = 0.35

ConfigLike = Union[PlanConfig, Mapping[str, Any]]
InputLike = Union[SalesInput, Mapping[str, Any]]


def as_plan_config(config: ConfigLike) -> PlanConfig:
    if isinstance(config, PlanConfig):
        return config
    return PlanConfig.model_validate(dict(config or {}))


def as_sales_input(sales: InputLike) -> SalesInput:
    if isinstance(sales, SalesInput):
        return sales
    return SalesInput.model_validate(dict(sales or {}))


def bundle_bonus_for(bundle_pct: float, config: PlanConfig) -> float:
    """Return the bonus for the highest bundle tier reached, or 0."""
    if bundle_pct >= BUNDLE_TIER_HIGH:
        return config.bundle35_bonus
    if bundle_pct >= BUNDLE_TIER_LOW:
        return config.bundle20_bonus
    return 0.0


def compute(config: ConfigLike, sales: InputLike) -> PayoutBreakdown:
    """Compute the payout breakdown for one AE.

    Args:
        config: Plan parameters, as a ``PlanConfig`` or a mapping of raw values.
        sales: Period results, as a ``SalesInput`` or a mapping of raw values.

    Returns:
        A ``PayoutBreakdown`` whose ``total`` equals
        ``base_payout + bundle_bonus + accelerator + kicker - clawbacks``.
    """
    plan = as_plan_config(config)
    inp = as_sales_input(sales)

    quota_arr = plan.quota_arr
    arr = inp.arr_sold

    attainment = arr / quota_arr if quota_arr > 0 else 0.0
    base_payout = min(1.0, attainment) * plan.base_payout_at_100

    deals = inp.total_deals
    bundle_pct = inp.bundle_count / deals if deals > 0 else 0.0
    bundle_bonus = bundle_bonus_for(bundle_pct, plan)

    over_arr = max(0.0, arr - quota_arr)
    over_mrr = over_arr / MONTHS_PER_YEAR
    accelerator = over_mrr * ACCELERATOR_RATE
    if inp.use_over_quota_bundle_share:
        share = inp.over_quota_bundle_share_pct / 100
        accelerator += over_mrr * share * BUNDLED_SHARE_EXTRA_RATE

    kicker = inp.prepaid_kicker
    clawbacks = inp.clawbacks
    total = base_payout + bundle_bonus + accelerator + kicker - clawbacks

    logger.debug(
        "Computed payout: arr=%s attainment=%.4f bundle_pct=%.4f total=%.2f",
        arr, attainment, bundle_pct, total,
    )
    return PayoutBreakdown(
        arr=arr,
        quota_arr=quota_arr,
        attainment=attainment,
        base_payout=base_payout,
        bundle_pct=bundle_pct,
        bundle_bonus=bundle_bonus,
        over_arr=over_arr,
        accelerator=accelerator,
        kicker=kicker,
        clawbacks=clawbacks,
        total=total,
    )
