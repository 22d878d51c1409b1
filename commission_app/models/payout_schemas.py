# models/payout_schemas.py - Pydantic models for plan config, AE inputs and payout breakdown
"""
Inputs accept raw form values (numbers or free text) under either the
snake_case field name or the camelCase name used by the calculator form.
Numeric fields are normalized before validation, so constructing a model
never fails on a malformed number.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.normalize import clamp_pct, to_amount, to_count, to_flag, to_number

DEFAULT_QUOTA_ARR = 72000.0
DEFAULT_BASE_PAYOUT_AT_100 = 5833.0
DEFAULT_BUNDLE20_BONUS = 500.0
DEFAULT_BUNDLE35_BONUS = 1000.0


class PlanConfig(BaseModel):
    """Administrator-tunable plan parameters."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    quota_arr: float = Field(DEFAULT_QUOTA_ARR, alias="quotaArr")
    base_payout_at_100: float = Field(DEFAULT_BASE_PAYOUT_AT_100, alias="basePayoutAt100")
    bundle20_bonus: float = Field(DEFAULT_BUNDLE20_BONUS, alias="bundle20Bonus")
    bundle35_bonus: float = Field(DEFAULT_BUNDLE35_BONUS, alias="bundle35Bonus")

    @field_validator(
        "quota_arr", "base_payout_at_100", "bundle20_bonus", "bundle35_bonus",
        mode="before",
    )
    @classmethod
    def _amount(cls, v: Any) -> float:
        return to_amount(v)


class SalesInput(BaseModel):
    """One AE's results for the period."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    arr_sold: float = Field(0.0, alias="arrSold")
    total_deals: int = Field(0, alias="totalDeals")
    bundle_count: int = Field(0, alias="bundleCount")
    prepaid_kicker: float = Field(0.0, alias="prepaidKicker")
    clawbacks: float = 0.0
    use_over_quota_bundle_share: bool = Field(False, alias="useOverQuotaBundleShare")
    over_quota_bundle_share_pct: float = Field(0.0, alias="overQuotaBundleSharePct")

    @field_validator("arr_sold", "clawbacks", mode="before")
    @classmethod
    def _amount(cls, v: Any) -> float:
        return to_amount(v)

    @field_validator("total_deals", "bundle_count", mode="before")
    @classmethod
    def _count(cls, v: Any) -> int:
        return to_count(v)

    @field_validator("prepaid_kicker", mode="before")
    @classmethod
    def _signed(cls, v: Any) -> float:
        # Kicker may be negative; it is the only signed input.
        return to_number(v)

    @field_validator("over_quota_bundle_share_pct", mode="before")
    @classmethod
    def _pct(cls, v: Any) -> float:
        return clamp_pct(to_number(v))

    @field_validator("use_over_quota_bundle_share", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return to_flag(v)


class PayoutBreakdown(BaseModel):
    """Derived payout components. Never stored; recomputed on every call."""
    model_config = ConfigDict(frozen=True)

    arr: float
    quota_arr: float
    attainment: float
    base_payout: float
    bundle_pct: float
    bundle_bonus: float
    over_arr: float
    accelerator: float
    kicker: float
    clawbacks: float
    total: float
