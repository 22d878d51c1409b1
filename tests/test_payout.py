"""Tests for the payout calculator."""
import pytest

from commission_app.core.payout import compute
from commission_app.models.payout_schemas import PayoutBreakdown, PlanConfig, SalesInput

REFERENCE_PLAN = PlanConfig(quota_arr=72000, base_payout_at_100=5833, bundle20_bonus=500, bundle35_bonus=1000)


def _sales(**kwargs):
    return SalesInput(**kwargs)


class TestReferenceScenario:
    def test_matches_reference_sheet(self):
        b = compute(
            REFERENCE_PLAN,
            _sales(arr_sold=93600, total_deals=22, bundle_count=7, prepaid_kicker=100, clawbacks=0),
        )
        assert b.arr == 93600
        assert b.quota_arr == 72000
        assert b.attainment == pytest.approx(1.3)
        assert b.base_payout == 5833
        assert b.bundle_pct == pytest.approx(7 / 22)
        assert b.bundle_bonus == 500
        assert b.over_arr == 21600
        assert b.accelerator == 2250
        assert b.kicker == 100
        assert b.clawbacks == 0
        assert b.total == 8683

    def test_camel_case_mappings_accepted(self):
        b = compute(
            {"quotaArr": 72000, "basePayoutAt100": 5833, "bundle20Bonus": 500, "bundle35Bonus": 1000},
            {"arrSold": 93600, "totalDeals": 22, "bundleCount": 7, "prepaidKicker": 100},
        )
        assert b.total == 8683

    def test_raw_form_text(self):
        b = compute(
            REFERENCE_PLAN,
            {"arrSold": "$93,600", "totalDeals": "22", "bundleCount": "7.9", "prepaidKicker": "$100"},
        )
        assert b.arr == 93600
        assert b.bundle_pct == pytest.approx(7 / 22)
        assert b.total == 8683


class TestBasePayout:
    @pytest.mark.parametrize("arr", [0, 18000, 36000, 54000, 72000])
    def test_pro_rated_below_quota(self, arr):
        b = compute(REFERENCE_PLAN, _sales(arr_sold=arr))
        assert b.base_payout == pytest.approx(arr / 72000 * 5833)
        assert b.accelerator == 0
        assert b.over_arr == 0

    @pytest.mark.parametrize("arr", [72000, 80000, 500000])
    def test_capped_at_full_payout(self, arr):
        b = compute(REFERENCE_PLAN, _sales(arr_sold=arr))
        assert b.base_payout == 5833

    def test_zero_quota(self):
        plan = PlanConfig(quota_arr=0, base_payout_at_100=5833)
        b = compute(plan, _sales(arr_sold=12000))
        assert b.attainment == 0
        assert b.base_payout == 0
        assert b.over_arr == 12000
        assert b.accelerator == pytest.approx(1250)


class TestBundleBonus:
    def test_no_deals(self):
        b = compute(REFERENCE_PLAN, _sales(total_deals=0, bundle_count=5))
        assert b.bundle_pct == 0
        assert b.bundle_bonus == 0

    @pytest.mark.parametrize(
        "bundles, expected",
        [(0, 0), (10, 0), (19, 0), (20, 500), (34, 500), (35, 1000), (100, 1000)],
    )
    def test_tiers(self, bundles, expected):
        b = compute(REFERENCE_PLAN, _sales(total_deals=100, bundle_count=bundles))
        assert b.bundle_bonus == expected

    def test_tiers_do_not_stack(self):
        b = compute(REFERENCE_PLAN, _sales(total_deals=10, bundle_count=5))
        assert b.bundle_bonus == REFERENCE_PLAN.bundle35_bonus

    def test_more_bundles_than_deals_takes_top_tier(self):
        b = compute(REFERENCE_PLAN, _sales(total_deals=4, bundle_count=9))
        assert b.bundle_pct == pytest.approx(2.25)
        assert b.bundle_bonus == 1000

    def test_negative_tier_amounts_clamped(self):
        plan = PlanConfig(quota_arr=72000, bundle20_bonus=-500, bundle35_bonus="-1,000")
        b = compute(plan, _sales(total_deals=10, bundle_count=5))
        assert b.bundle_bonus == 0


class TestAccelerator:
    def test_share_ignored_when_flag_off(self):
        b = compute(
            REFERENCE_PLAN,
            _sales(arr_sold=93600, use_over_quota_bundle_share=False, over_quota_bundle_share_pct=80),
        )
        assert b.accelerator == 2250

    def test_bundled_share_extra(self):
        b = compute(
            REFERENCE_PLAN,
            _sales(arr_sold=93600, use_over_quota_bundle_share=True, over_quota_bundle_share_pct=40),
        )
        assert b.accelerator == pytest.approx(2250 + 1800 * 0.4 * 0.25)

    @pytest.mark.parametrize("pct, extra", [(150, 450), (-20, 0), ("abc", 0)])
    def test_share_pct_clamped(self, pct, extra):
        b = compute(
            REFERENCE_PLAN,
            _sales(arr_sold=93600, use_over_quota_bundle_share=True, over_quota_bundle_share_pct=pct),
        )
        assert b.accelerator == pytest.approx(2250 + extra)

    def test_flag_from_form_text(self):
        b = compute(
            REFERENCE_PLAN,
            {"arrSold": 93600, "useOverQuotaBundleShare": "true", "overQuotaBundleSharePct": "100%"},
        )
        assert b.accelerator == pytest.approx(2700)

    def test_no_accelerator_below_quota(self):
        b = compute(
            REFERENCE_PLAN,
            _sales(arr_sold=50000, use_over_quota_bundle_share=True, over_quota_bundle_share_pct=100),
        )
        assert b.accelerator == 0


class TestAdjustments:
    def test_negative_kicker_reduces_total(self):
        b = compute(REFERENCE_PLAN, _sales(arr_sold=72000, prepaid_kicker=-250))
        assert b.kicker == -250
        assert b.total == pytest.approx(5833 - 250)

    def test_clawbacks_subtracted_and_clamped(self):
        b = compute(REFERENCE_PLAN, _sales(arr_sold=72000, clawbacks=300))
        assert b.total == pytest.approx(5833 - 300)
        b = compute(REFERENCE_PLAN, _sales(arr_sold=72000, clawbacks=-300))
        assert b.clawbacks == 0
        assert b.total == 5833


@pytest.mark.parametrize(
    "sales",
    [
        {},
        {"arrSold": 93600, "totalDeals": 22, "bundleCount": 7, "prepaidKicker": 100},
        {"arrSold": 40000, "totalDeals": 10, "bundleCount": 3, "prepaidKicker": -75, "clawbacks": 410},
        {"arrSold": 250000, "totalDeals": 3, "bundleCount": 1, "useOverQuotaBundleShare": True,
         "overQuotaBundleSharePct": 33.3, "clawbacks": 1200.5},
    ],
)
def test_total_is_sum_of_components(sales):
    b = compute(REFERENCE_PLAN, sales)
    assert b.total == b.base_payout + b.bundle_bonus + b.accelerator + b.kicker - b.clawbacks


def test_malformed_input_never_raises():
    b = compute(
        {"quotaArr": "n/a", "basePayoutAt100": None, "bundle20Bonus": [], "bundle35Bonus": "--"},
        {"arrSold": "lots", "totalDeals": "-4", "bundleCount": float("nan"), "prepaidKicker": "inf",
         "clawbacks": "", "useOverQuotaBundleShare": "maybe", "overQuotaBundleSharePct": None},
    )
    assert isinstance(b, PayoutBreakdown)
    assert b.total == 0
    assert b.attainment == 0
    assert b.bundle_pct == 0


def test_numbers_too_wide_for_float_read_as_zero():
    huge = 10**400
    b = compute(
        {"quotaArr": huge, "basePayoutAt100": 5833},
        {"arrSold": huge, "totalDeals": huge, "bundleCount": 3, "prepaidKicker": -huge,
         "clawbacks": huge, "useOverQuotaBundleShare": huge, "overQuotaBundleSharePct": huge},
    )
    assert b.quota_arr == 0
    assert b.arr == 0
    assert b.bundle_pct == 0
    assert b.kicker == 0
    assert b.clawbacks == 0
    assert b.total == 0


def test_idempotent():
    sales = _sales(arr_sold=81234.56, total_deals=13, bundle_count=4, prepaid_kicker=12.5)
    assert compute(REFERENCE_PLAN, sales) == compute(REFERENCE_PLAN, sales)
