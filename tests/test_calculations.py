"""Unit tests for the benefit, ROI and payback formulas."""

import math

import pytest

from app.services.calculations import (
    HOURLY_RATE,
    apply_industry_defaults,
    calculate_chatbot_savings,
    calculate_email_revenue,
    calculate_payback_period,
    calculate_product_savings,
    calculate_roi,
    calculate_social_savings,
    compute_results,
)
from tests.factories import make_inputs


class TestEmailRevenue:
    def test_basic_calculation(self):
        # 10,000 * 2% * 20% * $100 * 12 = $48,000
        result = calculate_email_revenue(10000, 2, 100, 20)
        assert result == pytest.approx(48_000)

    @pytest.mark.parametrize(
        "args",
        [
            (0, 2, 100, 20),
            (10000, 0, 100, 20),
            (10000, 2, 0, 20),
            (10000, 2, 100, 0),
            (None, 2, 100, 20),
            (10000, float("nan"), 100, 20),
        ],
    )
    def test_any_falsy_argument_returns_zero(self, args):
        assert calculate_email_revenue(*args) == 0


class TestSocialSavings:
    def test_basic_calculation(self):
        # ($2,000 * 40% + 40h * $50 * 40%) * 12 = $19,200
        result = calculate_social_savings(2000, 40, 40)
        assert result == pytest.approx(19_200)

    def test_uses_fixed_hourly_rate(self):
        assert HOURLY_RATE == 50
        assert calculate_social_savings(1, 10, 100) == pytest.approx((1 + 500) * 12)

    @pytest.mark.parametrize("args", [(0, 40, 40), (2000, 0, 40), (2000, 40, 0), (2000, None, 40)])
    def test_any_falsy_argument_returns_zero(self, args):
        # zero labor hours zeroes the whole benefit, not just the labor part
        assert calculate_social_savings(*args) == 0


class TestChatbotSavings:
    def test_basic_calculation(self):
        # 500 tickets * $5 * 50% * 12 = $15,000
        assert calculate_chatbot_savings(500, 5, 50) == pytest.approx(15_000)

    @pytest.mark.parametrize("args", [(0, 5, 50), (500, 0, 50), (500, 5, 0), (500, 5, None)])
    def test_any_falsy_argument_returns_zero(self, args):
        assert calculate_chatbot_savings(*args) == 0


class TestProductSavings:
    def test_basic_calculation(self):
        # 1,000 SKUs * 0.5h * $50 * 60% = $15,000
        assert calculate_product_savings(1000, 30, 60) == pytest.approx(15_000)

    def test_not_annualized(self):
        # the other three categories multiply by 12, this one does not
        assert calculate_product_savings(12, 60, 100) == pytest.approx(12 * 50)

    @pytest.mark.parametrize("args", [(0, 30, 60), (1000, 0, 60), (1000, 30, 0), (None, 30, 60)])
    def test_any_falsy_argument_returns_zero(self, args):
        assert calculate_product_savings(*args) == 0


class TestROI:
    def test_zero_benefit_is_total_loss(self):
        assert calculate_roi(0) == -100

    def test_none_benefit_is_total_loss(self):
        assert calculate_roi(None) == -100

    def test_basic_calculation(self):
        # ($150,000 - $50,000) / $50,000 = 200%
        assert calculate_roi(150_000) == pytest.approx(200)

    def test_custom_investment_cost(self):
        assert calculate_roi(150_000, investment_cost=100_000) == pytest.approx(50)

    def test_negative_benefit_uses_formula(self):
        assert calculate_roi(-50_000) == pytest.approx(-200)


class TestPaybackPeriod:
    @pytest.mark.parametrize("benefit", [0, -5, None, float("nan")])
    def test_no_benefit_never_pays_back(self, benefit):
        assert calculate_payback_period(benefit) == 999

    def test_basic_calculation(self):
        # $120,000/yr = $10,000/mo -> 5 months for $50,000
        assert calculate_payback_period(120_000) == pytest.approx(5)

    def test_custom_investment_cost(self):
        assert calculate_payback_period(120_000, investment_cost=20_000) == pytest.approx(2)


class TestComputeResults:
    def test_full_summary(self):
        summary = compute_results(make_inputs())
        assert summary.email_revenue == 48_000
        assert summary.social_savings == 19_200
        assert summary.chatbot_savings == 15_000
        assert summary.product_savings == 15_000
        assert summary.total_benefits == 97_200
        assert summary.roi == pytest.approx(94.4)
        assert summary.payback_months == pytest.approx(6.17)

    def test_total_is_sum_of_categories(self):
        summary = compute_results(
            make_inputs(
                averageOrderValue=33.33,
                currentConversionRate=1.7,
                costPerInquiry=3.14,
                monthlyContentSpend=999.99,
                descriptionUpdateTime=7,
            )
        )
        parts = (
            summary.email_revenue
            + summary.social_savings
            + summary.chatbot_savings
            + summary.product_savings
        )
        assert round(parts, 2) == summary.total_benefits

    def test_values_rounded_to_cents(self):
        summary = compute_results(make_inputs(averageOrderValue=33.333))
        for value in summary.model_dump().values():
            assert math.isclose(value, round(value, 2))

    def test_all_zero_inputs_hit_sentinels(self):
        summary = compute_results(
            make_inputs(
                emailListSize=0,
                monthlyContentSpend=0,
                supportTicketVolume=0,
                numberOfProducts=0,
            )
        )
        assert summary.total_benefits == 0
        assert summary.roi == -100
        assert summary.payback_months == 999

    def test_investment_cost_from_settings(self, monkeypatch):
        from app.core.config import settings

        monkeypatch.setattr(settings, "INVESTMENT_COST", 97_200.0)
        summary = compute_results(make_inputs())
        assert summary.roi == 0
        assert summary.payback_months == 12


class TestApplyIndustryDefaults:
    def test_overrides_all_four_percentages(self):
        adjusted = apply_industry_defaults(make_inputs(industry="Technology"))
        assert adjusted.email_improvement_pct == 32.5
        assert adjusted.social_improvement_pct == 32.5
        assert adjusted.chatbot_improvement_pct == 32.5
        assert adjusted.product_improvement_pct == 32.5

    def test_original_left_untouched(self):
        original = make_inputs(industry="Technology")
        apply_industry_defaults(original)
        assert original.social_improvement_pct == 40
