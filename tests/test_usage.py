"""Tests for cost estimation and plan limits."""

import logging

import pytest

from chatroute.routing.models import MODEL_ID_MAP
from chatroute.usage import (
    MODEL_PRICING,
    PlanTier,
    estimate_cost,
    get_plan_limit,
    get_usage_status,
    normalize_plan,
)


class TestEstimateCost:
    """Per-request cost from token counts."""

    def test_every_routed_model_is_priced(self):
        for model_id in MODEL_ID_MAP.values():
            assert model_id in MODEL_PRICING

    def test_input_and_output(self):
        cost = estimate_cost("gpt-5-mini-2025-08-07", 1_000_000, 0, 1_000_000)
        assert cost == pytest.approx(2.25)

    def test_cached_tokens_are_discounted(self):
        cost = estimate_cost("gpt-5.1-2025-11-13", 1_000_000, 400_000, 0)
        assert cost == pytest.approx(0.6 * 1.25 + 0.4 * 0.125)

    def test_zero_tokens(self):
        assert estimate_cost("gpt-5-nano-2025-08-07", 0) == 0.0

    def test_unknown_model_costs_nothing(self, caplog):
        caplog.set_level(logging.WARNING, logger="chatroute.usage")
        assert estimate_cost("gpt-4o", 1000, 0, 1000) == 0.0
        assert "Unknown model for pricing: gpt-4o" in caplog.text


class TestPlans:
    """Plan name coercion and ceilings."""

    @pytest.mark.parametrize("given,expected", [
        ("free", PlanTier.FREE),
        ("PLUS", PlanTier.PLUS),
        (PlanTier.MAX, PlanTier.MAX),
        ("dev", PlanTier.MAX),
        ("pro", PlanTier.PLUS),
        ("basic", PlanTier.PLUS),
        ("enterprise", PlanTier.FREE),
        ("", PlanTier.FREE),
        (None, PlanTier.FREE),
    ])
    def test_normalize_plan(self, given, expected):
        assert normalize_plan(given) == expected

    def test_limits(self):
        assert get_plan_limit("free") == 2.0
        assert get_plan_limit("plus") == 12.0
        assert get_plan_limit("max") == 120.0


class TestUsageStatus:
    """Spend against the monthly ceiling."""

    def test_under_limit(self):
        status = get_usage_status(1.0, "free")
        assert status.percentage == pytest.approx(50.0)
        assert status.remaining == pytest.approx(1.0)
        assert not status.warning
        assert not status.exceeded

    def test_warning_zone(self):
        status = get_usage_status(1.7, "free")
        assert status.warning
        assert not status.exceeded

    def test_exceeded_at_limit(self):
        status = get_usage_status(2.0, "free")
        assert status.exceeded
        assert not status.warning
        assert status.remaining == 0.0

    def test_remaining_never_negative(self):
        assert get_usage_status(250.0, "max").remaining == 0.0

    def test_to_dict(self):
        assert get_usage_status(6.0, "pro").to_dict() == {
            "plan": "plus",
            "spending": 6.0,
            "limit": 12.0,
            "percentage": 50.0,
            "remaining": 6.0,
            "exceeded": False,
            "warning": False,
        }
