"""Per-request cost estimation and plan limit evaluation.

Downstream consumers of a routing decision: the cost estimate is keyed
on ModelConfig.model_id, and plan limits compare accumulated spend
against a monthly ceiling. Neither feeds back into routing.

Features:
- Model pricing per 1M tokens (input / cached input / output)
- Cost estimation for a single request
- Plan tiers with monthly USD ceilings
- Usage status with soft warning threshold
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class PlanTier(str, Enum):
    """Subscription plans with a monthly spend ceiling."""
    FREE = "free"
    PLUS = "plus"
    MAX = "max"


@dataclass(frozen=True)
class ModelPricing:
    """USD per 1M tokens."""
    input: float
    cached: float
    output: float


@dataclass
class UsageStatus:
    """Spend measured against a plan ceiling."""
    plan: PlanTier
    spending: float
    limit: float
    percentage: float
    remaining: float
    exceeded: bool
    warning: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "plan": self.plan.value,
            "spending": round(self.spending, 6),
            "limit": self.limit,
            "percentage": round(self.percentage, 1),
            "remaining": round(self.remaining, 6),
            "exceeded": self.exceeded,
            "warning": self.warning,
        }


# Known model pricing (USD per 1M tokens), keyed on backend model id
MODEL_PRICING: dict[str, ModelPricing] = {
    "gpt-5.1-2025-11-13": ModelPricing(input=1.25, cached=0.125, output=10.0),
    # No cached-input discount on Pro
    "gpt-5-pro-2025-10-06": ModelPricing(input=15.0, cached=15.0, output=120.0),
    "gpt-5-mini-2025-08-07": ModelPricing(input=0.25, cached=0.025, output=2.0),
    "gpt-5-nano-2025-08-07": ModelPricing(input=0.05, cached=0.005, output=0.4),
}

# Monthly ceilings (USD)
PLAN_LIMITS: dict[PlanTier, float] = {
    PlanTier.FREE: 2.0,
    PlanTier.PLUS: 12.0,
    PlanTier.MAX: 120.0,
}

# Legacy plan names still found on older accounts
PLAN_ALIASES: dict[str, PlanTier] = {
    "dev": PlanTier.MAX,
    "pro": PlanTier.PLUS,
    "basic": PlanTier.PLUS,
}

WARNING_FRACTION = 0.8  # Warn at 80%

TOKENS_PER_UNIT = 1_000_000


def estimate_cost(
    model_id: str,
    input_tokens: int,
    cached_tokens: int = 0,
    output_tokens: int = 0,
) -> float:
    """Estimate the USD cost of a single request.

    Args:
        model_id: Backend model identifier (ModelConfig.model_id).
        input_tokens: Total input tokens, cached ones included.
        cached_tokens: Portion of input tokens served from cache.
        output_tokens: Generated tokens.

    Returns:
        Cost in USD, or 0.0 for a model with no known pricing.
    """
    pricing = MODEL_PRICING.get(model_id)
    if pricing is None:
        logger.warning(f"Unknown model for pricing: {model_id}")
        return 0.0

    input_cost = ((input_tokens - cached_tokens) / TOKENS_PER_UNIT) * pricing.input
    cached_cost = (cached_tokens / TOKENS_PER_UNIT) * pricing.cached
    output_cost = (output_tokens / TOKENS_PER_UNIT) * pricing.output
    return input_cost + cached_cost + output_cost


def normalize_plan(plan: PlanTier | str | None) -> PlanTier:
    """Coerce a stored plan name to a PlanTier; unknown plans are FREE."""
    name = str(plan.value if isinstance(plan, PlanTier) else plan or "").lower()
    try:
        return PlanTier(name)
    except ValueError:
        return PLAN_ALIASES.get(name, PlanTier.FREE)


def get_plan_limit(plan: PlanTier | str | None) -> float:
    return PLAN_LIMITS[normalize_plan(plan)]


def get_usage_status(spending: float, plan: PlanTier | str | None) -> UsageStatus:
    """Measure accumulated spend against the plan ceiling.

    warning is set from WARNING_FRACTION of the limit up to, but not
    including, the limit itself; at or above the limit only exceeded
    is set.
    """
    tier = normalize_plan(plan)
    limit = PLAN_LIMITS[tier]
    exceeded = spending >= limit
    return UsageStatus(
        plan=tier,
        spending=spending,
        limit=limit,
        percentage=(spending / limit) * 100,
        remaining=max(0.0, limit - spending),
        exceeded=exceeded,
        warning=spending >= limit * WARNING_FRACTION and not exceeded,
    )
