"""Closed vocabularies and result types for model routing.

Every routing decision is expressed in terms of three enumerations
(model family, speed preference, reasoning effort) and produces a
single immutable ModelConfig. The backend model identifiers live here
too, since they are a static property of each family.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ModelFamily(str, Enum):
    """Backend model families a caller may request.

    AUTO is a request-only value: it never appears in a resolved config.
    """
    AUTO = "auto"
    GPT_5_1 = "gpt-5.1"                 # Premium
    GPT_5_PRO = "gpt-5-pro-2025-10-06"  # Premium, always high effort
    GPT_5_MINI = "gpt-5-mini"           # Mid compact
    GPT_5_NANO = "gpt-5-nano"           # Smallest compact

    @property
    def is_compact(self) -> bool:
        return self in COMPACT_FAMILIES

    @property
    def is_full_tier(self) -> bool:
        return self in FULL_TIER_FAMILIES


class SpeedPreference(str, Enum):
    """Caller's latency/quality hint."""
    AUTO = "auto"
    INSTANT = "instant"
    THINKING = "thinking"


class ReasoningEffort(str, Enum):
    """Requested intensity of the model's internal deliberation."""
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Position in the none < low < medium < high ordering."""
        return _EFFORT_ORDER.index(self)


_EFFORT_ORDER = (
    ReasoningEffort.NONE,
    ReasoningEffort.LOW,
    ReasoningEffort.MEDIUM,
    ReasoningEffort.HIGH,
)

FULL_TIER_FAMILIES = frozenset({ModelFamily.GPT_5_1, ModelFamily.GPT_5_PRO})
COMPACT_FAMILIES = frozenset({ModelFamily.GPT_5_MINI, ModelFamily.GPT_5_NANO})

# Concrete backend identifiers, one per non-auto family
MODEL_ID_MAP: dict[ModelFamily, str] = {
    ModelFamily.GPT_5_1: "gpt-5.1-2025-11-13",
    ModelFamily.GPT_5_MINI: "gpt-5-mini-2025-08-07",
    ModelFamily.GPT_5_NANO: "gpt-5-nano-2025-08-07",
    ModelFamily.GPT_5_PRO: "gpt-5-pro-2025-10-06",
}

FAMILY_LABELS: dict[ModelFamily, str] = {
    ModelFamily.AUTO: "Auto",
    ModelFamily.GPT_5_1: "GPT 5.1",
    ModelFamily.GPT_5_MINI: "GPT 5 Mini",
    ModelFamily.GPT_5_NANO: "GPT 5 Nano",
    ModelFamily.GPT_5_PRO: "GPT 5 Pro",
}


class InvalidRoutingInput(ValueError):
    """Raised when a value outside the closed routing vocabularies reaches the resolver.

    This is a programming error at the caller's boundary, not a
    user-facing condition: untrusted input should be coerced with the
    normalize_* helpers first.
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


@dataclass(frozen=True)
class ModelConfig:
    """A finalized routing decision.

    reasoning_effort is None when the backend should use its own
    default, which is distinct from an explicit ReasoningEffort.NONE.
    """
    model_id: str
    resolved_family: ModelFamily
    reasoning_effort: ReasoningEffort | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "model": self.model_id,
            "resolved_family": self.resolved_family.value,
        }
        if self.reasoning_effort is not None:
            data["reasoning"] = {"effort": self.reasoning_effort.value}
        return data


def coerce_family(value: ModelFamily | str, field: str = "family") -> ModelFamily:
    """Accept a ModelFamily or its exact value; anything else is fatal."""
    try:
        return ModelFamily(value)
    except ValueError:
        raise InvalidRoutingInput(
            f"Unknown model family: {value!r}", field=field, value=value,
        ) from None


def coerce_speed(value: SpeedPreference | str, field: str = "speed") -> SpeedPreference:
    """Accept a SpeedPreference or its exact value; anything else is fatal."""
    try:
        return SpeedPreference(value)
    except ValueError:
        raise InvalidRoutingInput(
            f"Unknown speed preference: {value!r}", field=field, value=value,
        ) from None


def normalize_model_family(value: Any) -> ModelFamily:
    """Lenient boundary coercion: unknown values fall back to AUTO."""
    try:
        return ModelFamily(value)
    except ValueError:
        return ModelFamily.AUTO


def normalize_speed_preference(value: Any) -> SpeedPreference:
    """Lenient boundary coercion: unknown values fall back to AUTO."""
    try:
        return SpeedPreference(value)
    except ValueError:
        return SpeedPreference.AUTO


def map_to_model_id(family: ModelFamily) -> str:
    """Map a resolved family to its backend model identifier."""
    try:
        return MODEL_ID_MAP[family]
    except KeyError:
        raise InvalidRoutingInput(
            f"No backend model for family {family!r}",
            field="family", value=family,
        ) from None


def describe_family(family: ModelFamily) -> str:
    """Human-readable label for UI display."""
    return FAMILY_LABELS.get(family, "Auto")
