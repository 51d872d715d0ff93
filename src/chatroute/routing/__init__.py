"""Deterministic model routing engine.

Resolves, for every chat turn, three coupled knobs from the caller's
requested family, speed preference and prompt text:
- Backend model family (GPT 5.1, GPT 5 Pro, Mini, Nano)
- Reasoning effort (none/low/medium/high)
- Concrete backend model identifier

100% local: no network calls, no state between requests, no learning.
The same inputs always produce the same ModelConfig.
"""

from chatroute.routing.effort import ReasoningEffortResolver
from chatroute.routing.family import FamilyAutoSelector
from chatroute.routing.features import PromptFeatureExtractor, PromptFeatures
from chatroute.routing.models import (
    InvalidRoutingInput,
    ModelConfig,
    ModelFamily,
    ReasoningEffort,
    SpeedPreference,
    describe_family,
    map_to_model_id,
    normalize_model_family,
    normalize_speed_preference,
)
from chatroute.routing.presets import ModelSettings, settings_from_display_name
from chatroute.routing.resolver import DecisionTrace, ModelConfigResolver, resolve

__all__ = [
    "ModelConfigResolver",
    "ModelConfig",
    "ModelFamily",
    "SpeedPreference",
    "ReasoningEffort",
    "PromptFeatureExtractor",
    "PromptFeatures",
    "ReasoningEffortResolver",
    "FamilyAutoSelector",
    "DecisionTrace",
    "InvalidRoutingInput",
    "ModelSettings",
    "describe_family",
    "map_to_model_id",
    "normalize_model_family",
    "normalize_speed_preference",
    "settings_from_display_name",
    "resolve",
]
