"""Model configuration resolver.

Single entry point for routing a chat turn. Composes the feature
extractor, effort resolver, family selector and model id mapping into
one immutable ModelConfig:

    raw inputs -> features -> effort -> (optional) family re-selection
               -> model id -> ModelConfig

The decision itself is pure. The only side effect is a trace record
per call (logger + optional observer) for operational debugging.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .effort import ReasoningEffortResolver, ensure_compact_effort
from .family import FamilyAutoSelector
from .features import PromptFeatureExtractor
from .models import (
    ModelConfig,
    ModelFamily,
    ReasoningEffort,
    SpeedPreference,
    coerce_family,
    coerce_speed,
    map_to_model_id,
)

logger = logging.getLogger(__name__)

# Provisional family when the caller leaves the choice to us
DEFAULT_AUTO_FAMILY = ModelFamily.GPT_5_MINI

OMITTED_EFFORT_LABEL = "none/omitted"


@dataclass(frozen=True)
class DecisionTrace:
    """Non-authoritative record of one routing decision."""
    model_id: str
    family: ModelFamily
    speed: SpeedPreference
    effort: str  # effort value, or OMITTED_EFFORT_LABEL

    def to_dict(self) -> dict[str, Any]:
        return {
            "model_id": self.model_id,
            "family": self.family.value,
            "speed": self.speed.value,
            "effort": self.effort,
        }


DecisionObserver = Callable[[DecisionTrace], None]


class ModelConfigResolver:
    """Resolves (family, speed, prompt) into a ModelConfig.

    Usage:
        resolver = ModelConfigResolver()
        config = resolver.resolve(ModelFamily.GPT_5_1, SpeedPreference.AUTO, "fix this typo")
        # config.resolved_family = ModelFamily.GPT_5_NANO
        # config.reasoning_effort = ReasoningEffort.LOW

    The resolver holds no per-request state and can be shared across
    threads.
    """

    def __init__(
        self,
        observer: DecisionObserver | None = None,
        trace: bool = True,
    ):
        self.extractor = PromptFeatureExtractor()
        self.effort_resolver = ReasoningEffortResolver()
        self.family_selector = FamilyAutoSelector()
        self.observer = observer
        self.trace = trace

    def resolve(
        self,
        requested_family: ModelFamily | str,
        speed: SpeedPreference | str,
        prompt_text: str,
    ) -> ModelConfig:
        """Route a request.

        Args:
            requested_family: Family the caller asked for (may be AUTO).
            speed: Caller's speed preference.
            prompt_text: Raw prompt, may be empty.

        Returns:
            ModelConfig with a concrete family and model id.

        Raises:
            InvalidRoutingInput: If family or speed is outside its enumeration.
        """
        requested_family = coerce_family(requested_family, "requested_family")
        speed = coerce_speed(speed)

        config = self.decide(requested_family, speed, prompt_text)
        self._emit(config, speed)
        return config

    def decide(
        self,
        requested_family: ModelFamily,
        speed: SpeedPreference,
        prompt_text: str,
    ) -> ModelConfig:
        """The pure decision procedure, without tracing."""
        if requested_family == ModelFamily.AUTO:
            family = DEFAULT_AUTO_FAMILY
        else:
            family = requested_family

        features = self.extractor.extract(prompt_text)
        effort = self.effort_resolver.resolve_effort(family, speed, features)

        if requested_family == ModelFamily.GPT_5_1 and speed == SpeedPreference.AUTO:
            family = self.family_selector.select_family(features, effort)

        # A downgrade may land on a compact family with effort NONE
        if family.is_compact:
            effort = ensure_compact_effort(effort)

        return ModelConfig(
            model_id=map_to_model_id(family),
            resolved_family=family,
            reasoning_effort=None if effort == ReasoningEffort.NONE else effort,
        )

    def _emit(self, config: ModelConfig, speed: SpeedPreference) -> None:
        """Publish the trace record for a finished decision."""
        if not self.trace and self.observer is None:
            return

        effort = config.reasoning_effort
        record = DecisionTrace(
            model_id=config.model_id,
            family=config.resolved_family,
            speed=speed,
            effort=effort.value if effort is not None else OMITTED_EFFORT_LABEL,
        )

        if self.trace:
            logger.debug(
                f"[model-config] model={record.model_id} family={record.family.value} "
                f"speed={record.speed.value} effort={record.effort}",
                extra={"routing": record.to_dict()},
            )
        if self.observer is not None:
            self.observer(record)


# ─── Default instance ─────────────────────────────────────────────

_resolver = ModelConfigResolver()


def resolve(
    requested_family: ModelFamily | str,
    speed: SpeedPreference | str,
    prompt_text: str,
) -> ModelConfig:
    """Resolve a request with the shared default resolver."""
    return _resolver.resolve(requested_family, speed, prompt_text)
