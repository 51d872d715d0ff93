"""Reasoning effort selection.

Maps (family, speed preference, prompt features) to one of the four
effort levels. Full-tier families (GPT 5.1, GPT 5 Pro) may run with
no reasoning at all; compact families (Mini, Nano) never go below LOW.
"""

import re

from .features import PromptFeatures
from .models import ModelFamily, ReasoningEffort, SpeedPreference

# Prompt length thresholds (characters, trimmed)
LONG_PROMPT_THRESHOLD = 360
MEDIUM_PROMPT_THRESHOLD = 640
HIGH_PROMPT_THRESHOLD = 900
# Auto mode only jumps straight to HIGH well past the thinking-mode cutoff
AUTO_HIGH_MULTIPLIER = 1.2

STRUCTURED_INTENT = re.compile(
    r"\b(plan|roadmap|design|strategy|debug)\b",
    re.IGNORECASE,
)


def ensure_compact_effort(effort: ReasoningEffort | None) -> ReasoningEffort:
    """Clamp an effort to the compact-family floor of LOW."""
    if effort is None or effort.rank < ReasoningEffort.LOW.rank:
        return ReasoningEffort.LOW
    return effort


class ReasoningEffortResolver:
    """Chooses a reasoning effort for a request.

    Rules are evaluated top to bottom, first match wins:

    1. GPT 5 Pro always gets HIGH, whatever the speed or prompt.
    2. INSTANT: NONE for full-tier families, LOW for compact ones.
    3. THINKING: MEDIUM or HIGH depending on prompt complexity.
    4. AUTO: detect from prompt length and vocabulary.
    """

    def resolve_effort(
        self,
        family: ModelFamily,
        speed: SpeedPreference,
        features: PromptFeatures,
    ) -> ReasoningEffort:
        if family == ModelFamily.GPT_5_PRO:
            return ReasoningEffort.HIGH

        if speed == SpeedPreference.INSTANT:
            return ReasoningEffort.NONE if family.is_full_tier else ReasoningEffort.LOW

        if speed == SpeedPreference.THINKING:
            return self.pick_medium_or_high(features)

        detected = self.detect_auto_effort(family, features)
        if family.is_full_tier:
            return ReasoningEffort.NONE if detected is None else detected
        return ensure_compact_effort(detected)

    @staticmethod
    def pick_medium_or_high(features: PromptFeatures) -> ReasoningEffort:
        """Binary choice used by THINKING mode."""
        if features.length >= HIGH_PROMPT_THRESHOLD:
            return ReasoningEffort.HIGH
        if features.has_complexity_cue or features.has_long_clause:
            return ReasoningEffort.HIGH
        return ReasoningEffort.MEDIUM

    @staticmethod
    def detect_auto_effort(
        family: ModelFamily,
        features: PromptFeatures,
    ) -> ReasoningEffort | None:
        """Infer an effort from the prompt alone.

        Returns None when nothing in the prompt calls for reasoning;
        the caller decides what "undecided" means for the family.
        """
        if features.length >= HIGH_PROMPT_THRESHOLD * AUTO_HIGH_MULTIPLIER:
            return ReasoningEffort.HIGH
        if features.length >= MEDIUM_PROMPT_THRESHOLD:
            return ReasoningEffort.MEDIUM
        if features.has_light_reasoning_cue:
            return ReasoningEffort.LOW
        if STRUCTURED_INTENT.search(features.text):
            return ReasoningEffort.MEDIUM
        if family == ModelFamily.GPT_5_1 and features.length >= LONG_PROMPT_THRESHOLD:
            return ReasoningEffort.LOW
        return None
