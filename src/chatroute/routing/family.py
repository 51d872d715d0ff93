"""Cost-optimized family selection for premium auto requests.

When a caller asks for GPT 5.1 with an automatic speed preference, most
requests can be served by a compact family at a fraction of the price.
The selector downgrades to Mini or Nano unless both length and
complexity signal a demanding task, in which case it keeps GPT 5.1.
"""

import re

from .features import PromptFeatures
from .models import ModelFamily, ReasoningEffort

# Broader than the feature vocabularies: single words that suggest the
# request needs a capable model even when the prompt is short.
COMPLEXITY_MENTIONS = re.compile(
    r"\b(debug|optimize|architecture|roadmap|financial|legal|proof|algorithm|analysis)\b",
)

# Length cutoffs (characters) per effort level
NANO_MAX_NO_EFFORT = 320
NANO_MAX_LOW_EFFORT = 600
NANO_MAX_MEDIUM_EFFORT = 400
MINI_MAX_MEDIUM_EFFORT = 1600
MINI_MAX_HIGH_EFFORT = 900


def mentions_complexity(features: PromptFeatures) -> bool:
    """True if the prompt names a demanding task."""
    return features.has_complexity_cue or bool(
        COMPLEXITY_MENTIONS.search(features.text))


class FamilyAutoSelector:
    """Re-selects the family for GPT 5.1 requests under AUTO speed.

    Usage:
        selector = FamilyAutoSelector()
        family = selector.select_family(features, ReasoningEffort.LOW)
        # family = ModelFamily.GPT_5_NANO for a short, simple prompt
    """

    def select_family(
        self,
        features: PromptFeatures,
        effort: ReasoningEffort | None,
    ) -> ModelFamily:
        length = features.length
        complex_ = mentions_complexity(features)

        if effort is None or effort == ReasoningEffort.NONE:
            if length < NANO_MAX_NO_EFFORT:
                return ModelFamily.GPT_5_NANO
            return ModelFamily.GPT_5_MINI

        if effort == ReasoningEffort.LOW:
            if length < NANO_MAX_LOW_EFFORT and not complex_:
                return ModelFamily.GPT_5_NANO
            return ModelFamily.GPT_5_MINI

        if effort == ReasoningEffort.MEDIUM:
            if length < NANO_MAX_MEDIUM_EFFORT and not complex_:
                return ModelFamily.GPT_5_NANO
            if length < MINI_MAX_MEDIUM_EFFORT or not complex_:
                return ModelFamily.GPT_5_MINI
            return ModelFamily.GPT_5_1

        # HIGH
        if length < MINI_MAX_HIGH_EFFORT and not complex_:
            return ModelFamily.GPT_5_MINI
        return ModelFamily.GPT_5_1
