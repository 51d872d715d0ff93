"""Prompt feature extraction for model routing.

Derives a handful of cheap scalar and boolean signals from the raw
prompt text. Everything is local string work - substring checks and
a sentence split - so the result is fully deterministic.

Signals:
1. Length of the trimmed prompt
2. Sentence count (segments between . ! ?)
3. Light reasoning cues (explain, compare, why, ...)
4. High complexity cues (research, architecture, algorithm, ...)
5. Extreme complexity phrases (academic thesis, risk assessment, ...)
6. Long clauses (any sentence over LONG_CLAUSE_CHARS)
"""

import re
from dataclasses import dataclass

LIGHT_REASONING_KEYWORDS = frozenset({
    "step by step",
    "analyze",
    "analysis",
    "explain",
    "break down",
    "derive",
    "prove",
    "detailed",
    "strategy",
    "plan",
    "evaluate",
    "compare",
    "contrast",
    "investigate",
    "why",
    "how",
    "improve",
})

HIGH_COMPLEXITY_KEYWORDS = frozenset({
    "research",
    "comprehensive",
    "in-depth",
    "long-form",
    "whitepaper",
    "architecture",
    "roadmap",
    "algorithm",
    "implementation",
    "financial model",
})

EXTREME_COMPLEXITY_PHRASES = frozenset({
    "step-by-step proof",
    "academic thesis",
    "full proposal",
    "enterprise rollout",
    "investment memorandum",
    "system architecture",
    "risk assessment",
})

# A sentence longer than this counts as a long clause
LONG_CLAUSE_CHARS = 200

SENTENCE_SPLIT = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class PromptFeatures:
    """Signals derived from a single prompt."""
    length: int = 0
    sentence_count: int = 0
    has_light_reasoning_cue: bool = False
    has_high_complexity_cue: bool = False
    has_extreme_complexity_phrase: bool = False
    has_long_clause: bool = False
    text: str = ""  # trimmed, lowercased prompt

    @property
    def has_complexity_cue(self) -> bool:
        """True if any high or extreme complexity vocabulary matched."""
        return self.has_high_complexity_cue or self.has_extreme_complexity_phrase


def contains_any(text: str, vocabulary: frozenset[str]) -> bool:
    """Substring containment against a fixed vocabulary."""
    return any(term in text for term in vocabulary)


class PromptFeatureExtractor:
    """Extracts PromptFeatures from raw prompt text.

    Stateless; a single instance can be shared freely.
    """

    def extract(self, prompt_text: str) -> PromptFeatures:
        """Derive routing features from a prompt.

        Args:
            prompt_text: Raw user prompt, possibly empty.

        Returns:
            PromptFeatures. An empty prompt yields all-zero/False signals.
        """
        trimmed = prompt_text.strip()
        if not trimmed:
            return PromptFeatures()

        normalized = trimmed.lower()
        segments = [s.strip() for s in SENTENCE_SPLIT.split(normalized)]
        segments = [s for s in segments if s]

        return PromptFeatures(
            length=len(trimmed),
            sentence_count=len(segments),
            has_light_reasoning_cue=contains_any(
                normalized, LIGHT_REASONING_KEYWORDS),
            has_high_complexity_cue=contains_any(
                normalized, HIGH_COMPLEXITY_KEYWORDS),
            has_extreme_complexity_phrase=contains_any(
                normalized, EXTREME_COMPLEXITY_PHRASES),
            has_long_clause=any(len(s) > LONG_CLAUSE_CHARS for s in segments),
            text=normalized,
        )
