"""Tests for the GPT 5.1 auto downgrade/escalation path."""

import pytest

from chatroute.routing.family import FamilyAutoSelector, mentions_complexity
from chatroute.routing.features import PromptFeatureExtractor
from chatroute.routing.models import ModelFamily, ReasoningEffort


@pytest.fixture
def select():
    extractor = PromptFeatureExtractor()
    selector = FamilyAutoSelector()

    def _select(text, effort):
        return selector.select_family(extractor.extract(text), effort)

    return _select


class TestMentionsComplexity:
    """Complexity mentions combine feature cues with a word regex."""

    @pytest.mark.parametrize("text", [
        "optimize the query",
        "a legal question",
        "financial summary",
        "quick analysis",
        "implementation notes",      # high complexity keyword
        "enterprise rollout plan",   # extreme phrase
    ])
    def test_mentions(self, text):
        features = PromptFeatureExtractor().extract(text)
        assert mentions_complexity(features)

    @pytest.mark.parametrize("text", ["analyses", "fix this typo", ""])
    def test_no_mention(self, text):
        features = PromptFeatureExtractor().extract(text)
        assert not mentions_complexity(features)


class TestNoEffort:
    """NONE or undecided effort: length alone picks Nano or Mini."""

    @pytest.mark.parametrize("effort", [None, ReasoningEffort.NONE])
    def test_length_cutoff(self, select, prompt_of, effort):
        assert select(prompt_of(319), effort) == ModelFamily.GPT_5_NANO
        assert select(prompt_of(320), effort) == ModelFamily.GPT_5_MINI

    def test_complexity_is_ignored(self, select):
        assert select("optimize the algorithm", None) == ModelFamily.GPT_5_NANO


class TestLowEffort:

    def test_short_simple_is_nano(self, select):
        assert select("explain this", ReasoningEffort.LOW) == ModelFamily.GPT_5_NANO

    def test_long_is_mini(self, select, prompt_of):
        assert select(prompt_of(599), ReasoningEffort.LOW) == ModelFamily.GPT_5_NANO
        assert select(prompt_of(600), ReasoningEffort.LOW) == ModelFamily.GPT_5_MINI

    def test_complexity_is_mini(self, select):
        assert select("optimize the query", ReasoningEffort.LOW) == ModelFamily.GPT_5_MINI


class TestMediumEffort:

    def test_short_simple_is_nano(self, select, prompt_of):
        assert select(prompt_of(399), ReasoningEffort.MEDIUM) == ModelFamily.GPT_5_NANO
        assert select(prompt_of(400), ReasoningEffort.MEDIUM) == ModelFamily.GPT_5_MINI

    def test_short_complex_is_mini(self, select):
        assert select("debug the parser", ReasoningEffort.MEDIUM) == ModelFamily.GPT_5_MINI

    def test_long_simple_stays_mini(self, select, prompt_of):
        assert select(prompt_of(3000), ReasoningEffort.MEDIUM) == ModelFamily.GPT_5_MINI

    def test_long_complex_escalates(self, select, prompt_of):
        below = prompt_of(1599, prefix="algorithm review. ")
        at = prompt_of(1600, prefix="algorithm review. ")
        assert select(below, ReasoningEffort.MEDIUM) == ModelFamily.GPT_5_MINI
        assert select(at, ReasoningEffort.MEDIUM) == ModelFamily.GPT_5_1


class TestHighEffort:

    def test_short_simple_is_mini(self, select, prompt_of):
        assert select(prompt_of(899), ReasoningEffort.HIGH) == ModelFamily.GPT_5_MINI

    def test_long_is_premium(self, select, prompt_of):
        assert select(prompt_of(900), ReasoningEffort.HIGH) == ModelFamily.GPT_5_1

    def test_complex_is_premium(self, select):
        assert select("a legal question", ReasoningEffort.HIGH) == ModelFamily.GPT_5_1

    def test_never_returns_pro_or_auto(self, select, prompt_of):
        for effort in [None, *ReasoningEffort]:
            for text in ("", "hi", "legal proof", prompt_of(2500)):
                family = select(text, effort)
                assert family not in (ModelFamily.AUTO, ModelFamily.GPT_5_PRO)
