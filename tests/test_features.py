"""Tests for prompt feature extraction."""

import pytest

from chatroute.routing.features import (
    EXTREME_COMPLEXITY_PHRASES,
    HIGH_COMPLEXITY_KEYWORDS,
    LIGHT_REASONING_KEYWORDS,
    PromptFeatureExtractor,
    PromptFeatures,
)


@pytest.fixture
def extractor():
    return PromptFeatureExtractor()


class TestEmptyInput:
    """Empty and whitespace prompts yield zeroed features."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  "])
    def test_blank_prompt(self, extractor, text):
        assert extractor.extract(text) == PromptFeatures()

    def test_punctuation_only_has_no_sentences(self, extractor):
        features = extractor.extract("...")
        assert features.length == 3
        assert features.sentence_count == 0
        assert not features.has_long_clause


class TestScalars:
    """Length and sentence counting."""

    def test_length_is_trimmed(self, extractor):
        assert extractor.extract("  abc  ").length == 3

    def test_sentence_count(self, extractor):
        features = extractor.extract("Hello World. How are you? Fine!")
        assert features.length == 31
        assert features.sentence_count == 3

    def test_repeated_terminators_count_once(self, extractor):
        assert extractor.extract("Wait!!! Really?? yes.").sentence_count == 3

    def test_text_is_normalized(self, extractor):
        assert extractor.extract("  Fix THIS  ").text == "fix this"

    def test_long_clause_cutoff(self, extractor):
        """A segment must exceed 200 chars, 200 exactly is not long."""
        assert not extractor.extract("a" * 200).has_long_clause
        assert extractor.extract("a" * 201).has_long_clause

    def test_long_clause_in_later_sentence(self, extractor):
        text = "Short one. " + "b" * 250 + ". Short again."
        assert extractor.extract(text).has_long_clause


class TestVocabulary:
    """Keyword presence is case-insensitive substring containment."""

    def test_light_cue(self, extractor):
        features = extractor.extract("Please EXPLAIN recursion")
        assert features.has_light_reasoning_cue
        assert not features.has_high_complexity_cue

    def test_light_cue_matches_inside_words(self, extractor):
        """'show' contains 'how'; no tokenization is applied."""
        assert extractor.extract("show me the file").has_light_reasoning_cue

    def test_high_complexity_cue(self, extractor):
        features = extractor.extract("We need an ARCHITECTURE review")
        assert features.has_high_complexity_cue
        assert features.has_complexity_cue

    def test_extreme_phrase_without_high_keyword(self, extractor):
        features = extractor.extract("Prepare a Risk Assessment")
        assert features.has_extreme_complexity_phrase
        assert not features.has_high_complexity_cue
        assert features.has_complexity_cue

    def test_plain_prompt_has_no_cues(self, extractor, prompt_of):
        features = extractor.extract(prompt_of(500))
        assert not features.has_light_reasoning_cue
        assert not features.has_complexity_cue
        assert not features.has_long_clause

    def test_vocabularies_are_immutable(self):
        for vocab in (LIGHT_REASONING_KEYWORDS, HIGH_COMPLEXITY_KEYWORDS,
                      EXTREME_COMPLEXITY_PHRASES):
            assert isinstance(vocab, frozenset)
            assert all(term == term.lower() for term in vocab)
