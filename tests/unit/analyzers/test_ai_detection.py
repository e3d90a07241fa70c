"""
Tests for the AI-authorship analyzer.
"""
import pytest

from writescore.analyzers.ai_detection import (
    AIDetectionAnalyzer,
    bigram_surprises,
    detect_length_patterns,
    determine_confidence,
    score_burstiness,
    score_perplexity,
    sentence_structure,
)
from writescore.analyzers.models import Indicator


def _indicator(confidence, kind='ai'):
    return Indicator(type=kind, feature='test', confidence=confidence, description='test')


class TestAIDetectionAnalyzer:
    """Test suite for AIDetectionAnalyzer."""

    @pytest.fixture
    def analyzer(self):
        return AIDetectionAnalyzer()

    def test_01_empty_text_is_neutral(self, analyzer):
        result = analyzer.analyze("")

        assert result.score == 50
        assert result.human_likelihood == 0.5
        assert result.ai_likelihood == 0.5
        assert result.confidence == 'low'
        assert result.indicators == ()
        assert result.feedback == ('Mixed indicators - could be human or AI',)

    def test_02_likelihoods_are_complementary(self, analyzer, article_text):
        result = analyzer.analyze(article_text)

        assert result.human_likelihood == result.score / 100
        assert result.human_likelihood + result.ai_likelihood == pytest.approx(1.0, abs=0.01)

    def test_03_ai_phrasing_indicator(self, analyzer):
        text = ("It is important to note that our comprehensive solution scales. "
                "Furthermore, cutting-edge technology drives adoption. "
                "Moreover, teams benefit from automation.")
        result = analyzer.analyze(text)

        phrasing = [i for i in result.indicators if i.feature == 'AI-typical phrasing']
        assert len(phrasing) == 3
        assert all(i.type == 'ai' for i in phrasing)

    def test_04_colloquial_indicator(self, analyzer):
        result = analyzer.analyze("Wow, that was totally unexpected... I think we loved it!")

        assert any(
            i.type == 'human' and i.feature == 'Colloquial expressions'
            for i in result.indicators
        )

    def test_05_weighted_blend(self, analyzer, article_text):
        result = analyzer.analyze(article_text)
        a = result.analysis

        blended = (a.perplexity_score * 0.25 + a.burstiness_score * 0.20
                   + a.vocabulary_diversity * 0.20 + a.sentence_variation * 0.20
                   + a.stylometry_score * 0.15)
        assert abs(result.score - blended) <= 0.5


class TestSignals:

    def test_01_bigram_surprises(self):
        # P(b|a) = 2/2, P(a|b) = 1/2
        assert bigram_surprises(['a', 'b', 'a', 'b']) == [0, 1, 0]

    def test_02_perplexity_needs_two_words(self):
        assert score_perplexity("hello") == 50

    def test_03_repeating_lengths(self):
        assert detect_length_patterns([3, 7, 3, 7, 3, 7]) == (True, False)

    def test_04_uniform_lengths(self):
        assert detect_length_patterns([5, 5, 5, 5]) == (False, True)

    def test_05_too_few_lengths(self):
        assert detect_length_patterns([1, 2, 3]) == (False, False)

    def test_06_burstiness_needs_three_sentences(self):
        assert score_burstiness("One sentence. Two sentences.") == 50

    @pytest.mark.parametrize("sentence,expected", [
        ("Why not?", 'question'),
        ("Stop right there!", 'exclamation'),
        ("I came, I saw and I won", 'compound_complex'),
        ("After lunch, we left", 'complex'),
        ("Cats and dogs play", 'compound'),
        ("Go now", 'short_simple'),
        ("The quiet library opens early", 'simple'),
    ])
    def test_07_sentence_structure(self, sentence, expected):
        assert sentence_structure(sentence) == expected


class TestConfidence:

    def test_01_two_strong_indicators(self):
        assert determine_confidence([_indicator(0.8), _indicator(0.8, 'human')]) == 'high'

    def test_02_one_strong_indicator(self):
        assert determine_confidence([_indicator(0.8)]) == 'medium'

    def test_03_many_weak_indicators(self):
        assert determine_confidence([_indicator(0.5)] * 3) == 'medium'

    def test_04_few_weak_indicators(self):
        assert determine_confidence([_indicator(0.7)]) == 'low'
