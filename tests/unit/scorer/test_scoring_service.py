#!/usr/bin/env python3
"""
Test suite for the ScoringService orchestrator.

Covers caching, the qualitative review fallbacks and its concurrency with
the analyzers, analyzer failure propagation, score bounds and the
weighted-mean law of the composite.
"""

import time

import pytest

from writescore.analyzers.text_metrics import round_half_up
from writescore.config_loader import ScorerConfig, ScoringContext, ScoringWeights
from writescore.exceptions import AnalyzerError, QualitativeAnalysisError
from writescore.llm.fallbacks import ERROR_MARKER
from writescore.scorer import CompositeScore, ScoringService
from writescore.utils import ScoreFingerprinter
from tests.mocks.scoring_mocks import (
    BrokenScoreCache,
    ExplodingAnalyzer,
    InMemoryScoreCache,
    MockQualitativeProvider,
    OverlapRecordingAnalyzer,
    counting_analyzers,
)


@pytest.fixture
def cache():
    return InMemoryScoreCache()


@pytest.fixture
def provider():
    return MockQualitativeProvider()


@pytest.fixture
def analyzers():
    return counting_analyzers()


@pytest.fixture
def service(analyzers, cache, provider):
    svc = ScoringService(
        config=ScorerConfig(qualitative_timeout_seconds=2.0),
        analyzers=analyzers,
        cache=cache,
        qualitative_provider=provider,
        cache_ttl_seconds=3600,
    )
    yield svc
    svc.close()


class TestScoringService:
    """Test the orchestration of analyzers, cache and qualitative review."""

    def test_01_score_bundles_all_analyzers(self, service, article_text):
        result = service.score(article_text)

        assert isinstance(result, CompositeScore)
        assert result.readability_score == result.detailed_feedback.readability.score
        assert result.writing_quality_score == result.detailed_feedback.writing_quality.score
        assert result.seo_score == result.detailed_feedback.seo.score
        assert result.english_proficiency_score == result.detailed_feedback.english_proficiency.score
        assert result.ai_detection_score == result.detailed_feedback.ai_detection.score
        assert result.qualitative_analysis == {'overall_quality': 88, 'recommendation': 'HIRE'}

    def test_02_weighted_mean_law(self, service, article_text):
        weights = ScoringWeights()
        result = service.score(article_text, weights=weights)

        expected = round_half_up(sum(
            score * getattr(weights, name)
            for name, score in result.analyzer_scores().items()
        ) / 100)
        assert result.composite_score == expected

    def test_03_empty_text(self, service):
        result = service.score("")

        assert result.readability_score == 0
        assert result.detailed_feedback.readability.feedback == ("No content to analyze",)
        # 0*20 + 84*30 + 46*20 + 40*15 + 50*15 = 4790
        assert result.composite_score == 48

    def test_04_deterministic(self, analyzers, article_text):
        with ScoringService(analyzers=analyzers) as svc:
            first = svc.score(article_text)
            second = svc.score(article_text)

        assert first == second

    def test_05_provider_receives_role_and_timeout(self, service, provider, article_text):
        service.score(article_text, context=ScoringContext(role_type="seo_specialist"))

        assert provider.calls == [{
            'text': article_text,
            'role_type': 'seo_specialist',
            'timeout': 2.0,
        }]

    def test_06_no_provider_means_no_qualitative_analysis(self, analyzers, article_text):
        with ScoringService(analyzers=analyzers) as svc:
            result = svc.score(article_text)

        assert result.qualitative_analysis is None

    def test_07_results_are_immutable(self, service, article_text):
        result = service.score(article_text)

        assert isinstance(result.detailed_feedback.seo.issues, tuple)
        with pytest.raises(AttributeError):
            result.detailed_feedback.writing_quality.feedback.append("edited")

    def test_08_qualitative_runs_alongside_analyzers(self, article_text):
        provider = MockQualitativeProvider(block=True)
        analyzers = counting_analyzers()
        recorder = OverlapRecordingAnalyzer(analyzers[0], provider)
        analyzers[0] = recorder

        try:
            with ScoringService(analyzers=analyzers, qualitative_provider=provider) as svc:
                result = svc.score(article_text)
        finally:
            provider.release.set()

        assert recorder.overlapped is True
        assert result.qualitative_analysis == {'overall_quality': 88, 'recommendation': 'HIRE'}


class TestScoreBounds:
    """Every score stays within [0, 100] on degenerate input."""

    @pytest.mark.parametrize("text", [
        "!!! ??? ... ,,, ;;;",
        "<h1></h1><h2></h2><p><a href=\"#\"></a></p>",
        "Hello",
        "Caf\u00e9 na\u00efve r\u00e9sum\u00e9 \u00fcber stra\u00dfe. \u6771\u4eac \u0645\u0631\u062d\u0628\u0627!",
        " ".join(["The quick brown fox jumps over the lazy dog."] * 556),
    ], ids=["punctuation", "markup", "single-word", "non-ascii", "5000-words"])
    def test_01_scores_within_bounds(self, analyzers, text):
        with ScoringService(analyzers=analyzers) as svc:
            result = svc.score(text)

        for name, score in result.analyzer_scores().items():
            assert 0 <= score <= 100, name
        assert 0 <= result.composite_score <= 100


class TestCaching:
    """Test content-addressed caching."""

    def test_01_cache_hit_skips_analyzers(self, service, analyzers, cache, provider, article_text):
        first = service.score(article_text)
        second = service.score(article_text)

        assert second is first
        assert all(a.calls == 1 for a in analyzers)
        assert len(provider.calls) == 1
        assert len(cache.set_calls) == 1

    def test_02_written_with_ttl_under_fingerprint(self, service, cache, article_text):
        service.score(article_text)

        key = ScoreFingerprinter.calculate(article_text, ScoringWeights(), "content_writing")
        assert cache.set_calls == [(key, 3600)]
        assert key in cache.store

    def test_03_different_weights_miss(self, service, analyzers, article_text):
        service.score(article_text)
        service.score(article_text, weights=ScoringWeights(seo=40, writing_quality=10))

        assert all(a.calls == 2 for a in analyzers)

    def test_04_different_role_misses(self, service, analyzers, article_text):
        service.score(article_text)
        service.score(article_text, context=ScoringContext(role_type="copywriting"))

        assert all(a.calls == 2 for a in analyzers)

    def test_05_use_cache_false_rescores_and_writes(self, service, analyzers, cache, article_text):
        service.score(article_text)
        service.score(article_text, use_cache=False)

        assert all(a.calls == 2 for a in analyzers)
        assert len(cache.set_calls) == 2

    def test_06_broken_cache_degrades_to_miss(self, analyzers, article_text):
        with ScoringService(analyzers=analyzers, cache=BrokenScoreCache()) as svc:
            result = svc.score(article_text)

        assert isinstance(result, CompositeScore)
        assert all(a.calls == 1 for a in analyzers)


class TestQualitativeFallbacks:
    """The qualitative review never fails a request."""

    def test_01_provider_error_yields_placeholder(self, analyzers, article_text):
        provider = MockQualitativeProvider(error=QualitativeAnalysisError("boom"))
        with ScoringService(analyzers=analyzers, qualitative_provider=provider) as svc:
            result = svc.score(article_text)

        assert result.qualitative_analysis == {
            'error': ERROR_MARKER,
            'overall_quality': 70,
            'recommendation': 'MAYBE',
        }

    def test_02_unexpected_provider_exception_yields_placeholder(self, analyzers, article_text):
        provider = MockQualitativeProvider(error=ValueError("bad payload"))
        with ScoringService(analyzers=analyzers, qualitative_provider=provider) as svc:
            result = svc.score(article_text)

        assert result.qualitative_analysis['error'] == ERROR_MARKER

    @pytest.mark.slow
    def test_03_timeout_yields_placeholder(self, analyzers, article_text):
        provider = MockQualitativeProvider(block=True)
        config = ScorerConfig(qualitative_timeout_seconds=0.1)
        try:
            with ScoringService(config=config, analyzers=analyzers,
                                qualitative_provider=provider) as svc:
                result = svc.score(article_text)
        finally:
            provider.release.set()

        assert result.qualitative_analysis['error'] == ERROR_MARKER
        assert result.composite_score >= 0

    def test_04_placeholder_result_is_cached(self, analyzers, cache, article_text):
        provider = MockQualitativeProvider(error=QualitativeAnalysisError("boom"))
        with ScoringService(analyzers=analyzers, cache=cache,
                            qualitative_provider=provider) as svc:
            svc.score(article_text)
            second = svc.score(article_text)

        assert second.qualitative_analysis['error'] == ERROR_MARKER
        assert len(provider.calls) == 1

    @pytest.mark.slow
    def test_05_timed_out_calls_do_not_delay_later_requests(self, analyzers):
        provider = MockQualitativeProvider(block=True)
        config = ScorerConfig(qualitative_timeout_seconds=0.05)
        latencies = []
        try:
            with ScoringService(config=config, analyzers=analyzers,
                                qualitative_provider=provider) as svc:
                for i in range(8):
                    started = time.monotonic()
                    result = svc.score(f"Sample {i} is short. It has two sentences.")
                    latencies.append(time.monotonic() - started)
                    assert result.qualitative_analysis['error'] == ERROR_MARKER
        finally:
            provider.release.set()

        assert max(latencies) < 1.0


class TestAnalyzerFailures:
    """Analyzer failures abort the request."""

    def test_01_analyzer_error_propagates(self, cache, provider, article_text):
        analyzers = counting_analyzers()
        analyzers[2] = ExplodingAnalyzer('seo')

        with ScoringService(analyzers=analyzers, cache=cache,
                            qualitative_provider=provider) as svc:
            with pytest.raises(AnalyzerError) as exc_info:
                svc.score(article_text)

        assert exc_info.value.analyzer == 'seo'
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_02_failed_request_is_not_cached(self, cache, article_text):
        analyzers = counting_analyzers()
        analyzers[0] = ExplodingAnalyzer('readability')

        with ScoringService(analyzers=analyzers, cache=cache) as svc:
            with pytest.raises(AnalyzerError):
                svc.score(article_text)

        assert cache.store == {}
