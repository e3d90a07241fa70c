#!/usr/bin/env python3
"""
Scoring Service - Composite content-quality scoring for one text sample.

For each request:
- Looks up the content-addressed cache (text + weights + role + version)
- Fans out to the five analyzers and the qualitative LLM review concurrently
- Combines analyzer scores into the weighted composite
- Writes the result back to the cache with a TTL

Analyzer failures abort the request. The qualitative review is advisory:
failures and timeouts are replaced by a placeholder. Cache failures read
as a miss.
"""

from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Any, Dict, List, Optional
import logging

from writescore.analyzers import default_analyzers
from writescore.cache.interfaces import ScoreCache
from writescore.config_loader import ScorerConfig, ScoringContext, ScoringWeights
from writescore.exceptions import AnalyzerError
from writescore.llm.fallbacks import build_error_placeholder
from writescore.llm.interfaces import QualitativeAnalysisProvider
from writescore.scorer.composite import calculate_composite
from writescore.scorer.models import CompositeScore, DetailedFeedback
from writescore.utils import ScoreFingerprinter

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Orchestrates analyzers, the qualitative review and the score cache.

    Holds one worker pool for the analyzers and a separate one for the
    qualitative review, so a slow LLM call never delays analyzer work. Call
    close() (or use the service as a context manager) to release them.
    """

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        analyzers: Optional[List[Any]] = None,
        cache: Optional[ScoreCache] = None,
        qualitative_provider: Optional[QualitativeAnalysisProvider] = None,
        cache_ttl_seconds: Optional[int] = None
    ):
        self.config = config or ScorerConfig()
        self.analyzers = analyzers if analyzers is not None else default_analyzers(self.config.site_url)
        self.cache = cache
        self.qualitative_provider = qualitative_provider
        self.cache_ttl_seconds = cache_ttl_seconds
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="writescore"
        )
        self._qualitative_executor = ThreadPoolExecutor(
            max_workers=self.config.qualitative_workers,
            thread_name_prefix="writescore-qualitative"
        )

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        # Don't wait on a qualitative call that already timed out
        self._qualitative_executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "ScoringService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def score(
        self,
        text: str,
        weights: Optional[ScoringWeights] = None,
        context: Optional[ScoringContext] = None,
        use_cache: bool = True
    ) -> CompositeScore:
        """Score a text sample.

        Args:
            text: Writing sample (may be empty)
            weights: Composite weights; defaults to the configured ones
            context: Role type forwarded to the qualitative review
            use_cache: False skips the cache read; the result is still stored

        Returns:
            CompositeScore with per-analyzer scores, full feedback and the
            qualitative review (None when no provider is configured)

        Raises:
            AnalyzerError: if any analyzer raised
        """
        weights = weights or self.config.weights
        context = context or self.config.context
        cache_key = ScoreFingerprinter.calculate(text, weights, context.role_type)

        if use_cache:
            cached = self._read_cache(cache_key)
            if cached is not None:
                logger.debug(f"Score cache hit: {cache_key[:16]}")
                return cached
            logger.debug(f"Score cache miss: {cache_key[:16]}")

        qualitative_future = None
        if self.qualitative_provider is not None:
            qualitative_future = self._qualitative_executor.submit(
                self.qualitative_provider.analyze_content,
                text,
                context.role_type,
                self.config.qualitative_timeout_seconds,
            )

        analyzer_futures = {
            analyzer.name: self._executor.submit(analyzer.analyze, text)
            for analyzer in self.analyzers
        }

        try:
            results = self._collect_analyzer_results(analyzer_futures)
        except AnalyzerError:
            if qualitative_future is not None:
                qualitative_future.cancel()
            raise

        qualitative = None
        if qualitative_future is not None:
            qualitative = self._await_qualitative(qualitative_future)

        analyzer_scores = {name: result.score for name, result in results.items()}
        composite = calculate_composite(analyzer_scores, weights)

        scores = CompositeScore(
            readability_score=analyzer_scores['readability'],
            writing_quality_score=analyzer_scores['writing_quality'],
            seo_score=analyzer_scores['seo'],
            english_proficiency_score=analyzer_scores['english_proficiency'],
            ai_detection_score=analyzer_scores['ai_detection'],
            composite_score=composite,
            detailed_feedback=DetailedFeedback(**results),
            qualitative_analysis=qualitative,
        )

        self._write_cache(cache_key, scores)

        logger.info(
            f"Scored {len(text)} chars: composite={composite} "
            f"({', '.join(f'{k}={v}' for k, v in analyzer_scores.items())})"
        )
        return scores

    def _collect_analyzer_results(self, futures: Dict[str, Future]) -> Dict[str, Any]:
        results = {}
        for name, future in futures.items():
            try:
                results[name] = future.result()
            except Exception as e:
                for other in futures.values():
                    other.cancel()
                logger.error(f"{name} analyzer failed: {e}")
                raise AnalyzerError(name, f"{name} analyzer failed: {e}") from e
        return results

    def _await_qualitative(self, future: Future) -> Dict[str, Any]:
        try:
            return future.result(timeout=self.config.qualitative_timeout_seconds)
        except FutureTimeoutError:
            future.cancel()
            logger.warning(
                f"Qualitative analysis timed out after {self.config.qualitative_timeout_seconds}s, "
                f"using placeholder"
            )
        except Exception as e:
            logger.warning(f"Qualitative analysis failed, using placeholder: {e}")
        return build_error_placeholder()

    def _read_cache(self, key: str) -> Optional[CompositeScore]:
        if self.cache is None:
            return None
        try:
            return self.cache.get_scores(key)
        except Exception as e:
            logger.warning(f"Score cache read failed, treating as miss: {e}")
            return None

    def _write_cache(self, key: str, scores: CompositeScore) -> None:
        if self.cache is None:
            return
        try:
            if not self.cache.set_scores(key, scores, self.cache_ttl_seconds):
                logger.debug(f"Score cache write skipped for {key[:16]}")
        except Exception as e:
            logger.warning(f"Score cache write failed: {e}")
