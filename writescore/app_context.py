from dataclasses import dataclass
import logging
from typing import Optional

from writescore.cache.interfaces import ScoreCache
from writescore.cache.score_cache import ScoreCacheService
from writescore.config_loader import AppConfig, CacheConfig, LlmConfig
from writescore.llm.interfaces import QualitativeAnalysisProvider
from writescore.llm.openai_service import OpenAIQualitativeService
from writescore.scorer.service import ScoringService

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Collaborators that are disabled in config are left as None; the
    scoring service runs without them.
    """
    config: AppConfig
    scoring_service: ScoringService
    cache: Optional[ScoreCache] = None
    qualitative_provider: Optional[QualitativeAnalysisProvider] = None

    @classmethod
    def build(
        cls,
        config: AppConfig,
        use_cache: bool = True,
        use_llm: bool = True
    ) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            use_cache: False skips the cache even if it is enabled in config
            use_llm: False skips the qualitative review even if it is enabled

        Returns:
            Fully wired AppContext instance
        """
        cache = None
        if use_cache and config.cache.enabled:
            cache = cls._build_cache(config.cache)

        qualitative_provider = None
        if use_llm and config.llm.enabled:
            qualitative_provider = cls._build_qualitative_provider(config.llm)

        scoring_service = ScoringService(
            config=config.scorer,
            cache=cache,
            qualitative_provider=qualitative_provider,
            cache_ttl_seconds=config.cache.ttl_seconds,
        )

        return cls(
            config=config,
            scoring_service=scoring_service,
            cache=cache,
            qualitative_provider=qualitative_provider
        )

    def close(self) -> None:
        self.scoring_service.close()

    @staticmethod
    def _build_cache(cache_config: CacheConfig) -> ScoreCacheService:
        """Build the Redis score cache from configuration."""
        return ScoreCacheService(
            redis_url=cache_config.redis_url,
            password=cache_config.password,
            ttl_seconds=cache_config.ttl_seconds,
            key_prefix=cache_config.key_prefix
        )

    @staticmethod
    def _build_qualitative_provider(llm_config: LlmConfig) -> Optional[OpenAIQualitativeService]:
        """Build the OpenAI qualitative service, or None without credentials."""
        if not llm_config.api_key and not llm_config.base_url:
            logger.warning("No LLM api_key or base_url configured; qualitative analysis disabled")
            return None

        model_config = {
            'model': llm_config.model,
            'temperature': llm_config.temperature,
            'max_tokens': llm_config.max_tokens,
            'timeout_seconds': llm_config.timeout_seconds,
        }

        return OpenAIQualitativeService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model_config=model_config
        )
