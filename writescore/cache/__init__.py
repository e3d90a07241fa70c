"""Cache Module - Composite score caching."""
from writescore.cache.interfaces import ScoreCache
from writescore.cache.score_cache import (
    ScoreCacheService,
    CACHE_TTL_SECONDS
)

__all__ = [
    'ScoreCache',
    'ScoreCacheService',
    'CACHE_TTL_SECONDS'
]
