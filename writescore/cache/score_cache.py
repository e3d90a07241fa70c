"""Score Cache Service - Redis caching for composite scores."""
import json
import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from urllib.parse import urlparse

from pydantic import ValidationError
from redis import Redis

from writescore.cache.interfaces import ScoreCache
from writescore.scorer.models import CompositeScore

logger = logging.getLogger(__name__)

# 24 hours in seconds
CACHE_TTL_SECONDS = 24 * 60 * 60  # 86400 seconds
DEFAULT_KEY_PREFIX = "ai_scores:"


def _sanitize_url(url: str) -> str:
    """Remove credentials from URL for safe logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            sanitized = parsed._replace(
                netloc=f"{parsed.username or ''}:*@{parsed.hostname}:{parsed.port or 6379}"
            )
            return sanitized.geturl()
        return url
    except ValueError:
        return url


class ScoreCacheService(ScoreCache):
    """
    Service for caching composite scores so identical requests are not rescored.

    Uses Redis with a 24-hour TTL. Scores are keyed by the content/settings
    fingerprint. Every Redis failure degrades to a cache miss.

    The connection is checked once, at construction. If Redis is down then,
    the cache stays disabled for the life of the instance and does not
    reconnect; build a new service to retry.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        password: Optional[str] = None,
        ttl_seconds: int = CACHE_TTL_SECONDS,
        key_prefix: str = DEFAULT_KEY_PREFIX
    ):
        self.redis_url = redis_url
        self.password = password
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix
        self._redis: Optional[Redis] = None
        self._available = False

        try:
            self._redis = Redis.from_url(
                redis_url,
                password=password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )
            self._redis.ping()
            self._available = True
            logger.info(f"Score cache connected to Redis at {_sanitize_url(redis_url)}")
        except Exception as e:
            logger.warning(f"Score cache Redis unavailable: {e}")
            self._redis = None
            self._available = False

    @property
    def is_available(self) -> bool:
        """Check if cache is available."""
        if not self._available or not self._redis:
            return False
        try:
            return self._redis.ping()
        except Exception:
            return False

    def _make_key(self, fingerprint: str) -> str:
        """Create cache key from fingerprint."""
        return f"{self.key_prefix}{fingerprint}"

    def get_scores(self, fingerprint: str) -> Optional[CompositeScore]:
        """Get cached composite score by fingerprint."""
        if not self._redis:
            return None

        try:
            data = self._redis.get(self._make_key(fingerprint))
        except Exception as e:
            logger.warning(f"Error reading from score cache: {e}")
            return None

        if not data:
            logger.debug(f"Cache miss for scores {fingerprint[:16]}...")
            return None

        try:
            cache_entry = json.loads(data)
            scores = CompositeScore.model_validate(cache_entry["data"])
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable score cache entry {fingerprint[:16]}...: {e}")
            return None

        logger.debug(f"Cache hit for scores {fingerprint[:16]}...")
        return scores

    def set_scores(
        self,
        fingerprint: str,
        scores: CompositeScore,
        ttl_seconds: Optional[int] = None
    ) -> bool:
        """Cache composite score with TTL."""
        if not self._redis:
            return False

        try:
            ttl = ttl_seconds or self.ttl_seconds
            cache_entry = {
                "data": scores.model_dump(mode="json"),
                "cached_at": datetime.now(timezone.utc).isoformat(),
                "ttl_seconds": ttl
            }

            self._redis.setex(self._make_key(fingerprint), ttl, json.dumps(cache_entry))
            logger.debug(f"Cached scores {fingerprint[:16]}... (TTL: {ttl}s)")
            return True

        except Exception as e:
            logger.warning(f"Error writing to score cache: {e}")
            return False

    def delete_scores(self, fingerprint: str) -> bool:
        """Remove cached scores, forcing the next request to rescore."""
        if not self._redis:
            return False

        try:
            self._redis.delete(self._make_key(fingerprint))
            logger.debug(f"Deleted scores {fingerprint[:16]}... from cache")
            return True
        except Exception as e:
            logger.warning(f"Error deleting from score cache: {e}")
            return False

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        if not self.is_available:
            return {"available": False}

        try:
            info = self._redis.info()
            key_count = 0
            cursor = 0
            while True:
                cursor, keys = self._redis.scan(cursor=cursor, match=f"{self.key_prefix}*", count=1000)
                key_count += len(keys)
                if cursor == 0:
                    break
            return {
                "available": True,
                "used_memory_human": info.get("used_memory_human", "unknown"),
                "score_cache_keys": key_count,
                "ttl_seconds": self.ttl_seconds,
                "ttl_human": f"{self.ttl_seconds // 3600} hours"
            }
        except Exception as e:
            logger.warning(f"Error getting cache stats: {e}")
            return {"available": False, "error": str(e)}

    def clear_all(self) -> bool:
        """Clear all cached scores. Use with caution."""
        if not self.is_available:
            return False

        try:
            cursor = 0
            deleted = 0

            while True:
                cursor, keys = self._redis.scan(cursor=cursor, match=f"{self.key_prefix}*", count=100)
                if keys:
                    self._redis.delete(*keys)
                    deleted += len(keys)
                if cursor == 0:
                    break

            logger.info(f"Cleared {deleted} score entries from cache")
            return True

        except Exception as e:
            logger.warning(f"Error clearing score cache: {e}")
            return False
