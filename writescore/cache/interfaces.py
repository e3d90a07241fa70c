"""
Score Cache Interface - Key-value store for composite scores.

Implementations must never raise: failures read as a miss (None) or a
failed write (False).
"""
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from writescore.scorer.models import CompositeScore


class ScoreCache(ABC):
    """
    Abstract interface for composite-score caches (Redis, in-memory, etc.).
    """

    @abstractmethod
    def get_scores(self, key: str) -> Optional["CompositeScore"]:
        """Return the cached score for ``key`` or None on miss or error."""
        pass

    @abstractmethod
    def set_scores(self, key: str, scores: "CompositeScore", ttl_seconds: Optional[int] = None) -> bool:
        """Store ``scores`` under ``key`` with a TTL. Returns success."""
        pass
