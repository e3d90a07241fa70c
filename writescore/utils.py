import hashlib
import json
import logging
from typing import Optional

from writescore import ANALYZER_VERSION
from writescore.config_loader import ScoringWeights

logger = logging.getLogger(__name__)


class ScoreFingerprinter:
    """
    Pure logic for creating deterministic cache keys for scoring requests.
    """

    @staticmethod
    def settings_digest(
        weights: ScoringWeights,
        role_type: str = "content_writing",
        version: str = ANALYZER_VERSION
    ) -> str:
        """SHA256 over the canonical JSON of weights, role type and analyzer version."""
        payload = {
            'readability_weight': weights.readability,
            'writing_quality_weight': weights.writing_quality,
            'seo_weight': weights.seo,
            'english_proficiency_weight': weights.english_proficiency,
            'ai_detection_weight': weights.ai_detection,
            'role_type': role_type,
            'version': version,
        }
        canonical = json.dumps(payload, sort_keys=True, separators=(',', ':'))
        return hashlib.sha256(canonical.encode('utf-8')).hexdigest()

    @staticmethod
    def calculate(
        text: str,
        weights: ScoringWeights,
        role_type: Optional[str] = None,
        version: str = ANALYZER_VERSION
    ) -> str:
        """
        Create the cache key for a scoring request.
        Formula: SHA256(text) + "_" + first 8 hex of the settings digest
        """
        content_hash = hashlib.sha256(text.encode('utf-8')).hexdigest()
        settings_hash = ScoreFingerprinter.settings_digest(
            weights, role_type or "content_writing", version
        )
        return f"{content_hash}_{settings_hash[:8]}"
