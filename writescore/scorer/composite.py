#!/usr/bin/env python3
"""
Composite Calculations - Weighted aggregate and shortlist decision.
"""

from typing import Dict
import logging

from writescore.analyzers.text_metrics import round_half_up
from writescore.config_loader import ScoringWeights

logger = logging.getLogger(__name__)

STAGE_SHORTLISTED = 'shortlisted'
STAGE_REVIEWED = 'ai_reviewed'


def calculate_composite(scores: Dict[str, float], weights: ScoringWeights) -> int:
    """
    Weighted composite: sum(score_i * weight_i) / 100, rounded half-up.

    The divisor is the constant 100 regardless of the weights' total.

    Args:
        scores: Analyzer name -> score (0-100)
        weights: Percentage weight per analyzer

    Returns:
        Integer composite score
    """
    if weights.total != 100:
        logger.warning(
            f"Scoring weights total {weights.total:g}, not 100; composite is not renormalized"
        )

    weighted = (
        scores['readability'] * weights.readability
        + scores['writing_quality'] * weights.writing_quality
        + scores['seo'] * weights.seo
        + scores['english_proficiency'] * weights.english_proficiency
        + scores['ai_detection'] * weights.ai_detection
    )
    return round_half_up(weighted / 100)


def recommend_stage(composite_score: float, threshold: float = 75.0) -> str:
    """Application stage implied by a composite score."""
    if composite_score >= threshold:
        return STAGE_SHORTLISTED
    return STAGE_REVIEWED
