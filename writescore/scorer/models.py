#!/usr/bin/env python3
"""
Scoring Models - The composite result bundle.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from writescore.analyzers.models import (
    AIDetectionResult,
    EnglishProficiencyResult,
    ReadabilityResult,
    SEOResult,
    WritingQualityResult,
)


class DetailedFeedback(BaseModel):
    """Full analyzer results, one per analyzer."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    readability: ReadabilityResult
    writing_quality: WritingQualityResult
    seo: SEOResult
    english_proficiency: EnglishProficiencyResult
    ai_detection: AIDetectionResult


class CompositeScore(BaseModel):
    """Complete scoring result for one text sample.

    ``qualitative_analysis`` is advisory output of the external LLM review
    and never feeds ``composite_score``.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    readability_score: int = Field(ge=0, le=100)
    writing_quality_score: int = Field(ge=0, le=100)
    seo_score: int = Field(ge=0, le=100)
    english_proficiency_score: int = Field(ge=0, le=100)
    ai_detection_score: int = Field(ge=0, le=100)
    composite_score: int = Field(ge=0)
    detailed_feedback: DetailedFeedback
    qualitative_analysis: Optional[Dict[str, Any]] = None

    def analyzer_scores(self) -> Dict[str, int]:
        return {
            'readability': self.readability_score,
            'writing_quality': self.writing_quality_score,
            'seo': self.seo_score,
            'english_proficiency': self.english_proficiency_score,
            'ai_detection': self.ai_detection_score,
        }
