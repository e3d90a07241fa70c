#!/usr/bin/env python3
"""
Analyzer Models - Immutable result objects returned by each analyzer.

Results are created fresh per call and frozen. Sequence fields are tuples so
a cached result cannot be changed in place; they round-trip through JSON so
the composite can be cached and replayed unchanged.
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal['low', 'medium', 'high']


class ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class Issue(ResultModel):
    """A detected problem, tagged with a severity."""
    type: str
    message: str
    severity: Severity
    suggestion: Optional[str] = None
    examples: Optional[Tuple[str, ...]] = None


class Indicator(ResultModel):
    """Evidence for human or machine authorship."""
    type: Literal['human', 'ai']
    feature: str
    confidence: float = Field(ge=0, le=1)
    description: str


class ReadabilityMetrics(ResultModel):
    sentences: int = 0
    words: int = 0
    syllables: int = 0
    avg_sentence_length: float = 0.0
    avg_syllables_per_word: float = 0.0


class ReadabilityResult(ResultModel):
    score: int = Field(ge=0, le=100)
    grade_level: float = 0.0
    reading_ease: float = 0.0
    flesch_kincaid_grade: float = 0.0
    flesch_reading_ease: float = 0.0
    gunning_fog_index: float = 0.0
    smog_index: float = 0.0
    automated_readability_index: float = 0.0
    coleman_liau_index: float = 0.0
    metrics: ReadabilityMetrics = Field(default_factory=ReadabilityMetrics)
    feedback: Tuple[str, ...] = ()


class WritingQualityResult(ResultModel):
    score: int = Field(ge=0, le=100)
    grammar_score: int = Field(ge=0, le=100)
    structure_score: int = Field(ge=0, le=100)
    vocabulary_score: int = Field(ge=0, le=100)
    coherence_score: int = Field(ge=0, le=100)
    issues: Tuple[Issue, ...] = ()
    feedback: Tuple[str, ...] = ()


class SEOResult(ResultModel):
    score: int = Field(ge=0, le=100)
    heading_structure_score: int = Field(ge=0, le=100)
    keyword_optimization_score: int = Field(ge=0, le=100)
    internal_linking_score: int = Field(ge=0, le=100)
    meta_elements_score: int = Field(ge=0, le=100)
    content_length_score: int = Field(ge=0, le=100)
    recommendations: Tuple[str, ...] = ()
    issues: Tuple[Issue, ...] = ()


class EnglishProficiencyResult(ResultModel):
    score: int = Field(ge=0, le=100)
    fluency_score: int = Field(ge=0, le=100)
    grammar_accuracy_score: int = Field(ge=0, le=100)
    vocabulary_usage_score: int = Field(ge=0, le=100)
    sentence_complexity_score: int = Field(ge=0, le=100)
    language_confidence: Literal['native', 'advanced', 'intermediate', 'beginner']
    issues: Tuple[Issue, ...] = ()
    feedback: Tuple[str, ...] = ()


class AIDetectionAnalysis(ResultModel):
    perplexity_score: float = Field(ge=0, le=100)
    burstiness_score: float = Field(ge=0, le=100)
    vocabulary_diversity: float = Field(ge=0, le=100)
    sentence_variation: float = Field(ge=0, le=100)
    stylometry_score: float = Field(ge=0, le=100)


class AIDetectionResult(ResultModel):
    """Score is the human-likelihood: 100 means very likely human-written."""
    score: int = Field(ge=0, le=100)
    human_likelihood: float = Field(ge=0, le=1)
    ai_likelihood: float = Field(ge=0, le=1)
    confidence: Literal['high', 'medium', 'low']
    analysis: AIDetectionAnalysis
    indicators: Tuple[Indicator, ...] = ()
    feedback: Tuple[str, ...] = ()
