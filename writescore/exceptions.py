"""Exception hierarchy for the scoring engine."""
from typing import Optional


class ScoringError(Exception):
    """Base class for scoring failures surfaced to callers."""


class AnalyzerError(ScoringError):
    """An analyzer raised while scoring; the composite cannot be built."""

    def __init__(self, analyzer: str, message: Optional[str] = None):
        self.analyzer = analyzer
        super().__init__(message or f"{analyzer} analyzer failed")


class QualitativeAnalysisError(ScoringError):
    """The qualitative-analysis collaborator failed or returned nothing usable."""


class ConfigError(ScoringError):
    """Configuration could not be read or validated."""
