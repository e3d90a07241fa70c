"""writescore - Content quality scoring engine."""

ANALYZER_VERSION = "analyzers_v1.0"

__all__ = ['ANALYZER_VERSION']
