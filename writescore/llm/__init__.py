"""LLM Module - Qualitative analysis services and interfaces."""
from writescore.llm.interfaces import QualitativeAnalysisProvider
from writescore.llm.openai_service import OpenAIQualitativeService
from writescore.llm.fallbacks import build_error_placeholder, build_raw_fallback

__all__ = [
    'QualitativeAnalysisProvider',
    'OpenAIQualitativeService',
    'build_error_placeholder',
    'build_raw_fallback',
]
