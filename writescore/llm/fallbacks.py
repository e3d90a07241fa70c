"""
Qualitative Analysis Fallbacks - Well-formed stand-ins for missing reviews.

Downstream consumers always receive a dict with moderate default
sub-scores, so they never have to branch on a missing analysis.
"""
from typing import Dict, Any

ERROR_MARKER = 'Failed to get AI analysis'


def build_error_placeholder() -> Dict[str, Any]:
    """Placeholder used when the provider failed or timed out."""
    return {
        'error': ERROR_MARKER,
        'overall_quality': 70,
        'recommendation': 'MAYBE',
    }


def build_raw_fallback(raw_analysis: str) -> Dict[str, Any]:
    """Wrap a provider answer that could not be parsed as JSON."""
    return {
        'overall_quality': 75,
        'technical_writing': 75,
        'content_strategy': 75,
        'seo_digital': 75,
        'recommendation': 'MAYBE',
        'raw_analysis': raw_analysis,
    }
