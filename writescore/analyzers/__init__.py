"""
Analyzers - Five independent, stateless text-quality analyzers.

- readability.py: classic reading-grade formulas
- writing_quality.py: grammar/structure/vocabulary/coherence heuristics
- seo.py: heading, keyword, linking, meta-shape and length heuristics
- english_proficiency.py: second-language fluency and grammar heuristics
- ai_detection.py: human-vs-machine authorship heuristics

Shared counting lives in text_metrics.py; word lists and regex catalogs
in catalogs.py.
"""
from typing import List, Optional

from writescore.analyzers.readability import ReadabilityAnalyzer
from writescore.analyzers.writing_quality import WritingQualityAnalyzer
from writescore.analyzers.seo import SEOAnalyzer
from writescore.analyzers.english_proficiency import EnglishProficiencyAnalyzer
from writescore.analyzers.ai_detection import AIDetectionAnalyzer


def default_analyzers(site_url: Optional[str] = None) -> List:
    """One instance of each analyzer, in composite-weight order."""
    return [
        ReadabilityAnalyzer(),
        WritingQualityAnalyzer(),
        SEOAnalyzer(site_url=site_url),
        EnglishProficiencyAnalyzer(),
        AIDetectionAnalyzer(),
    ]


__all__ = [
    'ReadabilityAnalyzer',
    'WritingQualityAnalyzer',
    'SEOAnalyzer',
    'EnglishProficiencyAnalyzer',
    'AIDetectionAnalyzer',
    'default_analyzers',
]
