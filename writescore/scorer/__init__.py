#!/usr/bin/env python3
"""
Scoring Module - Composite content-quality scoring.

Public API:
- ScoringService: Main scoring service orchestrator
- CompositeScore: Result model for one scored text

- models.py: Data structures (CompositeScore, DetailedFeedback)
- composite.py: Weighted composite and shortlist-stage decision
- service.py: ScoringService orchestrator
"""

from writescore.scorer.models import CompositeScore
from writescore.scorer.service import ScoringService

__all__ = ['ScoringService', 'CompositeScore']
