"""
Qualitative Analysis Interface - Abstract base for LLM review providers.

This module defines the interface for services that produce a free-form
qualitative review of a writing sample (OpenAI, Ollama, Anthropic, etc.).
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class QualitativeAnalysisProvider(ABC):
    """
    Abstract Interface for qualitative text-analysis providers.
    """

    @abstractmethod
    def analyze_content(
        self,
        text: str,
        role_type: str = "content_writing",
        timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Produce a structured qualitative review of a writing sample.

        Args:
            text: Writing sample to review
            role_type: Position the sample was written for
            timeout: Optional per-request timeout in seconds

        Returns:
            Parsed analysis dict, or a raw-text fallback dict when the
            provider answered with something that is not JSON.

        Raises:
            QualitativeAnalysisError: when no answer could be obtained
        """
        pass
