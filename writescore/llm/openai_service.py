"""
OpenAI Qualitative Service - LLM review of writing samples via the OpenAI API.

Works against any OpenAI-compatible endpoint (OpenAI, Ollama, vLLM, ...).
"""
from typing import Dict, Any, Optional
import json
import logging
import re

import openai
from openai import OpenAI
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
)

from writescore.exceptions import QualitativeAnalysisError
from writescore.llm.fallbacks import build_raw_fallback
from writescore.llm.interfaces import QualitativeAnalysisProvider
from writescore.llm.system_prompts import (
    QUALITATIVE_ANALYSIS_SYSTEM_PROMPT,
    QUALITATIVE_ANALYSIS_USER_PROMPT,
    format_role_type,
)

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)
MAX_ATTEMPTS = 3
MAX_RATE_LIMIT_WAIT_SECONDS = 30

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    kind = "Rate limit hit" if isinstance(exc, openai.RateLimitError) else "Transient API error"
    logger.warning(
        "%s (attempt %s). Waiting %.1fs before retry. Details: %s",
        kind, retry_state.attempt_number, wait, exc,
    )


def _retry_after_seconds(exc: openai.RateLimitError) -> float:
    """Seconds declared by the ``retry-after`` header, 0.0 if absent or unusable."""
    try:
        return max(0.0, float(exc.response.headers.get("retry-after", "")))
    except (AttributeError, TypeError, ValueError):
        return 0.0


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Honour a server-declared wait on rate limits, else capped exponential backoff."""
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        wait = _retry_after_seconds(exc)
        if wait > 0:
            return min(wait, MAX_RATE_LIMIT_WAIT_SECONDS)

    return wait_exponential(multiplier=1, min=1, max=8)(retry_state)


def _llm_retry(max_delay: Optional[float] = None, **kwargs):
    """Return a tenacity @retry decorator for LLM API calls.

    With ``max_delay`` no new attempt starts once that many seconds have
    passed since the first one.
    """
    stop = stop_after_attempt(MAX_ATTEMPTS)
    if max_delay is not None:
        stop = stop | stop_after_delay(max_delay)
    return retry(
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        wait=_wait_respecting_retry_after,
        stop=stop,
        before_sleep=_log_retry,
        reraise=True,
        **kwargs,
    )


def parse_analysis(content: str) -> Dict[str, Any]:
    """Parse the model's JSON answer; fall back to a raw-text wrapper."""
    cleaned = _CODE_FENCE_RE.sub("", (content or "").strip())
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Error parsing qualitative analysis response: {e}")
        return build_raw_fallback(content or "")

    if not isinstance(data, dict):
        logger.warning(f"Qualitative analysis is a {type(data).__name__}, expected an object")
        return build_raw_fallback(content)
    return data


class OpenAIQualitativeService(QualitativeAnalysisProvider):
    """
    OpenAI qualitative-analysis service.

    Asks a chat model for a JSON review of a writing sample. Transient API
    errors are retried until the attempts or the timeout run out; anything
    else surfaces as QualitativeAnalysisError.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None
    ):
        client_kwargs = {'max_retries': 0}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url

        self.client = OpenAI(**client_kwargs)

        self.model_config = model_config or {}
        self.model = self.model_config.get('model', 'gpt-4o-mini')
        self.temperature = self.model_config.get('temperature', 0.0)
        self.max_tokens = self.model_config.get('max_tokens', 1500)
        self.request_timeout = self.model_config.get('timeout_seconds', 30.0)

    def _complete(self, messages, timeout: float) -> str:
        # The whole retry loop shares one budget, not just each request
        return _llm_retry(max_delay=timeout)(self._request_completion)(messages, timeout)

    def _request_completion(self, messages, timeout: float) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format={"type": "json_object"},
            timeout=timeout,
        )
        try:
            return response.choices[0].message.content or ""
        except (IndexError, AttributeError) as e:
            raise QualitativeAnalysisError(f"Malformed completion response: {e}") from e

    def analyze_content(
        self,
        text: str,
        role_type: str = "content_writing",
        timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        """Review a writing sample for the given role.

        Args:
            text: Writing sample
            role_type: Position the sample was written for
            timeout: Timeout in seconds for each request and for the retry
                loop as a whole; defaults to the configured one

        Returns:
            Parsed JSON analysis, or a raw-text fallback if the model's answer
            was not a JSON object
        """
        messages = [
            {"role": "system", "content": QUALITATIVE_ANALYSIS_SYSTEM_PROMPT},
            {"role": "user", "content": QUALITATIVE_ANALYSIS_USER_PROMPT.format(
                role_type=format_role_type(role_type),
                content=text,
            )},
        ]

        try:
            content = self._complete(messages, timeout or self.request_timeout)
        except openai.OpenAIError as e:
            raise QualitativeAnalysisError(f"Qualitative analysis request failed: {e}") from e

        analysis = parse_analysis(content)
        logger.debug(f"Qualitative analysis ({self.model}) keys: {sorted(analysis.keys())}")
        return analysis
