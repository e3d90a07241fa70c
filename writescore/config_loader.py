import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from writescore.exceptions import ConfigError

DEFAULT_WEIGHTS = {
    'readability': 20.0,
    'writing_quality': 30.0,
    'seo': 20.0,
    'english_proficiency': 15.0,
    'ai_detection': 15.0,
}


class ScoringWeights(BaseModel):
    """Percentage weight of each analyzer in the composite score.

    The composite divides by the constant 100, not by the sum of these
    weights, so weights that do not total 100 deflate or inflate it.
    """
    model_config = ConfigDict(frozen=True)

    readability: float = Field(DEFAULT_WEIGHTS['readability'], ge=0)
    writing_quality: float = Field(DEFAULT_WEIGHTS['writing_quality'], ge=0)
    seo: float = Field(DEFAULT_WEIGHTS['seo'], ge=0)
    english_proficiency: float = Field(DEFAULT_WEIGHTS['english_proficiency'], ge=0)
    ai_detection: float = Field(DEFAULT_WEIGHTS['ai_detection'], ge=0)

    @property
    def total(self) -> float:
        return (self.readability + self.writing_quality + self.seo
                + self.english_proficiency + self.ai_detection)

    @classmethod
    def from_job_settings(cls, settings: Optional[Dict[str, Any]]) -> "ScoringWeights":
        """Build weights from job-settings keys such as ``seo_weight``.

        Missing, null or zero values fall back to the defaults.
        """
        settings = settings or {}
        return cls(**{
            name: settings.get(f"{name}_weight") or default
            for name, default in DEFAULT_WEIGHTS.items()
        })


class ScoringContext(BaseModel):
    """Per-request settings forwarded to the qualitative-analysis service."""
    model_config = ConfigDict(frozen=True)

    role_type: str = "content_writing"
    shortlist_threshold: float = 75.0

    @classmethod
    def from_job_settings(cls, settings: Optional[Dict[str, Any]]) -> "ScoringContext":
        settings = settings or {}
        return cls(
            role_type=settings.get('role_type') or "content_writing",
            shortlist_threshold=settings.get('shortlist_threshold') or 75.0,
        )


class LlmConfig(BaseModel):
    enabled: bool = True
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.0
    max_tokens: int = 1500
    timeout_seconds: float = 30.0  # per HTTP request to the LLM


class CacheConfig(BaseModel):
    enabled: bool = True
    redis_url: str = "redis://localhost:6379/0"
    password: Optional[str] = None
    ttl_seconds: int = 86400  # composite scores rarely need rescoring
    key_prefix: str = "ai_scores:"


class ScorerConfig(BaseModel):
    """
    Configuration for the ScoringService orchestrator.
    """
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    context: ScoringContext = Field(default_factory=ScoringContext)

    # Analyzer fan-out
    max_workers: int = 5

    # Separate pool for qualitative calls; a timed-out call keeps its worker until it returns
    qualitative_workers: int = 4

    # Upper bound on waiting for the qualitative analysis before substituting a placeholder
    qualitative_timeout_seconds: float = 30.0

    # Absolute links containing this URL count as internal for SEO scoring
    site_url: Optional[str] = None


class AppConfig(BaseModel):
    llm: LlmConfig = Field(default_factory=LlmConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    data: Dict[str, Any] = {}
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config {config_path}: {e}") from e

    # Allow env var overrides for collaborator endpoints and secrets
    env_overrides = {
        ('cache', 'redis_url'): os.environ.get("REDIS_URL"),
        ('cache', 'password'): os.environ.get("REDIS_PASSWORD"),
        ('llm', 'base_url'): os.environ.get("LLM_BASE_URL"),
        ('llm', 'api_key'): os.environ.get("OPENAI_API_KEY"),
        ('scorer', 'site_url'): os.environ.get("SITE_URL"),
    }
    for (section, key), value in env_overrides.items():
        if value:
            if data.get(section) is None:
                data[section] = {}
            data[section][key] = value

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e
