import unittest
import os
import yaml
from unittest.mock import patch, mock_open

from writescore.config_loader import (
    load_config,
    AppConfig,
    ScoringContext,
    ScoringWeights,
)
from writescore.exceptions import ConfigError


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "scorer": {
                "weights": {"readability": 25, "writing_quality": 25, "seo": 20,
                            "english_proficiency": 15, "ai_detection": 15},
                "context": {"role_type": "copywriting", "shortlist_threshold": 80},
                "qualitative_timeout_seconds": 10,
            },
            "cache": {"redis_url": "redis://cache:6379/1", "ttl_seconds": 3600},
            "llm": {"base_url": "http://ollama:11434/v1", "model": "qwen3:14b"},
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def _load(self, content, env=None):
        with patch("builtins.open", mock_open(read_data=content)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, env or {}, clear=True):
                    return load_config("dummy_path.yaml")

    def test_load_config(self):
        config = self._load(self.config_yaml)

        self.assertIsInstance(config, AppConfig)
        self.assertEqual(config.scorer.weights.readability, 25)
        self.assertEqual(config.scorer.context.role_type, "copywriting")
        self.assertEqual(config.scorer.context.shortlist_threshold, 80)
        self.assertEqual(config.scorer.qualitative_timeout_seconds, 10)
        self.assertEqual(config.cache.redis_url, "redis://cache:6379/1")
        self.assertEqual(config.cache.ttl_seconds, 3600)
        self.assertEqual(config.llm.model, "qwen3:14b")

    def test_missing_file_uses_defaults(self):
        with patch("os.path.exists", return_value=False):
            with patch.dict(os.environ, {}, clear=True):
                config = load_config("missing.yaml")

        self.assertEqual(config.scorer.weights, ScoringWeights())
        self.assertEqual(config.scorer.context.role_type, "content_writing")
        self.assertEqual(config.cache.ttl_seconds, 86400)
        self.assertEqual(config.cache.key_prefix, "ai_scores:")
        self.assertEqual(config.llm.model, "gpt-4o-mini")
        self.assertIsNone(config.llm.api_key)

    def test_empty_file_uses_defaults(self):
        config = self._load("")

        self.assertEqual(config.scorer.max_workers, 5)
        self.assertEqual(config.scorer.qualitative_workers, 4)

    def test_env_var_override_cache(self):
        config = self._load(self.config_yaml, {
            "REDIS_URL": "redis://env-redis:6379/0",
            "REDIS_PASSWORD": "secret",
        })

        self.assertEqual(config.cache.redis_url, "redis://env-redis:6379/0")
        self.assertEqual(config.cache.password, "secret")

    def test_env_var_override_llm(self):
        config = self._load(self.config_yaml, {
            "LLM_BASE_URL": "http://env-llm:8000/v1",
            "OPENAI_API_KEY": "sk-test",
        })

        self.assertEqual(config.llm.base_url, "http://env-llm:8000/v1")
        self.assertEqual(config.llm.api_key, "sk-test")

    def test_env_var_override_creates_section(self):
        config = self._load(yaml.dump({"llm": {"model": "x"}}), {"SITE_URL": "https://example.com"})

        self.assertEqual(config.scorer.site_url, "https://example.com")

    def test_invalid_yaml_raises(self):
        with self.assertRaises(ConfigError):
            self._load("scorer: [unclosed")

    def test_invalid_values_raise(self):
        bad = yaml.dump({"scorer": {"weights": {"seo": -5}}})
        with self.assertRaises(ConfigError):
            self._load(bad)


class TestScoringWeights(unittest.TestCase):

    def test_defaults_total_100(self):
        weights = ScoringWeights()

        self.assertEqual(weights.writing_quality, 30)
        self.assertEqual(weights.total, 100)

    def test_from_job_settings(self):
        weights = ScoringWeights.from_job_settings({"seo_weight": 35, "readability_weight": 5})

        self.assertEqual(weights.seo, 35)
        self.assertEqual(weights.readability, 5)
        self.assertEqual(weights.writing_quality, 30)

    def test_from_job_settings_falsy_values_use_defaults(self):
        weights = ScoringWeights.from_job_settings({"seo_weight": 0, "ai_detection_weight": None})

        self.assertEqual(weights.seo, 20)
        self.assertEqual(weights.ai_detection, 15)

    def test_from_job_settings_none(self):
        self.assertEqual(ScoringWeights.from_job_settings(None), ScoringWeights())

    def test_weights_are_frozen(self):
        weights = ScoringWeights()
        with self.assertRaises(Exception):
            weights.seo = 50


class TestScoringContext(unittest.TestCase):

    def test_from_job_settings(self):
        context = ScoringContext.from_job_settings({"role_type": "seo_specialist",
                                                    "shortlist_threshold": 80})

        self.assertEqual(context.role_type, "seo_specialist")
        self.assertEqual(context.shortlist_threshold, 80)

    def test_from_job_settings_defaults(self):
        context = ScoringContext.from_job_settings({})

        self.assertEqual(context.role_type, "content_writing")
        self.assertEqual(context.shortlist_threshold, 75)
