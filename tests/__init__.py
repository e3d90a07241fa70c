#!/usr/bin/env python3
"""
Test suite for the scoring engine.

No Redis or LLM endpoint is needed: Redis is patched and the OpenAI
client is replaced with a MagicMock.

    # Run all tests
    python -m pytest tests/ -v

    # Skip the tests that wait on timeouts
    python -m pytest tests/ -v -m "not slow"
"""
