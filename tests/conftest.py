"""
Pytest configuration and fixtures.

Sample texts shared by analyzer and service tests live here; fakes for the
cache, analyzers and qualitative provider live in tests/mocks/.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests that wait on real timeouts (deselect with '-m \"not slow\"')"
    )


SIMPLE_TEXT = "This is a simple sentence. It is easy to read. The content is clear."

ARTICLE_TEXT = """<h1>Remote Work Productivity Guide</h1>
Remote work has changed how teams collaborate. In this article, we analyze strategies that help distributed teams stay productive.

<h2>Setting Up Your Workspace</h2>
A dedicated workspace helps you focus. However, many remote workers skip this step because it seems optional. For example, a quiet corner with good lighting can make a significant difference to remote productivity.

<h2>Communication Habits</h2>
Clear communication is essential for remote teams. Therefore, teams should agree on response times, meeting schedules and shared tools. Read the <a href="/guides/async">async communication guide</a> or the <a href="https://example.org/research">latest research on remote work</a> for details.

In conclusion, remote productivity depends on deliberate habits rather than luck."""


@pytest.fixture
def simple_text():
    return SIMPLE_TEXT


@pytest.fixture
def article_text():
    return ARTICLE_TEXT
