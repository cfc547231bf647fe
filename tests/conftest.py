"""pytest configuration.

Puts the repo root on sys.path so `import content_review` works without installing the package,
and provides fixtures that isolate the module-level singletons between tests.
"""

import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


FAKE_ANALYSIS = """### PROOFREADING CORRECTIONS
- Line 2: "its" should be "it's"

### PACKAGING CONTRADICTION CHECK
✅ CLEAR: No glass-related issues found

### REGULATORY RISK ASSESSMENT
Risk Level: LOW
Nothing problematic for the Indian market.
"""


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    from content_review.utils.rate_limit import rate_limiter

    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def configured(monkeypatch):
    """Pretends a Gemini key is set."""
    from content_review.config import settings

    monkeypatch.setattr(settings, "LLM_PROVIDER", "gemini")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    return settings


@pytest.fixture
def fake_llm(monkeypatch, configured):
    """Replaces the model call with a canned report and records what was sent."""
    from content_review.services.llm_service import llm_service

    calls = []

    async def _review(content, filename):
        calls.append({"content": content, "filename": filename})
        return FAKE_ANALYSIS

    monkeypatch.setattr(llm_service, "review_document", _review)
    return calls


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from content_review.main import app

    return TestClient(app)
