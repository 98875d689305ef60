"""
Shared fixtures for scanner tests.
"""
import pytest

from app.config import Settings


@pytest.fixture
def settings():
    """Settings with fake keys; never reads real secrets."""
    return Settings(
        PAGESPEED_API_KEY="test-pagespeed-key",
        GEMINI_API_KEY="test-gemini-key",
        HTTP_TIMEOUT=5,
    )


def make_lighthouse_result(
    title=None,
    description=None,
    snippet=None,
    performance=None,
    seo=None,
):
    """Build a minimal lighthouseResult; ``None`` leaves a node empty."""
    def items(item):
        return {"details": {"items": [item] if item else []}}
    
    categories = {}
    if performance is not None:
        categories["performance"] = {"score": performance}
    if seo is not None:
        categories["seo"] = {"score": seo}
    
    return {
        "audits": {
            "document-title": items({"title": title} if title is not None else None),
            "meta-description": items({"description": description} if description is not None else None),
            "heading-order": items({"node": {"snippet": snippet}} if snippet is not None else None),
        },
        "categories": categories,
    }


@pytest.fixture
def lighthouse_result():
    """Factory fixture for lighthouseResult payloads."""
    return make_lighthouse_result
