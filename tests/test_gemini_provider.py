"""
Test Gemini recommendation provider
"""
import json

import httpx
import pytest

from app.services.exceptions import RecommendationError
from app.services.providers.gemini import GeminiProvider


def provider_with(settings, handler):
    return GeminiProvider("test-gemini-key", settings, transport=httpx.MockTransport(handler))


def candidate(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class TestGeminiProvider:
    @pytest.mark.asyncio
    async def test_request_shape(self, settings):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=candidate("  - Shorten the title\n"))

        text = await provider_with(settings, handler).generate("Analyze this page")

        assert text == "- Shorten the title"
        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert request.url.path.endswith(f"/models/{settings.GEMINI_MODEL}:generateContent")
        assert request.url.params["key"] == "test-gemini-key"

        body = json.loads(request.content)
        assert body["contents"] == [{"role": "user", "parts": [{"text": "Analyze this page"}]}]
        assert body["generationConfig"] == {
            "temperature": settings.GEMINI_TEMPERATURE,
            "topK": settings.GEMINI_TOP_K,
            "topP": settings.GEMINI_TOP_P,
            "maxOutputTokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 403, 429, 500, 503])
    async def test_error_status_raises(self, settings, status):
        def handler(request):
            return httpx.Response(status, json={"error": {"message": "nope"}})

        with pytest.raises(RecommendationError):
            await provider_with(settings, handler).generate("prompt")

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self, settings):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(RecommendationError):
            await provider_with(settings, handler).generate("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"json": {}},
            {"json": {"candidates": []}},
            {"json": {"candidates": [{"finishReason": "SAFETY"}]}},
            {"json": {"candidates": [{"content": {"parts": []}}]}},
            {"json": candidate("   ")},
            {"json": candidate(None)},
            {"text": "not json"},
        ],
    )
    async def test_unusable_responses_return_none(self, settings, kwargs):
        def handler(request):
            return httpx.Response(200, **kwargs)

        assert await provider_with(settings, handler).generate("prompt") is None
