"""
Gemini Provider - Generate SEO recommendations with the generateContent API.
"""
from typing import Any, Optional

import httpx

from app.config import Settings
from app.logger import logger
from app.services.exceptions import RecommendationError


class GeminiProvider:
    """Sends a single-turn prompt to Gemini and returns the first candidate's text."""
    
    def __init__(
        self,
        api_key: str,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.endpoint = settings.gemini_endpoint
        self.timeout = settings.HTTP_TIMEOUT
        self.generation_config = {
            "temperature": settings.GEMINI_TEMPERATURE,
            "topK": settings.GEMINI_TOP_K,
            "topP": settings.GEMINI_TOP_P,
            "maxOutputTokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
        }
        self._transport = transport
    
    def build_payload(self, prompt: str) -> dict:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": self.generation_config,
        }
    
    async def generate(self, prompt: str) -> Optional[str]:
        """Return generated text, ``None`` if the response has none."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=self.build_payload(prompt),
                )
        except httpx.TransportError as e:
            raise RecommendationError(f"Gemini request failed: {type(e).__name__}: {e}") from e
        
        if not response.is_success:
            raise RecommendationError(
                f"Gemini API request failed with status {response.status_code}: {response.text[:500]}"
            )
        
        try:
            data = response.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body")
            return None
        
        text = self._parse(data)
        if text is None:
            logger.warning(f"Unexpected Gemini response structure: {str(data)[:500]}")
        return text
    
    def _parse(self, data: Any) -> Optional[str]:
        """candidates[0].content.parts[0].text, trimmed."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        
        if not isinstance(text, str) or not text.strip():
            return None
        return text.strip()
