"""
PageSpeed Insights Provider - Run Lighthouse remotely via the PSI v5 API.
"""
from typing import Any, Dict, Optional

import httpx

from app.config import Settings
from app.logger import logger
from app.services.error_classifier import (
    NETWORK_MESSAGE,
    NO_RESULTS_MESSAGE,
    classify_audit_error,
    provider_message_from,
)
from app.services.exceptions import NetworkError, ProviderError


class PageSpeedProvider:
    """Fetches a Lighthouse report for a URL (performance + SEO categories)."""
    
    CATEGORIES = ("PERFORMANCE", "SEO")
    
    def __init__(
        self,
        api_key: str,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.endpoint = settings.PAGESPEED_API_URL
        self.strategy = settings.PAGESPEED_STRATEGY
        self.timeout = settings.HTTP_TIMEOUT
        self.user_agent = settings.USER_AGENT
        self._transport = transport
    
    def build_params(self, url: str) -> list[tuple[str, str]]:
        """Query parameters; ``category`` is repeated once per category."""
        params = [("url", url), ("key", self.api_key)]
        params.extend(("category", category) for category in self.CATEGORIES)
        params.append(("strategy", self.strategy))
        return params
    
    async def fetch_report(self, url: str) -> Dict[str, Any]:
        """Run the audit and return the ``lighthouseResult`` object."""
        headers = {"User-Agent": self.user_agent}
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.endpoint, params=self.build_params(url), headers=headers)
        except httpx.TransportError as e:
            logger.error(f"PageSpeed request failed for {url}: {type(e).__name__}: {e}")
            raise NetworkError(NETWORK_MESSAGE, details=type(e).__name__) from e
        
        if not response.is_success:
            provider_message = provider_message_from(response)
            logger.warning(
                f"PageSpeed API error for {url}: {response.status_code} {provider_message or response.reason_phrase}"
            )
            raise ProviderError(
                classify_audit_error(response.status_code, provider_message, response.reason_phrase),
                details=str(response.status_code),
            )
        
        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"PageSpeed returned a non-JSON body for {url}")
            raise ProviderError(NO_RESULTS_MESSAGE, details="invalid_json") from e
        
        report = data.get("lighthouseResult") if isinstance(data, dict) else None
        if not isinstance(report, dict) or not report:
            logger.warning(f"PageSpeed returned no lighthouseResult for {url}")
            raise ProviderError(NO_RESULTS_MESSAGE, details="missing_lighthouse_result")
        
        return report
