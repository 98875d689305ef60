"""
Scan Runner - Orchestrates a single SEO scan.

Validate URL -> PageSpeed audit -> field extraction -> Gemini recommendations.
Both outbound calls are sequential; nothing is shared between scans.
"""
import time
from typing import Any, Optional

from app.config import Settings, settings as default_settings
from app.logger import logger
from app.schemas.scan_result import ScanResult
from app.services.exceptions import ConfigurationError, RecommendationError, ValidationError
from app.services.extractor import ExtractedFields, extract
from app.services.prompts import build_seo_prompt
from app.services.providers.base import AuditProvider, RecommendationProvider
from app.services.providers.gemini import GeminiProvider
from app.services.providers.pagespeed import PageSpeedProvider
from app.services.url_validator import UrlValidator


MISSING_URL_MESSAGE = "URL is required"
INVALID_URL_MESSAGE = "Please enter a valid URL including http:// or https://"

SUGGESTIONS_UNAVAILABLE = "AI suggestions are temporarily unavailable. Please try again later."
SUGGESTIONS_NOT_GENERATED = "Could not generate AI suggestions at this time."


class ScanRunner:
    """Runs the scan pipeline for one URL at a time."""
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        audit_provider: Optional[AuditProvider] = None,
        recommendation_provider: Optional[RecommendationProvider] = None,
    ):
        self.settings = settings or default_settings
        self.audit_provider = audit_provider
        self.recommendation_provider = recommendation_provider
    
    async def scan(self, url: Any) -> ScanResult:
        """
        Scan a URL.
        
        Args:
            url: Absolute http(s) URL
            
        Returns:
            ScanResult with extracted fields and recommendation text
            
        Raises:
            ValidationError, ConfigurationError, ProviderError, NetworkError
        """
        started = time.monotonic()
        target = self.validate(url)
        
        api_key = self._require("PAGESPEED_API_KEY", self.settings.PAGESPEED_API_KEY)
        audit_provider = self.audit_provider or PageSpeedProvider(api_key, self.settings)
        
        # 1. Audit
        logger.info(f"Starting scan for {target}")
        report = await audit_provider.fetch_report(target)
        
        # 2. Extract
        fields = extract(report)
        logger.info(
            f"Audit complete for {target}: performance={fields.performance_score} seo={fields.seo_score}"
        )
        
        # 3. Recommendations
        suggestions = await self.get_suggestions(target, fields)
        
        logger.info(f"Scan finished for {target} in {time.monotonic() - started:.2f}s")
        return ScanResult(
            title=fields.title,
            meta=fields.meta,
            h1=fields.h1,
            performance=fields.performance_score,
            seo_score=fields.seo_score,
            ai_suggestions=suggestions,
        )
    
    def validate(self, url: Any) -> str:
        """Return the stripped URL or raise ValidationError."""
        if url is None or (isinstance(url, str) and not url.strip()):
            raise ValidationError(MISSING_URL_MESSAGE, code="missing_url")
        
        if not isinstance(url, str):
            raise ValidationError(INVALID_URL_MESSAGE, details=f"Expected a string, got {type(url).__name__}")
        
        target = url.strip()
        is_valid, reason = UrlValidator.validate_url(target)
        if not is_valid:
            logger.info(f"Rejected URL {target!r}: {reason}")
            raise ValidationError(INVALID_URL_MESSAGE, details=reason)
        return target
    
    async def get_suggestions(self, url: str, fields: ExtractedFields) -> str:
        """Ask for recommendations. Prompt or provider failures degrade to fallback text."""
        api_key = self._require("GEMINI_API_KEY", self.settings.GEMINI_API_KEY)
        provider = self.recommendation_provider or GeminiProvider(api_key, self.settings)
        try:
            prompt = build_seo_prompt(url, fields)
            text = await provider.generate(prompt)
        except RecommendationError as e:
            logger.warning(f"Recommendations unavailable for {url}: {e}")
            return SUGGESTIONS_UNAVAILABLE
        except Exception as e:
            # A recommendation failure must not cost the user the audit data
            logger.exception(f"Unexpected error generating recommendations for {url}: {e}")
            return SUGGESTIONS_UNAVAILABLE
        
        if not text:
            return SUGGESTIONS_NOT_GENERATED
        return text
    
    def _require(self, name: str, value: str) -> str:
        if not value:
            logger.error(f"{name} is not configured")
            raise ConfigurationError(f"{name} environment variable is not set.", details=name)
        return value
