"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import Dict, List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = os.getenv("APP_NAME", "SEO Scanner")
    
    # API Keys
    PAGESPEED_API_KEY: str = os.getenv("PAGESPEED_API_KEY", "")
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    
    # PageSpeed Insights (audit provider)
    PAGESPEED_API_URL: str = os.getenv(
        "PAGESPEED_API_URL", "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
    )
    PAGESPEED_STRATEGY: str = os.getenv("PAGESPEED_STRATEGY", "DESKTOP")
    
    # Gemini (recommendation provider)
    GEMINI_API_BASE: str = os.getenv("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.7"))
    GEMINI_TOP_K: int = int(os.getenv("GEMINI_TOP_K", "40"))
    GEMINI_TOP_P: float = float(os.getenv("GEMINI_TOP_P", "0.95"))
    GEMINI_MAX_OUTPUT_TOKENS: int = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "1024"))
    
    # HTTP client settings
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "SEO-Scanner/1.0 (+https://github.com/seo-scanner)")
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"])
    
    @property
    def gemini_endpoint(self) -> str:
        return f"{self.GEMINI_API_BASE.rstrip('/')}/models/{self.GEMINI_MODEL}:generateContent"
    
    def configured_providers(self) -> Dict[str, bool]:
        """Report which provider keys are present (never the values)."""
        return {
            "pagespeed": bool(self.PAGESPEED_API_KEY),
            "gemini": bool(self.GEMINI_API_KEY),
        }

settings = Settings()
