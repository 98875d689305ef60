"""
Scan error taxonomy.

Every error raised out of a scan carries a user-facing ``message``. The HTTP
layer turns ``ValidationError`` into a 400 and everything else into a 500.
"""
from typing import Optional


class ScanError(Exception):
    """Base class for errors that abort a scan."""
    
    code: str = "scan_error"
    
    def __init__(self, message: str, code: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.code
        self.details = details


class ValidationError(ScanError):
    """Bad or missing input. Raised before any outbound call."""
    code = "invalid_url"


class ConfigurationError(ScanError):
    """A required secret is missing from configuration."""
    code = "missing_config"


class ProviderError(ScanError):
    """Audit provider answered, but with a failure or an unusable payload."""
    code = "provider_error"


class NetworkError(ScanError):
    """Audit provider could not be reached."""
    code = "network_error"


class RecommendationError(Exception):
    """Recommendation provider failed. Never surfaces to callers."""
