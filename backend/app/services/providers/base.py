"""
Provider contracts for the two outbound calls a scan makes.
"""
from typing import Any, Dict, Optional, Protocol


class AuditProvider(Protocol):
    """Runs a remote Lighthouse audit."""
    
    async def fetch_report(self, url: str) -> Dict[str, Any]:
        """Return the ``lighthouseResult`` object.
        
        Raises:
            ProviderError: provider answered with a failure or no report
            NetworkError: provider could not be reached
        """
        ...


class RecommendationProvider(Protocol):
    """Turns a prompt into advisory text."""
    
    async def generate(self, prompt: str) -> Optional[str]:
        """Return generated text, or ``None`` if the response carried none.
        
        Raises:
            RecommendationError: non-2xx response or transport failure
        """
        ...
