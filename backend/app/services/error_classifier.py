"""
Error Classifier - Translate audit provider failures into user-facing messages.

No status is retried automatically; the user is expected to resubmit.
"""
from typing import Optional

import httpx


INVALID_URL_MESSAGE = "Invalid URL or the page cannot be analyzed. Please check the URL and try again."
QUOTA_MESSAGE = "API quota exceeded or invalid API key. Please try again later."
RATE_LIMIT_MESSAGE = "Too many requests. Please wait a moment and try again."
GENERIC_MESSAGE = "Failed to analyze website: {detail}"

NETWORK_MESSAGE = (
    "Network error: could not reach the analysis service. "
    "Please check your connection and try again."
)
NO_RESULTS_MESSAGE = "No results returned. The site may be unreachable or blocking automated analysis."

STATUS_MESSAGES = {
    400: INVALID_URL_MESSAGE,
    403: QUOTA_MESSAGE,
    429: RATE_LIMIT_MESSAGE,
}


def classify_audit_error(
    status_code: int,
    provider_message: Optional[str] = None,
    reason: Optional[str] = None,
) -> str:
    """Map an audit provider HTTP status to the message shown to the user."""
    if status_code in STATUS_MESSAGES:
        return STATUS_MESSAGES[status_code]
    
    detail = provider_message or reason or f"HTTP {status_code}"
    return GENERIC_MESSAGE.format(detail=detail)


def provider_message_from(response: httpx.Response) -> Optional[str]:
    """Pull ``error.message`` out of a Google API error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    
    if not isinstance(body, dict):
        return None
    
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None
