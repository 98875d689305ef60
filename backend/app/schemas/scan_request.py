"""
Pydantic schemas for scan requests.
"""
from typing import Any

from pydantic import BaseModel, Field


class ScanRequest(BaseModel):
    """Request to scan a single URL.
    
    ``url`` is validated by the scan itself so that a missing or malformed
    value gets the scanner's own 400 message rather than a schema error.
    """
    url: Any = Field(None, description="Absolute URL to scan, including http:// or https://")
    
    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com"
            }
        }
