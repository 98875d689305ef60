"""
Pydantic schemas for scan responses.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ScanResult(BaseModel):
    """Combined audit fields and generated recommendations."""
    title: str
    meta: str
    h1: str
    performance: int = Field(..., ge=0, le=100)
    seo_score: int = Field(..., ge=0, le=100)
    ai_suggestions: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "title": "Example Domain",
                "meta": "No meta description found",
                "h1": "Example Domain",
                "performance": 87,
                "seo_score": 100,
                "ai_suggestions": "- Add a meta description of 120-160 characters..."
            }
        }


class ScanErrorResponse(BaseModel):
    """Error body returned for any failed scan."""
    error: str
    code: Optional[str] = None
