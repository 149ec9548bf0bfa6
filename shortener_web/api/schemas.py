"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class URLRequest(BaseModel):
    """Request to shorten a URL or repoint a short code."""

    # Checked by the service so the error types stay consistent
    url: str = Field(..., description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class URLRecordResponse(BaseModel):
    """A stored short URL."""

    id: str = Field(..., description="Record identifier")
    original_url: str = Field(..., description="The original long URL")
    short_code: str = Field(..., description="The generated short code")
    access_count: int = Field(..., description="Number of successful resolves")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "5f0c6c1e9d4b4a3c8e2f1a7b6c5d4e3f",
                    "original_url": "https://example.com",
                    "short_code": "Ab3xY9",
                    "access_count": 0,
                    "created_at": "2024-01-01T12:00:00Z",
                    "updated_at": "2024-01-01T12:00:00Z",
                }
            ]
        },
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
