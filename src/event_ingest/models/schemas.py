"""Pydantic models for API request/response validation."""
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field


class EventIndex(BaseModel):
    """An inbound event: something an entity did to an item."""

    entity_type: str = Field(..., min_length=1, max_length=50)
    action: str = Field(..., min_length=1, max_length=50)
    entity_id: str = Field(..., min_length=1, max_length=100)
    item_id: str = ""
    item_type: str = ""


class EnrichmentData(BaseModel):
    """Auxiliary data fetched from the document store for an event."""

    additional_info: str = ""


class EventStoredResponse(BaseModel):
    """Response after ingesting an event."""

    message: str = "Event received and stored successfully"
    event_id: int
    created_at: datetime


class EntityListResponse(BaseModel):
    """Canned results for an entity type."""

    entity_type: str
    query: str
    results: list[Dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str
