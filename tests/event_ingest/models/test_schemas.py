"""Unit tests for Pydantic schemas."""
import pytest
from datetime import datetime
from pydantic import ValidationError
from event_ingest.models.schemas import (
    EnrichmentData,
    EntityListResponse,
    EventIndex,
    EventStoredResponse,
)


def test_event_index_valid():
    event = EventIndex(
        entity_type="user",
        action="like",
        entity_id="user-1",
        item_id="post-9",
        item_type="post",
    )
    assert event.item_id == "post-9"


def test_event_index_optional_fields():
    event = EventIndex(entity_type="user", action="like", entity_id="user-1")
    assert event.item_id == ""
    assert event.item_type == ""


def test_event_index_required_fields():
    with pytest.raises(ValidationError):
        EventIndex(entity_type="user", action="like")


def test_event_index_rejects_empty_and_long_values():
    with pytest.raises(ValidationError):
        EventIndex(entity_type="", action="like", entity_id="user-1")
    with pytest.raises(ValidationError):
        EventIndex(entity_type="x" * 51, action="like", entity_id="user-1")


def test_enrichment_data_default():
    assert EnrichmentData().additional_info == ""


def test_event_stored_response_default_message():
    response = EventStoredResponse(event_id=1, created_at=datetime.now())
    assert response.message == "Event received and stored successfully"


def test_entity_list_response_default_results():
    response = EntityListResponse(entity_type="events", query="q")
    assert response.results == []
