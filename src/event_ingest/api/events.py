"""FastAPI routers for event ingestion and entity lookup."""
from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from event_ingest.api import sample_data
from event_ingest.config import settings
from event_ingest.core.logging import get_logger
from event_ingest.db.repositories import EventRepository
from event_ingest.enrichment import DocumentStoreClient
from event_ingest.models.schemas import (
    EnrichmentData,
    EntityListResponse,
    EventIndex,
    EventStoredResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["events"])

document_store = DocumentStoreClient()

_EVENT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": EventIndex.model_json_schema()}},
    }
}


def _invalid_json() -> HTTPException:
    logger.warning("Rejected request with invalid JSON body")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON")


def parse_event(body: bytes) -> EventIndex:
    """Parse a raw request body into an event.

    Anything that is not a UTF-8 JSON document (including an empty body) is
    rejected with 400, whatever the Content-Type; a JSON document missing
    required fields is rejected with the usual 422 error list.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise _invalid_json()

    try:
        return EventIndex.model_validate_json(text)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        if any(error["type"] == "json_invalid" for error in errors):
            raise _invalid_json()
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in errors]
        )


async def _enrich(event: EventIndex) -> EnrichmentData:
    """Fetch auxiliary data for the event, falling back to none on failure."""
    if not settings.enrichment_enabled:
        return EnrichmentData()
    try:
        return await document_store.fetch_additional_info(event)
    except Exception as e:
        logger.warning("Error fetching document store data", error=str(e))
        return EnrichmentData()


@router.post("/event", response_model=EventStoredResponse, openapi_extra=_EVENT_BODY)
async def ingest_event(request: Request) -> EventStoredResponse:
    """
    Receive an event, enrich it and store it.

    Enrichment is best effort; the event is stored without additional info
    when the document store lookup fails.
    """
    event = parse_event(await request.body())
    logger.info(
        "Received event",
        entity_type=event.entity_type,
        action=event.action,
        entity_id=event.entity_id,
    )

    enrichment = await _enrich(event)

    try:
        result = await EventRepository.create_event(event, enrichment)
    except Exception as e:
        logger.error("Error storing event", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store event",
        )

    logger.info("Event stored", event_id=result["event_id"])
    return EventStoredResponse(**result)


@router.get("/events/{entity_type}", response_model=EntityListResponse)
async def get_events_by_type(
    entity_type: str,
    query: str | None = Query(default=None),
) -> EntityListResponse:
    """
    Return sample results for an entity type.

    ``query`` must be supplied but does not filter the results.
    """
    if not query:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing query parameter",
        )

    results = sample_data.lookup(entity_type)
    if results is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unsupported entity type: {entity_type}",
        )

    return EntityListResponse(entity_type=entity_type, query=query, results=results)
