"""Document store lookup used to enrich incoming events.

Stub: no document store is wired up yet, every lookup yields the same
placeholder. The coroutine signature stays so a real driver can be dropped in
without changing callers.
"""

from event_ingest.core.logging import get_logger
from event_ingest.models.schemas import EnrichmentData, EventIndex

logger = get_logger(__name__)

PLACEHOLDER_INFO = "dummy info"


class DocumentStoreClient:
    """Fetches auxiliary data for events from the document store."""

    async def fetch_additional_info(self, event: EventIndex) -> EnrichmentData:
        """Return the auxiliary data stored for the event's entity."""
        logger.debug(
            "Document store lookup",
            entity_type=event.entity_type,
            entity_id=event.entity_id,
        )
        return EnrichmentData(additional_info=PLACEHOLDER_INFO)
