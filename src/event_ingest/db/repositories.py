"""Data access layer with repository pattern."""
from typing import Any, Dict

from event_ingest.db.connection import get_db_connection
from event_ingest.models.schemas import EnrichmentData, EventIndex


EVENTS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS events (
    id SERIAL PRIMARY KEY,
    entity_type TEXT NOT NULL,
    action TEXT NOT NULL,
    entity_id TEXT NOT NULL,
    item_id TEXT,
    item_type TEXT,
    additional_info TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


class EventRepository:
    """Repository for event persistence."""

    @staticmethod
    async def ensure_schema() -> None:
        """Create the events table if it does not exist (idempotent)."""
        async with get_db_connection() as conn:
            await conn.execute(EVENTS_TABLE_DDL)

    @staticmethod
    async def create_event(
        event: EventIndex, enrichment: EnrichmentData
    ) -> Dict[str, Any]:
        """Insert an event together with its enrichment data."""
        async with get_db_connection() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO events (
                    entity_type, action, entity_id, item_id, item_type, additional_info
                )
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING id, created_at
                """,
                event.entity_type,
                event.action,
                event.entity_id,
                event.item_id,
                event.item_type,
                enrichment.additional_info,
            )
            return {"event_id": row["id"], "created_at": row["created_at"]}
