"""Event enrichment from auxiliary data sources."""

from event_ingest.enrichment.document_store import DocumentStoreClient

__all__ = ["DocumentStoreClient"]
