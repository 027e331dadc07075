"""Event Ingest Service - event ingestion, enrichment and persistence."""

__version__ = "0.1.0"
