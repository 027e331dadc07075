"""Run the service with uvicorn: ``python -m event_ingest``."""
import uvicorn

from event_ingest.config import settings


def main() -> None:
    uvicorn.run(
        "event_ingest.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
