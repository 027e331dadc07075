"""HTTP client for the Event Ingest Service."""
from typing import Any, Dict, Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from event_ingest.core.auth import generate_service_token
from event_ingest.core.logging import get_logger
from event_ingest.models.schemas import EventIndex

logger = get_logger(__name__)


class EventIngestClient:
    """Client for posting events to and reading entities from the service."""

    def __init__(
        self,
        base_url: str,
        service_name: str = "event-ingest-client",
        service_auth_secret: Optional[str] = None,
        timeout: float = 10.0,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the service (e.g., http://localhost:4433)
            service_name: Name put in the ``sub`` claim of service tokens
            service_auth_secret: Shared JWT secret; no Authorization header when unset
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.service_name = service_name
        self.service_auth_secret = service_auth_secret
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    def _auth_headers(self) -> dict[str, str]:
        """Generate auth headers with a fresh JWT for each request."""
        if not self.service_auth_secret:
            return {}
        token = generate_service_token(self.service_name, self.service_auth_secret)
        return {"Authorization": f"Bearer {token}"}

    @retry(
        retry=retry_if_exception_type((httpx.ConnectError, httpx.ConnectTimeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def send_event(self, event: EventIndex) -> Dict[str, Any]:
        """Post an event to ``/event``.

        Only failures to connect are retried; once the request has gone out a
        retry could store the event twice.

        Returns:
            The stored-event response (message, event_id, created_at)
        """
        logger.debug("Sending event", entity_type=event.entity_type, action=event.action)
        response = await self.client.post(
            "/event",
            headers=self._auth_headers(),
            json=event.model_dump(),
        )
        response.raise_for_status()
        return response.json()

    async def get_events(self, entity_type: str, query: str) -> Dict[str, Any]:
        """Fetch the results listed for ``entity_type``."""
        response = await self.client.get(
            f"/events/{entity_type}",
            headers=self._auth_headers(),
            params={"query": query},
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
