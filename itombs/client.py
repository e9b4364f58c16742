"""Async HTTP client for the family tree API."""

from typing import Optional

import httpx

from itombs.config import settings
from itombs.errors import NotFound, TransientError, ValidationError
from itombs.logger import get_logger
from itombs.models import RelativeRecord

logger = get_logger(__name__)


class RelativeClient:
    """Async client for ``/api/tree``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Server hosting the tree API (default from settings).
            timeout: Request timeout in seconds.
            transport: Custom httpx transport, mainly for tests.
        """
        self.base_url = base_url or settings.server.api_base_url
        self.timeout = timeout or settings.server.request_timeout
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        if self.client is None:
            raise RuntimeError("RelativeClient must be used as an async context manager")
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransientError(str(e)) from e

        if response.is_success:
            return response

        message = _message_of(response)
        if response.status_code in (400, 422):
            raise ValidationError(message)
        if response.status_code == 404:
            raise NotFound(message)
        logger.error("%s %s returned %s: %s", method, url, response.status_code, message)
        raise TransientError(f"HTTP {response.status_code}: {message}")

    async def list_relatives(self, owner_id: int) -> list[RelativeRecord]:
        """Get all relatives of a user."""
        response = await self._request("GET", "/api/tree", params={"userId": owner_id})
        return [RelativeRecord.model_validate(row) for row in response.json()]

    async def add_relative(
        self,
        owner_id: int,
        name: str,
        relationship: str,
        profile_link: Optional[str] = None,
    ) -> RelativeRecord:
        """Add a relative and return the stored record."""
        payload = {
            "userId": owner_id,
            "relativeName": name,
            "relationship": relationship,
            "profileUrl": profile_link or None,
        }
        response = await self._request("POST", "/api/tree", json=payload)
        return RelativeRecord.model_validate(response.json())

    async def delete_relative(self, relative_id: int) -> bool:
        """Delete a relative by ID."""
        await self._request("DELETE", "/api/tree", params={"treeId": relative_id})
        return True


def _message_of(response: httpx.Response) -> str:
    try:
        return response.json().get("message", response.text)
    except (ValueError, AttributeError):
        return response.text
