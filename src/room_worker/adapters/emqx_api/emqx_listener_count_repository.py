"""Listener count repository backed by the EMQX subscriptions API."""

import asyncio
import base64
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from room_worker.adapters.api_request_logger import log_api_request
from room_worker.adapters.emqx_api.constants import (
    DEFAULT_HEADERS,
    SUBSCRIPTIONS_LIMIT,
    SUBSCRIPTIONS_PATH,
)
from room_worker.domain.errors import ListenerLookupError
from room_worker.domain.models.error_details import ErrorDetails
from room_worker.domain.ports.listener_count_repository import ListenerCountRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


def _reason_for_status(status: int) -> str:
    """Describe an unsuccessful HTTP status."""
    if status == 401:
        return "Unauthorized (check EMQX API key)"
    if status == 404:
        return "Not found"
    if status == 429:
        return "Rate limit exceeded"
    if status == 502:
        return "Bad gateway (server error)"
    if status == 503:
        return "Service unavailable"
    if status == 504:
        return "Gateway timeout"
    return "Unexpected status"


def _extract_count(data: Any) -> int | None:
    """Extract ``meta.count`` from a subscriptions response body."""
    if not isinstance(data, dict):
        return None
    meta = data.get("meta")
    if not isinstance(meta, dict):
        return None
    count = meta.get("count")
    # bool is an int subclass
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        return None
    return count


class EmqxListenerCountRepository(ListenerCountRepository):
    """Counts subscribers of a room's listener topic via the EMQX management API."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str,
        api_key: str,
        api_secret: str,
        topic_template: str = "room/{name}/listener",
        timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Shared aiohttp session.
            base_url: EMQX management API base URL, e.g. ``http://emqx:18083``.
            api_key: API key used as the Basic auth username.
            api_secret: API secret used as the Basic auth password.
            topic_template: Topic of a room's listeners; ``{name}`` is replaced by the room name.
            timeout_seconds: Total timeout for one lookup.
        """
        self._session = session
        self._url = base_url.rstrip("/") + SUBSCRIPTIONS_PATH
        credentials = base64.b64encode(f"{api_key}:{api_secret}".encode()).decode("ascii")
        self._headers = {**DEFAULT_HEADERS, "Authorization": f"Basic {credentials}"}
        self._topic_template = topic_template
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def topic_for(self, room_name: str) -> str:
        return self._topic_template.format(name=room_name)

    async def _handle_response(self, response: "ClientResponse", room_name: str) -> int:
        if response.status < 200 or response.status >= 300:
            body = await response.text()
            logger.debug(
                f"EMQX returned status {response.status} for room {room_name}: {body[:200]}"
            )
            raise ListenerLookupError(
                room_name,
                ErrorDetails(
                    status_code=response.status, reason=_reason_for_status(response.status)
                ),
            )

        try:
            data = await response.json(content_type=None)
        except (ValueError, RecursionError) as e:
            raise ListenerLookupError(
                room_name,
                ErrorDetails(status_code=response.status, reason=f"Malformed JSON response: {e}"),
            ) from e

        count = _extract_count(data)
        if count is None:
            raise ListenerLookupError(
                room_name,
                ErrorDetails(
                    status_code=response.status,
                    reason="Malformed response: missing or invalid meta.count",
                ),
            )
        return count

    async def get_listener_count(self, room_name: str) -> int:
        """Return the number of subscribers on the room's listener topic."""
        params: dict[str, str | int] = {
            "topic": self.topic_for(room_name),
            "limit": SUBSCRIPTIONS_LIMIT,
        }
        log_api_request("GET", self._url, params=params, headers=self._headers)

        try:
            async with self._session.get(
                self._url,
                params=params,
                headers=self._headers,
                timeout=self._timeout,
            ) as response:
                return await self._handle_response(response, room_name)
        except asyncio.TimeoutError as e:
            raise ListenerLookupError(room_name, ErrorDetails(reason="Request timed out")) from e
        except aiohttp.ClientError as e:
            raise ListenerLookupError(
                room_name, ErrorDetails(reason=f"Request failed: {e}")
            ) from e
