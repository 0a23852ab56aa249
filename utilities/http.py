from __future__ import annotations

import asyncio
from functools import lru_cache
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING, Any, TypeVar

import aiohttp
import msgspec

from .errors import APIHTTPError, DeserializationError, TransportError, TransportTimeoutError

if TYPE_CHECKING:
    from .auth import TokenProvider
    from .config import Config
    from .route import Route

__all__ = ("HTTPClient", "RawResponse", "get_decoder", "map_response")

log = getLogger(__name__)

D = TypeVar("D")

_BODY_LOG_LIMIT = 500


@lru_cache(maxsize=None)
def get_decoder(model: type[D]) -> msgspec.json.Decoder[D]:
    """Return a cached msgspec decoder for the given model type.

    Args:
        model (type[D]): The msgspec Struct model (or container of models) to decode.

    Returns:
        msgspec.json.Decoder[D]: A decoder for the model.
    """
    return msgspec.json.Decoder(model)


class RawResponse(msgspec.Struct, frozen=True):
    """Status and body of one API response, before decoding."""

    status: int
    body: bytes
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def map_response(response: RawResponse, model: Any, *, allow_missing: bool = False) -> Any:  # noqa: ANN401
    """Decode a response body into ``model``.

    Args:
        response (RawResponse): The dispatched response.
        model (Any): The target type.
        allow_missing (bool): Whether a 404 means "no such entity" for this call.

    Returns:
        Any: The decoded object, or ``None`` for a 404 when ``allow_missing`` is set.

    Raises:
        APIHTTPError: If the status is not successful (and not an allowed 404).
        DeserializationError: If the body is not valid JSON for ``model``.
    """
    if response.status == HTTPStatus.NOT_FOUND and allow_missing:
        log.debug("GET %s returned 404; treating as missing.", response.url)
        return None
    if not response.ok:
        raise APIHTTPError(response.status, response.body, url=response.url)
    if response.status == HTTPStatus.NO_CONTENT or not response.body:
        raise DeserializationError(response.status, response.body, model, "Expected JSON but got no content")
    try:
        return get_decoder(model).decode(response.body)
    except msgspec.DecodeError as e:
        raise DeserializationError(response.status, response.body, model, str(e)) from e


class HTTPClient:
    """Sends requests to the osu! API over a session owned by the caller."""

    def __init__(self, session: aiohttp.ClientSession, config: Config, token_provider: TokenProvider) -> None:
        """Initialize the HTTP client.

        Args:
            session (aiohttp.ClientSession): The shared session. It is borrowed, never closed here.
            config (Config): API base URL, timeout and headers.
            token_provider (TokenProvider): Supplies the bearer token for each request.
        """
        self.config = config
        self.token_provider = token_provider
        self.__session = session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout)

    async def _headers(self) -> dict[str, str]:
        token = await self.token_provider.get_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if self.config.api_version:
            headers["x-api-version"] = self.config.api_version
        return headers

    async def dispatch(self, route: Route) -> RawResponse:
        """Send exactly one request for ``route`` and return its status and body.

        A 404 is returned like any other response so the caller can decide whether it
        means "missing". Other non-success statuses raise.

        Raises:
            TransportTimeoutError: If the request timed out.
            TransportError: If the connection failed before a response was received.
            APIHTTPError: If the API answered with a non-success status other than 404.
        """
        url = route.url(self.config.base_url)
        headers = await self._headers()
        log.debug("GET %s", url)
        try:
            async with self.__session.get(url, headers=headers, timeout=self._timeout, raise_for_status=False) as resp:
                body = await resp.read()
                status = resp.status
        except asyncio.TimeoutError as e:
            log.warning("GET %s timed out after %ss", url, self.config.timeout)
            raise TransportTimeoutError(url) from e
        except aiohttp.ClientError as e:
            log.warning("GET %s failed: %s", url, e)
            raise TransportError(url) from e

        log.debug("GET %s -> %s", url, status)
        response = RawResponse(status=status, body=body, url=url)
        if not response.ok and status != HTTPStatus.NOT_FOUND:
            log.warning("GET %s returned %s: %s", url, status, body[:_BODY_LOG_LIMIT])
            raise APIHTTPError(status, body, url=url)
        return response

    async def request(self, route: Route, *, allow_missing: bool = False) -> Any:  # noqa: ANN401
        """Dispatch ``route`` and decode the body into ``route.response_model``.

        Args:
            route (Route): The request to send.
            allow_missing (bool): Return ``None`` instead of raising on 404.

        Returns:
            Any: The decoded response, or ``None`` for a missing entity.
        """
        response = await self.dispatch(route)
        return map_response(response, route.response_model, allow_missing=allow_missing)
