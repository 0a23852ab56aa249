from __future__ import annotations

import logging
from types import TracebackType

import aiohttp

import utilities.config
from endpoints import BeatmapEndpoints, ScoreEndpoints, UserEndpoints
from utilities.auth import StaticTokenProvider, TokenProvider
from utilities.http import HTTPClient

__all__ = ("OsuClient",)


log = logging.getLogger(__name__)


class OsuClient:
    """Entry point to the osu! API v2.

    Owns the connection pool shared by every request. Endpoints are grouped by
    resource and exposed as properties::

        async with OsuClient(token="...") as osu:
            user = await osu.users.get_user("peppy")
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        token_provider: TokenProvider | None = None,
        config: utilities.config.Config | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: A fixed access token. Mutually exclusive with ``token_provider``.
            token_provider: Supplies access tokens, e.g. one that refreshes them.
            config: API settings. Defaults to ``utilities.config.from_env()``.
            session: An existing aiohttp session to borrow. When omitted the client
                creates its own and closes it in ``close()``.
        """
        if (token is None) == (token_provider is None):
            raise TypeError("Pass exactly one of token or token_provider.")
        self.token_provider: TokenProvider = token_provider or StaticTokenProvider(token or "")
        self.config = config or utilities.config.from_env()
        self._session = session
        self._owns_session = session is None
        self._http: HTTPClient | None = None
        self._users: UserEndpoints | None = None
        self._beatmaps: BeatmapEndpoints | None = None
        self._scores: ScoreEndpoints | None = None

    async def __aenter__(self) -> OsuClient:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def start(self) -> None:
        """Create the session (if none was given) and the endpoint groups."""
        if self._http is not None:
            return
        if self._session is None:
            self._session = aiohttp.ClientSession()
        self._http = HTTPClient(self._session, self.config, self.token_provider)
        self._users = UserEndpoints(self._http)
        self._beatmaps = BeatmapEndpoints(self._http)
        self._scores = ScoreEndpoints(self._http)
        log.debug("osu! API client started against %s", self.config.base_url)

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None if self._owns_session else self._session
        self._http = self._users = self._beatmaps = self._scores = None

    @property
    def http(self) -> HTTPClient:
        """Return the request core."""
        if self._http is None:
            raise AttributeError("Client not started; use 'async with OsuClient(...)' or await start().")
        return self._http

    @property
    def users(self) -> UserEndpoints:
        """Return the user endpoints."""
        if self._users is None:
            raise AttributeError("Client not started; use 'async with OsuClient(...)' or await start().")
        return self._users

    @property
    def beatmaps(self) -> BeatmapEndpoints:
        """Return the beatmap endpoints."""
        if self._beatmaps is None:
            raise AttributeError("Client not started; use 'async with OsuClient(...)' or await start().")
        return self._beatmaps

    @property
    def scores(self) -> ScoreEndpoints:
        """Return the score endpoints."""
        if self._scores is None:
            raise AttributeError("Client not started; use 'async with OsuClient(...)' or await start().")
        return self._scores
