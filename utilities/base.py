from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

if TYPE_CHECKING:
    from ._types import Response
    from .http import HTTPClient
    from .route import Route

__all__ = ("BaseEndpoints",)

T = TypeVar("T")
U = TypeVar("U")


class BaseEndpoints:
    def __init__(self, http: HTTPClient) -> None:
        """Initialize an endpoint group.

        Args:
            http (HTTPClient): The request core shared by every endpoint group of a client.
        """
        self.http = http

    def _request(self, route: Route, *, allow_missing: bool = False) -> Response[Any]:
        return self.http.request(route, allow_missing=allow_missing)

    @staticmethod
    async def _then(awaitable: Awaitable[T], func: Callable[[T], U]) -> U:
        """Await ``awaitable`` and pass its result through ``func``."""
        return func(await awaitable)
