from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ("StaticTokenProvider", "TokenProvider")


@runtime_checkable
class TokenProvider(Protocol):
    """Supplies the bearer token sent with every request.

    Acquiring and refreshing the token is up to the implementation.
    """

    async def get_token(self) -> str: ...


class StaticTokenProvider:
    def __init__(self, token: str) -> None:
        """Wrap a token that never changes.

        Args:
            token: An osu! API v2 access token.
        """
        if not token:
            raise ValueError("token must not be empty")
        self._token = token

    def __repr__(self) -> str:
        return "<StaticTokenProvider>"

    async def get_token(self) -> str:
        """Return the wrapped token."""
        return self._token
