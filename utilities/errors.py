from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable

import msgspec

log = logging.getLogger(__name__)

__all__ = (
    "APIHTTPError",
    "ConfigurationError",
    "DeserializationError",
    "OsuAPIError",
    "PreconditionError",
    "TransportError",
    "TransportTimeoutError",
)


class OsuAPIError(Exception):
    """Base class for every failure raised by the osu! API client."""


class ConfigurationError(OsuAPIError):
    def __init__(self, enum: type[Enum], variants: Iterable[Enum]) -> None:
        """Init configuration error.

        Args:
            enum: The enum whose wire table is incomplete.
            variants: The variants without a registered wire string.
        """
        self.enum = enum
        self.variants = tuple(variants)
        names = ", ".join(v.name for v in self.variants)
        super().__init__(f"No wire string registered for {enum.__name__}: {names}")


class PreconditionError(OsuAPIError, ValueError): ...


class TransportError(OsuAPIError):
    def __init__(self, url: str, message: str | None = None) -> None:
        """Init transport error."""
        super().__init__(message or f"Request to {url} failed before a response was received.")
        self.url = url


class TransportTimeoutError(TransportError):
    def __init__(self, url: str) -> None:
        """Init transport timeout error."""
        super().__init__(url, f"Request to {url} timed out.")


class APIHTTPError(OsuAPIError):
    def __init__(self, status: int, body: bytes, *, url: str | None = None) -> None:
        """Init API Error.

        Args:
            status: The HTTP status code returned by the API.
            body: The raw, unmodified response body.
            url: The requested URL, if known.
        """
        self.status = status
        self.body = body
        self.url = url
        self.error = _extract_error(body)
        super().__init__(f"{status}: {self.error or 'unexpected response from the API'}")


class DeserializationError(OsuAPIError):
    def __init__(self, status: int, body: bytes, model: Any, message: str) -> None:  # noqa: ANN401
        """Init deserialization error.

        Args:
            status: The HTTP status code of the response that failed to decode.
            body: The raw response body.
            model: The type the body was decoded into.
            message: The decoder message, including the offending JSON path when available.
        """
        self.status = status
        self.body = body
        self.model = model
        self.path = _extract_path(message)
        name = getattr(model, "__name__", None) or repr(model)
        super().__init__(f"Could not decode response into {name}: {message}")


class _ErrorBody(msgspec.Struct):
    error: str | None = None


def _extract_error(body: bytes) -> str | None:
    if not body:
        return None
    try:
        return msgspec.json.decode(body, type=_ErrorBody).error
    except msgspec.DecodeError:
        log.debug("Error body is not a JSON object with an 'error' key.")
        return None


def _extract_path(message: str) -> str | None:
    # msgspec appends " - at `$.field[0]`" to validation messages.
    _, sep, tail = message.rpartition(" - at `")
    if not sep:
        return None
    return tail.rstrip("`")
