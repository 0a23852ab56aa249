from __future__ import annotations

import re
from enum import Enum
from typing import Any, ClassVar, Mapping
from urllib.parse import quote, urlencode

import msgspec
from multidict import MultiDict

from .wire import to_wire

__all__ = ("Route", "build_query", "query_params")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _to_query_str(v: Any) -> str:  # noqa: ANN401
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, Enum):
        return to_wire(v)
    return str(v)


def _is_absent(v: Any) -> bool:  # noqa: ANN401
    return v is None or v is msgspec.UNSET


def query_params(params: Mapping[str, Any] | None) -> MultiDict[str]:
    """Flatten optional query parameters into an ordered multidict.

    Absent values (``None`` or ``msgspec.UNSET``) are dropped. Everything else,
    including ``0``, ``""`` and ``False``, is kept. List values repeat the key
    once per item, in order.

    Args:
        params (Mapping[str, Any] | None): Parameter name to optional value.

    Returns:
        MultiDict[str]: The present parameters, serialized to strings.
    """
    flat_params: MultiDict[str] = MultiDict()
    if not params:
        return flat_params
    for k, v in params.items():
        if _is_absent(v):
            continue
        elif isinstance(v, (list, tuple)):
            for item in v:
                if not _is_absent(item):
                    flat_params.add(k, _to_query_str(item))
        else:
            flat_params.add(k, _to_query_str(v))
    return flat_params


def build_query(params: Mapping[str, Any] | None) -> str:
    """Return the percent-encoded query string for ``params`` without a leading ``?``."""
    return urlencode(list(query_params(params).items()), quote_via=quote)


class Route:
    """One GET request against the API: the resolved path and its query string."""

    BASE: ClassVar[str] = "https://osu.ppy.sh/api/v2"

    __slots__ = ("path", "query", "response_model")

    def __init__(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        response_model: Any = None,  # noqa: ANN401
        **parameters: Any,  # noqa: ANN401
    ) -> None:
        """Initialize a Route.

        Path placeholders are filled from ``parameters``. Strings are quoted as a
        single path segment and enum variants are resolved through their wire
        table. A segment made of one placeholder whose value is absent is dropped,
        which is how optional trailing segments are expressed.

        Args:
            path (str): The API route path, e.g. ``"/users/{user}/{mode}"``.
            params (Mapping[str, Any] | None): Optional query parameters.
            response_model (Any): The type the response body decodes into.
            **parameters (Any): Values for the path placeholders.

        Raises:
            ValueError: If a placeholder has no matching parameter, resolves to an
                empty segment, or is absent in front of a present segment.
        """
        missing = [name for name in _PLACEHOLDER.findall(path) if name not in parameters]
        if missing:
            raise ValueError(f"Unresolved path placeholders in {path!r}: {', '.join(missing)}")

        def _segment(match: re.Match[str]) -> str:
            name = match.group(1)
            v = parameters[name]
            if isinstance(v, Enum):
                v = to_wire(v)
            if _is_absent(v) or v == "":
                raise ValueError(f"Path parameter {name!r} in {path!r} is empty")
            return quote(v, safe="@") if isinstance(v, str) else str(v)

        segments: list[str] = []
        dropped: str | None = None
        for part in path.split("/"):
            match = _PLACEHOLDER.fullmatch(part)
            if match and _is_absent(parameters[match.group(1)]):
                dropped = dropped or match.group(1)
                continue
            if dropped is not None:
                raise ValueError(f"Path parameter {dropped!r} in {path!r} may only be omitted at the end")
            segments.append(_PLACEHOLDER.sub(_segment, part))

        self.path: str = "/".join(segments).rstrip("/") or "/"
        self.query: str = build_query(params)
        self.response_model = response_model

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        if hasattr(self, name):
            raise AttributeError(f"Route.{name} is read-only")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"<Route GET {self.path}{'?' + self.query if self.query else ''}>"

    def url(self, base: str | None = None) -> str:
        """Return the full URL of this route against ``base`` (defaults to ``Route.BASE``)."""
        url = (base or self.BASE).rstrip("/") + self.path
        if self.query:
            url += "?" + self.query
        return url
