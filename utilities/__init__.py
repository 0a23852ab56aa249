from . import _types, auth, config, enums, errors, models, wire
from .auth import StaticTokenProvider, TokenProvider
from .http import HTTPClient, RawResponse
from .route import Route, build_query

__all__ = (
    "HTTPClient",
    "RawResponse",
    "Route",
    "StaticTokenProvider",
    "TokenProvider",
    "_types",
    "auth",
    "build_query",
    "config",
    "enums",
    "errors",
    "models",
    "wire",
)
