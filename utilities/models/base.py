from __future__ import annotations

import msgspec

__all__ = ("Base",)


class Base(msgspec.Struct, kw_only=True):
    """Base for API payload models.

    Fields without a default are required. ``None`` defaults mark fields the API
    may send as null, and ``msgspec.UNSET`` defaults mark fields that are only
    present on some endpoints, so a missing field stays distinct from a null one.
    Unknown fields are ignored.
    """
