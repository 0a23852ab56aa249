from __future__ import annotations

from typing import TYPE_CHECKING, Any, Coroutine, TypeVar

if TYPE_CHECKING:
    T = TypeVar("T")

    Response = Coroutine[Any, Any, T]
