from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import msgspec

__all__ = ("Config", "decode", "from_env", "load")

DEFAULT_BASE_URL = "https://osu.ppy.sh/api/v2"
DEFAULT_USER_AGENT = "osu-api-client/0.1 (+https://osu.ppy.sh/docs)"


class Base(msgspec.Struct, forbid_unknown_fields=True, frozen=True): ...


class Config(Base):
    base_url: Annotated[str, msgspec.Meta(pattern=r"^https?://")] = DEFAULT_BASE_URL
    timeout: Annotated[float, msgspec.Meta(gt=0)] = 30.0
    user_agent: Annotated[str, msgspec.Meta(min_length=1)] = DEFAULT_USER_AGENT
    api_version: str | None = None


def decode(data: bytes | str) -> Config:
    """Decode a config.toml file."""
    return msgspec.toml.decode(data, type=Config)


def load(path: str | Path) -> Config:
    """Read and decode the TOML config at ``path``."""
    with open(path, "rb") as f:
        return decode(f.read())


def from_env() -> Config:
    """Build a Config from ``OSU_API_*`` environment variables, defaulting anything unset."""
    values = {
        "base_url": os.getenv("OSU_API_BASE_URL"),
        "timeout": os.getenv("OSU_API_TIMEOUT"),
        "user_agent": os.getenv("OSU_API_USER_AGENT"),
        "api_version": os.getenv("OSU_API_VERSION"),
    }
    return msgspec.convert({k: v for k, v in values.items() if v}, type=Config, strict=False)
