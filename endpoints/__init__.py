from __future__ import annotations

from .beatmaps import BeatmapEndpoints
from .scores import ScoreEndpoints
from .users import UserEndpoints

__all__ = ("BeatmapEndpoints", "ScoreEndpoints", "UserEndpoints")
