from __future__ import annotations

import datetime

from msgspec import UNSET, UnsetType

from ..enums import Grade, Ruleset
from ..wire import GRADES, RULESETS
from .base import Base
from .beatmaps import BeatmapExtended, BeatmapSet
from .users import User

__all__ = ("BeatmapScores", "BeatmapUserScore", "Score", "ScoreStatistics")


class ScoreStatistics(Base, kw_only=True):
    count_50: int
    count_100: int
    count_300: int
    count_geki: int
    count_katu: int
    count_miss: int


class Score(Base, kw_only=True):
    """A score, as returned by the user and beatmap score listings."""

    accuracy: float
    best_id: int | None = None
    created_at: datetime.datetime
    id: int
    max_combo: int
    mode: str
    mods: list[str]
    passed: bool
    perfect: bool
    pp: float | None = None
    rank: str
    replay: bool
    score: int
    statistics: ScoreStatistics
    user_id: int

    beatmap: BeatmapExtended | UnsetType = UNSET
    beatmapset: BeatmapSet | UnsetType = UNSET
    user: User | UnsetType = UNSET
    rank_country: int | None | UnsetType = UNSET
    rank_global: int | None | UnsetType = UNSET

    @property
    def ruleset(self) -> Ruleset:
        return RULESETS.parse(self.mode)

    @property
    def grade(self) -> Grade:
        return GRADES.parse(self.rank)


class BeatmapUserScore(Base, kw_only=True):
    position: int
    score: Score


class BeatmapScores(Base, kw_only=True):
    scores: list[Score]
    user_score: BeatmapUserScore | None = None
