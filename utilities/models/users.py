from __future__ import annotations

import datetime
from typing import Any

import msgspec
from msgspec import UNSET, UnsetType

from ..enums import Ruleset
from ..wire import RULESETS
from .base import Base

__all__ = (
    "Country",
    "GradeCounts",
    "KudosuHistoryEntry",
    "KudosuGiver",
    "KudosuPost",
    "User",
    "UserKudosu",
    "UserStatistics",
)


class Country(Base, kw_only=True):
    code: str
    name: str


class UserKudosu(Base, kw_only=True):
    available: int
    total: int


class GradeCounts(Base, kw_only=True):
    ss: int
    ssh: int
    s: int
    sh: int
    a: int


class UserStatistics(Base, kw_only=True):
    pp: float
    global_rank: int | None = None
    country_rank: int | None = None
    hit_accuracy: float
    play_count: int
    play_time: int | None = None
    ranked_score: int
    total_score: int
    maximum_combo: int
    is_ranked: bool
    grade_counts: GradeCounts


class User(Base, kw_only=True):
    """A user, as returned by ``GET users/{user}/{mode?}`` and ``GET users``."""

    id: int
    username: str
    avatar_url: str
    country_code: str
    default_group: str | None = None
    is_active: bool
    is_bot: bool
    is_online: bool
    is_supporter: bool
    pm_friends_only: bool
    profile_colour: str | None = None
    last_visit: datetime.datetime | None = None
    join_date: datetime.datetime | UnsetType = UNSET
    playmode: str | UnsetType = UNSET
    cover_url: str | UnsetType = UNSET
    country: Country | UnsetType = UNSET
    kudosu: UserKudosu | UnsetType = UNSET
    statistics: UserStatistics | None | UnsetType = UNSET

    @property
    def ruleset(self) -> Ruleset | None:
        """The user's default ruleset, if the payload included it."""
        if self.playmode is UNSET:
            return None
        return RULESETS.parse(self.playmode)


class KudosuGiver(Base, kw_only=True):
    url: str
    username: str


class KudosuPost(Base, kw_only=True):
    url: str | None = None
    title: str


class KudosuHistoryEntry(Base, kw_only=True):
    id: int
    action: str
    amount: int
    model: str
    created_at: datetime.datetime
    giver: KudosuGiver | None = None
    post: KudosuPost
    details: dict[str, Any] = msgspec.field(default_factory=dict)
