from __future__ import annotations

import datetime

import msgspec
from msgspec import UNSET, UnsetType

from ..enums import RankedStatus, Ruleset
from ..wire import RANKED_STATUSES, RULESETS
from .base import Base

__all__ = (
    "Beatmap",
    "BeatmapExtended",
    "BeatmapPlaycount",
    "BeatmapSet",
    "BeatmapSetAvailability",
    "BeatmapSetCovers",
    "BeatmapSetDescription",
    "BeatmapSetExtended",
    "BeatmapSetHype",
    "BeatmapSetNomination",
)


class Beatmap(Base, kw_only=True):
    id: int
    beatmapset_id: int
    difficulty_rating: float
    mode: str
    status: str
    total_length: int
    user_id: int
    version: str

    @property
    def ruleset(self) -> Ruleset:
        return RULESETS.parse(self.mode)

    @property
    def ranked_status(self) -> RankedStatus:
        return RANKED_STATUSES.parse(self.status)


class BeatmapExtended(Beatmap, kw_only=True):
    accuracy: float
    ar: float
    bpm: float | None = None
    checksum: str | None = None
    count_circles: int
    count_sliders: int
    count_spinners: int
    cs: float
    drain: float
    hit_length: int
    is_scoreable: bool
    last_updated: datetime.datetime
    passcount: int
    playcount: int
    url: str
    max_combo: int | UnsetType = UNSET
    beatmapset: BeatmapSet | None | UnsetType = UNSET


class BeatmapSetCovers(Base, kw_only=True):
    cover: str
    card: str
    list_: str = msgspec.field(name="list")
    slimcover: str


class BeatmapSetHype(Base, kw_only=True):
    current: int
    required: int


class BeatmapSetAvailability(Base, kw_only=True):
    download_disabled: bool
    more_information: str | None = None


class BeatmapSetNomination(Base, kw_only=True):
    beatmapset_id: int
    rulesets: list[str] | None = None
    reset: bool
    user_id: int


class BeatmapSetDescription(Base, kw_only=True):
    description: str | None = None


class BeatmapSet(Base, kw_only=True):
    """A beatmapset. Relations the API only includes on request default to ``UNSET``."""

    artist: str
    artist_unicode: str
    covers: BeatmapSetCovers
    creator: str
    favourite_count: int
    hype: BeatmapSetHype | None = None
    id: int
    nsfw: bool
    offset: int
    play_count: int
    preview_url: str
    source: str
    spotlight: bool
    status: str
    title: str
    title_unicode: str
    track_id: int | None = None
    user_id: int
    video: bool

    availability: BeatmapSetAvailability | UnsetType = UNSET
    beatmaps: list[BeatmapExtended] | UnsetType = UNSET
    converts: list[BeatmapExtended] | UnsetType = UNSET
    current_nominations: list[BeatmapSetNomination] | UnsetType = UNSET
    description: BeatmapSetDescription | UnsetType = UNSET

    @property
    def ranked_status(self) -> RankedStatus:
        """The ranked status, resolved from its wire string."""
        return RANKED_STATUSES.parse(self.status)


class BeatmapSetExtended(BeatmapSet, kw_only=True):
    bpm: float
    can_be_hyped: bool
    discussion_locked: bool
    is_scoreable: bool
    last_updated: datetime.datetime | None = None
    ranked: RankedStatus
    ranked_date: datetime.datetime | None = None
    storyboard: bool
    submitted_date: datetime.datetime | None = None
    tags: str


class BeatmapPlaycount(Base, kw_only=True):
    """An entry of a user's most played beatmaps."""

    beatmap_id: int
    count: int
    beatmap: Beatmap | None = None
    beatmapset: BeatmapSet | None = None
