from __future__ import annotations

from enum import Enum, IntEnum, auto

__all__ = ("BeatmapType", "Grade", "RankedStatus", "Ruleset", "ScoreType")


class Ruleset(IntEnum):
    """The official rulesets. Values are the API's ruleset ids."""

    OSU = 0
    TAIKO = 1
    FRUITS = 2
    MANIA = 3


class BeatmapType(Enum):
    """Beatmapset categories listed on a user's profile."""

    FAVOURITE = auto()
    GRAVEYARD = auto()
    GUEST = auto()
    LOVED = auto()
    MOST_PLAYED = auto()
    NOMINATED = auto()
    PENDING = auto()
    RANKED = auto()


class ScoreType(Enum):
    BEST = auto()
    FIRSTS = auto()
    RECENT = auto()
    PINNED = auto()


class RankedStatus(IntEnum):
    GRAVEYARD = -2
    WIP = -1
    PENDING = 0
    RANKED = 1
    APPROVED = 2
    QUALIFIED = 3
    LOVED = 4


class Grade(Enum):
    SILVER_SS = auto()
    SS = auto()
    SILVER_S = auto()
    S = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    F = auto()
