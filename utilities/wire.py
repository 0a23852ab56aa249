"""Enum to wire string tables.

The osu! API expects its own lowercase tokens in paths and query strings
(``most_played``, ``fruits``) which never match the enum member names, so
every enum the client sends or receives has an explicit table here. The
shipped tables are checked for completeness when this module is imported.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Generic, Mapping, TypeVar

from .enums import BeatmapType, Grade, RankedStatus, Ruleset, ScoreType
from .errors import ConfigurationError

__all__ = (
    "BEATMAP_TYPES",
    "GRADES",
    "RANKED_STATUSES",
    "RULESETS",
    "SCORE_TYPES",
    "WireTable",
    "to_wire",
)

E = TypeVar("E", bound=Enum)


class WireTable(Generic[E]):
    """A read-only mapping from the variants of one enum to their wire strings."""

    __slots__ = ("enum", "_forward", "_reverse")

    def __init__(self, enum: type[E], mapping: Mapping[E, str]) -> None:
        """Initialize the table.

        Args:
            enum: The enum the table covers.
            mapping: Variant to wire string pairs. Wire strings must be non-empty and unique.

        Raises:
            ValueError: If a key is not a member of ``enum`` or a wire string is empty or duplicated.
        """
        for variant, wire in mapping.items():
            if not isinstance(variant, enum):
                raise ValueError(f"{variant!r} is not a member of {enum.__name__}")
            if not wire:
                raise ValueError(f"Empty wire string for {variant!r}")
        reverse = {wire: variant for variant, wire in mapping.items()}
        if len(reverse) != len(mapping):
            raise ValueError(f"Duplicate wire strings in the {enum.__name__} table")

        self.enum = enum
        self._forward: Mapping[E, str] = MappingProxyType(dict(mapping))
        self._reverse: Mapping[str, E] = MappingProxyType(reverse)

    def __repr__(self) -> str:
        return f"<WireTable {self.enum.__name__} ({len(self._forward)}/{len(self.enum)})>"

    def __getitem__(self, variant: E) -> str:
        try:
            return self._forward[variant]
        except KeyError:
            raise ConfigurationError(self.enum, [variant]) from None

    def parse(self, wire: str) -> E:
        """Return the variant for a wire string received from the API.

        Raises:
            ValueError: If the string is not a known token for this enum.
        """
        try:
            return self._reverse[wire]
        except KeyError:
            raise ValueError(f"{wire!r} is not a valid {self.enum.__name__} wire string") from None

    def missing(self) -> list[E]:
        """Return the variants that have no wire string, in declaration order."""
        return [variant for variant in self.enum if variant not in self._forward]

    def verify(self) -> None:
        """Raise ``ConfigurationError`` if any variant of the enum is unmapped."""
        missing = self.missing()
        if missing:
            raise ConfigurationError(self.enum, missing)


RULESETS = WireTable(
    Ruleset,
    {
        Ruleset.OSU: "osu",
        Ruleset.TAIKO: "taiko",
        Ruleset.FRUITS: "fruits",
        Ruleset.MANIA: "mania",
    },
)

BEATMAP_TYPES = WireTable(
    BeatmapType,
    {
        BeatmapType.FAVOURITE: "favourite",
        BeatmapType.GRAVEYARD: "graveyard",
        BeatmapType.GUEST: "guest",
        BeatmapType.LOVED: "loved",
        BeatmapType.MOST_PLAYED: "most_played",
        BeatmapType.NOMINATED: "nominated",
        BeatmapType.PENDING: "pending",
        BeatmapType.RANKED: "ranked",
    },
)

SCORE_TYPES = WireTable(
    ScoreType,
    {
        ScoreType.BEST: "best",
        ScoreType.FIRSTS: "firsts",
        ScoreType.RECENT: "recent",
        ScoreType.PINNED: "pinned",
    },
)

RANKED_STATUSES = WireTable(
    RankedStatus,
    {
        RankedStatus.GRAVEYARD: "graveyard",
        RankedStatus.WIP: "wip",
        RankedStatus.PENDING: "pending",
        RankedStatus.RANKED: "ranked",
        RankedStatus.APPROVED: "approved",
        RankedStatus.QUALIFIED: "qualified",
        RankedStatus.LOVED: "loved",
    },
)

GRADES = WireTable(
    Grade,
    {
        Grade.SILVER_SS: "XH",
        Grade.SS: "X",
        Grade.SILVER_S: "SH",
        Grade.S: "S",
        Grade.A: "A",
        Grade.B: "B",
        Grade.C: "C",
        Grade.D: "D",
        Grade.F: "F",
    },
)

_TABLES: Mapping[type[Enum], WireTable] = MappingProxyType(
    {table.enum: table for table in (RULESETS, BEATMAP_TYPES, SCORE_TYPES, RANKED_STATUSES, GRADES)}
)

for _table in _TABLES.values():
    _table.verify()
del _table


def to_wire(variant: Enum) -> str:
    """Resolve any supported enum variant to its wire string.

    Raises:
        ConfigurationError: If the variant's enum has no table or the variant is unmapped.
    """
    table = _TABLES.get(type(variant))
    if table is None:
        raise ConfigurationError(type(variant), [variant])
    return table[variant]
