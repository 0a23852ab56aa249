from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from utilities.base import BaseEndpoints
from utilities.enums import Ruleset
from utilities.models import BeatmapScores, BeatmapUserScore, Score
from utilities.route import Route

if TYPE_CHECKING:
    from utilities._types import Response

__all__ = ("ScoreEndpoints",)


class ScoreEndpoints(BaseEndpoints):
    """Beatmap leaderboard endpoints."""

    def get_beatmap_scores(
        self,
        beatmap_id: int,
        ruleset: Ruleset | None = None,
        mods: Sequence[str] | None = None,
        limit: int | None = None,
    ) -> Response[list[Score]]:
        """Fetch the top scores on a beatmap.

        Args:
            beatmap_id (int): The beatmap ID.
            ruleset (Ruleset | None): The ruleset of the leaderboard.
            mods (Sequence[str] | None): Only scores with exactly these mod acronyms.
            limit (int | None): Maximum number of scores.

        Returns:
            Response[list[Score]]: The leaderboard, best first.
        """
        r = Route(
            "/beatmaps/{beatmap_id}/scores",
            beatmap_id=beatmap_id,
            params={"mode": ruleset, "mods[]": mods, "limit": limit},
            response_model=BeatmapScores,
        )
        return self._then(self._request(r), lambda data: data.scores)

    def get_user_beatmap_score(
        self,
        beatmap_id: int,
        user_id: int,
        ruleset: Ruleset | None = None,
        mods: Sequence[str] | None = None,
    ) -> Response[BeatmapUserScore | None]:
        """Fetch a user's best score on a beatmap.

        Returns:
            Response[BeatmapUserScore | None]: The score and its leaderboard position, or None
            if the user has no score on the beatmap.
        """
        r = Route(
            "/beatmaps/{beatmap_id}/scores/users/{user_id}",
            beatmap_id=beatmap_id,
            user_id=user_id,
            params={"mode": ruleset, "mods[]": mods},
            response_model=BeatmapUserScore,
        )
        return self._request(r, allow_missing=True)
