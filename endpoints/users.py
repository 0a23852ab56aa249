from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import msgspec

from utilities.base import BaseEndpoints
from utilities.enums import BeatmapType, Ruleset, ScoreType
from utilities.errors import PreconditionError
from utilities.models import BeatmapPlaycount, BeatmapSetExtended, KudosuHistoryEntry, Score, User
from utilities.route import Route

if TYPE_CHECKING:
    from utilities._types import Response

__all__ = ("UserEndpoints",)


class _Users(msgspec.Struct):
    users: list[User]


def _user_identifier(user: int | str) -> str:
    if isinstance(user, bool):
        raise PreconditionError("A user must be identified by an integer ID or a username.")
    if isinstance(user, int):
        return str(user)
    if not user:
        raise PreconditionError("Username must not be empty.")
    return f"@{user}"


class UserEndpoints(BaseEndpoints):
    """Endpoints under ``users/``.

    API docs: https://osu.ppy.sh/docs/index.html#users
    """

    def get_user(self, user: int | str, ruleset: Ruleset | None = None) -> Response[User | None]:
        """Fetch a single user by ID or username.

        Args:
            user (int | str): The user ID, or the username (sent as ``@username``).
            ruleset (Ruleset | None): The ruleset to return statistics for. Defaults to the user's own.

        Returns:
            Response[User | None]: The user, or None if no such user exists.
        """
        r = Route(
            "/users/{user}/{mode}",
            user=_user_identifier(user),
            mode=ruleset,
            response_model=User,
        )
        return self._request(r, allow_missing=True)

    def get_users(self, ids: Iterable[int]) -> Response[list[User]]:
        """Fetch up to 50 users by ID in one request.

        Args:
            ids (Iterable[int]): The user IDs.

        Returns:
            Response[list[User]]: The users that exist, in the order returned by the API.
        """
        ids = list(ids)
        if not ids:
            raise PreconditionError("At least one user ID is required.")
        if len(ids) > 50:
            raise PreconditionError(f"At most 50 users can be fetched at once, got {len(ids)}.")
        r = Route("/users", params={"ids[]": ids}, response_model=_Users)
        return self._then(self._request(r), lambda data: data.users)

    def get_kudosu_history(
        self, user_id: int, limit: int | None = None, offset: int | None = None
    ) -> Response[list[KudosuHistoryEntry]]:
        """Fetch the kudosu history of a user.

        Args:
            user_id (int): The user ID.
            limit (int | None): Maximum number of entries.
            offset (int | None): Offset into the history.

        Returns:
            Response[list[KudosuHistoryEntry]]: The history entries.
        """
        r = Route(
            "/users/{user_id}/kudosu",
            user_id=user_id,
            params={"limit": limit, "offset": offset},
            response_model=list[KudosuHistoryEntry],
        )
        return self._request(r)

    def get_user_beatmaps(
        self,
        user_id: int,
        type: BeatmapType,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Response[list[BeatmapSetExtended]]:
        """Fetch a user's beatmapsets of the given category.

        Most played beatmaps come back as playcounts rather than beatmapsets, so they
        have their own method.

        Args:
            user_id (int): The user ID.
            type (BeatmapType): The category, anything but ``BeatmapType.MOST_PLAYED``.
            limit (int | None): Maximum number of beatmapsets.
            offset (int | None): Offset into the listing.

        Returns:
            Response[list[BeatmapSetExtended]]: The beatmapsets.

        Raises:
            PreconditionError: If ``type`` is ``BeatmapType.MOST_PLAYED``.
        """
        if type is BeatmapType.MOST_PLAYED:
            raise PreconditionError("Use get_user_most_played() for most played beatmaps; the response type differs.")
        r = Route(
            "/users/{user_id}/beatmapsets/{type}",
            user_id=user_id,
            type=type,
            params={"limit": limit, "offset": offset},
            response_model=list[BeatmapSetExtended],
        )
        return self._request(r)

    def get_user_most_played(
        self, user_id: int, limit: int | None = None, offset: int | None = None
    ) -> Response[list[BeatmapPlaycount]]:
        """Fetch a user's most played beatmaps.

        Args:
            user_id (int): The user ID.
            limit (int | None): Maximum number of entries.
            offset (int | None): Offset into the listing.

        Returns:
            Response[list[BeatmapPlaycount]]: Beatmaps with the user's playcount on each.
        """
        r = Route(
            "/users/{user_id}/beatmapsets/{type}",
            user_id=user_id,
            type=BeatmapType.MOST_PLAYED,
            params={"limit": limit, "offset": offset},
            response_model=list[BeatmapPlaycount],
        )
        return self._request(r)

    def get_user_scores(  # noqa: PLR0913
        self,
        user_id: int,
        type: ScoreType,
        ruleset: Ruleset | None = None,
        include_fails: bool | None = None,
        legacy_only: bool | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Response[list[Score]]:
        """Fetch a user's scores of the given type.

        Args:
            user_id (int): The user ID.
            type (ScoreType): Best, firsts, recent or pinned scores.
            ruleset (Ruleset | None): Restrict to a ruleset. Defaults to the user's own.
            include_fails (bool | None): Include failed plays (recent scores only).
            legacy_only (bool | None): Only return scores set on osu!(stable).
            limit (int | None): Maximum number of scores.
            offset (int | None): Offset into the listing.

        Returns:
            Response[list[Score]]: The scores.
        """
        r = Route(
            "/users/{user_id}/scores/{type}",
            user_id=user_id,
            type=type,
            params={
                "mode": ruleset,
                "include_fails": include_fails,
                "legacy_only": legacy_only,
                "limit": limit,
                "offset": offset,
            },
            response_model=list[Score],
        )
        return self._request(r)
