from __future__ import annotations

from typing import TYPE_CHECKING

from utilities.base import BaseEndpoints
from utilities.errors import PreconditionError
from utilities.models import BeatmapExtended, BeatmapSetExtended
from utilities.route import Route

if TYPE_CHECKING:
    from utilities._types import Response

__all__ = ("BeatmapEndpoints",)


class BeatmapEndpoints(BaseEndpoints):
    """Endpoints under ``beatmaps/`` and ``beatmapsets/``."""

    def get_beatmap(self, beatmap_id: int) -> Response[BeatmapExtended | None]:
        """Fetch a beatmap by ID.

        Returns:
            Response[BeatmapExtended | None]: The beatmap, or None if it does not exist.
        """
        r = Route("/beatmaps/{beatmap_id}", beatmap_id=beatmap_id, response_model=BeatmapExtended)
        return self._request(r, allow_missing=True)

    def lookup_beatmap(
        self,
        checksum: str | None = None,
        filename: str | None = None,
        id: int | None = None,
    ) -> Response[BeatmapExtended | None]:
        """Look up a beatmap by checksum, filename or ID.

        Args:
            checksum (str | None): The MD5 checksum of the .osu file.
            filename (str | None): The .osu filename.
            id (int | None): The beatmap ID.

        Returns:
            Response[BeatmapExtended | None]: The matching beatmap, or None.

        Raises:
            PreconditionError: If no lookup key is given.
        """
        if checksum is None and filename is None and id is None:
            raise PreconditionError("lookup_beatmap() needs a checksum, filename or id.")
        r = Route(
            "/beatmaps/lookup",
            params={"checksum": checksum, "filename": filename, "id": id},
            response_model=BeatmapExtended,
        )
        return self._request(r, allow_missing=True)

    def get_beatmapset(self, beatmapset_id: int) -> Response[BeatmapSetExtended | None]:
        """Fetch a beatmapset by ID, including its beatmaps."""
        r = Route("/beatmapsets/{beatmapset_id}", beatmapset_id=beatmapset_id, response_model=BeatmapSetExtended)
        return self._request(r, allow_missing=True)
