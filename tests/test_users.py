from __future__ import annotations

import asyncio

import msgspec
import pytest
from pytest_mock import MockerFixture

from core import OsuClient
from tests import payloads
from tests.conftest import FakeOsuAPI
from utilities.enums import BeatmapType, Ruleset, ScoreType
from utilities.errors import APIHTTPError, DeserializationError, PreconditionError
from utilities.models import BeatmapPlaycount, BeatmapSetExtended, KudosuHistoryEntry, Score, User

pytestmark = pytest.mark.integration


class TestGetUser:
    async def test_by_id(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2", payloads.user(statistics=payloads.statistics()))

        user = await osu.users.get_user(2)

        assert isinstance(user, User)
        assert user.username == "peppy"
        assert user.statistics.play_count == 500
        assert fake_api.last.path == "/users/2"
        assert fake_api.last.raw_query == ""

    async def test_by_username_with_ruleset(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/@peppy/fruits", payloads.user(playmode="fruits"))

        user = await osu.users.get_user("peppy", Ruleset.FRUITS)

        assert user is not None
        assert user.ruleset is Ruleset.FRUITS
        assert fake_api.last.path == "/users/@peppy/fruits"

    async def test_unknown_user_is_none(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/9999999999", status=404, body=b'{"error":null}')

        assert await osu.users.get_user(9999999999) is None

    async def test_malformed_body_is_a_deserialization_error(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2", status=200, body=b'{"id": 2, "username": ')

        with pytest.raises(DeserializationError):
            await osu.users.get_user(2)

    async def test_missing_required_field_is_not_defaulted(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        data = payloads.user()
        del data["is_bot"]
        fake_api.add("/users/2", data)

        with pytest.raises(DeserializationError, match="is_bot"):
            await osu.users.get_user(2)

    async def test_server_error_surfaces_unmodified(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2", status=500, body=b'{"error":"rate limited"}')

        with pytest.raises(APIHTTPError) as exc_info:
            await osu.users.get_user(2)

        assert exc_info.value.status == 500
        assert exc_info.value.body == b'{"error":"rate limited"}'

    @pytest.mark.parametrize("user", ["", True])
    async def test_invalid_identifier(self, osu: OsuClient, user: object) -> None:
        with pytest.raises(PreconditionError):
            osu.users.get_user(user)  # type: ignore[arg-type]

    async def test_concurrent_lookups_are_independent(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        for i in range(1, 11):
            fake_api.add(f"/users/{i}", payloads.user(id=i, username=f"user{i}"))

        users = await asyncio.gather(*(osu.users.get_user(i) for i in range(1, 13)))

        assert [u.id if u else None for u in users] == [*range(1, 11), None, None]


class TestGetUsers:
    async def test_batch(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users", {"users": [payloads.user(id=1), payloads.user(id=2)]})

        users = await osu.users.get_users([1, 2])

        assert [u.id for u in users] == [1, 2]
        assert fake_api.last.query == [("ids[]", "1"), ("ids[]", "2")]

    @pytest.mark.parametrize("ids", [[], list(range(51))])
    async def test_id_count_is_checked_before_dispatch(self, osu: OsuClient, fake_api: FakeOsuAPI, ids: list[int]) -> None:
        with pytest.raises(PreconditionError):
            osu.users.get_users(ids)
        assert fake_api.requests == []


class TestKudosu:
    async def test_limit_without_offset(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/kudosu", [payloads.kudosu_entry(), payloads.kudosu_entry(id=2, giver=None)])

        history = await osu.users.get_kudosu_history(2, limit=5, offset=None)

        assert [type(e) for e in history] == [KudosuHistoryEntry, KudosuHistoryEntry]
        assert history[1].giver is None
        assert fake_api.last.raw_query == "limit=5"
        assert "offset" not in fake_api.last.raw_query

    async def test_zero_values_are_sent(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/kudosu", [])

        assert await osu.users.get_kudosu_history(2, limit=0, offset=0) == []
        assert fake_api.last.query == [("limit", "0"), ("offset", "0")]

    async def test_no_parameters(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/kudosu", [])
        await osu.users.get_kudosu_history(2)
        assert fake_api.last.raw_query == ""

    async def test_unknown_user_listing_is_an_error(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        with pytest.raises(APIHTTPError) as exc_info:
            await osu.users.get_kudosu_history(404)
        assert exc_info.value.status == 404


class TestUserBeatmaps:
    async def test_listing_uses_wire_segment(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/beatmapsets/graveyard", [payloads.beatmapset_extended(status="graveyard", ranked=-2)])

        beatmapsets = await osu.users.get_user_beatmaps(2, BeatmapType.GRAVEYARD, limit=10)

        assert isinstance(beatmapsets[0], BeatmapSetExtended)
        assert fake_api.last.query == [("limit", "10")]

    async def test_most_played_is_rejected_before_any_request(
        self, osu: OsuClient, fake_api: FakeOsuAPI, mocker: MockerFixture
    ) -> None:
        dispatch = mocker.spy(osu.http, "dispatch")

        with pytest.raises(PreconditionError, match="get_user_most_played"):
            osu.users.get_user_beatmaps(2, BeatmapType.MOST_PLAYED)

        dispatch.assert_not_called()
        assert fake_api.requests == []

    async def test_most_played(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add(
            "/users/2/beatmapsets/most_played",
            [{"beatmap_id": 75, "count": 3, "beatmap": payloads.beatmap(), "beatmapset": payloads.beatmapset()}],
        )

        entries = await osu.users.get_user_most_played(2, offset=5)

        assert isinstance(entries[0], BeatmapPlaycount)
        assert entries[0].count == 3
        assert fake_api.last.query == [("offset", "5")]

    async def test_most_played_shape_does_not_fit_beatmapsets(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/beatmapsets/ranked", [{"beatmap_id": 75, "count": 3}])

        with pytest.raises(DeserializationError) as exc_info:
            await osu.users.get_user_beatmaps(2, BeatmapType.RANKED)
        assert exc_info.value.path == "$[0]"


class TestUserScores:
    async def test_recent_with_fails(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/scores/recent", [payloads.score(passed=False, rank="F", pp=None)])

        scores = await osu.users.get_user_scores(2, ScoreType.RECENT, Ruleset.MANIA, include_fails=True, limit=1)

        assert isinstance(scores[0], Score)
        assert scores[0].pp is None
        assert scores[0].beatmapset is msgspec.UNSET
        assert fake_api.last.query == [("mode", "mania"), ("include_fails", "true"), ("limit", "1")]

    async def test_false_flags_are_sent(self, osu: OsuClient, fake_api: FakeOsuAPI) -> None:
        fake_api.add("/users/2/scores/best", [])
        await osu.users.get_user_scores(2, ScoreType.BEST, legacy_only=False)
        assert fake_api.last.query == [("legacy_only", "false")]
