"""Unit tests for the vote use cases."""

import pytest

from puppies.application.usecase.image import GetImageUseCase, ListImagesUseCase
from puppies.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    FlushVotesUseCase,
)
from puppies.domain.error import NotFoundError, VoteLimitError
from puppies.domain.repository import ImageRepository, VoteRecordRepository
from puppies.domain.value import MAX_VOTES, ImageId, VoteDirection
from tests.conftest import make_image
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCastVote:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_returns_tally(self, unit_env):
        image_repo = await unit_env.get(ImageRepository)
        use_case = await unit_env.get(CastVoteUseCase)
        image_repo.save(make_image("1"))

        response = await use_case.execute(
            CastVoteRequest(image_id="1", direction=VoteDirection.UP)
        )

        assert response.model_dump(by_alias=True) == {
            "id": "1",
            "upvotes": 1,
            "downvotes": 0,
        }

    @pytest.mark.asyncio
    async def test_downvote_returns_tally(self, unit_env):
        image_repo = await unit_env.get(ImageRepository)
        use_case = await unit_env.get(CastVoteUseCase)
        image_repo.save(make_image("1", up_votes=2))

        response = await use_case.execute(
            CastVoteRequest(image_id="1", direction=VoteDirection.DOWN)
        )

        assert (response.up_votes, response.down_votes) == (2, 1)

    @pytest.mark.asyncio
    async def test_unknown_image_raises(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(image_id="missing", direction=VoteDirection.UP)
            )

    @pytest.mark.asyncio
    async def test_vote_at_limit_raises_and_keeps_tally(self, unit_env):
        image_repo = await unit_env.get(ImageRepository)
        use_case = await unit_env.get(CastVoteUseCase)
        image_repo.save(make_image("1", up_votes=MAX_VOTES, down_votes=4))

        with pytest.raises(VoteLimitError):
            await use_case.execute(
                CastVoteRequest(image_id="1", direction=VoteDirection.UP)
            )

        assert image_repo.find_by_id(ImageId("1")).tally.as_tuple() == (MAX_VOTES, 4)


class TestFlushVotes:
    """Tests for FlushVotesUseCase."""

    @pytest.mark.asyncio
    async def test_flush_reports_rows_written(self, unit_env):
        image_repo = await unit_env.get(ImageRepository)
        vote_repo = await unit_env.get(VoteRecordRepository)
        use_case = await unit_env.get(FlushVotesUseCase)
        image_repo.save(make_image("1", up_votes=1))
        image_repo.save(make_image("2"))

        response = await use_case.execute()

        assert response.flushed == 2
        assert len(vote_repo.load_by_ids([ImageId("1"), ImageId("2")])) == 2


class TestImageLookups:
    """Tests for GetImageUseCase and ListImagesUseCase."""

    @pytest.mark.asyncio
    async def test_get_returns_registered_image(self, unit_env):
        image_repo = await unit_env.get(ImageRepository)
        use_case = await unit_env.get(GetImageUseCase)
        image_repo.save(make_image("1", title="Pug"))

        image = await use_case.execute("1")

        assert image.title == "Pug"

    @pytest.mark.asyncio
    async def test_get_unknown_raises(self, unit_env):
        use_case = await unit_env.get(GetImageUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute("missing")

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, unit_env):
        image_repo = await unit_env.get(ImageRepository)
        use_case = await unit_env.get(ListImagesUseCase)
        for image_id in ["3", "1", "2"]:
            image_repo.save(make_image(image_id))

        images = await use_case.execute()

        assert [i.id for i in images] == ["3", "1", "2"]
