"""Integration tests for flushing and rehydrating against SQLite."""

import pytest

from puppies.domain.repository import ImageRepository, VoteRecordRepository
from puppies.domain.service import ReconcileService, VoteService
from puppies.domain.value import ImageId
from tests.conftest import make_image
from tests.harness import create_env_fixture

# Integration test fixture - real SQLite file under tmp_path
integration_env = create_env_fixture(unmock={"persistence"})


class TestReconcileWithSqlite:
    """Flush then rehydrate through the real vote store."""

    @pytest.mark.asyncio
    async def test_flush_then_rehydrate_restores_votes(self, integration_env):
        reconcile_service = await integration_env.get(ReconcileService)
        vote_service = await integration_env.get(VoteService)
        image_repo = await integration_env.get(ImageRepository)
        reconcile_service.initialize_schema(cold_start=True)
        image_repo.save(make_image("1"))
        vote_service.upvote(ImageId("1"))
        vote_service.upvote(ImageId("1"))
        vote_service.downvote(ImageId("1"))

        assert reconcile_service.flush() == 1

        # Simulate a fresh registry entry for the same photo
        image_repo.restore_tally(ImageId("1"), make_image("1").tally)
        restored = reconcile_service.rehydrate([ImageId("1")])

        assert [i.tally.as_tuple() for i in restored] == [(2, 1)]
        assert image_repo.find_by_id(ImageId("1")).tally.as_tuple() == (2, 1)

    @pytest.mark.asyncio
    async def test_warm_start_keeps_flushed_rows(self, integration_env):
        reconcile_service = await integration_env.get(ReconcileService)
        vote_repo = await integration_env.get(VoteRecordRepository)
        reconcile_service.initialize_schema(cold_start=True)
        vote_repo.bulk_insert([make_image("7", down_votes=3)])

        reconcile_service.initialize_schema(cold_start=False)

        assert vote_repo.load_by_ids([ImageId("7")])[0].down_votes == 3
