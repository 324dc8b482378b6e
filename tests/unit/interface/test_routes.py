"""Unit tests for API error mapping."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from puppies.adapter.flickr import FlickrError, MockFlickrClient
from puppies.domain.error import VoteLimitError
from puppies.domain.model import PuppiesSummary, SearchResponse
from puppies.domain.service import ImageService
from puppies.domain.value import MAX_VOTES
from puppies.interface.api.app import create_app
from puppies.persistence.error import StorageOperationError
from puppies.persistence.repository.inmemory import (
    InMemoryImageRepository,
    InMemoryVoteRecordRepository,
)
from tests.di import build_test_container


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create test client with an all-mock container."""
    monkeypatch.setenv("DATABASE__PATH", str(tmp_path / "puppies.sqlite"))
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("PERSISTENCE__FLUSH_ON_SHUTDOWN", "false")
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


class TestSearchErrors:
    """Search failures map to gateway errors."""

    def test_flickr_failure_is_502(self, client, monkeypatch):
        async def failing_search(self, page: int = 1):
            raise FlickrError("100", "Invalid API Key")

        monkeypatch.setattr(MockFlickrClient, "search", failing_search)

        response = client.get("/puppies")

        assert response.status_code == 502
        assert "Invalid API Key" in response.json()["detail"]

    def test_non_numeric_pagination_is_502(self, client, monkeypatch):
        async def bad_pagination(self, page: int = 1):
            return SearchResponse(page="x", pages="1", per_page="1", total="1")

        monkeypatch.setattr(MockFlickrClient, "search", bad_pagination)

        response = client.get("/puppies")

        assert response.status_code == 502

    def test_vote_store_failure_is_503(self, client, monkeypatch):
        def failing_load(self, image_ids):
            raise StorageOperationError("load_by_ids", image_ids, "disk I/O error")

        monkeypatch.setattr(InMemoryVoteRecordRepository, "load_by_ids", failing_load)

        response = client.get("/puppies")

        assert response.status_code == 503


class TestFlushErrors:
    """Flush failures map to service unavailable."""

    def test_failed_flush_is_503(self, client, monkeypatch):
        def failing_insert(self, images):
            raise StorageOperationError("bulk_insert", [i.id for i in images], "locked")

        monkeypatch.setattr(InMemoryVoteRecordRepository, "bulk_insert", failing_insert)
        client.get("/puppies")

        response = client.post("/votes/flush")

        assert response.status_code == 503
        assert "bulk_insert" in response.json()["detail"]


class TestVoteErrors:
    """Vote endpoint error mapping."""

    def test_unknown_direction_is_422(self, client):
        client.get("/puppies")

        response = client.post("/images/101/vote", json={"direction": "sideways"})

        assert response.status_code == 422

    def test_vote_at_limit_is_409(self, client, monkeypatch):
        def saturated(self, image_id, direction):
            raise VoteLimitError(direction.value, MAX_VOTES)

        monkeypatch.setattr(InMemoryImageRepository, "update_tally", saturated)
        client.get("/puppies")

        response = client.post("/images/101/vote", json={"direction": "up"})

        assert response.status_code == 409
        assert "limit" in response.json()["detail"]


class TestUnexpectedErrors:
    """Errors that are not provider failures are not reported as 502."""

    def test_model_validation_error_is_not_mapped_to_502(self, client, monkeypatch):
        def broken_summary(self, search):
            return PuppiesSummary(page="one", pages=1, per_page=1, total=1)

        monkeypatch.setattr(ImageService, "summarize", broken_summary)

        with pytest.raises(ValidationError):
            client.get("/puppies")
