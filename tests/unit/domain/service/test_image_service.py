"""Unit tests for ImageService."""

import pytest

from puppies.domain.model import SearchResponse
from puppies.domain.repository import ImageRepository
from puppies.domain.service import ImageService
from puppies.domain.value import ImageId, SaveResult, Tally
from tests.conftest import make_image, make_photo
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestNewImage:
    """Tests for new_image."""

    @pytest.mark.asyncio
    async def test_new_image_uses_thumbnail_and_large_urls(self, unit_env):
        """Image URLs come from the 't' and 'b' sizes, tallies start at zero."""
        image_service = await unit_env.get(ImageService)
        photo = make_photo("42", title="Corgi")

        image = image_service.new_image(photo)

        assert image.id == "42"
        assert image.title == "Corgi"
        assert image.thumbnail == photo.url("t")
        assert image.large == photo.url("b")
        assert image.tally.as_tuple() == (0, 0)


class TestSave:
    """Tests for save and register_photos."""

    @pytest.mark.asyncio
    async def test_save_twice_keeps_one_entry_with_first_tally(self, unit_env):
        image_service = await unit_env.get(ImageService)

        first = image_service.save(make_image("1", up_votes=3))
        second = image_service.save(make_image("1", up_votes=10))

        assert first == SaveResult.CREATED
        assert second == SaveResult.EXISTS
        assert len(image_service.all()) == 1
        assert image_service.find(ImageId("1")).up_votes == 3

    @pytest.mark.asyncio
    async def test_register_photos_returns_only_new_ids(self, unit_env):
        image_service = await unit_env.get(ImageService)
        image_service.register_photos([make_photo("1"), make_photo("2")])

        created = image_service.register_photos(
            [make_photo("2"), make_photo("3"), make_photo("3")]
        )

        assert created == ["3"]
        assert [i.id for i in image_service.all()] == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, unit_env):
        image_service = await unit_env.get(ImageService)

        assert image_service.find(ImageId("nope")) is None


class TestSummarize:
    """Tests for summarize."""

    @pytest.mark.asyncio
    async def test_summarize_converts_pagination_and_lists_registry(self, unit_env):
        image_service = await unit_env.get(ImageService)
        image_repo = await unit_env.get(ImageRepository)
        image_repo.save(make_image("1"))
        image_repo.save(make_image("2"))

        summary = image_service.summarize(
            SearchResponse(page="2", pages="10", per_page="20", total="193")
        )

        assert summary is not None
        assert (summary.page, summary.pages, summary.per_page, summary.total) == (
            2,
            10,
            20,
            193,
        )
        assert [i.id for i in summary.images] == ["1", "2"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["page", "pages", "per_page", "total"])
    async def test_non_numeric_field_returns_none(self, unit_env, field):
        """Any pagination field failing conversion yields no summary."""
        image_service = await unit_env.get(ImageService)
        values = {"page": "1", "pages": "1", "per_page": "1", "total": "1"}
        values[field] = "abc"

        assert image_service.summarize(SearchResponse(**values)) is None

    @pytest.mark.asyncio
    async def test_summary_serializes_perpage_key(self, unit_env):
        image_service = await unit_env.get(ImageService)

        summary = image_service.summarize(
            SearchResponse(page="1", pages="1", per_page="5", total="5")
        )

        assert summary.model_dump(by_alias=True)["perpage"] == 5


class TestRegisterWithStoredTallies:
    """Tests for unregistered_ids and register_photos with stored tallies."""

    @pytest.mark.asyncio
    async def test_unregistered_ids_skips_known_and_duplicates(self, unit_env):
        image_service = await unit_env.get(ImageService)
        image_service.save(make_image("1"))

        ids = image_service.unregistered_ids(
            [make_photo("1"), make_photo("2"), make_photo("2"), make_photo("3")]
        )

        assert ids == ["2", "3"]

    @pytest.mark.asyncio
    async def test_new_images_start_from_stored_tally(self, unit_env):
        image_service = await unit_env.get(ImageService)

        image_service.register_photos(
            [make_photo("1"), make_photo("2")],
            {ImageId("1"): Tally(up_votes=4, down_votes=1)},
        )

        assert image_service.find(ImageId("1")).tally.as_tuple() == (4, 1)
        assert image_service.find(ImageId("2")).tally.as_tuple() == (0, 0)

    @pytest.mark.asyncio
    async def test_stored_tally_does_not_override_registered_image(self, unit_env):
        image_service = await unit_env.get(ImageService)
        image_service.save(make_image("1", up_votes=9))

        image_service.register_photos(
            [make_photo("1")], {ImageId("1"): Tally(up_votes=1)}
        )

        assert image_service.find(ImageId("1")).up_votes == 9
