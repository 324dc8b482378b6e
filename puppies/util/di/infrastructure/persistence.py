"""Persistence infrastructure providers."""

from collections.abc import Iterator

from dishka import Scope, provide
from sqlalchemy import Engine

from puppies.config import Settings
from puppies.domain.repository import ImageRepository, VoteRecordRepository
from puppies.persistence.database import init_store
from puppies.persistence.repository import SqliteVoteRecordRepository
from puppies.persistence.repository.inmemory import InMemoryImageRepository
from puppies.util.di.base import ProviderBase
from puppies.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLite."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> Iterator[Engine]:
        """Provide the vote store engine, disposed when the container closes."""
        engine = init_store(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        engine.dispose()

    @provide(scope=Scope.APP)
    def get_image_repository(self) -> ImageRepository:
        """Provide the process-wide image registry."""
        return InMemoryImageRepository()

    @provide(scope=Scope.APP)
    def get_vote_record_repository(self, engine: Engine) -> VoteRecordRepository:
        """Provide VoteRecord repository."""
        return SqliteVoteRecordRepository(engine)
