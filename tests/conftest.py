"""Core test fixtures for dice bot tests."""

from contextlib import contextmanager

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from scum_bot.database.models import Base, ChannelConfig, CharacterSheet


@pytest.fixture(scope="session")
def engine():
    """Create SQLite in-memory engine for fast tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture(scope="function")
def db_session(engine) -> Session:
    """Create a fresh database session for each test.

    Uses a transaction that rolls back after each test for isolation.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session_factory = sessionmaker(bind=connection)
    session = session_factory()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def session_factory(db_session: Session):
    """Session factory for the message handler, sharing the test session.

    Mirrors get_db_session but flushes instead of committing, so the
    test transaction can still be rolled back.
    """

    @contextmanager
    def factory():
        yield db_session
        db_session.flush()

    return factory


@pytest.fixture
def character_sheet(db_session: Session) -> CharacterSheet:
    """Create a character with Insight 2 (doctor 1, rig 2) in channel 100."""
    sheet = CharacterSheet(
        channel_id="100",
        user_id="42",
        attune=0,
        command=1,
        consort=0,
        doctor=1,
        hack=0,
        helm=2,
        rig=2,
        scramble=0,
        scrap=3,
        skulk=0,
        study=0,
        sway=None,
    )
    db_session.add(sheet)
    db_session.flush()
    return sheet


@pytest.fixture
def enabled_channel(db_session: Session) -> ChannelConfig:
    """Create an enabled, mention-only channel 100."""
    config = ChannelConfig(channel_id="100", enabled=True, dice_only=False)
    db_session.add(config)
    db_session.flush()
    return config

