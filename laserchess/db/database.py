"""Generate database sessions"""

from typing import Iterator

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from laserchess.core.config import DATABASE_URL
from laserchess.db.schema import Base


def create_session_factory(database_url: str = DATABASE_URL) -> sessionmaker[Session]:
    """
    Engine + session factory, with all tables created.

    An in-memory SQLite database only lives as long as its connection:
    every session has to share that single connection (StaticPool).
    """
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url)

    Base.metadata.create_all(bind=engine)
    return sessionmaker(autoflush=False, bind=engine)


def get_db(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
