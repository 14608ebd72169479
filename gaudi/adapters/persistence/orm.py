# gaudi/adapters/persistence/orm.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Float, Integer, String, create_engine
from sqlalchemy.orm import Mapped, Session, declarative_base, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class RoomRecord(Base):
    """
    Storage row for a Room.
    The domain entity lives in gaudi.core.domain.models; this class never
    leaves the persistence adapter.
    """

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(36), unique=True, index=True, nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)


# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def build_session_factory(database_url: str, echo: bool = False) -> sessionmaker:
    """
    Creates the engine, the tables, and returns a session factory bound to it.
    """
    connect_args: dict[str, object] = {}
    engine_kwargs: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        # SQLite needs a special flag when shared between threads.
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # Keep a single connection, or every session gets its own empty database.
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(
        database_url,
        echo=echo,
        future=True,
        connect_args=connect_args,
        **engine_kwargs,
    )
    Base.metadata.create_all(engine)

    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


@contextmanager
def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Context manager running one unit of work:

        with session_scope(factory) as session:
            ...
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["Base", "RoomRecord", "build_session_factory", "session_scope"]
