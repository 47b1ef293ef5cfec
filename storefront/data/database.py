# storefront/data/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from storefront.utils.logging import get_logger
from storefront.utils.retry import db_retry
from storefront.utils.settings import DATABASE_URL, DB_CONNECT_TIMEOUT

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def make_engine(url: str | None = None, **kwargs) -> Engine:
    url = url or DATABASE_URL
    if url.startswith("postgresql"):
        kwargs.setdefault("connect_args", {"connect_timeout": DB_CONNECT_TIMEOUT})
    return create_engine(url, pool_pre_ping=True, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def get_db(request: Request) -> Iterator[Session]:
    """One session per request, taken from the factory the app was built with."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@db_retry()
def _create_tables(engine: Engine):
    # register every model in Base.metadata before create_all
    import storefront.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def init_db(engine: Engine, seed: bool = True):
    _create_tables(engine)
    logger.info(f"Database ready, tables: {sorted(Base.metadata.tables.keys())}")

    if seed:
        from storefront.data.seed import seed_catalog

        with make_session_factory(engine)() as db:
            seed_catalog(db)
