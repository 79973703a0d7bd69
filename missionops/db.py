# missionops/db.py
import os
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

# --- SQLAlchemy Base ---------------------------------------------------------
class Base(DeclarativeBase):
    pass

# --- Engine / Session --------------------------------------------------------
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "postgresql+psycopg://missionops:devpass@db:5432/missionops",
)


def make_engine(url: str = DATABASE_URL, **kw) -> Engine:
    # pool_pre_ping avoids "stale" connections on container restarts
    eng = create_engine(url, pool_pre_ping=True, future=True, **kw)
    if eng.dialect.name == "sqlite":
        # SQLite ignores FK constraints unless asked, per connection
        @event.listens_for(eng, "connect")
        def _fk_on(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()
    return eng


def make_sessionmaker(eng: Engine) -> sessionmaker:
    return sessionmaker(
        bind=eng,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


engine = make_engine()
SessionLocal = make_sessionmaker(engine)

# FastAPI dependency
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create every table registered on Base.metadata (dev/test only; prod uses alembic)."""
    import missionops.models  # noqa: F401  registers the tables

    Base.metadata.create_all(bind=bind or engine)

# Used by the /health route
def healthcheck() -> dict:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {"status": "ok"}
