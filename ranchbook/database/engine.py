import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

_SQLITE_BUSY_TIMEOUT_SECONDS = 30
_SQLITE_BUSY_TIMEOUT_MS = _SQLITE_BUSY_TIMEOUT_SECONDS * 1000


def _normalize_db_url(url: str) -> str:
    u = url.strip()
    # Hosted Postgres providers still hand out postgres:// URLs
    if u.startswith("postgres://"):
        u = u.replace("postgres://", "postgresql+psycopg2://", 1)
    return u


def build_engine(database_url: str) -> Engine:
    database_url = _normalize_db_url(database_url)
    db_url = make_url(database_url)
    is_sqlite = db_url.get_backend_name() == "sqlite"
    is_sqlite_memory = False
    if is_sqlite:
        is_sqlite_memory = db_url.database in (None, "", ":memory:")
        if not is_sqlite_memory and db_url.query.get("mode") == "memory":
            is_sqlite_memory = True

    connect_args = {}
    engine_kwargs: dict[str, object] = dict(pool_pre_ping=True)
    if is_sqlite:
        connect_args = {"check_same_thread": False, "timeout": _SQLITE_BUSY_TIMEOUT_SECONDS}
        if is_sqlite_memory:
            engine_kwargs.update(poolclass=StaticPool)

    engine = create_engine(database_url, connect_args=connect_args, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            try:
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.execute(f"PRAGMA busy_timeout={_SQLITE_BUSY_TIMEOUT_MS}")
                if not is_sqlite_memory:
                    try:
                        cursor.execute("PRAGMA journal_mode=WAL")
                        cursor.execute("PRAGMA synchronous=NORMAL")
                    except sqlite3.DatabaseError:
                        pass
            finally:
                cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    from ranchbook.database.base import Base
    from ranchbook.models import import_all_models

    import_all_models()
    Base.metadata.create_all(bind=engine)


__all__ = ["build_engine", "create_schema"]
