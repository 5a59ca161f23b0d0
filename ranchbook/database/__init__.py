from ranchbook.database.base import Base
from ranchbook.database.engine import build_engine, create_schema
from ranchbook.database.session import build_session_factory, get_db

__all__ = ["Base", "build_engine", "build_session_factory", "create_schema", "get_db"]
