# Local application imports
from bookclub.core.db.create_async_engine import async_engine, create_async_engine
from bookclub.core.db.get_async_session import AsyncSessionLocal, build_session_factory, get_async_session
from bookclub.core.db.store_errors import store_errors

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "build_session_factory",
    "create_async_engine",
    "get_async_session",
    "store_errors",
]
