# Third-party imports
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine as sa_create_async_engine

# Local application imports
from bookclub.settings import settings


def create_async_engine(url: str | None = None, **kwargs) -> AsyncEngine:
    """
    Build an async engine for the configured database.

    SQLite connections get a generous busy timeout so concurrent writers
    queue on the database lock instead of failing immediately.
    """
    url = url or settings.SQLALCHEMY_ASYNC_DATABASE_URI
    if url.startswith("sqlite"):
        connect_args = kwargs.setdefault("connect_args", {})
        connect_args.setdefault("timeout", 30)
    kwargs.setdefault("echo", settings.SQL_ECHO)
    return sa_create_async_engine(url, future=True, **kwargs)


# Asynchronous Engine
async_engine = create_async_engine()
