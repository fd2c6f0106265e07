# Standard library imports
from collections.abc import AsyncGenerator

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

# Local application imports
from bookclub.core.db.create_async_engine import async_engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory for an engine.

    Objects stay loaded after commit; services return them to the API
    layer after committing.
    """
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# Asynchronous Session Factory
AsyncSessionLocal = build_session_factory(async_engine)


# Dependency to get an async session (e.g., for FastAPI)
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
