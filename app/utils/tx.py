from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession

@asynccontextmanager
async def maybe_begin(session: AsyncSession):
    """
    Reuse the session's transaction when one is already open,
    otherwise open (and commit on exit) a new one.
    """
    if session.in_transaction():
        yield
    else:
        async with session.begin():
            yield
