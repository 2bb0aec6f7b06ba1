from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config.database import get_db
from stores.interfaces import CheckinStore
from stores.sqlalchemy_store import SqlAlchemyCheckinStore


async def get_store(db: AsyncSession = Depends(get_db)) -> CheckinStore:
    """
    Per-request store bound to the request's session. Routes hand it to the
    controllers, which hand it to the services.
    """
    return SqlAlchemyCheckinStore(db)
