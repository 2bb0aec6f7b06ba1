import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from models.index import Base, engine, models

logger = logging.getLogger(__name__)


async def init_db(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ready: %s", ", ".join(sorted(models)))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db())
    print("✅ Database initialized!")
