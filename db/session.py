from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from config import settings
from db.base import Base
from db.models.company import Company  # noqa: F401 (metadata 등록)
from db.models.job import Job  # noqa: F401


def make_engine(database_url: str) -> AsyncEngine:
    """postgresql://... DSN을 SQLAlchemy asyncpg 드라이버 URL로 바꿔 엔진 생성"""
    for scheme in ("postgresql://", "postgres://"):
        if database_url.startswith(scheme):
            database_url = "postgresql+asyncpg://" + database_url.removeprefix(scheme)
            break
    return create_async_engine(database_url)


engine = make_engine(settings.database_url)


async def create_tables(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
