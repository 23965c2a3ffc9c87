# utils/database.py

import logging
from decimal import Decimal
from typing import Any

import asyncpg

from config import settings

pool: asyncpg.Pool | None = None

logger = logging.getLogger(__name__)


def get_pool() -> asyncpg.Pool:
    if pool is None:
        raise RuntimeError("Database pool is not initialized")
    return pool


async def init_db_pool(dsn: str | None = None) -> None:
    global pool
    if pool is not None:
        return
    pool = await asyncpg.create_pool(
        dsn=dsn or settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=60,
    )
    logger.info("DB pool 생성 완료 (min=%s, max=%s)", settings.db_pool_min_size, settings.db_pool_max_size)


async def close_db_pool() -> None:
    global pool
    if pool:
        await pool.close()
        pool = None


def row_to_dict(row: asyncpg.Record) -> dict[str, Any]:
    """
    asyncpg Record -> dict 변환
    - NUMERIC(Decimal)은 정밀도 유지를 위해 문자열로 전달 ("0.091")
    """
    return {
        key: str(value) if isinstance(value, Decimal) else value
        for key, value in row.items()
    }


async def query(sql: str, *params: Any) -> list[dict[str, Any]]:
    """
    파라미터 바인딩 쿼리 실행 ($1, $2, ... 위치 기반)

    SQL 텍스트에는 값이 들어가지 않고, 모든 값은 params로만 전달된다.
    DB 에러는 그대로 호출자에게 전파된다.
    """
    async with get_pool().acquire() as conn:
        rows = await conn.fetch(sql, *params)
    return [row_to_dict(row) for row in rows]
