"""
채용공고(jobs) 테이블 쿼리

- 라우터는 HTTP만 담당하고, SQL 생성/실행은 여기서 처리
- 값은 항상 $n 바인딩으로 전달 (SQL 문자열에 값 삽입 금지)
"""
import logging
from decimal import Decimal
from typing import Any, Mapping

from utils import database
from utils.errors import NotFoundError
from utils.query import WhereClauseBuilder, build_set_clause

logger = logging.getLogger(__name__)

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# 요청 필드명과 컬럼명이 같으므로 매핑 없음
JOB_COLUMN_MAP: Mapping[str, str] = {}


async def create(
    title: str,
    salary: int | None,
    equity: Decimal | None,
    company_handle: str,
) -> dict[str, Any]:
    """채용공고 생성 후 id 포함 반환"""
    rows = await database.query(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ($1, $2, $3, $4)
        RETURNING {JOB_COLUMNS}
        """,
        title, salary, equity, company_handle,
    )
    return rows[0]


def build_job_filter(
    title: str | None = None,
    min_salary: int | str | None = None,
    has_equity: bool | None = None,
) -> WhereClauseBuilder:
    """
    채용공고 검색 조건 (title -> min_salary -> has_equity 순서 고정)

    - title: 대소문자 무시 부분 일치. LIKE는 대소문자를 구분하므로
      원문 패턴과 소문자 패턴 두 개를 OR로 묶는다 (플레이스홀더 2개)
    - min_salary: salary > min_salary (초과, 이상 아님)
    - has_equity: 정확히 True일 때만 equity > 0 (False/None은 조건 없음)
    """
    where = WhereClauseBuilder()
    if title is not None:
        pattern = f"%{title}%"
        where.add("(title LIKE {} OR title LIKE {})", pattern, pattern.lower())
    if min_salary is not None:
        where.add("salary > {}", int(min_salary))
    if has_equity is True:
        where.add("equity > 0")
    return where


async def find_all(
    title: str | None = None,
    min_salary: int | str | None = None,
    has_equity: bool | None = None,
) -> list[dict[str, Any]]:
    """채용공고 목록 (title 오름차순)"""
    filters = build_job_filter(title, min_salary, has_equity).build()
    sql = f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        {filters.where_clause}
        ORDER BY title
        """
    logger.debug("jobs.find_all: %s %s", filters.where_clause, filters.parameters)
    return await database.query(sql, *filters.parameters)


async def get(job_id: int) -> dict[str, Any]:
    rows = await database.query(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        job_id,
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return rows[0]


async def update(job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
    """
    부분 수정: data에 있는 필드만 변경 (null도 유효한 값으로 반영)

    Raises:
        InvalidInputError: data가 비어있을 때 (DB 호출 전)
        NotFoundError: 해당 id가 없을 때
    """
    clause = build_set_clause(data, JOB_COLUMN_MAP)
    id_placeholder = f"${len(clause.values) + 1}"

    sql = f"""
        UPDATE jobs
        SET {clause.set_clause}
        WHERE id = {id_placeholder}
        RETURNING {JOB_COLUMNS}
        """
    logger.debug("jobs.update: %s", clause.set_clause)
    rows = await database.query(sql, *clause.values, job_id)
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return rows[0]


async def remove(job_id: int) -> None:
    rows = await database.query(
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        job_id,
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
