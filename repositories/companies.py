"""회사(companies) 테이블 쿼리"""
import logging
from typing import Any, Mapping

from utils import database
from utils.errors import InvalidInputError, NotFoundError
from utils.query import WhereClauseBuilder, build_set_clause

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

# 요청(camelCase) 필드 -> 컬럼
COMPANY_COLUMN_MAP: Mapping[str, str] = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


async def create(
    handle: str,
    name: str,
    description: str,
    num_employees: int | None = None,
    logo_url: str | None = None,
) -> dict[str, Any]:
    """
    회사 생성

    Raises:
        InvalidInputError: 이미 존재하는 handle
    """
    duplicate = await database.query(
        "SELECT handle FROM companies WHERE handle = $1",
        handle,
    )
    if duplicate:
        raise InvalidInputError(f"Duplicate company: {handle}")

    rows = await database.query(
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {COMPANY_COLUMNS}
        """,
        handle, name, description, num_employees, logo_url,
    )
    return rows[0]


def build_company_filter(
    name_like: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> WhereClauseBuilder:
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise InvalidInputError("minEmployees cannot be greater than maxEmployees")

    where = WhereClauseBuilder()
    if name_like is not None:
        where.add("name ILIKE {}", f"%{name_like}%")
    if min_employees is not None:
        where.add("num_employees >= {}", min_employees)
    if max_employees is not None:
        where.add("num_employees <= {}", max_employees)
    return where


async def find_all(
    name_like: str | None = None,
    min_employees: int | None = None,
    max_employees: int | None = None,
) -> list[dict[str, Any]]:
    """회사 목록 (name 오름차순)"""
    filters = build_company_filter(name_like, min_employees, max_employees).build()
    sql = f"""
        SELECT {COMPANY_COLUMNS}
        FROM companies
        {filters.where_clause}
        ORDER BY name
        """
    logger.debug("companies.find_all: %s %s", filters.where_clause, filters.parameters)
    return await database.query(sql, *filters.parameters)


async def get(handle: str) -> dict[str, Any]:
    """회사 상세 (소속 채용공고 포함)"""
    rows = await database.query(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        handle,
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    company = rows[0]
    company["jobs"] = await database.query(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        handle,
    )
    return company


async def update(handle: str, data: Mapping[str, Any]) -> dict[str, Any]:
    """
    부분 수정 (data 키는 camelCase 요청 필드명)

    Raises:
        InvalidInputError: data가 비어있을 때
        NotFoundError: 해당 handle이 없을 때
    """
    clause = build_set_clause(data, COMPANY_COLUMN_MAP)
    handle_placeholder = f"${len(clause.values) + 1}"

    sql = f"""
        UPDATE companies
        SET {clause.set_clause}
        WHERE handle = {handle_placeholder}
        RETURNING {COMPANY_COLUMNS}
        """
    logger.debug("companies.update: %s", clause.set_clause)
    rows = await database.query(sql, *clause.values, handle)
    if not rows:
        raise NotFoundError(f"No company: {handle}")
    return rows[0]


async def remove(handle: str) -> None:
    rows = await database.query(
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        handle,
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")
