"""companies 테이블 접근. API 필드명(camelCase)으로 컬럼을 돌려준다."""
import logging
from typing import Any, Mapping

import asyncpg

from db.repositories import jobs as job_repo
from utils.query import FilterBuilder, contains_pattern, sql_for_partial_update

logger = logging.getLogger(__name__)

COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'


async def find_all(
        conn: asyncpg.Connection,
        name: str | None = None,
        min_employees: int | None = None,
        max_employees: int | None = None,
) -> list[dict[str, Any]]:
    """회사 목록 (name 순). name은 대소문자 무시 부분 일치"""
    filters = FilterBuilder()
    if name is not None:
        filters.add("name ILIKE {} ESCAPE '\\'", contains_pattern(name))
    if min_employees is not None:
        filters.add("num_employees >= {}", min_employees)
    if max_employees is not None:
        filters.add("num_employees <= {}", max_employees)

    where_clause, values = filters.build()
    rows = await conn.fetch(
        f"""
        SELECT {COMPANY_COLUMNS}
        FROM companies
        {where_clause}
        ORDER BY name
        """,
        *values,
    )
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, handle: str) -> dict[str, Any] | None:
    """회사 + 소속 채용공고"""
    row = await conn.fetchrow(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        handle,
    )
    if row is None:
        return None

    company = dict(row)
    company["jobs"] = await job_repo.find_by_company(conn, handle)
    return company


async def create(
        conn: asyncpg.Connection,
        handle: str,
        name: str,
        description: str,
        num_employees: int | None,
        logo_url: str | None,
) -> dict[str, Any]:
    row = await conn.fetchrow(
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {COMPANY_COLUMNS}
        """,
        handle, name, description, num_employees, logo_url,
    )
    logger.info("Company created: %s", handle)
    return dict(row)


async def update(
        conn: asyncpg.Connection,
        handle: str,
        data: Mapping[str, Any],
) -> dict[str, Any] | None:
    set_clause, values = sql_for_partial_update(data, COMPANY_COLUMN_MAP)
    handle_idx = len(values) + 1

    row = await conn.fetchrow(
        f"""
        UPDATE companies
        SET {set_clause}
        WHERE handle = ${handle_idx}
        RETURNING {COMPANY_COLUMNS}
        """,
        *values, handle,
    )
    return dict(row) if row else None


async def remove(conn: asyncpg.Connection, handle: str) -> str | None:
    deleted = await conn.fetchval(
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        handle,
    )
    if deleted is not None:
        logger.info("Company deleted: %s", deleted)
    return deleted
