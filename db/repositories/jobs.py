"""
jobs 테이블 접근 (asyncpg, $N placeholder)

모든 값은 파라미터로 바인딩한다. SQL 문자열에는 컬럼명/placeholder만 들어간다.
"""
import logging
from decimal import Decimal
from typing import Any, Mapping

import asyncpg

from utils.query import FilterBuilder, contains_pattern, sql_for_partial_update

logger = logging.getLogger(__name__)

# 수정 가능한 필드 -> DB 컬럼 (id, company_handle은 변경 불가)
JOB_COLUMN_MAP = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

JOB_COLUMNS = "id, title, salary, equity, company_handle"


async def find_all(
        conn: asyncpg.Connection,
        title: str | None = None,
        min_salary: int | None = None,
        has_equity: bool | None = None,
) -> list[dict[str, Any]]:
    """
    채용공고 목록 (title 순)
    - title: 대소문자 무시, 부분 일치
    - min_salary: salary >= min_salary
    - has_equity: True면 equity > 0 인 공고만, False/None이면 필터 없음
    """
    filters = FilterBuilder()
    if title is not None:
        filters.add("title ILIKE {} ESCAPE '\\'", contains_pattern(title))
    if min_salary is not None:
        filters.add("salary >= {}", min_salary)
    if has_equity is True:
        filters.add_raw("equity > 0")

    where_clause, values = filters.build()
    rows = await conn.fetch(
        f"""
        SELECT {JOB_COLUMNS}
        FROM jobs
        {where_clause}
        ORDER BY title, id
        """,
        *values,
    )
    return [dict(row) for row in rows]


async def find_by_company(conn: asyncpg.Connection, company_handle: str) -> list[dict[str, Any]]:
    rows = await conn.fetch(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        company_handle,
    )
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, job_id: int) -> dict[str, Any] | None:
    row = await conn.fetchrow(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        job_id,
    )
    return dict(row) if row else None


async def title_exists(conn: asyncpg.Connection, title: str, exclude_id: int | None = None) -> bool:
    """중복 제목 확인 (exclude_id: 수정 중인 공고 자신은 제외)"""
    if exclude_id is None:
        row = await conn.fetchrow("SELECT 1 FROM jobs WHERE title = $1", title)
    else:
        row = await conn.fetchrow("SELECT 1 FROM jobs WHERE title = $1 AND id <> $2", title, exclude_id)
    return row is not None


async def create(
        conn: asyncpg.Connection,
        title: str,
        salary: int | None,
        equity: Decimal | None,
        company_handle: str,
) -> dict[str, Any]:
    row = await conn.fetchrow(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ($1, $2, $3, $4)
        RETURNING {JOB_COLUMNS}
        """,
        title, salary, equity, company_handle,
    )
    logger.info("Job created: id=%s company=%s", row["id"], company_handle)
    return dict(row)


async def update(
        conn: asyncpg.Connection,
        job_id: int,
        data: Mapping[str, Any],
) -> dict[str, Any] | None:
    """
    부분 업데이트 - data에 있는 필드만 변경.
    data가 비어 있으면 InvalidArgumentError (호출자가 400으로 변환)
    """
    set_clause, values = sql_for_partial_update(data, JOB_COLUMN_MAP)
    id_idx = len(values) + 1

    row = await conn.fetchrow(
        f"""
        UPDATE jobs
        SET {set_clause}
        WHERE id = ${id_idx}
        RETURNING {JOB_COLUMNS}
        """,
        *values, job_id,
    )
    return dict(row) if row else None


async def remove(conn: asyncpg.Connection, job_id: int) -> int | None:
    """삭제된 id 반환 (없으면 None)"""
    deleted_id = await conn.fetchval(
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        job_id,
    )
    if deleted_id is not None:
        logger.info("Job deleted: id=%s", deleted_id)
    return deleted_id
