from typing import Any

import asyncpg


async def get(conn: asyncpg.Connection, username: str) -> dict[str, Any] | None:
    row = await conn.fetchrow(
        """
        SELECT username, password, first_name, last_name, email, is_admin
        FROM users
        WHERE username = $1
        """,
        username,
    )
    return dict(row) if row else None


async def create(
        conn: asyncpg.Connection,
        username: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
) -> dict[str, Any]:
    """회원 생성 (중복 username이면 asyncpg.UniqueViolationError)"""
    row = await conn.fetchrow(
        """
        INSERT INTO users (username, password, first_name, last_name, email, is_admin)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING username, first_name, last_name, email, is_admin
        """,
        username, hashed_password, first_name, last_name, email, is_admin,
    )
    return dict(row)
