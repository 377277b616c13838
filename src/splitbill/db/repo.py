from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Iterable

import asyncpg

from splitbill.db.models import Expense, Group
from splitbill.errors import GroupAlreadyExistsError
from splitbill.logging import get_logger, sql_logger


class Database:
    def __init__(self, dsn: str) -> None:
        self._dsn = dsn
        self._pool: asyncpg.Pool | None = None
        self._log = get_logger(__name__)

    async def connect(self) -> None:
        if self._pool is None:
            # asyncpg は "+asyncpg" なしの postgresql:// スキームのみ受け付ける
            dsn = self._dsn.replace("+asyncpg", "")
            self._pool = await asyncpg.create_pool(dsn)
            self._log.info("db.pool.created")

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            self._log.info("db.pool.closed")

    async def fetch(self, query: str, *args: Any) -> list[asyncpg.Record]:
        await self._ensure_pool()
        assert self._pool
        sql_logger.info("sql.fetch", query=query, args=args)
        return await self._pool.fetch(query, *args)

    async def fetchrow(self, query: str, *args: Any) -> asyncpg.Record | None:
        await self._ensure_pool()
        assert self._pool
        sql_logger.info("sql.fetchrow", query=query, args=args)
        return await self._pool.fetchrow(query, *args)

    async def execute(self, query: str, *args: Any) -> str:
        await self._ensure_pool()
        assert self._pool
        sql_logger.info("sql.execute", query=query, args=args)
        return await self._pool.execute(query, *args)

    async def executemany(self, command: str, args: Iterable[Iterable[Any]]) -> None:
        await self._ensure_pool()
        assert self._pool
        sql_logger.info("sql.executemany", query=command)
        await self._pool.executemany(command, args)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[asyncpg.Connection]:
        await self._ensure_pool()
        assert self._pool
        async with self._pool.acquire() as conn:
            async with conn.transaction():
                sql_logger.info("sql.transaction")
                yield conn

    async def _ensure_pool(self) -> None:
        if self._pool is None:
            await self.connect()


_GROUPS_QUERY = """
    SELECT g.name, array_agg(m.name ORDER BY m.position) AS members
    FROM groups g
    JOIN group_members m ON m.group_id = g.id
    {where}
    GROUP BY g.id
    ORDER BY g.id
"""


def _row_to_group(row: Any) -> Group:
    return Group(name=row["name"], members=tuple(row["members"]))


def _row_to_expense(row: Any) -> Expense:
    return Expense(
        group_name=row["group_name"],
        label=row["label"],
        payer=row["payer"],
        amount=int(row["amount"]),
    )


class SplitBillRepository:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def load_groups(self) -> list[Group]:
        rows = await self.db.fetch(_GROUPS_QUERY.format(where=""))
        return [_row_to_group(row) for row in rows]

    async def get_group(self, name: str) -> Group | None:
        row = await self.db.fetchrow(_GROUPS_QUERY.format(where="WHERE g.name = $1"), name)
        if row is None:
            return None
        return _row_to_group(row)

    async def save_group(self, group: Group) -> None:
        # groups と group_members は同一トランザクションで書き込む
        try:
            async with self.db.transaction() as conn:
                group_id = await conn.fetchval(
                    "INSERT INTO groups (name) VALUES ($1) RETURNING id",
                    group.name,
                )
                await conn.executemany(
                    """
                    INSERT INTO group_members (group_id, position, name)
                    VALUES ($1, $2, $3)
                    """,
                    [(group_id, position, member) for position, member in enumerate(group.members)],
                )
        except asyncpg.UniqueViolationError as exc:
            raise GroupAlreadyExistsError(group.name) from exc

    async def load_expenses(self, group_name: str) -> list[Expense]:
        rows = await self.db.fetch(
            """
            SELECT g.name AS group_name, e.label, e.payer, e.amount
            FROM expenses e
            JOIN groups g ON g.id = e.group_id
            WHERE g.name = $1
            ORDER BY e.id
            """,
            group_name,
        )
        return [_row_to_expense(row) for row in rows]

    async def save_expense(self, expense: Expense) -> None:
        await self.db.execute(
            """
            INSERT INTO expenses (group_id, label, payer, amount)
            SELECT id, $2, $3, $4 FROM groups WHERE name = $1
            """,
            expense.group_name,
            expense.label,
            expense.payer,
            expense.amount,
        )


_global_repo: SplitBillRepository | None = None


def set_global_repository(repo: SplitBillRepository) -> None:
    global _global_repo
    _global_repo = repo


def get_global_repository() -> SplitBillRepository:
    if _global_repo is None:
        raise RuntimeError("リポジトリが初期化されていません")
    return _global_repo
