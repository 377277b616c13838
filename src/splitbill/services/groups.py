from __future__ import annotations

from typing import Iterable, Optional, Protocol

from splitbill.db.models import Expense, Group
from splitbill.errors import GroupAlreadyExistsError
from splitbill.logging import get_logger


class Repository(Protocol):
    async def load_groups(self) -> list[Group]: ...

    async def get_group(self, name: str) -> Optional[Group]: ...

    async def save_group(self, group: Group) -> None: ...

    async def load_expenses(self, group_name: str) -> list[Expense]: ...

    async def save_expense(self, expense: Expense) -> None: ...


class GroupService:
    def __init__(self, repo: Repository) -> None:
        self.repo = repo
        self._log = get_logger(__name__)

    async def get_groups(self) -> list[Group]:
        return await self.repo.load_groups()

    async def get_group_by_name(self, name: str) -> Optional[Group]:
        return await self.repo.get_group(name.strip())

    async def add_group(self, name: str, members: Iterable[str]) -> Group:
        group = Group.create(name, members)
        if await self.repo.get_group(group.name) is not None:
            raise GroupAlreadyExistsError(group.name)
        await self.repo.save_group(group)
        self._log.info("group.added", group=group.name, members=len(group.members))
        return group
