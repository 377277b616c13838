from __future__ import annotations

from typing import List

from splitbill.db.models import Expense, Group, Settlement
from splitbill.errors import GroupNotFoundError
from splitbill.logging import get_logger
from splitbill.services.balances import compute_balances
from splitbill.services.engine import compute_settlements
from splitbill.services.groups import GroupService, Repository


class ExpenseService:
    def __init__(self, repo: Repository, groups: GroupService) -> None:
        self.repo = repo
        self.groups = groups
        self._log = get_logger(__name__)

    async def _require_group(self, name: str) -> Group:
        group = await self.groups.get_group_by_name(name)
        if group is None:
            raise GroupNotFoundError(name)
        return group

    async def add_expense(self, group_name: str, label: str, payer: str, amount: int) -> Expense:
        group = await self._require_group(group_name)
        expense = Expense.create(group, label, payer, amount)
        await self.repo.save_expense(expense)
        self._log.info("expense.added", group=group.name, payer=expense.payer, amount=expense.amount)
        return expense

    async def get_expenses(self, group_name: str) -> list[Expense]:
        group = await self._require_group(group_name)
        return await self.repo.load_expenses(group.name)

    async def get_balances(self, group_name: str) -> dict[str, int]:
        group = await self._require_group(group_name)
        expenses = await self.repo.load_expenses(group.name)
        return compute_balances(expenses, group.members)

    async def get_settlements(self, group_name: str) -> List[Settlement]:
        group = await self._require_group(group_name)
        expenses = await self.repo.load_expenses(group.name)
        settlements = compute_settlements(expenses, group.members)
        self._log.info(
            "settlement.computed",
            group=group.name,
            expenses=len(expenses),
            transfers=len(settlements),
        )
        return settlements
