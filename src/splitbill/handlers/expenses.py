from __future__ import annotations

from html import escape

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from splitbill.config import get_settings
from splitbill.db.repo import get_global_repository
from splitbill.errors import SplitBillError
from splitbill.keyboards import group_keyboard
from splitbill.logging import get_logger
from splitbill.services.expenses import ExpenseService
from splitbill.services.groups import GroupService
from splitbill.services.summary import format_amount, format_balances, format_expenses, format_settlements
from splitbill.utils.parse import parse_amount, split_args

expenses_router = Router()
log = get_logger(__name__)


def get_expense_service() -> ExpenseService:
    repo = get_global_repository()
    return ExpenseService(repo, GroupService(repo))


async def build_summary_message(service: ExpenseService, group_name: str, currency: str) -> str:
    balances = await service.get_balances(group_name)
    expenses = await service.get_expenses(group_name)
    return "\n".join(
        [f"📊 <b>{escape(group_name)}</b>", format_balances(balances, currency), format_expenses(expenses, currency)]
    )


async def build_settle_message(service: ExpenseService, group_name: str, currency: str) -> str:
    settlements = await service.get_settlements(group_name)
    return "\n".join([f"💸 <b>{escape(group_name)}</b>", format_settlements(settlements, currency)])


@expenses_router.message(Command("addexpense"))
async def cmd_addexpense(message: Message) -> None:
    if not message.text:
        return
    parts = split_args(message.text, "addexpense")
    if len(parts) != 4:
        await message.answer("使い方: /addexpense [グループ名] | [支出名] | [金額] | [支払い者]")
        return

    group_name, label, raw_amount, payer = parts
    try:
        amount = parse_amount(raw_amount)
    except ValueError as exc:
        await message.answer(str(exc))
        return

    settings = get_settings()
    try:
        expense = await get_expense_service().add_expense(group_name, label, payer, amount)
    except SplitBillError as exc:
        log.warning("expense.add.rejected", group=group_name, error=exc.message)
        await message.answer(exc.message)
        return

    await message.answer(
        f"支出が登録されました: {escape(expense.label)} — {format_amount(expense.amount, settings.currency)}"
        f" ({escape(expense.payer)} が支払い)",
        reply_markup=group_keyboard(expense.group_name),
    )


@expenses_router.message(Command("summary"))
async def cmd_summary(message: Message) -> None:
    if not message.text:
        return
    parts = split_args(message.text, "summary")
    if len(parts) != 1:
        await message.answer("使い方: /summary [グループ名]")
        return

    try:
        text = await build_summary_message(get_expense_service(), parts[0], get_settings().currency)
    except SplitBillError as exc:
        log.warning("summary.failed", group=parts[0], error=exc.message)
        await message.answer(exc.message)
        return
    await message.answer(text)


@expenses_router.message(Command("settle"))
async def cmd_settle(message: Message) -> None:
    if not message.text:
        return
    parts = split_args(message.text, "settle")
    if len(parts) != 1:
        await message.answer("使い方: /settle [グループ名]")
        return

    try:
        text = await build_settle_message(get_expense_service(), parts[0], get_settings().currency)
    except SplitBillError as exc:
        log.warning("settle.failed", group=parts[0], error=exc.message)
        await message.answer(exc.message)
        return
    await message.answer(text)


@expenses_router.callback_query(F.data.startswith("summary:"))
async def cb_summary(callback: CallbackQuery) -> None:
    group_name = callback.data.split(":", 1)[1]
    try:
        text = await build_summary_message(get_expense_service(), group_name, get_settings().currency)
    except SplitBillError as exc:
        log.warning("summary.failed", group=group_name, error=exc.message)
        await callback.answer(exc.message, show_alert=True)
        return
    await callback.message.answer(text)
    await callback.answer()


@expenses_router.callback_query(F.data.startswith("settle:"))
async def cb_settle(callback: CallbackQuery) -> None:
    group_name = callback.data.split(":", 1)[1]
    try:
        text = await build_settle_message(get_expense_service(), group_name, get_settings().currency)
    except SplitBillError as exc:
        log.warning("settle.failed", group=group_name, error=exc.message)
        await callback.answer(exc.message, show_alert=True)
        return
    await callback.message.answer(text)
    await callback.answer()
