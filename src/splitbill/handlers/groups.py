from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, InlineKeyboardMarkup, Message

from splitbill.db.repo import get_global_repository
from splitbill.errors import SplitBillError
from splitbill.keyboards import group_keyboard, groups_keyboard
from splitbill.logging import get_logger
from splitbill.services.groups import GroupService
from splitbill.services.summary import format_group
from splitbill.utils.parse import parse_members, split_args

groups_router = Router()
log = get_logger(__name__)


def get_group_service() -> GroupService:
    return GroupService(get_global_repository())


@groups_router.message(Command("newgroup"))
async def cmd_newgroup(message: Message) -> None:
    if not message.text:
        return
    parts = split_args(message.text, "newgroup")
    if len(parts) != 2:
        await message.answer("使い方: /newgroup [グループ名] | [メンバー1], [メンバー2], ...")
        return

    name, members = parts[0], parse_members(parts[1])
    try:
        group = await get_group_service().add_group(name, members)
    except SplitBillError as exc:
        log.warning("group.add.rejected", group=name, error=exc.message)
        await message.answer(exc.message)
        return

    await message.answer(
        "グループの作成が成功しました\n\n" + format_group(group),
        reply_markup=group_keyboard(group.name),
    )


async def _groups_overview() -> tuple[str, InlineKeyboardMarkup]:
    groups = await get_group_service().get_groups()
    if not groups:
        return "グループがまだありません。/newgroup で作成してください。", groups_keyboard([])
    return "👥 <b>グループ一覧</b>\n\nグループを選んでください:", groups_keyboard(groups)


@groups_router.message(Command("groups"))
async def cmd_groups(message: Message) -> None:
    text, keyboard = await _groups_overview()
    await message.answer(text, reply_markup=keyboard)


@groups_router.callback_query(F.data == "menu:groups")
async def cb_groups(callback: CallbackQuery) -> None:
    text, keyboard = await _groups_overview()
    await callback.message.edit_text(text, reply_markup=keyboard)
    await callback.answer()


@groups_router.message(Command("group"))
async def cmd_group(message: Message) -> None:
    if not message.text:
        return
    parts = split_args(message.text, "group")
    if len(parts) != 1:
        await message.answer("使い方: /group [グループ名]")
        return

    group = await get_group_service().get_group_by_name(parts[0])
    if group is None:
        await message.answer("グループが存在しません")
        return
    await message.answer(format_group(group), reply_markup=group_keyboard(group.name))


@groups_router.callback_query(F.data.startswith("group:"))
async def cb_group(callback: CallbackQuery) -> None:
    name = callback.data.split(":", 1)[1]
    group = await get_group_service().get_group_by_name(name)
    if group is None:
        await callback.answer("グループが存在しません", show_alert=True)
        return
    await callback.message.edit_text(format_group(group), reply_markup=group_keyboard(group.name))
    await callback.answer()
