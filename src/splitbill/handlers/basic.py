from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import CallbackQuery, Message

from splitbill.keyboards import back_keyboard, main_menu_keyboard

basic_router = Router()


HELP_TEXT = (
    "<b>📖 コマンド一覧</b>\n\n"
    "<b>グループ:</b>\n"
    "/newgroup - グループを作成\n"
    "/groups - グループ一覧\n"
    "/group - メンバーを表示\n\n"
    "<b>支出:</b>\n"
    "/addexpense - 支出を登録\n"
    "/summary - 残高と支出の一覧\n"
    "/settle - 精算方法を表示\n\n"
    "<b>書式:</b>\n"
    "• /newgroup [グループ名] | [メンバー1], [メンバー2], ...\n"
    "• /addexpense [グループ名] | [支出名] | [金額] | [支払い者]\n"
    "• /summary [グループ名]\n"
    "• /settle [グループ名]\n"
)


def greeting(name: str) -> str:
    return (
        f"👋 こんにちは、{name}さん！\n\n"
        "<b>SplitBill</b> はグループの立て替えを記録して、"
        "最小限の送金で精算する方法を計算します。\n\n"
        "操作を選んでください:"
    )


@basic_router.message(CommandStart())
async def cmd_start(message: Message) -> None:
    user = message.from_user
    name = user.first_name if user else "ゲスト"
    await message.answer(greeting(name), reply_markup=main_menu_keyboard())


@basic_router.message(Command("help"))
async def cmd_help(message: Message) -> None:
    await message.answer(HELP_TEXT)


@basic_router.callback_query(F.data == "menu:main")
async def cb_main_menu(callback: CallbackQuery) -> None:
    user = callback.from_user
    name = user.first_name if user else "ゲスト"
    await callback.message.edit_text(greeting(name), reply_markup=main_menu_keyboard())
    await callback.answer()


@basic_router.callback_query(F.data == "menu:help")
async def cb_help_menu(callback: CallbackQuery) -> None:
    await callback.message.edit_text(HELP_TEXT, reply_markup=back_keyboard())
    await callback.answer()
