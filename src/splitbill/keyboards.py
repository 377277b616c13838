from __future__ import annotations

from typing import Iterable

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from splitbill.db.models import Group


def main_menu_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [InlineKeyboardButton(text="👥 グループ一覧", callback_data="menu:groups")],
            [InlineKeyboardButton(text="ℹ️ ヘルプ", callback_data="menu:help")],
        ]
    )


def back_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[[InlineKeyboardButton(text="◀️ メニューに戻る", callback_data="menu:main")]]
    )


def groups_keyboard(groups: Iterable[Group]) -> InlineKeyboardMarkup:
    rows = [
        [InlineKeyboardButton(text=group.name, callback_data=f"group:{group.name}")]
        for group in groups
    ]
    rows.append([InlineKeyboardButton(text="◀️ メニューに戻る", callback_data="menu:main")])
    return InlineKeyboardMarkup(inline_keyboard=rows)


def group_keyboard(group_name: str) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(text="残高", callback_data=f"summary:{group_name}"),
                InlineKeyboardButton(text="精算", callback_data=f"settle:{group_name}"),
            ],
            [InlineKeyboardButton(text="◀️ グループ一覧", callback_data="menu:groups")],
        ]
    )
