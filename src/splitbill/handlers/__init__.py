from splitbill.handlers.basic import basic_router
from splitbill.handlers.expenses import expenses_router
from splitbill.handlers.groups import groups_router

__all__ = ["basic_router", "expenses_router", "groups_router"]
