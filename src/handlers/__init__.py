"""
Handler 层

每种操作三部分：
- 接口（interfaces）：注册表覆盖时使用的键
- 通用 handler（*BaseServerHandler）：打开 unit of work，执行一次 ORM 调用
- 入口 handler（*ServerHandler）：先查记录专属 handler，否则交给通用 handler
"""

from handlers.interfaces import (
    ListRequestHandler,
    ItemRequestHandler,
    CreateRequestHandler,
    UpdateRequestHandler,
    DeleteRequestHandler,
)
from handlers.base import ServerHandlerBase, OverridableHandler, CommandServerHandlerBase
from handlers.list_handler import ListRequestBaseServerHandler, ListRequestServerHandler
from handlers.item_handler import ItemRequestBaseServerHandler, ItemRequestServerHandler
from handlers.create_handler import CreateRequestBaseServerHandler, CreateRequestServerHandler
from handlers.update_handler import UpdateRequestBaseServerHandler, UpdateRequestServerHandler
from handlers.delete_handler import DeleteRequestBaseServerHandler, DeleteRequestServerHandler

__all__ = [
    # Interfaces
    "ListRequestHandler",
    "ItemRequestHandler",
    "CreateRequestHandler",
    "UpdateRequestHandler",
    "DeleteRequestHandler",

    # Bases
    "ServerHandlerBase",
    "OverridableHandler",
    "CommandServerHandlerBase",

    # Generic handlers
    "ListRequestBaseServerHandler",
    "ItemRequestBaseServerHandler",
    "CreateRequestBaseServerHandler",
    "UpdateRequestBaseServerHandler",
    "DeleteRequestBaseServerHandler",

    # Override-resolving handlers
    "ListRequestServerHandler",
    "ItemRequestServerHandler",
    "CreateRequestServerHandler",
    "UpdateRequestServerHandler",
    "DeleteRequestServerHandler",
]
