"""
新增记录 handler
"""

from typing import Any, Type

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from core.requests import CommandRequest
from core.results import CommandResult
from handlers.base import CommandServerHandlerBase, OverridableHandler, column_values
from handlers.interfaces import CreateRequestHandler


class CreateRequestBaseServerHandler(CommandServerHandlerBase, CreateRequestHandler):
    """通用新增 handler：session.add() + flush，记录变为 persistent 即视为写入 1 行"""

    action = "create"
    success_message = "Record Added"
    failure_message = "Error adding Record"

    async def _apply(self, session: AsyncSession, record_type: Type[Any], item: Any) -> int:
        if inspect(item).transient:
            target = item
        else:
            # 已经属于（或曾属于）某个 session 的实例，按值复制后插入
            target = record_type(**column_values(record_type, item, include_primary_key=True))

        session.add(target)
        await session.flush()
        return 1 if inspect(target).persistent else 0


class CreateRequestServerHandler(OverridableHandler, CreateRequestHandler):
    """新增入口：优先使用记录专属 handler"""

    interface = CreateRequestHandler

    async def execute(self, record_type: Type[Any], request: CommandRequest[Any]) -> CommandResult:
        return await self.resolve(record_type).execute(record_type, request)
