"""
删除记录 handler
"""

from typing import Any, Type

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from core.requests import CommandRequest
from core.results import CommandResult
from handlers.base import CommandServerHandlerBase, OverridableHandler, primary_key_criteria
from handlers.interfaces import DeleteRequestHandler


class DeleteRequestBaseServerHandler(CommandServerHandlerBase, DeleteRequestHandler):
    """通用删除 handler：按主键 DELETE，只看主键，其余字段不参与匹配"""

    action = "delete"
    success_message = "Record Deleted"
    failure_message = "Error deleting Record"

    async def _apply(self, session: AsyncSession, record_type: Type[Any], item: Any) -> int:
        result = await session.execute(
            delete(record_type)
            .where(*primary_key_criteria(record_type, item))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount


class DeleteRequestServerHandler(OverridableHandler, DeleteRequestHandler):
    """删除入口：优先使用记录专属 handler"""

    interface = DeleteRequestHandler

    async def execute(self, record_type: Type[Any], request: CommandRequest[Any]) -> CommandResult:
        return await self.resolve(record_type).execute(record_type, request)
