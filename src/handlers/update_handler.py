"""
更新记录 handler
"""

from typing import Any, Type

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.requests import CommandRequest
from core.results import CommandResult
from handlers.base import (
    CommandServerHandlerBase,
    OverridableHandler,
    column_values,
    primary_key_criteria,
)
from handlers.interfaces import UpdateRequestHandler


class UpdateRequestBaseServerHandler(CommandServerHandlerBase, UpdateRequestHandler):
    """
    通用更新 handler

    按主键 UPDATE 所有非主键列，受影响行数即 rowcount；
    主键不存在时 rowcount 为 0，返回失败而不是插入。
    """

    action = "update"
    success_message = "Record Saved"
    failure_message = "Error saving Record"

    async def _apply(self, session: AsyncSession, record_type: Type[Any], item: Any) -> int:
        criteria = primary_key_criteria(record_type, item)
        values = column_values(record_type, item)

        if not values:
            # 只有主键列的记录没有可更新的内容，按存在性判断
            result = await session.execute(
                select(func.count()).select_from(record_type).where(*criteria)
            )
            return result.scalar_one()

        result = await session.execute(
            update(record_type)
            .where(*criteria)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount


class UpdateRequestServerHandler(OverridableHandler, UpdateRequestHandler):
    """更新入口：优先使用记录专属 handler"""

    interface = UpdateRequestHandler

    async def execute(self, record_type: Type[Any], request: CommandRequest[Any]) -> CommandResult:
        return await self.resolve(record_type).execute(record_type, request)
