"""
单条查询 handler
"""

from typing import Any, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.requests import ItemQueryRequest
from core.results import ItemQueryResult
from handlers.base import OverridableHandler, ServerHandlerBase
from handlers.interfaces import ItemRequestHandler
from utils.logger import get_logger

logger = get_logger("DataBroker")

TRecord = TypeVar("TRecord")

UID_FIELD = "uid"


class ItemRequestBaseServerHandler(ServerHandlerBase, ItemRequestHandler):
    """
    通用单条查询 handler

    记录有 uid 列时按 uid 查询，否则把 uid 当作主键用 session.get() 查找。
    """

    async def execute(self, record_type: Type[TRecord], request: ItemQueryRequest) -> ItemQueryResult[TRecord]:
        self._require_request(request, "ItemQueryRequest")

        try:
            async with self._db_manager.session() as session:
                record = await self._find(session, record_type, request.uid)
        except SQLAlchemyError as e:
            logger.exception(f"{type(self).__name__} failed to read {record_type.__name__} {request.uid}: {e}")
            return ItemQueryResult.failure(f"Error retrieving {record_type.__name__} record")

        if record is None:
            logger.critical(f"{type(self).__name__} failed to find the Record with Uid: {request.uid}")
            return ItemQueryResult.failure("No record retrieved")

        return ItemQueryResult.success(record)

    @staticmethod
    async def _find(session: AsyncSession, record_type: Type[TRecord], uid: Any) -> Optional[TRecord]:
        if UID_FIELD in inspect(record_type).column_attrs:
            result = await session.execute(
                select(record_type).where(getattr(record_type, UID_FIELD) == uid)
            )
            return result.scalar_one_or_none()
        return await session.get(record_type, uid)


class ItemRequestServerHandler(OverridableHandler, ItemRequestHandler):
    """单条查询入口：优先使用记录专属 handler"""

    interface = ItemRequestHandler

    async def execute(self, record_type: Type[TRecord], request: ItemQueryRequest) -> ItemQueryResult[TRecord]:
        return await self.resolve(record_type).execute(record_type, request)
