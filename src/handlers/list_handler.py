"""
列表查询 handler

查询管道：select → 过滤 → 计数 → 排序 → 分页。
过滤、排序交给注册的 RecordFilter / RecordSorter（或按字段名反射排序），
分页是 offset/limit，计数是 count()。
"""

from typing import Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.requests import ListQueryRequest, validate_paging
from core.results import ListQueryResult
from core.sorting import RecordSortHelper
from handlers.base import OverridableHandler, ServerHandlerBase
from handlers.interfaces import ListRequestHandler
from utils.logger import get_logger

logger = get_logger("DataBroker")

TRecord = TypeVar("TRecord")


class ListRequestBaseServerHandler(ServerHandlerBase, ListRequestHandler):
    """通用列表查询 handler"""

    async def execute(self, record_type: Type[TRecord], request: ListQueryRequest) -> ListQueryResult[TRecord]:
        self._validate(request)

        try:
            async with self._db_manager.session() as session:
                query = self._filtered_query(record_type, request)
                total_count = await self._count(session, query)

                query = self._sorted_query(record_type, query, request)
                if request.page_size > 0:
                    query = query.offset(request.start_index).limit(request.page_size)

                result = await session.execute(query)
                items = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.exception(f"{type(self).__name__} failed to list {record_type.__name__} records: {e}")
            return ListQueryResult.failure(f"Error retrieving {record_type.__name__} records")

        return ListQueryResult.success(items, total_count)

    def _validate(self, request: ListQueryRequest) -> None:
        self._require_request(request, "ListQueryRequest")
        validate_paging(request, source=type(self).__name__)

    def _filtered_query(self, record_type: Type[TRecord], request: ListQueryRequest) -> Select:
        query = select(record_type)
        if not request.filters:
            return query

        record_filter = self._registry.get_filter(record_type)
        if record_filter is None:
            logger.warning(
                f"No RecordFilter registered for {record_type.__name__}; "
                f"ignoring {len(request.filters)} filter(s)"
            )
            return query
        return record_filter.add_filters(query, request.filters)

    def _sorted_query(self, record_type: Type[TRecord], query: Select, request: ListQueryRequest) -> Select:
        sorter = self._registry.get_sorter(record_type)
        if sorter is not None:
            return sorter.sort(query, request.sort_field, request.sort_descending)
        return RecordSortHelper.apply(query, record_type, request.sort_field, request.sort_descending)

    @staticmethod
    async def _count(session: AsyncSession, query: Select) -> int:
        count_query = select(func.count()).select_from(query.order_by(None).subquery())
        result = await session.execute(count_query)
        return result.scalar_one()


class ListRequestServerHandler(OverridableHandler, ListRequestHandler):
    """列表查询入口：优先使用记录专属 handler"""

    interface = ListRequestHandler

    async def execute(self, record_type: Type[TRecord], request: ListQueryRequest) -> ListQueryResult[TRecord]:
        return await self.resolve(record_type).execute(record_type, request)
