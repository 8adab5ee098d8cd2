"""
报表 Broker

报表是带自定义参数的只读列表查询。每种报表请求类型在注册表中对应一个 ReportHandler。
"""

from abc import ABC, abstractmethod
from typing import Generic, Type, TypeVar

from core.exceptions import DataPipelineError
from core.registry import ServiceRegistry
from core.requests import ReportRequest, validate_paging
from core.results import ListQueryResult
from utils.logger import get_logger

logger = get_logger("DataBroker")

TRecord = TypeVar("TRecord")


class ReportHandler(ABC, Generic[TRecord]):
    """报表 handler 接口"""

    @abstractmethod
    async def execute(self, request: ReportRequest) -> ListQueryResult[TRecord]:
        ...


class ServerReportBroker:
    """按 (请求类型, 记录类型) 解析报表 handler 并执行"""

    def __init__(self, registry: ServiceRegistry):
        self._registry = registry

    async def get_report(self, record_type: Type[TRecord], request: ReportRequest) -> ListQueryResult[TRecord]:
        """
        执行报表

        Args:
            record_type: 报表返回的记录类型
            request: 报表请求（具体子类决定使用哪个 handler）

        Returns:
            报表结果；没有注册对应 handler 时返回失败结果

        Raises:
            DataPipelineError: request 为 None 或分页参数为负数
        """
        if request is None:
            raise DataPipelineError("No ReportRequest defined", source=type(self).__name__)
        validate_paging(request, source=type(self).__name__)

        handler = self._registry.get_report_handler(type(request), record_type)

        if handler is None:
            error = f"A report for {type(request).__name__} is not defined in the service registry."
            logger.error(error)
            return ListQueryResult.failure(error)

        return await handler.execute(request)
