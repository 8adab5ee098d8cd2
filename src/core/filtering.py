"""
过滤策略

每种记录类型可以注册一个 RecordFilter，把 FilterDefinition 翻译成 WHERE 条件。
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, Iterable, TypeVar

from sqlalchemy import Select

from core.exceptions import DataPipelineError
from core.requests import FilterDefinition
from utils.logger import get_logger

logger = get_logger("DataBroker")

TRecord = TypeVar("TRecord")


class RecordFilter(ABC, Generic[TRecord]):
    """记录过滤策略接口"""

    @abstractmethod
    def add_filters(self, query: Select, filters: Iterable[FilterDefinition]) -> Select:
        """
        把过滤条件加到查询上

        Args:
            query: 当前的 select 语句
            filters: 请求中的过滤条件

        Returns:
            加上 WHERE 之后的 select 语句

        Raises:
            DataPipelineError: filter_data 无法解析
        """


class RecordFilterBase(RecordFilter[TRecord]):
    """
    按名称分发的过滤器基类

    子类在 filter_builders() 中返回 {filter_name: builder}，
    builder 接收 (query, filter_data) 返回新的 query。未知名称记录 warning 后忽略。
    """

    def filter_builders(self) -> Dict[str, Callable[[Select, str], Select]]:
        return {}

    def add_filters(self, query: Select, filters: Iterable[FilterDefinition]) -> Select:
        builders = self.filter_builders()
        for definition in filters:
            builder = builders.get(definition.filter_name)
            if builder is None:
                logger.warning(f"{type(self).__name__} ignored unknown filter '{definition.filter_name}'")
                continue
            query = builder(query, definition.filter_data)
        return query

    @staticmethod
    def parse_int(definition_name: str, value: str) -> int:
        """把 filter_data 转为 int，失败视为请求格式错误"""
        try:
            return int(value)
        except (TypeError, ValueError):
            raise DataPipelineError(f"Filter '{definition_name}' expects an integer, got {value!r}") from None
