"""
排序策略

- RecordSorter: 按记录类型注册的排序策略接口
- RecordSortHelper: 把字段名绑定到映射列（未知字段返回 None）
- RecordSortBase: 自定义排序器的基类，提供通用的排序拼装
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import Select, inspect
from sqlalchemy.orm import InstrumentedAttribute

TRecord = TypeVar("TRecord")


class RecordSortHelper:
    """字段名 → ORM 排序表达式"""

    @staticmethod
    def build_sort_expression(
        record_type: Type[Any],
        sort_field: Optional[str],
    ) -> Optional[InstrumentedAttribute]:
        """
        查找与 sort_field 同名的映射列

        Args:
            record_type: ORM 模型类
            sort_field: 字段名，None 或空串表示不排序

        Returns:
            映射列属性；字段不存在或不是列（如 property）时返回 None
        """
        if not sort_field:
            return None

        mapper = inspect(record_type)
        if sort_field not in mapper.column_attrs:
            return None
        return getattr(record_type, sort_field)

    @staticmethod
    def apply(
        query: Select,
        record_type: Type[Any],
        sort_field: Optional[str],
        sort_descending: bool = False,
    ) -> Select:
        """按字段名排序，无法绑定时原样返回"""
        expression = RecordSortHelper.build_sort_expression(record_type, sort_field)
        if expression is None:
            return query
        return query.order_by(expression.desc() if sort_descending else expression.asc())


class RecordSorter(ABC, Generic[TRecord]):
    """记录排序策略接口"""

    @abstractmethod
    def sort(self, query: Select, sort_field: Optional[str], sort_descending: bool) -> Select:
        """
        给查询加上排序

        Args:
            query: 当前的 select 语句
            sort_field: 请求中的排序字段
            sort_descending: 是否降序

        Returns:
            加上 ORDER BY 之后的 select 语句
        """


class RecordSortBase(RecordSorter[TRecord]):
    """
    自定义排序器基类

    子类设置 record_type，并可覆盖 default_sort() 提供字段无法绑定时的默认排序。
    """

    record_type: Type[TRecord]

    def sort(self, query: Select, sort_field: Optional[str], sort_descending: bool) -> Select:
        expression = self.try_build_sort_expression(sort_field)
        if expression is None:
            return self.default_sort(query, sort_descending)
        return self._order(query, sort_descending, expression)

    def default_sort(self, query: Select, sort_descending: bool) -> Select:
        return query

    def try_build_sort_expression(self, sort_field: Optional[str]) -> Optional[InstrumentedAttribute]:
        return RecordSortHelper.build_sort_expression(self.record_type, sort_field)

    @staticmethod
    def _order(query: Select, sort_descending: bool, expression: Any) -> Select:
        return query.order_by(expression.desc() if sort_descending else expression.asc())
