"""
CQS 请求对象

- ListQueryRequest: 列表查询（分页、排序、过滤）
- ItemQueryRequest: 单条查询（按 uid）
- CommandRequest: 命令（create / update / delete）
- ReportRequest: 报表查询的基类
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Tuple, TypeVar

from core.exceptions import DataPipelineError

TRecord = TypeVar("TRecord")

DEFAULT_PAGE_SIZE = 1000


@dataclass(frozen=True)
class FilterDefinition:
    """
    过滤条件

    filter_name 由各记录类型的 RecordFilter 解释，filter_data 一律为字符串。
    """
    filter_name: str
    filter_data: str


@dataclass(frozen=True)
class ListQueryRequest:
    """列表查询请求，page_size 为 0 表示不分页"""
    start_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_field: Optional[str] = None
    sort_descending: bool = False
    filters: Tuple[FilterDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # 允许传入 list，统一转为 tuple 以保持不可变
        if not isinstance(self.filters, tuple):
            object.__setattr__(self, "filters", tuple(self.filters))


@dataclass(frozen=True)
class ItemQueryRequest:
    """单条记录查询请求"""
    uid: uuid.UUID


@dataclass(frozen=True)
class CommandRequest(Generic[TRecord]):
    """命令请求，携带需要写入的记录"""
    item: TRecord


@dataclass(frozen=True)
class ReportRequest:
    """报表请求基类，具体报表在子类中添加自己的参数"""
    report_name: str = ""
    start_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_field: Optional[str] = None
    sort_descending: bool = False


def validate_paging(request: Any, source: Optional[str] = None) -> None:
    """
    检查分页参数（ListQueryRequest / ReportRequest 通用）

    Raises:
        DataPipelineError: start_index 或 page_size 为负数
    """
    if request.page_size < 0:
        raise DataPipelineError(f"page_size must be >= 0, got {request.page_size}", source=source)
    if request.start_index < 0:
        raise DataPipelineError(f"start_index must be >= 0, got {request.start_index}", source=source)
