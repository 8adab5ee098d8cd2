"""
Core 模块
提供 CQS 请求/结果对象、排序与过滤策略、服务注册表和编辑上下文
"""

from core.exceptions import DataPipelineError
from core.requests import (
    FilterDefinition,
    ListQueryRequest,
    ItemQueryRequest,
    CommandRequest,
    ReportRequest,
)
from core.results import (
    ListQueryResult,
    ItemQueryResult,
    CommandResult,
)
from core.sorting import RecordSorter, RecordSortBase, RecordSortHelper
from core.filtering import RecordFilter, RecordFilterBase
from core.registry import ServiceRegistry
from core.edit import RecordEditContextBase


__all__ = [
    # Errors
    "DataPipelineError",

    # Requests
    "FilterDefinition",
    "ListQueryRequest",
    "ItemQueryRequest",
    "CommandRequest",
    "ReportRequest",

    # Results
    "ListQueryResult",
    "ItemQueryResult",
    "CommandResult",

    # Strategies
    "RecordSorter",
    "RecordSortBase",
    "RecordSortHelper",
    "RecordFilter",
    "RecordFilterBase",

    # Registration
    "ServiceRegistry",

    # Edit
    "RecordEditContextBase",
]
