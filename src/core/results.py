"""
CQS 结果对象

query 返回数据 + 状态，command 只返回状态。
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Sequence, TypeVar

TRecord = TypeVar("TRecord")


@dataclass(frozen=True)
class ListQueryResult(Generic[TRecord]):
    """列表查询结果"""
    items: List[TRecord] = field(default_factory=list)
    total_count: int = 0
    successful: bool = False
    message: Optional[str] = None

    @classmethod
    def success(
        cls,
        items: Sequence[TRecord],
        total_count: int,
        message: Optional[str] = None,
    ) -> "ListQueryResult[TRecord]":
        return cls(items=list(items), total_count=total_count, successful=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "ListQueryResult[TRecord]":
        return cls(successful=False, message=message)


@dataclass(frozen=True)
class ItemQueryResult(Generic[TRecord]):
    """单条查询结果"""
    item: Optional[TRecord] = None
    successful: bool = False
    message: Optional[str] = None

    @classmethod
    def success(cls, item: TRecord, message: Optional[str] = None) -> "ItemQueryResult[TRecord]":
        return cls(item=item, successful=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "ItemQueryResult[TRecord]":
        return cls(successful=False, message=message)


@dataclass(frozen=True)
class CommandResult:
    """命令结果"""
    successful: bool = False
    message: Optional[str] = None

    @classmethod
    def success(cls, message: Optional[str] = None) -> "CommandResult":
        return cls(successful=True, message=message)

    @classmethod
    def failure(cls, message: str) -> "CommandResult":
        return cls(successful=False, message=message)
