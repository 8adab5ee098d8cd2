"""
Handler 接口

每种操作一个接口。服务注册表以 (接口, 记录类型) 为键保存记录专属的覆盖实现。
"""

from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

from core.requests import CommandRequest, ItemQueryRequest, ListQueryRequest
from core.results import CommandResult, ItemQueryResult, ListQueryResult

TRecord = TypeVar("TRecord")


class ListRequestHandler(ABC):
    """列表查询"""

    @abstractmethod
    async def execute(self, record_type: Type[TRecord], request: ListQueryRequest) -> ListQueryResult[TRecord]:
        ...


class ItemRequestHandler(ABC):
    """单条查询"""

    @abstractmethod
    async def execute(self, record_type: Type[TRecord], request: ItemQueryRequest) -> ItemQueryResult[TRecord]:
        ...


class CreateRequestHandler(ABC):
    """新增记录"""

    @abstractmethod
    async def execute(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        ...


class UpdateRequestHandler(ABC):
    """更新记录"""

    @abstractmethod
    async def execute(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        ...


class DeleteRequestHandler(ABC):
    """删除记录"""

    @abstractmethod
    async def execute(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        ...
