"""
Data Broker

把五个操作 handler 聚合在一个接口后面。调用方只依赖 DataBroker，
具体的 handler（以及记录专属的覆盖）由 ServiceRegistry / 构造参数决定。
"""

from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

from core.requests import CommandRequest, ItemQueryRequest, ListQueryRequest
from core.results import CommandResult, ItemQueryResult, ListQueryResult
from handlers.interfaces import (
    CreateRequestHandler,
    DeleteRequestHandler,
    ItemRequestHandler,
    ListRequestHandler,
    UpdateRequestHandler,
)

TRecord = TypeVar("TRecord")


class DataBroker(ABC):
    """数据访问接口"""

    @abstractmethod
    async def get_items(self, record_type: Type[TRecord], request: ListQueryRequest) -> ListQueryResult[TRecord]:
        ...

    @abstractmethod
    async def get_item(self, record_type: Type[TRecord], request: ItemQueryRequest) -> ItemQueryResult[TRecord]:
        ...

    @abstractmethod
    async def create_item(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        ...

    @abstractmethod
    async def update_item(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        ...

    @abstractmethod
    async def delete_item(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        ...


class ServerDataBroker(DataBroker):
    """服务端 broker：直接转交给各操作的 handler"""

    def __init__(
        self,
        list_handler: ListRequestHandler,
        item_handler: ItemRequestHandler,
        create_handler: CreateRequestHandler,
        update_handler: UpdateRequestHandler,
        delete_handler: DeleteRequestHandler,
    ):
        self._list_handler = list_handler
        self._item_handler = item_handler
        self._create_handler = create_handler
        self._update_handler = update_handler
        self._delete_handler = delete_handler

    async def get_items(self, record_type: Type[TRecord], request: ListQueryRequest) -> ListQueryResult[TRecord]:
        return await self._list_handler.execute(record_type, request)

    async def get_item(self, record_type: Type[TRecord], request: ItemQueryRequest) -> ItemQueryResult[TRecord]:
        return await self._item_handler.execute(record_type, request)

    async def create_item(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        return await self._create_handler.execute(record_type, request)

    async def update_item(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        return await self._update_handler.execute(record_type, request)

    async def delete_item(self, record_type: Type[TRecord], request: CommandRequest[Any]) -> CommandResult:
        return await self._delete_handler.execute(record_type, request)
