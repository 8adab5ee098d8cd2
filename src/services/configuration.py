"""
服务装配

把 unit of work 工厂、注册表和各 handler 组装成 broker。
"""

from typing import Optional

from core.registry import ServiceRegistry
from db.database import DatabaseManager
from handlers import (
    CreateRequestBaseServerHandler,
    CreateRequestServerHandler,
    DeleteRequestBaseServerHandler,
    DeleteRequestServerHandler,
    ItemRequestBaseServerHandler,
    ItemRequestServerHandler,
    ListRequestBaseServerHandler,
    ListRequestServerHandler,
    UpdateRequestBaseServerHandler,
    UpdateRequestServerHandler,
)
from services.data_broker import ServerDataBroker
from services.report_broker import ServerReportBroker


def add_server_data_services(
    db_manager: DatabaseManager,
    registry: Optional[ServiceRegistry] = None,
) -> ServerDataBroker:
    """
    创建默认的服务端 broker

    每个操作使用"入口 handler → 通用 handler"的组合，
    入口 handler 会先在 registry 中查找记录专属的覆盖实现。

    Args:
        db_manager: unit of work 工厂
        registry: 服务注册表，None 时新建一个空的

    Returns:
        ServerDataBroker 实例
    """
    registry = registry or ServiceRegistry()

    return ServerDataBroker(
        list_handler=ListRequestServerHandler(
            registry, ListRequestBaseServerHandler(db_manager, registry)
        ),
        item_handler=ItemRequestServerHandler(
            registry, ItemRequestBaseServerHandler(db_manager, registry)
        ),
        create_handler=CreateRequestServerHandler(
            registry, CreateRequestBaseServerHandler(db_manager, registry)
        ),
        update_handler=UpdateRequestServerHandler(
            registry, UpdateRequestBaseServerHandler(db_manager, registry)
        ),
        delete_handler=DeleteRequestServerHandler(
            registry, DeleteRequestBaseServerHandler(db_manager, registry)
        ),
    )


def add_server_report_services(registry: ServiceRegistry) -> ServerReportBroker:
    """创建报表 broker（报表 handler 需事先注册到 registry）"""
    return ServerReportBroker(registry)
