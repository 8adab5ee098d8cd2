"""
FastAPI 依赖注入

依赖注入链路：
    应用启动 init_globals()
        │
        ├──► DatabaseManager      # 全局单例，管理连接池
        ├──► ServiceRegistry      # 全局单例，排序器/过滤器/报表/handler 覆盖
        ├──► ServerDataBroker     # 全局单例，无状态
        └──► ServerReportBroker   # 全局单例，无状态

并发安全：
    broker 和 handler 不持有 session，每次操作由 DatabaseManager 打开独立的 unit of work。
"""

from typing import Optional

from fastapi import Depends
from sqlalchemy import func, select

from api.config import config
from core.registry import ServiceRegistry
from db.database import DatabaseManager
from db.models import WeatherForecast
from services.configuration import add_server_data_services, add_server_report_services
from services.data_broker import DataBroker
from services.report_broker import ServerReportBroker
from utils.logger import get_logger
from weather import (
    WeatherForecastEditService,
    WeatherForecastListService,
    WeatherTestDataProvider,
    add_weather_services,
)

logger = get_logger("DataBroker")


# ============================================================
# 全局单例
# ============================================================

_db_manager: Optional[DatabaseManager] = None
_registry: Optional[ServiceRegistry] = None
_data_broker: Optional[DataBroker] = None
_report_broker: Optional[ServerReportBroker] = None


def build_services(db_manager: DatabaseManager) -> None:
    """根据给定的 DatabaseManager 创建注册表和 broker"""
    global _db_manager, _registry, _data_broker, _report_broker

    _db_manager = db_manager
    _registry = add_weather_services(ServiceRegistry(), db_manager)
    _data_broker = add_server_data_services(db_manager, _registry)
    _report_broker = add_server_report_services(_registry)


async def init_globals() -> None:
    """
    应用启动时初始化全局单例

    在 FastAPI lifespan 中调用。
    """
    db_manager = DatabaseManager(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    await db_manager.initialize()
    logger.info("Database manager initialized")

    build_services(db_manager)
    logger.info("Data broker initialized")

    if config.SEED_TEST_DATA:
        await seed_test_data(db_manager)


async def seed_test_data(
    db_manager: DatabaseManager,
    provider: Optional[WeatherTestDataProvider] = None,
) -> int:
    """
    表为空时写入测试数据

    Args:
        db_manager: 目标数据库
        provider: 测试数据提供者，None 时使用默认单例

    Returns:
        写入的记录数
    """
    async with db_manager.session() as session:
        result = await session.execute(select(func.count()).select_from(WeatherForecast))
        existing = result.scalar_one()

    if existing:
        logger.info(f"Skip seeding: {existing} weather forecasts already present")
        return 0
    provider = provider or WeatherTestDataProvider.instance()
    return await provider.load_database(db_manager)


async def close_globals() -> None:
    """
    应用关闭时清理全局单例

    在 FastAPI lifespan 中调用。
    """
    global _db_manager, _registry, _data_broker, _report_broker

    if _db_manager:
        await _db_manager.close()
        logger.info("Database manager closed")

    _db_manager = None
    _registry = None
    _data_broker = None
    _report_broker = None


def get_db_manager() -> DatabaseManager:
    if _db_manager is None:
        raise RuntimeError("DatabaseManager not initialized. Call init_globals() first.")
    return _db_manager


def get_registry() -> ServiceRegistry:
    if _registry is None:
        raise RuntimeError("ServiceRegistry not initialized. Call init_globals() first.")
    return _registry


def get_data_broker() -> DataBroker:
    if _data_broker is None:
        raise RuntimeError("DataBroker not initialized. Call init_globals() first.")
    return _data_broker


def get_report_broker() -> ServerReportBroker:
    if _report_broker is None:
        raise RuntimeError("ReportBroker not initialized. Call init_globals() first.")
    return _report_broker


# ============================================================
# 请求级别依赖
# ============================================================

def get_list_service(
    data_broker: DataBroker = Depends(get_data_broker),
) -> WeatherForecastListService:
    """每个请求一个新的列表服务（服务内保存了查询结果）"""
    return WeatherForecastListService(data_broker)


def get_edit_service(
    data_broker: DataBroker = Depends(get_data_broker),
) -> WeatherForecastEditService:
    """每个请求一个新的编辑服务（服务内保存了编辑状态）"""
    return WeatherForecastEditService(data_broker)
