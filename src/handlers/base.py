"""
Handler 公共部分

- ServerHandlerBase: 持有 unit of work 工厂和服务注册表的基础 handler
- OverridableHandler: 先查注册表里的记录专属 handler，没有则交给通用 handler
- CommandServerHandlerBase: 命令 handler 的公共流程（受影响行数 → 成功/失败）
- 主键相关的辅助函数
"""

from typing import Any, Dict, List, Optional, Type

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DataPipelineError
from core.registry import ServiceRegistry
from core.results import CommandResult
from db.database import DatabaseManager
from utils.logger import get_logger

logger = get_logger("DataBroker")


class ServerHandlerBase:
    """
    通用 handler 基类

    每次 execute 都通过 db_manager.session() 打开一个新的 unit of work，
    handler 本身不保存任何跨请求的可变状态。
    """

    def __init__(self, db_manager: DatabaseManager, registry: Optional[ServiceRegistry] = None):
        self._db_manager = db_manager
        self._registry = registry or ServiceRegistry()

    @property
    def db_manager(self) -> DatabaseManager:
        return self._db_manager

    @property
    def registry(self) -> ServiceRegistry:
        return self._registry

    def _require_request(self, request: Any, request_name: str) -> None:
        if request is None:
            raise DataPipelineError(f"No {request_name} defined", source=type(self).__name__)

    def _require_item(self, record_type: Type[Any], request: Any) -> Any:
        self._require_request(request, "CommandRequest")
        item = request.item
        if not isinstance(item, record_type):
            raise DataPipelineError(
                f"CommandRequest item is {type(item).__name__}, expected {record_type.__name__}",
                source=type(self).__name__,
            )
        return item


class OverridableHandler:
    """
    记录专属 handler 覆盖

    子类设置 interface，并在构造时传入通用 handler。
    """

    interface: type

    def __init__(self, registry: ServiceRegistry, base_handler: Any):
        self._registry = registry
        self._base_handler = base_handler

    def resolve(self, record_type: Type[Any]) -> Any:
        """
        选出处理该记录类型的 handler

        Returns:
            注册表中的专属 handler，没有则为通用 handler
        """
        custom = self._registry.get_handler(self.interface, record_type)
        if custom is None or custom is self:
            return self._base_handler
        return custom


# ============================================================
# 主键辅助
# ============================================================

def primary_key_names(record_type: Type[Any]) -> List[str]:
    """记录类型的主键属性名"""
    mapper = inspect(record_type)
    return [mapper.get_property_by_column(column).key for column in mapper.primary_key]


def primary_key_criteria(record_type: Type[Any], item: Any) -> List[Any]:
    """
    生成 "主键 == 记录主键值" 的 WHERE 条件

    Raises:
        DataPipelineError: 记录缺少主键值
    """
    criteria = []
    for key in primary_key_names(record_type):
        value = getattr(item, key)
        if value is None:
            raise DataPipelineError(f"{record_type.__name__} has no value for primary key '{key}'")
        criteria.append(getattr(record_type, key) == value)
    return criteria


def column_values(record_type: Type[Any], item: Any, include_primary_key: bool = False) -> Dict[str, Any]:
    """记录所有映射列的值（默认不含主键）"""
    mapper = inspect(record_type)
    skip = set() if include_primary_key else set(primary_key_names(record_type))
    return {
        attr.key: getattr(item, attr.key)
        for attr in mapper.column_attrs
        if attr.key not in skip
    }


class CommandServerHandlerBase(ServerHandlerBase):
    """
    命令 handler 基类

    子类实现 _apply()：在 unit of work 中执行一次 ORM 操作，返回受影响的行数。
    受影响行数为 1 视为成功；否则回滚并记录 critical 日志。数据库异常只记录、不重试。
    """

    action: str = "save"
    success_message: str = "Record Saved"
    failure_message: str = "Error saving Record"

    async def execute(self, record_type: Type[Any], request: Any) -> CommandResult:
        item = self._require_item(record_type, request)

        try:
            async with self._db_manager.session() as session:
                records_changed = await self._apply(session, record_type, item)
                if records_changed != 1:
                    await session.rollback()
        except SQLAlchemyError as e:
            logger.exception(f"{type(self).__name__} failed to {self.action} the Record: {e}")
            return CommandResult.failure(self.failure_message)

        if records_changed != 1:
            logger.critical(
                f"{type(self).__name__} failed to {self.action} the Record. "
                f"The returned update count was {records_changed}"
            )
            return CommandResult.failure(self.failure_message)

        logger.debug(f"{type(self).__name__}: {self.success_message} ({record_type.__name__})")
        return CommandResult.success(self.success_message)

    async def _apply(self, session: AsyncSession, record_type: Type[Any], item: Any) -> int:
        raise NotImplementedError
