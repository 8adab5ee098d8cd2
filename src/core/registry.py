"""
服务注册表（依赖注入的注册面）

- 记录专属的 handler 覆盖：(handler 接口, 记录类型) → handler 实例
- 排序器 / 过滤器：记录类型 → 工厂（每次解析创建新实例）
- 报表 handler：(报表请求类型, 记录类型) → 工厂

使用方式：
    registry = ServiceRegistry()
    registry.register_sorter(WeatherForecast, WeatherForecastSorter)
    registry.register_handler(ListRequestHandler, WeatherForecast, MyListHandler(db_manager))
"""

from typing import Any, Callable, Dict, Optional, Tuple, Type

from core.filtering import RecordFilter
from core.sorting import RecordSorter
from utils.logger import get_logger

logger = get_logger("DataBroker")


class ServiceRegistry:
    """handler / 排序器 / 过滤器 / 报表的注册和解析"""

    def __init__(self):
        self._handlers: Dict[Tuple[type, type], Any] = {}
        self._sorters: Dict[type, Callable[[], RecordSorter]] = {}
        self._filters: Dict[type, Callable[[], RecordFilter]] = {}
        self._report_handlers: Dict[Tuple[type, type], Callable[[], Any]] = {}

    # ========================================
    # Handler 覆盖
    # ========================================

    def register_handler(self, interface: type, record_type: type, handler: Any) -> None:
        """
        为某个记录类型注册专属 handler

        Args:
            interface: handler 接口（如 ListRequestHandler）
            record_type: 记录类型
            handler: 实现了该接口的 handler 实例
        """
        if not isinstance(handler, interface):
            raise TypeError(f"{type(handler).__name__} does not implement {interface.__name__}")
        self._handlers[(interface, record_type)] = handler
        logger.debug(f"Registered {type(handler).__name__} as {interface.__name__} for {record_type.__name__}")

    def get_handler(self, interface: type, record_type: type) -> Optional[Any]:
        return self._handlers.get((interface, record_type))

    def remove_handler(self, interface: type, record_type: type) -> bool:
        return self._handlers.pop((interface, record_type), None) is not None

    # ========================================
    # 排序 / 过滤策略
    # ========================================

    def register_sorter(self, record_type: type, factory: Callable[[], RecordSorter]) -> None:
        self._sorters[record_type] = factory

    def get_sorter(self, record_type: type) -> Optional[RecordSorter]:
        factory = self._sorters.get(record_type)
        return factory() if factory else None

    def register_filter(self, record_type: type, factory: Callable[[], RecordFilter]) -> None:
        self._filters[record_type] = factory

    def get_filter(self, record_type: type) -> Optional[RecordFilter]:
        factory = self._filters.get(record_type)
        return factory() if factory else None

    # ========================================
    # 报表
    # ========================================

    def register_report_handler(
        self,
        request_type: Type[Any],
        record_type: type,
        factory: Callable[[], Any],
    ) -> None:
        self._report_handlers[(request_type, record_type)] = factory

    def get_report_handler(self, request_type: Type[Any], record_type: type) -> Optional[Any]:
        factory = self._report_handlers.get((request_type, record_type))
        return factory() if factory else None
