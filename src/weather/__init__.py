"""
天气预报示例领域

演示如何为一种记录类型注册排序器、过滤器和报表。
"""

from core.registry import ServiceRegistry
from db.database import DatabaseManager
from db.models import WeatherForecast
from weather.constants import WeatherForecastConstants, SUMMARIES
from weather.strategies import WeatherForecastSorter, WeatherForecastFilter
from weather.reports import (
    WeatherForecastsFilteredBySummaryRequest,
    WeatherForecastsFilteredBySummaryHandler,
)
from weather.edit_context import WeatherForecastEditContext
from weather.services import WeatherForecastListService, WeatherForecastEditService
from weather.seed_data import WeatherTestDataProvider


def add_weather_services(registry: ServiceRegistry, db_manager: DatabaseManager) -> ServiceRegistry:
    """
    注册 WeatherForecast 的排序器、过滤器和报表 handler

    Returns:
        传入的 registry（便于链式调用）
    """
    registry.register_sorter(WeatherForecast, WeatherForecastSorter)
    registry.register_filter(WeatherForecast, WeatherForecastFilter)
    registry.register_report_handler(
        WeatherForecastsFilteredBySummaryRequest,
        WeatherForecast,
        lambda: WeatherForecastsFilteredBySummaryHandler(db_manager),
    )
    return registry


__all__ = [
    "WeatherForecastConstants",
    "SUMMARIES",
    "WeatherForecastSorter",
    "WeatherForecastFilter",
    "WeatherForecastsFilteredBySummaryRequest",
    "WeatherForecastsFilteredBySummaryHandler",
    "WeatherForecastEditContext",
    "WeatherForecastListService",
    "WeatherForecastEditService",
    "WeatherTestDataProvider",
    "add_weather_services",
]
