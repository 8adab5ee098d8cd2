"""
数据库层模块
提供 unit of work 工厂和 ORM 模型定义
"""

from db.database import DatabaseManager, create_test_database_manager
from db.models import Base, RecordMixin, WeatherForecast

__all__ = [
    "DatabaseManager",
    "create_test_database_manager",
    "Base",
    "RecordMixin",
    "WeatherForecast",
]
