"""
工具模块
提供日志等基础功能
"""

from .logger import (
    Logger,
    get_logger,
    set_global_debug,
    get_all_loggers,
)

__all__ = [
    'Logger',
    'get_logger',
    'set_global_debug',
    'get_all_loggers',
]
