"""
日志系统
- 分级日志记录
- 控制台（彩色）和文件输出
- 文件日志轮转，错误日志单独成文件
- 通过环境变量或 set_global_debug() 切换调试模式

环境变量：
    DEBUG                  是否开启调试级别（true/false）
    DATABROKER_LOG_DIR     日志目录，默认 logs
    DATABROKER_LOG_FILE    是否写文件日志（true/false），默认 true
"""

import os
import sys
import copy
import logging
from pathlib import Path
from typing import Optional, Dict
from logging.handlers import RotatingFileHandler


DEFAULT_LOGGER_NAME = "DataBroker"

CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] %(filename)s:%(funcName)s:%(lineno)d - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(funcName)s:%(lineno)d - %(message)s'


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class ColoredFormatter(logging.Formatter):
    """彩色控制台输出（仅在 tty 下生效）"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
    }

    def format(self, record):
        if not sys.stdout.isatty():
            return super().format(record)

        # 复制 record，避免影响文件 handler 的输出
        colored = copy.copy(record)
        color = self.COLORS.get(colored.levelname)
        if color:
            colored.levelname = f"{color}{colored.levelname}{self.COLORS['RESET']}"
            colored.msg = f"{color}{colored.msg}{self.COLORS['RESET']}"
        return super().format(colored)


class Logger:
    """对 logging.Logger 的薄封装，统一 handler 配置和调用栈层级"""

    def __init__(
        self,
        name: str = DEFAULT_LOGGER_NAME,
        log_dir: Optional[str] = None,
        debug: bool = False,
        console: bool = True,
        file: Optional[bool] = None,
    ):
        """
        初始化日志记录器

        Args:
            name: 日志记录器名称
            log_dir: 日志文件目录，None 时读取 DATABROKER_LOG_DIR
            debug: 是否开启调试模式
            console: 是否输出到控制台
            file: 是否输出到文件，None 时读取 DATABROKER_LOG_FILE
        """
        self.name = name
        self.debug_mode = debug

        if file is None:
            file = _env_flag("DATABROKER_LOG_FILE", "true")

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug else logging.INFO)
        self.logger.handlers.clear()
        self.logger.propagate = False

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            self.logger.addHandler(console_handler)

        if file:
            self.log_dir = Path(log_dir or os.getenv("DATABROKER_LOG_DIR", "logs"))
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_formatter = logging.Formatter(FILE_FORMAT)

            file_handler = RotatingFileHandler(
                self.log_dir / f"{name.lower()}.log",
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

            error_handler = RotatingFileHandler(
                self.log_dir / f"{name.lower()}_error.log",
                maxBytes=5 * 1024 * 1024,  # 5MB
                backupCount=3,
                encoding='utf-8'
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(file_formatter)
            self.logger.addHandler(error_handler)

    def set_debug(self, enabled: bool):
        """切换调试模式"""
        self.debug_mode = enabled
        self.logger.setLevel(logging.DEBUG if enabled else logging.INFO)

    def debug(self, msg: str, *args, **kwargs):
        kwargs.setdefault('stacklevel', 2)
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        kwargs.setdefault('stacklevel', 2)
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        kwargs.setdefault('stacklevel', 2)
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        kwargs.setdefault('stacklevel', 2)
        self.logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs):
        kwargs.setdefault('stacklevel', 2)
        self.logger.critical(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        """记录异常信息（自动包含堆栈）"""
        kwargs.setdefault('stacklevel', 2)
        self.logger.exception(msg, *args, **kwargs)


_logger_cache: Dict[str, Logger] = {}
_global_debug = False


def get_logger(name: Optional[str] = None, **kwargs) -> Logger:
    """
    获取日志记录器（带缓存，同名只创建一次）

    Args:
        name: 日志记录器名称，None 则使用 DEFAULT_LOGGER_NAME
        **kwargs: Logger 构造函数参数（仅首次创建时生效）

    Returns:
        Logger 实例
    """
    name = name or DEFAULT_LOGGER_NAME
    if name not in _logger_cache:
        debug = _global_debug or _env_flag('DEBUG')
        _logger_cache[name] = Logger(name=name, debug=debug, **kwargs)
    return _logger_cache[name]


def set_global_debug(enabled: bool):
    """
    设置全局 debug 模式，并同步到所有已创建的 logger

    Args:
        enabled: 是否启用 debug 模式
    """
    global _global_debug
    _global_debug = enabled

    for logger in _logger_cache.values():
        logger.set_debug(enabled)

    get_logger().info(f"Global debug mode: {'ENABLED' if enabled else 'DISABLED'}")


def get_all_loggers() -> Dict[str, Logger]:
    """获取所有已创建的 logger"""
    return dict(_logger_cache)
