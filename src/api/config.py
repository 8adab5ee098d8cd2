"""
API 配置

包含服务器配置、CORS 配置、分页默认值和数据库配置。
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class APIConfig(BaseSettings):
    """
    API 配置类

    可通过 DATABROKER_ 前缀的环境变量覆盖配置项。
    """

    model_config = SettingsConfigDict(env_prefix="DATABROKER_", case_sensitive=False)

    # 服务器配置
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = True

    # CORS 配置
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # 分页默认值
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 1000

    # 数据库配置
    DATABASE_URL: str = "sqlite+aiosqlite:///data/databroker.db"
    DATABASE_ECHO: bool = False

    # 启动时写入天气预报测试数据（仅当表为空）
    SEED_TEST_DATA: bool = False


# 全局配置实例
config = APIConfig()
