"""
数据库管理器（Unit of Work 工厂）

职责：
- 管理异步引擎和连接池
- 为每次操作提供独立的短生命周期 session（unit of work）
- 初始化数据库 schema
- SQLite 文件库启用 WAL 模式
"""

from pathlib import Path
from typing import Optional, AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    AsyncEngine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from utils.logger import get_logger

logger = get_logger("DataBroker")


class DatabaseManager:
    """
    数据库管理器

    handler 不持有 session，而是每次调用通过 session() 打开一个新的
    unit of work：正常退出时 commit，异常时 rollback 并重新抛出。

    使用方式：
        db_manager = DatabaseManager("sqlite+aiosqlite:///data/databroker.db")
        await db_manager.initialize()

        async with db_manager.session() as session:
            session.add(record)
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
    ):
        """
        初始化数据库管理器

        Args:
            database_url: 数据库连接 URL，默认为 data/ 下的 SQLite 文件
                         格式: sqlite+aiosqlite:///path/to/db.sqlite
            echo: 是否打印 SQL 语句（调试用）
        """
        if database_url is None:
            database_url = "sqlite+aiosqlite:///data/databroker.db"

        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._initialized = False

        logger.info(f"DatabaseManager created with URL: {self._mask_url(database_url)}")

    @staticmethod
    def _mask_url(url: str) -> str:
        """隐藏 URL 中的账号密码"""
        if "@" in url and ":///" not in url:
            scheme, _, rest = url.partition("://")
            return f"{scheme}://***@{rest.split('@')[-1]}"
        return url

    def _is_sqlite(self) -> bool:
        return self.database_url.lower().startswith("sqlite")

    def _is_memory(self) -> bool:
        return ":memory:" in self.database_url

    async def initialize(self) -> None:
        """
        初始化数据库
        - 创建引擎和 session 工厂
        - SQLite 文件库配置 WAL
        - 创建所有表
        """
        if self._initialized:
            logger.debug("Database already initialized")
            return

        engine_kwargs = {"echo": self.echo}

        if self._is_sqlite():
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self._is_memory():
                # 内存库只存在于单个连接中
                engine_kwargs["poolclass"] = StaticPool

        self._engine = create_async_engine(self.database_url, **engine_kwargs)

        if self._is_sqlite() and not self._is_memory():
            Path(self.database_url.split(":///", 1)[-1]).parent.mkdir(parents=True, exist_ok=True)
            await self._configure_sqlite_wal()

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        await self._create_tables()

        self._initialized = True
        logger.info("Database initialized successfully")

    async def _configure_sqlite_wal(self) -> None:
        """SQLite WAL 模式：读写并发，写不阻塞读"""
        async with self._engine.begin() as conn:
            await conn.execute(text("PRAGMA journal_mode=WAL"))
            await conn.execute(text("PRAGMA synchronous=NORMAL"))
            await conn.execute(text("PRAGMA foreign_keys=ON"))

        logger.info("SQLite WAL mode configured")

    async def _create_tables(self) -> None:
        """创建所有数据库表"""
        from db.models import Base

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        打开一个 unit of work

        Yields:
            AsyncSession: 数据库会话
        """
        if not self._initialized:
            await self.initialize()

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def close(self) -> None:
        """关闭数据库连接"""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            self._initialized = False
            logger.info("Database connection closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._initialized


def create_test_database_manager() -> DatabaseManager:
    """
    创建用于测试的内存数据库管理器

    Returns:
        使用内存数据库的 DatabaseManager
    """
    return DatabaseManager(
        database_url="sqlite+aiosqlite:///:memory:",
        echo=False,
    )
