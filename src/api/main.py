"""
FastAPI 应用入口

创建 FastAPI 应用实例，配置中间件、异常处理和路由。
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import config
from api.dependencies import init_globals, close_globals
from api.routers import forecasts
from core.exceptions import DataPipelineError
from utils.logger import get_logger

logger = get_logger("DataBroker")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    应用生命周期管理

    启动时：初始化数据库和 broker
    关闭时：释放连接
    """
    logger.info("Starting Data Broker API...")
    await init_globals()
    logger.info("Data Broker API started successfully")

    yield

    logger.info("Shutting down Data Broker API...")
    await close_globals()
    logger.info("Data Broker API shutdown complete")


async def data_pipeline_error_handler(request: Request, exc: DataPipelineError) -> JSONResponse:
    """格式错误的请求 → 400"""
    logger.warning(f"Malformed request on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """
    创建 FastAPI 应用

    Returns:
        配置好的 FastAPI 应用实例
    """
    app = FastAPI(
        title="Data Broker API",
        description="CQS data broker over SQLAlchemy",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if config.DEBUG else None,
        redoc_url="/redoc" if config.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(DataPipelineError, data_pipeline_error_handler)

    app.include_router(
        forecasts.router,
        prefix="/api/v1/forecasts",
        tags=["forecasts"]
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
