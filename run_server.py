#!/usr/bin/env python3
"""
Data Broker API 服务器启动脚本

使用方式:
    python run_server.py
    python run_server.py --port 8080 --seed
    python run_server.py --database-url sqlite+aiosqlite:///data/demo.db
    python run_server.py --reload  # 开发模式
"""

import argparse
import os
import sys
from pathlib import Path

# 将 src 目录添加到 Python 路径
SRC_DIR = Path(__file__).parent / "src"
sys.path.insert(0, str(SRC_DIR))

import uvicorn
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()


def main():
    parser = argparse.ArgumentParser(description="Data Broker API Server")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy async URL (default: DATABROKER_DATABASE_URL or data/databroker.db)"
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Load weather forecast test data on startup when the table is empty"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="info",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level (default: info)"
    )

    args = parser.parse_args()

    # api.config 在 uvicorn 导入 app 时读取环境变量
    if args.database_url:
        os.environ["DATABROKER_DATABASE_URL"] = args.database_url
    if args.seed:
        os.environ["DATABROKER_SEED_TEST_DATA"] = "true"
    if args.log_level == "debug":
        os.environ["DEBUG"] = "true"

    display_host = "localhost" if args.host == "0.0.0.0" else args.host
    database_url = os.getenv("DATABROKER_DATABASE_URL", "sqlite+aiosqlite:///data/databroker.db")

    print(f"""
╔══════════════════════════════════════════════════════════════╗
║                    Data Broker API Server                    ║
╠══════════════════════════════════════════════════════════════╣
║  Host: {args.host:<53} ║
║  Port: {args.port:<53} ║
║  Reload: {str(args.reload):<51} ║
║  Seed: {str(args.seed):<53} ║
╠══════════════════════════════════════════════════════════════╣
║  Database: {database_url[:49]:<49} ║
║  Forecasts: {f"http://{display_host}:{args.port}/api/v1/forecasts":<48} ║
╚══════════════════════════════════════════════════════════════╝
""")

    uvicorn_kwargs = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }

    if args.reload:
        uvicorn_kwargs["reload"] = True
        uvicorn_kwargs["reload_dirs"] = [str(SRC_DIR)]

    uvicorn.run("api.main:app", **uvicorn_kwargs)


if __name__ == "__main__":
    main()
