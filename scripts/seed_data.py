"""
写入天气预报测试数据

用法：
    python scripts/seed_data.py
    python scripts/seed_data.py --database-url sqlite+aiosqlite:///data/demo.db --count 500

表中已有数据时跳过。
"""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dotenv import load_dotenv

load_dotenv()

from api.config import config
from api.dependencies import seed_test_data
from db.database import DatabaseManager
from weather import WeatherTestDataProvider


async def main(database_url: str, count: int) -> None:
    db_manager = DatabaseManager(database_url)
    await db_manager.initialize()
    try:
        provider = WeatherTestDataProvider(record_count=count)
        written = await seed_test_data(db_manager, provider)
        print(f"Seeded {written} weather forecasts into {database_url}")
    finally:
        await db_manager.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed weather forecast test data")
    parser.add_argument("--database-url", default=config.DATABASE_URL)
    parser.add_argument("--count", type=int, default=100)
    args = parser.parse_args()

    asyncio.run(main(args.database_url, args.count))
