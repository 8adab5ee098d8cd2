"""
天气预报测试数据

用固定种子生成，保证每次运行数据一致：
每个 summary 出现的次数相同，按 summary 升序时 "Balmy" 排在最前。
"""

import random
import uuid
from datetime import date, timedelta
from typing import List, Optional

from db.database import DatabaseManager
from db.models import WeatherForecast
from utils.logger import get_logger
from weather.constants import SUMMARIES

logger = get_logger("DataBroker")

DEFAULT_RECORD_COUNT = 100
DEFAULT_SEED = 20240101


class WeatherTestDataProvider:
    """测试数据提供者（进程内单例）"""

    _instance: Optional["WeatherTestDataProvider"] = None

    def __init__(self, record_count: int = DEFAULT_RECORD_COUNT, seed: int = DEFAULT_SEED):
        self._rng = random.Random(seed)
        start = date(2024, 1, 1)
        self.weather_forecasts: List[WeatherForecast] = [
            WeatherForecast(
                uid=uuid.UUID(int=self._rng.getrandbits(128), version=4),
                date=start + timedelta(days=i),
                temperature_c=self._rng.randint(-20, 55),
                summary=SUMMARIES[i % len(SUMMARIES)],
            )
            for i in range(record_count)
        ]

    @classmethod
    def instance(cls) -> "WeatherTestDataProvider":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_random_record(self) -> WeatherForecast:
        """返回一条随机记录的副本，调用方可以随意修改"""
        return self._rng.choice(self.weather_forecasts).copy_with()

    async def load_database(self, db_manager: DatabaseManager) -> int:
        """
        把测试数据写入数据库（写入的是副本，provider 中的记录保持瞬态）

        Returns:
            写入的记录数
        """
        async with db_manager.session() as session:
            session.add_all([record.copy_with() for record in self.weather_forecasts])

        logger.info(f"Loaded {len(self.weather_forecasts)} weather forecasts")
        return len(self.weather_forecasts)
