"""
WeatherForecast 应用服务

- WeatherForecastListService: 列表页使用，保存最近一次成功的查询结果
- WeatherForecastEditService: 编辑页使用，读取 → 编辑 → 保存
"""

import uuid
from typing import List, Tuple

from core.requests import CommandRequest, ItemQueryRequest, ListQueryRequest
from core.results import CommandResult
from db.models import WeatherForecast
from services.data_broker import DataBroker
from weather.edit_context import WeatherForecastEditContext


class WeatherForecastListService:
    """天气预报列表服务"""

    def __init__(self, data_broker: DataBroker):
        self._data_broker = data_broker
        self.forecasts: List[WeatherForecast] = []
        self.total_count = 0

    async def get_forecasts(self, request: ListQueryRequest) -> bool:
        """
        查询一页数据，成功时更新 forecasts / total_count

        Returns:
            查询是否成功
        """
        result = await self._data_broker.get_items(WeatherForecast, request)
        if result.successful:
            self.forecasts = result.items
            self.total_count = result.total_count
        return result.successful

    async def get_forecasts_page(self, start_index: int, count: int) -> Tuple[List[WeatherForecast], int]:
        """
        虚拟滚动列表的数据源

        Args:
            start_index: 起始位置
            count: 需要的条数

        Returns:
            (items, total_count)，失败时为 ([], 0)
        """
        request = ListQueryRequest(start_index=start_index, page_size=count)
        result = await self._data_broker.get_items(WeatherForecast, request)
        if not result.successful:
            return [], 0
        return result.items, result.total_count


class WeatherForecastEditService:
    """天气预报编辑服务"""

    def __init__(self, data_broker: DataBroker):
        self._data_broker = data_broker
        self.last_result: CommandResult = CommandResult.success()
        self.edit_context = WeatherForecastEditContext(WeatherForecast())

    async def get_forecast(self, uid: uuid.UUID) -> bool:
        """读取记录并载入编辑上下文，返回是否找到"""
        result = await self._data_broker.get_item(WeatherForecast, ItemQueryRequest(uid=uid))
        if result.successful and result.item is not None:
            self.edit_context.load(result.item)
            return True
        return False

    async def update_forecast(self) -> CommandResult:
        """保存编辑；没有修改时直接返回上一次的结果"""
        if not self.edit_context.is_dirty:
            return self.last_result

        request = CommandRequest(item=self.edit_context.record)
        result = await self._data_broker.update_item(WeatherForecast, request)

        if result.successful:
            self.edit_context.set_as_saved()

        self.last_result = result
        return result
