"""
WeatherForecast 的排序和过滤策略
"""

from typing import Callable, Dict

from sqlalchemy import Select

from core.filtering import RecordFilterBase
from core.sorting import RecordSortBase
from db.models import WeatherForecast
from weather.constants import WeatherForecastConstants


class WeatherForecastSorter(RecordSortBase[WeatherForecast]):
    """按字段名排序；字段无效时按日期排序"""

    record_type = WeatherForecast

    def default_sort(self, query: Select, sort_descending: bool) -> Select:
        return self._order(query, sort_descending, WeatherForecast.date)


class WeatherForecastFilter(RecordFilterBase[WeatherForecast]):
    """
    支持的过滤器：
    - BySummary: summary 等于 filter_data
    - ByTemperature: temperature_c 等于 filter_data
    - TemperatureLessThan: temperature_c 小于 filter_data
    """

    def filter_builders(self) -> Dict[str, Callable[[Select, str], Select]]:
        return {
            WeatherForecastConstants.BY_SUMMARY: self._by_summary,
            WeatherForecastConstants.BY_TEMPERATURE: self._by_temperature,
            WeatherForecastConstants.TEMPERATURE_LESS_THAN: self._temperature_less_than,
        }

    @staticmethod
    def _by_summary(query: Select, data: str) -> Select:
        return query.where(WeatherForecast.summary == data)

    def _by_temperature(self, query: Select, data: str) -> Select:
        value = self.parse_int(WeatherForecastConstants.BY_TEMPERATURE, data)
        return query.where(WeatherForecast.temperature_c == value)

    def _temperature_less_than(self, query: Select, data: str) -> Select:
        value = self.parse_int(WeatherForecastConstants.TEMPERATURE_LESS_THAN, data)
        return query.where(WeatherForecast.temperature_c < value)
