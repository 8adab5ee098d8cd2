"""
WeatherForecast 编辑上下文
"""

import uuid
import datetime
from typing import Optional

from core.edit import RecordEditContextBase
from db.models import WeatherForecast
from weather.constants import WeatherForecastConstants


class WeatherForecastEditContext(RecordEditContextBase[WeatherForecast]):
    """可编辑字段：date / temperature_c / summary"""

    @property
    def date(self) -> Optional[datetime.date]:
        return self._date

    @date.setter
    def date(self, value: Optional[datetime.date]) -> None:
        self._update_if_changed("_date", value, WeatherForecastConstants.DATE)

    @property
    def temperature_c(self) -> Optional[int]:
        return self._temperature_c

    @temperature_c.setter
    def temperature_c(self, value: Optional[int]) -> None:
        self._update_if_changed("_temperature_c", value, WeatherForecastConstants.TEMPERATURE_C)

    @property
    def summary(self) -> Optional[str]:
        return self._summary

    @summary.setter
    def summary(self, value: Optional[str]) -> None:
        self._update_if_changed("_summary", value, WeatherForecastConstants.SUMMARY)

    def load(self, record: WeatherForecast, notify: bool = True) -> None:
        self.base_record = record
        self.uid = record.uid
        self._date = record.date
        self._temperature_c = record.temperature_c
        self._summary = record.summary
        if notify:
            self.notify_field_changed(None)

    @property
    def record(self) -> WeatherForecast:
        return WeatherForecast(
            uid=self.uid,
            date=self._date,
            temperature_c=self._temperature_c,
            summary=self._summary,
        )

    def as_new_record(self) -> WeatherForecast:
        return self.record.copy_with(uid=uuid.uuid4())
