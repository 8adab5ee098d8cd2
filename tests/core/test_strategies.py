"""
Sort / filter strategies and the service registry.

These tests only build statements; nothing touches the database.
"""

import pytest
from sqlalchemy import select

from core.exceptions import DataPipelineError
from core.registry import ServiceRegistry
from core.requests import FilterDefinition
from core.sorting import RecordSortHelper
from db.models import WeatherForecast
from handlers import ListRequestBaseServerHandler, ListRequestHandler
from weather import WeatherForecastFilter, WeatherForecastSorter


def _sql(query) -> str:
    return str(query.compile(compile_kwargs={"literal_binds": True}))


class TestRecordSortHelper:

    def test_binds_mapped_column(self):
        assert RecordSortHelper.build_sort_expression(WeatherForecast, "summary") is WeatherForecast.summary

    @pytest.mark.parametrize("field", [None, "", "no_such_field", "temperature_f"])
    def test_unbindable_field_returns_none(self, field):
        assert RecordSortHelper.build_sort_expression(WeatherForecast, field) is None

    def test_apply_descending(self):
        query = RecordSortHelper.apply(select(WeatherForecast), WeatherForecast, "temperature_c", True)
        assert "ORDER BY weather_forecasts.temperature_c DESC" in _sql(query)

    def test_apply_unknown_field_leaves_query_unsorted(self):
        query = RecordSortHelper.apply(select(WeatherForecast), WeatherForecast, "bogus")
        assert "ORDER BY" not in _sql(query)


class TestWeatherForecastSorter:

    def test_sorts_by_requested_field(self):
        query = WeatherForecastSorter().sort(select(WeatherForecast), "summary", False)
        assert "ORDER BY weather_forecasts.summary ASC" in _sql(query)

    def test_falls_back_to_date(self):
        query = WeatherForecastSorter().sort(select(WeatherForecast), "bogus", True)
        assert "ORDER BY weather_forecasts.date DESC" in _sql(query)


class TestWeatherForecastFilter:

    def test_by_summary(self):
        query = WeatherForecastFilter().add_filters(
            select(WeatherForecast), [FilterDefinition("BySummary", "Hot")]
        )
        assert "weather_forecasts.summary = 'Hot'" in _sql(query)

    def test_filters_are_combined(self):
        query = WeatherForecastFilter().add_filters(
            select(WeatherForecast),
            [FilterDefinition("BySummary", "Hot"), FilterDefinition("TemperatureLessThan", "30")],
        )
        sql = _sql(query)
        assert "weather_forecasts.summary = 'Hot'" in sql
        assert "weather_forecasts.temperature_c < 30" in sql

    def test_unknown_filter_is_ignored(self):
        base = select(WeatherForecast)
        query = WeatherForecastFilter().add_filters(base, [FilterDefinition("ByMoonPhase", "full")])
        assert _sql(query) == _sql(base)

    def test_non_integer_temperature_raises(self):
        with pytest.raises(DataPipelineError, match="ByTemperature"):
            WeatherForecastFilter().add_filters(
                select(WeatherForecast), [FilterDefinition("ByTemperature", "warm")]
            )


class TestServiceRegistry:

    def test_sorters_are_transient(self):
        registry = ServiceRegistry()
        registry.register_sorter(WeatherForecast, WeatherForecastSorter)

        first = registry.get_sorter(WeatherForecast)
        second = registry.get_sorter(WeatherForecast)
        assert isinstance(first, WeatherForecastSorter)
        assert first is not second

    def test_missing_registrations_return_none(self):
        registry = ServiceRegistry()
        assert registry.get_sorter(WeatherForecast) is None
        assert registry.get_filter(WeatherForecast) is None
        assert registry.get_handler(ListRequestHandler, WeatherForecast) is None
        assert registry.get_report_handler(object, WeatherForecast) is None

    def test_handler_must_implement_interface(self):
        with pytest.raises(TypeError):
            ServiceRegistry().register_handler(ListRequestHandler, WeatherForecast, object())

    async def test_register_and_remove_handler(self, db_manager):
        registry = ServiceRegistry()
        handler = ListRequestBaseServerHandler(db_manager, registry)

        registry.register_handler(ListRequestHandler, WeatherForecast, handler)
        assert registry.get_handler(ListRequestHandler, WeatherForecast) is handler

        assert registry.remove_handler(ListRequestHandler, WeatherForecast) is True
        assert registry.remove_handler(ListRequestHandler, WeatherForecast) is False
