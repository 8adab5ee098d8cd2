"""
ListRequestServerHandler / ListRequestBaseServerHandler tests.

Covers paging, sorting, filtering, counting, malformed requests
and record-specific handler overrides.
"""

import datetime

import pytest

from core.exceptions import DataPipelineError
from core.registry import ServiceRegistry
from core.requests import FilterDefinition, ListQueryRequest
from core.results import ListQueryResult
from db.database import DatabaseManager
from db.models import WeatherForecast
from handlers import (
    ListRequestBaseServerHandler,
    ListRequestHandler,
    ListRequestServerHandler,
)
from weather import WeatherTestDataProvider


@pytest.fixture
def list_handler(populated_db: DatabaseManager, registry: ServiceRegistry) -> ListRequestServerHandler:
    return ListRequestServerHandler(registry, ListRequestBaseServerHandler(populated_db, registry))


class TestPaging:

    async def test_first_page(self, list_handler):
        result = await list_handler.execute(WeatherForecast, ListQueryRequest(start_index=0, page_size=10))
        assert result.successful
        assert len(result.items) == 10
        assert result.total_count == 100

    async def test_last_partial_page(self, list_handler):
        result = await list_handler.execute(WeatherForecast, ListQueryRequest(start_index=95, page_size=10))
        assert len(result.items) == 5
        assert result.total_count == 100

    async def test_page_beyond_end_is_empty(self, list_handler):
        result = await list_handler.execute(WeatherForecast, ListQueryRequest(start_index=500, page_size=10))
        assert result.successful
        assert result.items == []
        assert result.total_count == 100

    async def test_page_size_zero_returns_everything(self, list_handler):
        result = await list_handler.execute(WeatherForecast, ListQueryRequest(page_size=0))
        assert len(result.items) == 100

    async def test_empty_table(self, db_manager):
        registry = ServiceRegistry()
        handler = ListRequestBaseServerHandler(db_manager, registry)
        result = await handler.execute(WeatherForecast, ListQueryRequest())
        assert result.successful
        assert result.items == []
        assert result.total_count == 0


class TestSorting:

    async def test_sort_by_summary_ascending(self, list_handler):
        request = ListQueryRequest(page_size=10, sort_field="summary")
        result = await list_handler.execute(WeatherForecast, request)
        assert [f.summary for f in result.items[:3]] == ["Balmy"] * 3

    async def test_sort_by_summary_descending(self, list_handler):
        request = ListQueryRequest(page_size=10, sort_field="summary", sort_descending=True)
        result = await list_handler.execute(WeatherForecast, request)
        assert result.items[0].summary == "Warm"

    async def test_sort_by_temperature(self, list_handler):
        request = ListQueryRequest(page_size=0, sort_field="temperature_c")
        result = await list_handler.execute(WeatherForecast, request)
        temperatures = [f.temperature_c for f in result.items]
        assert temperatures == sorted(temperatures)

    async def test_unknown_field_uses_default_date_order(self, list_handler):
        request = ListQueryRequest(page_size=3, sort_field="no_such_field")
        result = await list_handler.execute(WeatherForecast, request)
        assert result.successful
        assert result.items[0].date == datetime.date(2024, 1, 1)
        assert result.items[1].date == datetime.date(2024, 1, 2)

    async def test_sort_without_registered_sorter(self, populated_db):
        handler = ListRequestBaseServerHandler(populated_db, ServiceRegistry())
        request = ListQueryRequest(page_size=5, sort_field="summary", sort_descending=True)
        result = await handler.execute(WeatherForecast, request)
        assert [f.summary for f in result.items] == ["Warm"] * 5


class TestFiltering:

    async def test_filter_by_summary(self, list_handler):
        request = ListQueryRequest(filters=[FilterDefinition("BySummary", "Hot")])
        result = await list_handler.execute(WeatherForecast, request)
        assert result.total_count == 10
        assert {f.summary for f in result.items} == {"Hot"}

    async def test_count_is_filtered_not_paged(self, list_handler):
        request = ListQueryRequest(page_size=3, filters=[FilterDefinition("BySummary", "Mild")])
        result = await list_handler.execute(WeatherForecast, request)
        assert len(result.items) == 3
        assert result.total_count == 10

    async def test_temperature_less_than(self, list_handler, test_data: WeatherTestDataProvider):
        expected = sum(1 for f in test_data.weather_forecasts if f.temperature_c < 10)
        request = ListQueryRequest(page_size=0, filters=[FilterDefinition("TemperatureLessThan", "10")])
        result = await list_handler.execute(WeatherForecast, request)
        assert result.total_count == expected
        assert all(f.temperature_c < 10 for f in result.items)

    async def test_filters_ignored_without_registered_filter(self, populated_db):
        handler = ListRequestBaseServerHandler(populated_db, ServiceRegistry())
        request = ListQueryRequest(filters=[FilterDefinition("BySummary", "Hot")])
        result = await handler.execute(WeatherForecast, request)
        assert result.total_count == 100

    async def test_malformed_filter_data_raises(self, list_handler):
        request = ListQueryRequest(filters=[FilterDefinition("ByTemperature", "hot")])
        with pytest.raises(DataPipelineError):
            await list_handler.execute(WeatherForecast, request)


class TestMalformedRequests:

    async def test_missing_request(self, list_handler):
        with pytest.raises(DataPipelineError, match="No ListQueryRequest defined"):
            await list_handler.execute(WeatherForecast, None)

    async def test_negative_page_size(self, list_handler):
        with pytest.raises(DataPipelineError):
            await list_handler.execute(WeatherForecast, ListQueryRequest(page_size=-1))

    async def test_negative_start_index(self, list_handler):
        with pytest.raises(DataPipelineError):
            await list_handler.execute(WeatherForecast, ListQueryRequest(start_index=-5))


class _CannedListHandler(ListRequestHandler):
    """Record-specific override that never touches the database."""

    def __init__(self):
        self.calls = 0

    async def execute(self, record_type, request):
        self.calls += 1
        return ListQueryResult.success([], 42, message="canned")


class TestOverrides:

    async def test_registered_handler_is_used(self, list_handler, registry: ServiceRegistry):
        custom = _CannedListHandler()
        registry.register_handler(ListRequestHandler, WeatherForecast, custom)

        result = await list_handler.execute(WeatherForecast, ListQueryRequest())

        assert custom.calls == 1
        assert result.total_count == 42
        assert result.message == "canned"

    async def test_removed_override_falls_back(self, list_handler, registry: ServiceRegistry):
        registry.register_handler(ListRequestHandler, WeatherForecast, _CannedListHandler())
        registry.remove_handler(ListRequestHandler, WeatherForecast)

        result = await list_handler.execute(WeatherForecast, ListQueryRequest())
        assert result.total_count == 100

    async def test_self_registration_does_not_recurse(self, list_handler, registry: ServiceRegistry):
        registry.register_handler(ListRequestHandler, WeatherForecast, list_handler)

        result = await list_handler.execute(WeatherForecast, ListQueryRequest(page_size=1))
        assert result.successful
        assert result.total_count == 100
