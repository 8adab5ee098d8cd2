"""
WeatherForecastListService / WeatherForecastEditService and the test data provider.
"""

import uuid

from api.dependencies import seed_test_data
from core.requests import ListQueryRequest
from db.database import DatabaseManager
from db.models import WeatherForecast
from services.configuration import add_server_data_services
from services.data_broker import DataBroker
from weather import (
    SUMMARIES,
    WeatherForecastEditService,
    WeatherForecastListService,
    WeatherTestDataProvider,
)


class TestTestDataProvider:

    def test_is_deterministic(self):
        first = WeatherTestDataProvider()
        second = WeatherTestDataProvider()
        assert [f.uid for f in first.weather_forecasts] == [f.uid for f in second.weather_forecasts]

    def test_summaries_are_balanced(self, test_data: WeatherTestDataProvider):
        summaries = [f.summary for f in test_data.weather_forecasts]
        assert len(summaries) == 100
        assert all(summaries.count(s) == 10 for s in SUMMARIES)

    def test_random_record_is_a_copy(self, test_data: WeatherTestDataProvider):
        record = test_data.get_random_record()
        assert all(record is not f for f in test_data.weather_forecasts)

    def test_random_records_follow_the_seed(self):
        first = WeatherTestDataProvider(seed=7)
        second = WeatherTestDataProvider(seed=7)
        picks = [first.get_random_record().uid for _ in range(5)]
        assert picks == [second.get_random_record().uid for _ in range(5)]


class TestSeedTestData:

    async def test_seeds_custom_provider(self, db_manager: DatabaseManager):
        written = await seed_test_data(db_manager, WeatherTestDataProvider(record_count=15))

        assert written == 15
        data_broker = add_server_data_services(db_manager)
        result = await data_broker.get_items(WeatherForecast, ListQueryRequest(page_size=1))
        assert result.total_count == 15

    async def test_skips_populated_table(self, populated_db: DatabaseManager):
        written = await seed_test_data(populated_db, WeatherTestDataProvider(record_count=15))
        assert written == 0


class TestListService:

    async def test_get_forecasts(self, data_broker: DataBroker):
        service = WeatherForecastListService(data_broker)

        assert await service.get_forecasts(ListQueryRequest(page_size=10))
        assert len(service.forecasts) == 10
        assert service.total_count == 100

    async def test_get_forecasts_page(self, data_broker: DataBroker):
        service = WeatherForecastListService(data_broker)

        items, total = await service.get_forecasts_page(90, 20)

        assert len(items) == 10
        assert total == 100


class TestEditService:

    async def test_edit_and_save(self, data_broker: DataBroker, test_data: WeatherTestDataProvider):
        service = WeatherForecastEditService(data_broker)
        uid = test_data.weather_forecasts[0].uid

        assert await service.get_forecast(uid)
        service.edit_context.summary = "Scorching"
        result = await service.update_forecast()

        assert result.successful
        assert result.message == "Record Saved"
        assert not service.edit_context.is_dirty

        reloaded = WeatherForecastEditService(data_broker)
        await reloaded.get_forecast(uid)
        assert reloaded.edit_context.summary == "Scorching"

    async def test_clean_save_returns_last_result(self, data_broker: DataBroker, test_data: WeatherTestDataProvider):
        service = WeatherForecastEditService(data_broker)
        await service.get_forecast(test_data.weather_forecasts[1].uid)

        result = await service.update_forecast()

        assert result is service.last_result
        assert result.successful

    async def test_missing_forecast(self, data_broker: DataBroker):
        service = WeatherForecastEditService(data_broker)
        assert not await service.get_forecast(uuid.uuid4())
