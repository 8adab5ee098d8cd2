"""
ServerReportBroker and the filtered-by-summary report.
"""

from dataclasses import dataclass

import pytest

from core.exceptions import DataPipelineError
from core.requests import ReportRequest
from db.models import WeatherForecast
from services.report_broker import ServerReportBroker
from weather import WeatherForecastsFilteredBySummaryHandler, WeatherForecastsFilteredBySummaryRequest


@dataclass(frozen=True)
class UnregisteredReportRequest(ReportRequest):
    pass


class TestReportBroker:

    async def test_filtered_by_summary(self, report_broker: ServerReportBroker):
        request = WeatherForecastsFilteredBySummaryRequest(summary="Cool", page_size=4)

        result = await report_broker.get_report(WeatherForecast, request)

        assert result.successful
        assert result.total_count == 10
        assert len(result.items) == 4
        assert {f.summary for f in result.items} == {"Cool"}

    async def test_no_summary_returns_everything(self, report_broker: ServerReportBroker):
        result = await report_broker.get_report(WeatherForecast, WeatherForecastsFilteredBySummaryRequest())
        assert result.total_count == 100

    async def test_sorted_report(self, report_broker: ServerReportBroker):
        request = WeatherForecastsFilteredBySummaryRequest(
            summary="Hot", page_size=0, sort_field="temperature_c", sort_descending=True
        )

        result = await report_broker.get_report(WeatherForecast, request)

        temperatures = [f.temperature_c for f in result.items]
        assert temperatures == sorted(temperatures, reverse=True)

    async def test_unregistered_report(self, report_broker: ServerReportBroker):
        result = await report_broker.get_report(WeatherForecast, UnregisteredReportRequest())

        assert not result.successful
        assert result.message == (
            "A report for UnregisteredReportRequest is not defined in the service registry."
        )

    async def test_handler_rejects_other_requests(self, populated_db):
        handler = WeatherForecastsFilteredBySummaryHandler(populated_db)
        with pytest.raises(DataPipelineError):
            await handler.execute(ReportRequest())


class TestMalformedReportRequests:

    async def test_missing_request(self, report_broker: ServerReportBroker):
        with pytest.raises(DataPipelineError, match="No ReportRequest defined"):
            await report_broker.get_report(WeatherForecast, None)

    async def test_negative_start_index(self, report_broker: ServerReportBroker):
        request = WeatherForecastsFilteredBySummaryRequest(start_index=-5, page_size=3)
        with pytest.raises(DataPipelineError, match="start_index"):
            await report_broker.get_report(WeatherForecast, request)

    async def test_negative_page_size(self, report_broker: ServerReportBroker):
        request = WeatherForecastsFilteredBySummaryRequest(page_size=-1)
        with pytest.raises(DataPipelineError, match="page_size"):
            await report_broker.get_report(WeatherForecast, request)

    async def test_handler_checks_paging_directly(self, populated_db):
        handler = WeatherForecastsFilteredBySummaryHandler(populated_db)
        with pytest.raises(DataPipelineError, match="start_index"):
            await handler.execute(WeatherForecastsFilteredBySummaryRequest(start_index=-1))
