"""
天气预报报表：按 summary 过滤
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import DataPipelineError
from core.requests import ReportRequest, validate_paging
from core.results import ListQueryResult
from core.sorting import RecordSortHelper
from db.database import DatabaseManager
from db.models import WeatherForecast
from services.report_broker import ReportHandler
from utils.logger import get_logger
from weather.constants import WeatherForecastConstants

logger = get_logger("DataBroker")


@dataclass(frozen=True)
class WeatherForecastsFilteredBySummaryRequest(ReportRequest):
    """summary 为 None 时不过滤"""
    report_name: str = WeatherForecastConstants.REPORT_FILTERED_BY_SUMMARY
    summary: Optional[str] = None


class WeatherForecastsFilteredBySummaryHandler(ReportHandler[WeatherForecast]):
    """按 summary 过滤 → 计数 → 排序 → 分页"""

    def __init__(self, db_manager: DatabaseManager):
        self._db_manager = db_manager

    async def execute(self, request: ReportRequest) -> ListQueryResult[WeatherForecast]:
        if not isinstance(request, WeatherForecastsFilteredBySummaryRequest):
            raise DataPipelineError(
                "No WeatherForecastsFilteredBySummaryRequest provided",
                source=type(self).__name__,
            )
        validate_paging(request, source=type(self).__name__)

        query = select(WeatherForecast)
        if request.summary is not None:
            query = query.where(WeatherForecast.summary == request.summary)

        try:
            async with self._db_manager.session() as session:
                count_result = await session.execute(
                    select(func.count()).select_from(query.subquery())
                )
                total_count = count_result.scalar_one()

                query = RecordSortHelper.apply(
                    query, WeatherForecast, request.sort_field, request.sort_descending
                )
                if request.page_size > 0:
                    query = query.offset(request.start_index).limit(request.page_size)

                result = await session.execute(query)
                items = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.exception(f"Report {request.report_name} failed: {e}")
            return ListQueryResult.failure(f"Error running report {request.report_name}")

        return ListQueryResult.success(items, total_count)
