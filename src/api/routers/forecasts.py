"""
Forecasts Router

通过 Data Broker 暴露 WeatherForecast 的 CRUD 端点：
- GET    /api/v1/forecasts                     - 列表（分页、排序、过滤）
- GET    /api/v1/forecasts/reports/by-summary  - 按 summary 过滤的报表
- GET    /api/v1/forecasts/{uid}               - 详情
- POST   /api/v1/forecasts                     - 新增
- PUT    /api/v1/forecasts/{uid}               - 更新
- DELETE /api/v1/forecasts/{uid}               - 删除
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.config import config
from api.dependencies import (
    get_data_broker,
    get_edit_service,
    get_list_service,
    get_report_broker,
)
from api.schemas.forecast import (
    CommandResponse,
    ForecastCreateRequest,
    ForecastListResponse,
    ForecastResponse,
    ForecastUpdateRequest,
)
from core.requests import CommandRequest, FilterDefinition, ItemQueryRequest, ListQueryRequest
from db.models import WeatherForecast
from services.data_broker import DataBroker
from services.report_broker import ServerReportBroker
from utils.logger import get_logger
from weather import (
    WeatherForecastConstants,
    WeatherForecastEditService,
    WeatherForecastListService,
    WeatherForecastsFilteredBySummaryRequest,
)

logger = get_logger("DataBroker")

router = APIRouter()


@router.get("", response_model=ForecastListResponse)
async def list_forecasts(
    start_index: int = Query(0, ge=0),
    page_size: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    sort_field: Optional[str] = Query(None, description="Field name, e.g. date / temperature_c / summary"),
    sort_descending: bool = Query(False),
    summary: Optional[str] = Query(None, description="Only forecasts with this summary"),
    temperature_below: Optional[int] = Query(None, description="Only forecasts colder than this"),
    list_service: WeatherForecastListService = Depends(get_list_service),
):
    """
    列出天气预报
    """
    filters: List[FilterDefinition] = []
    if summary is not None:
        filters.append(FilterDefinition(WeatherForecastConstants.BY_SUMMARY, summary))
    if temperature_below is not None:
        filters.append(FilterDefinition(WeatherForecastConstants.TEMPERATURE_LESS_THAN, str(temperature_below)))

    request = ListQueryRequest(
        start_index=start_index,
        page_size=page_size,
        sort_field=sort_field,
        sort_descending=sort_descending,
        filters=filters,
    )

    if not await list_service.get_forecasts(request):
        raise HTTPException(status_code=500, detail="Error retrieving forecasts")

    return ForecastListResponse(
        items=[ForecastResponse.model_validate(f) for f in list_service.forecasts],
        total_count=list_service.total_count,
        start_index=start_index,
        page_size=page_size,
    )


@router.get("/reports/by-summary", response_model=ForecastListResponse)
async def forecasts_by_summary(
    summary: Optional[str] = Query(None),
    start_index: int = Query(0, ge=0),
    page_size: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
    sort_field: Optional[str] = Query(None),
    sort_descending: bool = Query(False),
    report_broker: ServerReportBroker = Depends(get_report_broker),
):
    """
    按 summary 过滤的报表
    """
    request = WeatherForecastsFilteredBySummaryRequest(
        summary=summary,
        start_index=start_index,
        page_size=page_size,
        sort_field=sort_field,
        sort_descending=sort_descending,
    )
    result = await report_broker.get_report(WeatherForecast, request)

    if not result.successful:
        raise HTTPException(status_code=500, detail=result.message)

    return ForecastListResponse(
        items=[ForecastResponse.model_validate(f) for f in result.items],
        total_count=result.total_count,
        start_index=start_index,
        page_size=page_size,
    )


@router.get("/{uid}", response_model=ForecastResponse)
async def get_forecast(
    uid: uuid.UUID,
    data_broker: DataBroker = Depends(get_data_broker),
):
    """
    获取单条天气预报
    """
    result = await data_broker.get_item(WeatherForecast, ItemQueryRequest(uid=uid))

    if not result.successful:
        raise HTTPException(status_code=404, detail=f"Forecast '{uid}' not found")

    return ForecastResponse.model_validate(result.item)


@router.post("", response_model=CommandResponse, status_code=201)
async def create_forecast(
    body: ForecastCreateRequest,
    data_broker: DataBroker = Depends(get_data_broker),
):
    """
    新增天气预报
    """
    record = WeatherForecast(
        uid=body.uid or uuid.uuid4(),
        date=body.date,
        temperature_c=body.temperature_c,
        summary=body.summary,
    )
    result = await data_broker.create_item(WeatherForecast, CommandRequest(item=record))

    if not result.successful:
        raise HTTPException(status_code=409, detail=result.message)

    return CommandResponse(successful=True, message=result.message, uid=record.uid)


@router.put("/{uid}", response_model=CommandResponse)
async def update_forecast(
    uid: uuid.UUID,
    body: ForecastUpdateRequest,
    edit_service: WeatherForecastEditService = Depends(get_edit_service),
):
    """
    更新天气预报（只修改请求中给出的字段）
    """
    if not await edit_service.get_forecast(uid):
        raise HTTPException(status_code=404, detail=f"Forecast '{uid}' not found")

    context = edit_service.edit_context
    if body.date is not None:
        context.date = body.date
    if body.temperature_c is not None:
        context.temperature_c = body.temperature_c
    if "summary" in body.model_fields_set:
        context.summary = body.summary

    result = await edit_service.update_forecast()

    if not result.successful:
        raise HTTPException(status_code=404, detail=result.message)

    return CommandResponse(successful=True, message=result.message, uid=uid)


@router.delete("/{uid}", response_model=CommandResponse)
async def delete_forecast(
    uid: uuid.UUID,
    data_broker: DataBroker = Depends(get_data_broker),
):
    """
    删除天气预报
    """
    result = await data_broker.delete_item(
        WeatherForecast, CommandRequest(item=WeatherForecast(uid=uid))
    )

    if not result.successful:
        raise HTTPException(status_code=404, detail=f"Forecast '{uid}' not found")

    return CommandResponse(successful=True, message=result.message, uid=uid)
