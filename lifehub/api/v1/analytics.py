"""
Analytics API Endpoints
=======================

Dashboard and analytics aggregates. Read-only.
"""

from fastapi import APIRouter, Query

from lifehub.core.aggregation import TimeRange
from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.analytics import AnalyticsResponse, DailyStats, DashboardResponse
from lifehub.schemas.common import BaseResponse
from lifehub.services.analytics_service import AnalyticsService
from lifehub.services.dashboard_service import DashboardService

router = APIRouter()
dashboard_router = APIRouter()


@dashboard_router.get(
    "",
    response_model=BaseResponse[DashboardResponse],
)
async def get_dashboard(
    current_user: CurrentUser,
    db: DBSession,
):
    """Recent activity across trackers and a seven-day activity chart."""
    return BaseResponse(data=await DashboardService(db).get_dashboard(current_user.id))


@router.get(
    "",
    response_model=BaseResponse[AnalyticsResponse],
)
async def get_analytics(
    current_user: CurrentUser,
    db: DBSession,
    time_range: TimeRange = Query(default=TimeRange.LAST_30_DAYS, alias="range"),
):
    """
    Charts for the selected range.

    ``7days``, ``30days`` and ``90days`` are bucketed by day; ``year``
    is bucketed by month.
    """
    analytics = await AnalyticsService(db).get_analytics(current_user.id, time_range)
    return BaseResponse(data=analytics)


@router.get(
    "/daily",
    response_model=BaseResponse[DailyStats],
)
async def get_daily_stats(
    current_user: CurrentUser,
    db: DBSession,
):
    return BaseResponse(data=await AnalyticsService(db).get_daily_stats(current_user.id))
