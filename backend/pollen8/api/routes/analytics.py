"""Analytics Routes — network growth, engagement, invite effectiveness and network value."""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from pollen8.api.dependencies import get_analytics_service
from pollen8.schemas.analytics import (
    InviteEffectivenessResponse, NetworkGrowthResponse, UserEngagementResponse,
)
from pollen8.schemas.network import NetworkValueResponse
from pollen8.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/v1/users/{user_id}/analytics", tags=["analytics"])


@router.get("/growth", response_model=NetworkGrowthResponse)
async def get_network_growth(
    user_id: UUID,
    start_date: datetime = Query(...),
    end_date: datetime = Query(...),
    service: AnalyticsService = Depends(get_analytics_service),
):
    growth = await service.calculate_network_growth(user_id, start_date, end_date)
    return NetworkGrowthResponse.model_validate(growth)


@router.get("/engagement", response_model=UserEngagementResponse)
async def get_user_engagement(
    user_id: UUID,
    period: str = Query("30d"),
    service: AnalyticsService = Depends(get_analytics_service),
):
    engagement = await service.get_user_engagement(user_id, period)
    return UserEngagementResponse.model_validate(engagement)


@router.get("/invites", response_model=InviteEffectivenessResponse)
async def get_invite_effectiveness(
    user_id: UUID, service: AnalyticsService = Depends(get_analytics_service),
):
    report = await service.get_invite_effectiveness(user_id)
    return InviteEffectivenessResponse.model_validate(report)


@router.get("/network-value", response_model=NetworkValueResponse)
async def get_network_value(
    user_id: UUID, service: AnalyticsService = Depends(get_analytics_service),
):
    return NetworkValueResponse(
        user_id=user_id, network_value=await service.get_network_value(user_id),
    )
