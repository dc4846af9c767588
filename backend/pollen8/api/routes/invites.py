"""Invite Routes — invite creation, listing, click/conversion tracking and analytics.

Invariants:
    - Click tracking failures surface as INVITE_TRACKING_FAILED (404 for an
      unknown invite, 503 for store failures)
    - Analytics date range validated by the service (400 on start > end)
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from pollen8.api.dependencies import get_invite_service
from pollen8.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from pollen8.schemas.invite import (
    InviteAnalyticsResponse, InviteCreate, InviteResponse,
)
from pollen8.schemas.pagination import Paginated
from pollen8.services.invite_service import InviteService

router = APIRouter(prefix="/api/v1", tags=["invites"])


@router.post(
    "/users/{user_id}/invites", response_model=InviteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invite(
    user_id: UUID,
    body: InviteCreate,
    service: InviteService = Depends(get_invite_service),
):
    return await service.create_invite(user_id, body.name)


@router.get("/users/{user_id}/invites", response_model=Paginated[InviteResponse])
async def list_invites(
    user_id: UUID,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: InviteService = Depends(get_invite_service),
):
    result = await service.get_invites_by_user(user_id, page, limit)
    return Paginated[InviteResponse].from_page(result)


@router.post("/invites/{invite_id}/clicks")
async def track_invite_click(
    invite_id: UUID, service: InviteService = Depends(get_invite_service),
):
    await service.track_invite_click(invite_id)
    return {"message": "Invite click tracked successfully"}


@router.post("/invites/{invite_id}/conversions")
async def record_invite_conversion(
    invite_id: UUID, service: InviteService = Depends(get_invite_service),
):
    await service.record_invite_conversion(invite_id)
    return {"message": "Invite conversion recorded"}


@router.get(
    "/invites/{invite_id}/analytics", response_model=InviteAnalyticsResponse,
)
async def get_invite_analytics(
    invite_id: UUID,
    start_date: datetime = Query(...),
    end_date: datetime = Query(...),
    service: InviteService = Depends(get_invite_service),
):
    report = await service.get_invite_analytics(invite_id, start_date, end_date)
    return InviteAnalyticsResponse.model_validate(report)
