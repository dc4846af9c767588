"""Network Routes — connection lifecycle and network value/analytics endpoints.

Invariants:
    - POST returns 201 with the forward connection record
    - DELETE returns 204 and removes both directions
    - Domain errors propagate to the global Pollen8Error handler
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from pollen8.api.dependencies import get_network_service
from pollen8.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from pollen8.schemas.network import (
    ConnectionCreate, ConnectionResponse, NetworkAnalyticsResponse,
    NetworkValueResponse,
)
from pollen8.schemas.pagination import Paginated
from pollen8.services.network_service import NetworkService

router = APIRouter(prefix="/api/v1/users/{user_id}", tags=["network"])


@router.post(
    "/connections", response_model=ConnectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_connection(
    user_id: UUID,
    body: ConnectionCreate,
    service: NetworkService = Depends(get_network_service),
):
    """Connect two users (both directions)."""
    return await service.create_connection(user_id, body.connected_user_id)


@router.delete(
    "/connections/{connected_user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_connection(
    user_id: UUID,
    connected_user_id: UUID,
    service: NetworkService = Depends(get_network_service),
):
    await service.remove_connection(user_id, connected_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/connections", response_model=Paginated[ConnectionResponse])
async def list_connections(
    user_id: UUID,
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: NetworkService = Depends(get_network_service),
):
    result = await service.get_network_for_user(user_id, page, limit)
    return Paginated[ConnectionResponse].from_page(result)


@router.get("/network/value", response_model=NetworkValueResponse)
async def get_network_value(
    user_id: UUID, service: NetworkService = Depends(get_network_service),
):
    return NetworkValueResponse(
        user_id=user_id,
        network_value=await service.calculate_network_value(user_id),
    )


@router.get("/network/analytics", response_model=NetworkAnalyticsResponse)
async def get_network_analytics(
    user_id: UUID, service: NetworkService = Depends(get_network_service),
):
    analytics = await service.get_network_analytics(user_id)
    return NetworkAnalyticsResponse.model_validate(analytics)
