"""Network Schemas — connection requests and network value/analytics responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ConnectionCreate(BaseModel):
    connected_user_id: UUID


class ConnectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    connected_user_id: UUID
    value: float
    connected_at: datetime


class NetworkValueResponse(BaseModel):
    user_id: UUID
    network_value: float


class NetworkAnalyticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    network_size: int
    network_value: float
    growth_rate: float
    industry_distribution: dict[str, int]
    connections: list[ConnectionResponse]
