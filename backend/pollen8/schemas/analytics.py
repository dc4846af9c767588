"""Analytics Schemas — response shapes for growth, engagement and invite effectiveness."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class NetworkGrowthResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    start_date: datetime
    end_date: datetime
    start_network_size: int
    end_network_size: int
    new_connections: int
    growth_rate: float
    average_growth_per_day: float
    start_network_value: float
    end_network_value: float
    network_value_growth: float


class UserEngagementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    period: str
    start_date: datetime
    end_date: datetime
    login_frequency: float
    connection_interactions: int
    invites_sent: int
    profile_updates: int
    engagement_score: float


class InviteEffectivenessResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: UUID
    total_invites: int
    total_clicks: int
    total_conversions: int
    click_through_rate: float
    conversion_rate: float
    overall_effectiveness: float
