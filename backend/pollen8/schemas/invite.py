"""Invite Schemas — invite creation and invite analytics.

Invariants:
    - InviteCreate.name: 1-200 chars after stripping
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InviteCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class InviteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    name: str
    url: str
    click_count: int
    conversion_count: int
    created_at: datetime


class DailyClicksResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    clicks: int


class InviteAnalyticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    invite_id: UUID
    total_clicks: int
    clicks_per_day: float
    conversion_rate: float
    daily_clicks: list[DailyClicksResponse] = []
