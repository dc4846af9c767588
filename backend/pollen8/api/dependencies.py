"""Service Wiring — builds request-scoped services from the request's DB session.

Invariants:
    - One AsyncSession per request, shared by every repository in that request
    - Strategy parameters come from Settings

Design Decisions:
    - Plain factory functions used with Depends(): tests override get_db only
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pollen8.config import Settings, get_settings
from pollen8.core.analytics_strategies import (
    DiscountedPriorPeriod, FixedConversionEstimator,
)
from pollen8.infrastructure.database import get_db
from pollen8.repositories.connection_repository import ConnectionRepository
from pollen8.repositories.industry_distribution import SqlIndustryCategorizer
from pollen8.repositories.invite_repository import InviteRepository
from pollen8.repositories.user_repository import (
    UserActivityRepository, UserRepository,
)
from pollen8.services.analytics_service import AnalyticsService
from pollen8.services.invite_service import InviteService
from pollen8.services.network_service import NetworkService


def build_network_service(db: AsyncSession, settings: Settings) -> NetworkService:
    return NetworkService(
        connections=ConnectionRepository(db),
        users=UserRepository(db),
        baseline=DiscountedPriorPeriod(settings.prior_period_factor),
        categorizer=SqlIndustryCategorizer(db),
        scan_limit=settings.analytics_scan_limit,
    )


def build_invite_service(db: AsyncSession, settings: Settings) -> InviteService:
    return InviteService(
        invites=InviteRepository(db),
        users=UserRepository(db),
        conversion=FixedConversionEstimator(settings.assumed_conversion_rate),
        base_url=settings.invite_base_url,
        token_bytes=settings.invite_token_bytes,
        max_url_attempts=settings.invite_url_max_attempts,
    )


async def get_network_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> NetworkService:
    return build_network_service(db, settings)


async def get_invite_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> InviteService:
    return build_invite_service(db, settings)


async def get_analytics_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AnalyticsService:
    return AnalyticsService(
        network=build_network_service(db, settings),
        invites=build_invite_service(db, settings),
        activity=UserActivityRepository(db),
        scan_limit=settings.analytics_scan_limit,
    )
