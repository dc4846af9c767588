"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner of connections, invites and activity events

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from pollen8.models.user import User, user_industries  # noqa: F401
from pollen8.models.industry import Industry  # noqa: F401
from pollen8.models.connection import Connection  # noqa: F401
from pollen8.models.invite import Invite  # noqa: F401
from pollen8.models.invite_analytics import InviteAnalytics  # noqa: F401
from pollen8.models.activity_event import ActivityEvent  # noqa: F401
