"""Invite Links — URL generation for trackable referral invites.

Invariants:
    - URL = <base_url>/<token>, token is URL-safe base64 from a CSPRNG
    - Default token carries 72 bits of entropy (9 bytes)
    - Uniqueness is enforced by the invites.url unique index, not here

Design Decisions:
    - Token source is injectable so tests can force collisions
"""

import secrets
from collections.abc import Callable

TokenSource = Callable[[int], str]


def generate_invite_url(
    base_url: str,
    token_bytes: int = 9,
    token_source: TokenSource = secrets.token_urlsafe,
) -> str:
    """Build a fresh invite URL under `base_url`."""
    return f"{base_url.rstrip('/')}/{token_source(token_bytes)}"
