"""Repositories — SQLAlchemy implementations of the core boundary protocols.

Invariants:
    - Each repository wraps one AsyncSession handed in by the caller
    - Multi-row writes commit once; IntegrityError is translated to ConflictError here
"""
