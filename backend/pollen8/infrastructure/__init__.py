"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - Raw driver errors are mapped to core/errors.py types here
"""
