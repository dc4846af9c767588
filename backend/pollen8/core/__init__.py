"""Core Layer — pure domain logic and boundary protocols, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, repositories/ or db/
    - All functions are pure and deterministic (clock and randomness are injected)
    - Default strategies (core/analytics_strategies.py) expose async methods so they
      satisfy the same Protocols as DB-backed implementations; they never await IO

Design Decisions:
    - Functional core separated from imperative shell: services orchestrate the
      async store calls around these functions
"""
