"""Services Layer — orchestration of stores and pure core logic.

Invariants:
    - Services receive every collaborator through __init__ (no module-level state)
    - Input validation happens before the first store call
"""
