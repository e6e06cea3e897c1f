"""Services Layer — the stateful shell around the pure storage core.

Invariants:
    - Services own all mutable state (stores, counter) and the lock guarding it
    - Services never import from api/

Design Decisions:
    - One service object per process, handed to routes by dependency injection
"""
