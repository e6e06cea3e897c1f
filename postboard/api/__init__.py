"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - JSON routes return structured responses; render routes return text/plain

Design Decisions:
    - Thin routes delegate to BlogService: routes never touch the stores
"""
