"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (camelCase keys)

Design Decisions:
    - Thin routes delegate to core rules and the services shell
"""
