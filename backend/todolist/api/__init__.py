"""API Layer — FastAPI routes, controllers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON envelopes

Design Decisions:
    - Thin routes delegate to controllers, controllers to services
"""
