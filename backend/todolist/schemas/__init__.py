"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input) before controllers run
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Responses are plain projected dicts (core/projections.py), not response_models,
      because the task category field changes shape between list and detail
"""
