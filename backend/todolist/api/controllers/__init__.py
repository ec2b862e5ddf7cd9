"""Controllers — translate validated requests into service calls and envelopes.

Invariants:
    - One controller per resource, one method per CRUD action
    - Status codes come from core/responses.py, keyed by (resource, action)
"""
