"""Service Layer — domain CRUD over an injected AsyncSession.

Invariants:
    - Services never read global state; the session arrives through the constructor
    - Services raise TodoListError subclasses; controllers decide status codes
"""
