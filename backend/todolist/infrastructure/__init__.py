"""Infrastructure Layer — database engine lifecycle and observability.

Invariants:
    - Modules here perform IO; core/ never imports them
"""
