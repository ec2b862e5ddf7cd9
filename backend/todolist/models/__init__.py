"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Category owns Tasks only through the todos.category_id foreign key

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from todolist.models.category import Category  # noqa: F401
from todolist.models.task import Task  # noqa: F401
