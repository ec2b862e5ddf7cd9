"""Category Schemas — request bodies for category create/update.

Invariants:
    - name is required, stripped, and never empty or whitespace
"""

from pydantic import BaseModel, Field, field_validator


class CategoryCreate(BaseModel):
    """Category creation with a non-blank name."""
    name: str = Field(min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        return v


class CategoryUpdate(CategoryCreate):
    """Category update: name is the only mutable field and is required."""
