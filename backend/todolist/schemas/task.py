"""Task Schemas — request bodies for task create/update with field-level validation.

Invariants:
    - TaskCreate.title: non-empty after stripping; categoryId must be a UUID
    - status accepts TaskStatus values, plus legacy labels normalised to them
    - TaskUpdate: every field optional, but title/status/categoryId may not be null
    - Unknown fields are ignored

Design Decisions:
    - camelCase aliases on the wire (categoryId), snake_case in Python
    - to_fields() returns only fields the client actually sent (partial update)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from todolist.core.domain_types import LEGACY_STATUS_LABELS, TaskStatus


def _normalise_status(v: object) -> object:
    if isinstance(v, str) and v in LEGACY_STATUS_LABELS:
        return LEGACY_STATUS_LABELS[v].value
    return v


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Title is required")
    return v


class TaskCreate(BaseModel):
    """Task creation: title and categoryId required, status defaults to pending."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    category_id: UUID = Field(alias="categoryId")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v):
        return _strip_title(v)

    @field_validator("status", mode="before")
    @classmethod
    def accept_legacy_status(cls, v):
        return _normalise_status(v)

    def to_fields(self) -> dict:
        data = self.model_dump()
        data["status"] = self.status.value
        return data


class TaskUpdate(BaseModel):
    """Partial task update: only supplied fields change."""
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None
    category_id: UUID | None = Field(None, alias="categoryId")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v):
        return _strip_title(v)

    @field_validator("status", mode="before")
    @classmethod
    def accept_legacy_status(cls, v):
        return _normalise_status(v)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in ("title", "status", "category_id"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_fields(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if "status" in data:
            data["status"] = self.status.value
        return data
