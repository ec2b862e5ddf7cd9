"""Domain Types — verifies enum values and identity wrappers.

Tests:
    - TaskStatus persisted values are pending / in-progress / done
    - Legacy labels map onto TaskStatus members
    - Action and Resource enumerate exactly the CRUD surface
"""

from uuid import uuid4

from todolist.core.domain_types import (
    Action, CategoryId, CategoryProjection, LEGACY_STATUS_LABELS, Resource,
    TaskId, TaskStatus,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert CategoryId(uid) == uid
    assert TaskId(uid) == uid


def test_task_status_values():
    assert [s.value for s in TaskStatus] == ["pending", "in-progress", "done"]


def test_legacy_labels_cover_every_status():
    assert LEGACY_STATUS_LABELS == {
        "Pending": TaskStatus.PENDING,
        "InProgress": TaskStatus.IN_PROGRESS,
        "Completed": TaskStatus.DONE,
    }


def test_action_has_five_crud_actions():
    assert len(Action) == 5
    assert len(Resource) == 2


def test_category_projection_modes():
    assert set(CategoryProjection) == {CategoryProjection.NAME, CategoryProjection.NESTED}
