"""Response Envelopes — success/error bodies and the action → status code table.

Invariants:
    - success envelope: {message, data?}; error envelope: {message, error}
    - Status codes depend only on (resource, action), never on the error kind

Design Decisions:
    - Static table over per-exception mapping: the public contract discards error
      kinds, so they are kept in logs only
"""

from typing import Any, NamedTuple

from todolist.core.domain_types import Action, Resource


class ActionOutcome(NamedTuple):
    """HTTP status and message for each outcome of one controller action."""
    success_status: int
    failure_status: int
    success_message: str
    failure_message: str


_STATUS_BY_ACTION: dict[Action, tuple[int, int]] = {
    Action.CREATE: (201, 400),
    Action.GET_ALL: (200, 500),
    Action.GET_ONE: (200, 404),
    Action.UPDATE: (200, 400),
    Action.DELETE: (200, 400),
}

_MESSAGES: dict[Resource, dict[Action, tuple[str, str]]] = {
    Resource.CATEGORY: {
        Action.CREATE: ("Category successfully created", "Failed to create category"),
        Action.GET_ALL: ("Categories fetched successfully", "Failed to fetch categories"),
        Action.GET_ONE: ("Category fetched successfully", "Failed to fetch category"),
        Action.UPDATE: ("Category updated successfully", "Failed to update category"),
        Action.DELETE: ("Category deleted successfully", "Failed to delete category"),
    },
    Resource.TASK: {
        Action.CREATE: ("Task successfully created", "Failed to create task"),
        Action.GET_ALL: ("Tasks fetched successfully", "Failed to fetch tasks"),
        Action.GET_ONE: ("Task fetched successfully", "Failed to fetch task"),
        Action.UPDATE: ("Task updated successfully", "Failed to update task"),
        Action.DELETE: ("Task deleted successfully", "Failed to delete task"),
    },
}

ACTION_OUTCOMES: dict[tuple[Resource, Action], ActionOutcome] = {
    (resource, action): ActionOutcome(
        *_STATUS_BY_ACTION[action], *_MESSAGES[resource][action],
    )
    for resource in Resource
    for action in Action
}


def outcome_for(resource: Resource, action: Action) -> ActionOutcome:
    return ACTION_OUTCOMES[(resource, action)]


def success_response(message: str, data: Any = None) -> dict:
    """Success envelope. `data` is omitted when there is nothing to return."""
    body: dict[str, Any] = {"message": message}
    if data is not None:
        body["data"] = data
    return body


def error_response(message: str, error: Any) -> dict:
    return {"message": message, "error": error}
