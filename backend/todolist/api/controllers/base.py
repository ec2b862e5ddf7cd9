"""Controller Base — shared success/failure handling for resource controllers.

Invariants:
    - Every action answers with a JSON envelope, never raises
    - Failure status depends only on (resource, action); the error kind goes to logs
    - Failure envelope carries the error's message string

Design Decisions:
    - Broad except in run(): the public contract is a flat action-keyed mapping,
      so every failure of an action maps to the same status
"""

import logging
from typing import Any, Awaitable, Callable

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from todolist.core.domain_types import Action, Resource
from todolist.core.errors import TodoListError
from todolist.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, parse_positive_int
from todolist.core.responses import error_response, outcome_for, success_response

logger = logging.getLogger(__name__)


def _error_code(exc: Exception) -> str:
    if isinstance(exc, TodoListError):
        return exc.code
    return type(exc).__name__


def _error_message(exc: Exception) -> str:
    if isinstance(exc, TodoListError):
        return exc.message
    return str(exc) or type(exc).__name__


def parse_paging(page: Any, limit: Any) -> tuple[int, int]:
    """page/limit from raw query values, defaulting to 1/25."""
    return (
        parse_positive_int(page, DEFAULT_PAGE),
        parse_positive_int(limit, DEFAULT_LIMIT),
    )


class ResourceController:
    """Runs one service call per action and shapes its outcome."""

    resource: Resource

    async def run(
        self,
        action: Action,
        call: Callable[[], Awaitable[Any]],
        present: Callable[[Any], Any] | None = None,
    ) -> JSONResponse:
        outcome = outcome_for(self.resource, action)
        try:
            result = await call()
            data = present(result) if present else None
        except Exception as exc:
            logger.warning(
                f"{outcome.failure_message}: {exc}",
                extra={
                    "resource": self.resource.value,
                    "action": action.value,
                    "error_code": _error_code(exc),
                },
            )
            return JSONResponse(
                status_code=outcome.failure_status,
                content=jsonable_encoder(
                    error_response(outcome.failure_message, _error_message(exc)),
                ),
            )
        return JSONResponse(
            status_code=outcome.success_status,
            content=jsonable_encoder(success_response(outcome.success_message, data)),
        )
