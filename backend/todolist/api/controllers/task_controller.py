"""Task Controller — HTTP actions for tasks.

Detail responses (create/get_one/update) nest the full category; the list keeps
the category name only (see core/projections.py).
"""

from functools import partial
from typing import Any
from uuid import UUID

from fastapi.responses import JSONResponse

from todolist.api.controllers.base import ResourceController, parse_paging
from todolist.core.domain_types import Action, CategoryProjection, Resource
from todolist.core.projections import project_task
from todolist.services.task_service import TaskService

_present_detail = partial(project_task, mode=CategoryProjection.NESTED)


class TaskController(ResourceController):
    resource = Resource.TASK

    def __init__(self, service: TaskService):
        self.service = service

    async def create(self, fields: dict) -> JSONResponse:
        return await self.run(
            Action.CREATE,
            lambda: self.service.create(fields),
            _present_detail,
        )

    async def get_all(self, page: Any = None, limit: Any = None) -> JSONResponse:
        page, limit = parse_paging(page, limit)
        return await self.run(
            Action.GET_ALL,
            lambda: self.service.get_all(page, limit),
            lambda result: result,
        )

    async def get_one(self, task_id: UUID) -> JSONResponse:
        return await self.run(
            Action.GET_ONE,
            lambda: self.service.get_one(task_id),
            _present_detail,
        )

    async def update(self, task_id: UUID, fields: dict) -> JSONResponse:
        return await self.run(
            Action.UPDATE,
            lambda: self.service.update(task_id, fields),
            _present_detail,
        )

    async def delete(self, task_id: UUID) -> JSONResponse:
        return await self.run(
            Action.DELETE,
            lambda: self.service.delete(task_id),
        )
