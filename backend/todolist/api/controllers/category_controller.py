"""Category Controller — HTTP actions for categories."""

from typing import Any
from uuid import UUID

from fastapi.responses import JSONResponse

from todolist.api.controllers.base import ResourceController, parse_paging
from todolist.core.domain_types import Action, Resource
from todolist.core.projections import project_category
from todolist.services.category_service import CategoryService


class CategoryController(ResourceController):
    resource = Resource.CATEGORY

    def __init__(self, service: CategoryService):
        self.service = service

    async def create(self, name: str) -> JSONResponse:
        return await self.run(
            Action.CREATE,
            lambda: self.service.create(name),
            project_category,
        )

    async def get_all(self, page: Any = None, limit: Any = None) -> JSONResponse:
        page, limit = parse_paging(page, limit)
        return await self.run(
            Action.GET_ALL,
            lambda: self.service.get_all(page, limit),
            lambda result: result,
        )

    async def get_one(self, category_id: UUID) -> JSONResponse:
        return await self.run(
            Action.GET_ONE,
            lambda: self.service.get_one(category_id),
            project_category,
        )

    async def update(self, category_id: UUID, fields: dict) -> JSONResponse:
        return await self.run(
            Action.UPDATE,
            lambda: self.service.update(category_id, fields),
            project_category,
        )

    async def delete(self, category_id: UUID) -> JSONResponse:
        return await self.run(
            Action.DELETE,
            lambda: self.service.delete(category_id),
        )
