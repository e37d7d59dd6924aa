from typing import Any, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.app.database import get_session
from catalog_service.app.handlers import CategoryHandler
from catalog_service.app.models import Category
from catalog_service.app.schemas import Category as CategorySchema, Message
from catalog_service.app.store import SqlAlchemyRecordStore

router = APIRouter(prefix="/categories", tags=["Categories"])


def get_category_handler(db: AsyncSession = Depends(get_session)) -> CategoryHandler:
    return CategoryHandler(SqlAlchemyRecordStore(db, Category))


@router.get("/", response_model=List[CategorySchema])
async def get_categories(handler: CategoryHandler = Depends(get_category_handler)):
    return await handler.list()

@router.post("/", response_model=CategorySchema, status_code=201)
async def create_category(
    payload: Any = Body(default=None),
    handler: CategoryHandler = Depends(get_category_handler)
):
    return await handler.create(payload)

@router.get("/{category_id}", response_model=CategorySchema)
async def get_category_detail(category_id: int, handler: CategoryHandler = Depends(get_category_handler)):
    return await handler.get(category_id)

@router.put("/{category_id}", response_model=CategorySchema)
async def update_category(
    category_id: int,
    payload: Any = Body(default=None),
    handler: CategoryHandler = Depends(get_category_handler)
):
    return await handler.update(category_id, payload)

@router.delete("/{category_id}", response_model=Message)
async def delete_category(category_id: int, handler: CategoryHandler = Depends(get_category_handler)):
    return await handler.delete(category_id)
