from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.app.database import get_session
from catalog_service.app.handlers import ProductHandler
from catalog_service.app.models import Product
from catalog_service.app.schemas import Product as ProductSchema, ProductCreated, ProductStatus, Message
from catalog_service.app.store import SqlAlchemyRecordStore

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_handler(db: AsyncSession = Depends(get_session)) -> ProductHandler:
    return ProductHandler(SqlAlchemyRecordStore(db, Product))


@router.get("/", response_model=List[ProductSchema])
async def get_products(
    category_id: Optional[int] = None,
    status: Optional[ProductStatus] = None,
    handler: ProductHandler = Depends(get_product_handler)
):
    return await handler.list(
        category_id=category_id,
        status=status.value if status is not None else None
    )

@router.post("/", response_model=ProductCreated, status_code=201)
async def create_product(
    payload: Any = Body(default=None),
    handler: ProductHandler = Depends(get_product_handler)
):
    return await handler.create(payload)

@router.get("/{product_id}", response_model=ProductSchema)
async def get_product_detail(product_id: int, handler: ProductHandler = Depends(get_product_handler)):
    return await handler.get(product_id)

@router.put("/{product_id}", response_model=ProductSchema)
async def update_product(
    product_id: int,
    payload: Any = Body(default=None),
    handler: ProductHandler = Depends(get_product_handler)
):
    return await handler.update(product_id, payload)

@router.delete("/{product_id}", response_model=Message)
async def delete_product(product_id: int, handler: ProductHandler = Depends(get_product_handler)):
    return await handler.delete(product_id)
