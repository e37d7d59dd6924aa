"""CRUD operations on categories and products.

Every mutating operation looks the record up first and validates second, so a
missing id is reported as NotFound even when the payload is also bad, and a
rejected payload never reaches the store.
"""
from typing import Any, Dict, List, Optional

from catalog_service.app.exceptions import NotFound, ValidationFailure
from catalog_service.app.logger import logger
from catalog_service.app.store import Record, RecordStore
from catalog_service.app.validators import validate


class CategoryHandler:

    def __init__(self, store: RecordStore):
        self.store = store

    async def _require(self, category_id: int) -> Record:
        category = await self.store.find_by_id(category_id)
        if category is None:
            logger.warning("Запрошена категория которой нет", extra={"category_id": category_id})
            raise NotFound("Category", category_id)
        return category

    async def list(self) -> List[Record]:
        categories = await self.store.query()
        logger.info("Получен список категорий", extra={"count": len(categories)})
        return categories

    async def create(self, payload: Any) -> Record:
        try:
            data = validate("category", "create", payload)
        except ValidationFailure as e:
            logger.warning("Категория не прошла валидацию", extra={"errors": e.errors})
            raise
        category = await self.store.create(data)
        logger.info("Категория создана", extra={"category_id": category["id"], "category_name": category["name"]})
        return category

    async def get(self, category_id: int) -> Record:
        return await self._require(category_id)

    async def update(self, category_id: int, payload: Any) -> Record:
        current = await self._require(category_id)
        try:
            data = validate("category", "update", payload)
        except ValidationFailure as e:
            logger.warning("Категория не прошла валидацию", extra={"category_id": category_id, "errors": e.errors})
            raise
        category = await self.store.update(category_id, data)
        if category is None:
            raise NotFound("Category", category_id)
        logger.info(
            "Категория обновлена",
            extra={"category_id": category_id, "old_name": current["name"], "new_name": category["name"]}
        )
        return category

    async def delete(self, category_id: int) -> Dict[str, str]:
        category = await self._require(category_id)
        # products keep their category_id; it is a weak reference
        if not await self.store.delete(category_id):
            raise NotFound("Category", category_id)
        logger.info("Категория удалена", extra={"category_id": category_id, "category_name": category["name"]})
        return {"message": "Category deleted successfully"}


class ProductHandler:

    def __init__(self, store: RecordStore):
        self.store = store

    async def _require(self, product_id: int) -> Record:
        product = await self.store.find_by_id(product_id)
        if product is None:
            logger.warning("Запрошен несуществующий товар", extra={"product_id": product_id})
            raise NotFound("Product", product_id)
        return product

    async def list(self, category_id: Optional[int] = None, status: Optional[str] = None) -> List[Record]:
        filters = {}
        if category_id is not None:
            filters["category_id"] = category_id
        if status is not None:
            filters["status"] = status
        products = await self.store.query(filters)
        logger.info("Получен список товаров", extra={"count": len(products), "filters": filters})
        return products

    async def create(self, payload: Any) -> Dict[str, Any]:
        try:
            data = validate("product", "create", payload)
        except ValidationFailure as e:
            logger.warning("Товар не прошёл валидацию", extra={"errors": e.errors})
            raise
        product = await self.store.create(data)
        logger.info("Товар создан", extra={"product_id": product["id"], "product_name": product["name"]})
        return {"success": True, "id": product["id"], "message": "Product added successfully"}

    async def get(self, product_id: int) -> Record:
        return await self._require(product_id)

    async def update(self, product_id: int, payload: Any) -> Record:
        current = await self._require(product_id)
        try:
            data = validate("product", "update", payload)
        except ValidationFailure as e:
            logger.warning("Товар не прошёл валидацию", extra={"product_id": product_id, "errors": e.errors})
            raise
        product = await self.store.update(product_id, data)
        if product is None:
            raise NotFound("Product", product_id)
        old_data = {field: current[field] for field in data}
        logger.info(
            "Товар обновлён",
            extra={"product_id": product_id, "old_data": old_data, "new_data": data}
        )
        return product

    async def delete(self, product_id: int) -> Dict[str, str]:
        product = await self._require(product_id)
        if not await self.store.delete(product_id):
            raise NotFound("Product", product_id)
        logger.info("Товар удалён", extra={"product_id": product_id, "product_name": product["name"]})
        return {"message": "Product deleted successfully"}
