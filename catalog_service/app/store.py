"""Record store used by the resource handlers.

Handlers only see ``RecordStore``; the SQLAlchemy implementation below is
what the HTTP layer wires in, one instance per request session.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from catalog_service.app.exceptions import StoreFailure
from catalog_service.app.logger import logger

Record = Dict[str, Any]


class RecordStore(ABC):
    """Keyed storage for one record type. Ids are assigned by the store."""

    @abstractmethod
    async def create(self, data: Record) -> Record:
        """Persist a new record and return it with its assigned id."""

    @abstractmethod
    async def find_by_id(self, record_id: int) -> Optional[Record]:
        """Return the record with this id, or None."""

    @abstractmethod
    async def update(self, record_id: int, data: Record) -> Optional[Record]:
        """Write the given fields onto an existing record and return it."""

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """Remove the record. Returns False if there was nothing to remove."""

    @abstractmethod
    async def query(self, filters: Optional[Record] = None) -> List[Record]:
        """Return every record whose fields equal all of ``filters``."""


class SqlAlchemyRecordStore(RecordStore):

    def __init__(self, session: AsyncSession, model):
        self.session = session
        self.model = model

    def _as_record(self, instance) -> Record:
        return {column.name: getattr(instance, column.name) for column in self.model.__table__.columns}

    async def _get(self, record_id: int):
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def _fail(self, operation: str, error: SQLAlchemyError, **extra):
        await self.session.rollback()
        logger.error(
            f"Ошибка базы данных: {error}",
            extra={"operation": operation, "table": self.model.__tablename__, **extra}
        )
        return StoreFailure(operation)

    async def create(self, data: Record) -> Record:
        try:
            instance = self.model(**data)
            self.session.add(instance)
            await self.session.commit()
            await self.session.refresh(instance)
            return self._as_record(instance)
        except SQLAlchemyError as e:
            raise await self._fail("create", e) from e

    async def find_by_id(self, record_id: int) -> Optional[Record]:
        try:
            instance = await self._get(record_id)
        except SQLAlchemyError as e:
            raise await self._fail("find", e, record_id=record_id) from e
        return None if instance is None else self._as_record(instance)

    async def update(self, record_id: int, data: Record) -> Optional[Record]:
        try:
            instance = await self._get(record_id)
            if instance is None:
                return None
            for field, value in data.items():
                setattr(instance, field, value)
            await self.session.commit()
            await self.session.refresh(instance)
            return self._as_record(instance)
        except SQLAlchemyError as e:
            raise await self._fail("update", e, record_id=record_id) from e

    async def delete(self, record_id: int) -> bool:
        try:
            instance = await self._get(record_id)
            if instance is None:
                return False
            await self.session.delete(instance)
            await self.session.commit()
            return True
        except SQLAlchemyError as e:
            raise await self._fail("delete", e, record_id=record_id) from e

    async def query(self, filters: Optional[Record] = None) -> List[Record]:
        try:
            result = await self.session.execute(select(self.model).filter_by(**(filters or {})))
            return [self._as_record(instance) for instance in result.scalars().all()]
        except SQLAlchemyError as e:
            raise await self._fail("query", e, filters=filters) from e
