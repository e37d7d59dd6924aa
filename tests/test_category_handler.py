"""Category handler against the in-memory fake store."""
import asyncio

import pytest

from catalog_service.app.exceptions import NotFound, ValidationFailure
from catalog_service.app.handlers import CategoryHandler
from tests.fakes import FakeRecordStore


def _setup(records=None):
    store = FakeRecordStore(records)
    return CategoryHandler(store), store


class TestCreateCategory:

    def test_assigns_fresh_id(self):
        handler, _ = _setup()
        category = asyncio.run(handler.create({"name": "Shoes"}))
        assert category == {"id": 1, "name": "Shoes"}

    def test_ids_never_reused(self):
        handler, _ = _setup()
        first = asyncio.run(handler.create({"name": "Shoes"}))
        asyncio.run(handler.delete(first["id"]))
        second = asyncio.run(handler.create({"name": "Hats"}))
        assert second["id"] != first["id"]

    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": None}, None])
    def test_invalid_name_persists_nothing(self, payload):
        handler, store = _setup()
        with pytest.raises(ValidationFailure) as exc_info:
            asyncio.run(handler.create(payload))
        assert "name" in exc_info.value.errors
        assert len(store) == 0


class TestCategoryLookups:

    def test_list_returns_all(self):
        handler, _ = _setup([{"id": 1, "name": "Shoes"}, {"id": 2, "name": "Hats"}])
        names = {c["name"] for c in asyncio.run(handler.list())}
        assert names == {"Shoes", "Hats"}

    def test_get_existing(self):
        handler, _ = _setup([{"id": 3, "name": "Shoes"}])
        assert asyncio.run(handler.get(3)) == {"id": 3, "name": "Shoes"}

    @pytest.mark.parametrize("operation", ["get", "delete"])
    def test_missing_id_not_found(self, operation):
        handler, _ = _setup()
        with pytest.raises(NotFound):
            asyncio.run(getattr(handler, operation)(42))

    def test_update_missing_id_not_found(self):
        handler, store = _setup()
        with pytest.raises(NotFound):
            asyncio.run(handler.update(42, {"name": "Shoes"}))
        assert store.writes == 0


class TestUpdateCategory:

    def test_replaces_name(self):
        handler, _ = _setup([{"id": 1, "name": "Shoes"}])
        assert asyncio.run(handler.update(1, {"name": "Boots"})) == {"id": 1, "name": "Boots"}
        assert asyncio.run(handler.get(1))["name"] == "Boots"

    def test_id_in_payload_ignored(self):
        handler, _ = _setup([{"id": 1, "name": "Shoes"}])
        assert asyncio.run(handler.update(1, {"id": 7, "name": "Boots"}))["id"] == 1

    def test_invalid_payload_leaves_record(self):
        handler, store = _setup([{"id": 1, "name": "Shoes"}])
        with pytest.raises(ValidationFailure):
            asyncio.run(handler.update(1, {"name": ""}))
        assert asyncio.run(handler.get(1))["name"] == "Shoes"
        assert store.writes == 0


class TestDeleteCategory:

    def test_delete_then_get_not_found(self):
        handler, _ = _setup([{"id": 1, "name": "Shoes"}])
        assert asyncio.run(handler.delete(1)) == {"message": "Category deleted successfully"}
        with pytest.raises(NotFound):
            asyncio.run(handler.get(1))

    def test_second_delete_not_found(self):
        handler, _ = _setup([{"id": 1, "name": "Shoes"}])
        asyncio.run(handler.delete(1))
        with pytest.raises(NotFound):
            asyncio.run(handler.delete(1))


class VanishingRecordStore(FakeRecordStore):
    """Loses the record between the lookup and the write."""

    async def update(self, record_id, data):
        return None

    async def delete(self, record_id):
        return False


class TestRecordRemovedMidOperation:

    def test_update_reports_not_found(self):
        handler = CategoryHandler(VanishingRecordStore([{"id": 1, "name": "Shoes"}]))
        with pytest.raises(NotFound):
            asyncio.run(handler.update(1, {"name": "Boots"}))

    def test_delete_reports_not_found(self):
        handler = CategoryHandler(VanishingRecordStore([{"id": 1, "name": "Shoes"}]))
        with pytest.raises(NotFound):
            asyncio.run(handler.delete(1))
