"""Error kinds raised by the catalog core.

The HTTP layer maps each kind to its own status code, so callers can always
tell a rejected payload from a missing record or a broken store.
"""
from typing import Dict, List


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ValidationFailure(CatalogError):
    """The payload broke one or more field rules. Nothing was written."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__(f"Invalid fields: {', '.join(sorted(errors))}")


class NotFound(CatalogError):
    """No record with the given id exists in the store."""

    def __init__(self, resource: str, record_id: int):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} not found")

    @property
    def message(self) -> str:
        return f"{self.resource} not found"


class StoreFailure(CatalogError):
    """The record store could not complete an operation."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} failed")
