"""
Bookshelf API — Resource Service (CRUD Request Lifecycle)
==========================================================

What:  list / get / create / update / delete for one resource kind.
Why:   Keeps the lifecycle (lookup, ownership, result translation, response
       shaping) out of the HTTP layer so it can be tested with a fake store.
How:   Each operation calls the document store, matches the returned result
       explicitly, and either returns plain records or raises the matching
       application exception for the global handlers.

Result translation:
    StoreOk        → value returned to the route
    StoreNotFound  → NotFoundError   (404)
    StoreInvalid   → ValidationError (422)
    StoreFailure   → DatabaseError   (500, generic message)

Update and delete follow the same flow:
    find_by_id → 404 if missing → ownership check → mutate → commit

Writes are committed here, before the route builds its response. Nothing
here retries: a failed operation is reported once and the request's
transaction is rolled back by the session dependency.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from bookshelf.exceptions import DatabaseError, NotFoundError, ValidationError
from bookshelf.resources import ResourceKind
from bookshelf.services.document_store import (
    DocumentStore,
    StoreFailure,
    StoreInvalid,
    StoreNotFound,
    StoreOk,
    StoreResult,
)
from bookshelf.services.ownership import OwnershipPolicy

logger = logging.getLogger(__name__)


class ResourceService:
    """
    Stateless lifecycle for one resource kind.

    The store is passed per call because it is bound to the request's
    database session.
    """

    def __init__(self, kind: ResourceKind, ownership: Optional[OwnershipPolicy] = None):
        self.kind = kind
        self.ownership = ownership or OwnershipPolicy()

    async def list(self, store: DocumentStore) -> List[Dict[str, Any]]:
        documents = self._unwrap(await store.find_all())
        return [document.to_record() for document in documents]

    async def get(self, store: DocumentStore, record_id: str) -> Dict[str, Any]:
        document = self._unwrap(await store.find_by_id(record_id), record_id)
        return document.to_record()

    async def create(
        self,
        store: DocumentStore,
        fields: Mapping[str, Any],
        caller: Optional[str] = None,
    ) -> Dict[str, Any]:
        owner = self.ownership.owner_for_new_record(caller)
        document = self._unwrap(await store.create(fields, owner=owner))
        self._unwrap(await store.commit(), document.id)
        logger.info("Created %s %s", self.kind.singular, document.id)
        return document.to_record()

    async def update(
        self,
        store: DocumentStore,
        record_id: str,
        changes: Mapping[str, Any],
        caller: Optional[str] = None,
    ) -> None:
        document = self._unwrap(await store.find_by_id(record_id), record_id)
        self.ownership.require_owner(document, caller)
        self._unwrap(await store.update(document, changes), record_id)
        self._unwrap(await store.commit(), record_id)
        logger.info(
            "Updated %s %s (fields: %s)",
            self.kind.singular,
            record_id,
            ", ".join(sorted(changes)) or "none",
        )

    async def delete(
        self,
        store: DocumentStore,
        record_id: str,
        caller: Optional[str] = None,
    ) -> None:
        document = self._unwrap(await store.find_by_id(record_id), record_id)
        self.ownership.require_owner(document, caller)
        self._unwrap(await store.delete(document), record_id)
        self._unwrap(await store.commit(), record_id)
        logger.info("Deleted %s %s", self.kind.singular, record_id)

    def _unwrap(self, result: StoreResult, record_id: Optional[str] = None) -> Any:
        if isinstance(result, StoreOk):
            return result.value
        if isinstance(result, StoreNotFound):
            raise NotFoundError(resource=self.kind.singular, resource_id=result.document_id)
        if isinstance(result, StoreInvalid):
            raise ValidationError(message=result.message, context=dict(result.context))
        if isinstance(result, StoreFailure):
            raise DatabaseError(
                message=f"Could not access {self.kind.plural}. Please try again.",
                context={"reason": result.message, "record_id": record_id, **result.context},
            )
        raise TypeError(f"Unexpected store result: {result!r}")
