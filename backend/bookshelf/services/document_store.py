"""
Bookshelf API — Document Store (Persistence Collaborator)
==========================================================

What:  find-all / find-by-id / create / update / delete / commit over one collection.
Why:   The resource service needs a persistence primitive whose outcomes it
       can match explicitly, instead of exceptions thrown from the driver.
How:   Every operation returns one of four result types:

           StoreOk        the operation succeeded; `value` holds the document(s)
           StoreNotFound  the identifier does not resolve in this collection
           StoreInvalid   the database rejected the submitted fields
           StoreFailure   anything else (malformed id, connectivity, driver bug)

       SQLAlchemy errors are caught here and converted; nothing else in the
       application imports SQLAlchemy exception types.

Transactions:
    Mutations only flush. The resource service calls commit() before it
    returns, so a client never receives a success for an uncommitted write.
    The per-request session (database.get_db_session) rolls back on error.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.models.document import Document, new_document_id, utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Identifiers are uuid4().hex
_DOCUMENT_ID = re.compile(r"[0-9a-f]{32}")


@dataclass(frozen=True)
class StoreOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class StoreNotFound:
    collection: str
    document_id: str


@dataclass(frozen=True)
class StoreInvalid:
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StoreFailure:
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


StoreResult = Union[StoreOk, StoreNotFound, StoreInvalid, StoreFailure]


def is_document_id(value: str) -> bool:
    return bool(_DOCUMENT_ID.fullmatch(value or ""))


class DocumentStore:
    """
    Document-store view over a single collection, bound to one session.

    Created per request by the resource router:
        store = DocumentStore(session, "authors")
    """

    def __init__(self, session: AsyncSession, collection: str):
        self.session = session
        self.collection = collection

    async def find_all(self) -> StoreResult:
        """All documents of the collection, oldest first."""
        query = (
            select(Document)
            .where(Document.collection == self.collection)
            .order_by(Document.created_at, Document.id)
        )
        try:
            result = await self.session.execute(query)
            documents: List[Document] = list(result.scalars().all())
        except SQLAlchemyError as e:
            return self._failure("find_all", e)
        return StoreOk(documents)

    async def find_by_id(self, document_id: str) -> StoreResult:
        if not is_document_id(document_id):
            # Mirrors a driver cast error: the id cannot even be queried
            return StoreFailure(
                message="Malformed document identifier",
                context={"collection": self.collection, "document_id": document_id},
            )
        query = select(Document).where(
            Document.id == document_id,
            Document.collection == self.collection,
        )
        try:
            result = await self.session.execute(query)
            document: Optional[Document] = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return self._failure("find_by_id", e, document_id=document_id)

        if document is None:
            return StoreNotFound(collection=self.collection, document_id=document_id)
        return StoreOk(document)

    async def create(self, fields: Mapping[str, Any], owner: Optional[str] = None) -> StoreResult:
        document = Document(
            id=new_document_id(),
            collection=self.collection,
            owner=owner,
            body=dict(fields),
        )
        self.session.add(document)
        try:
            await self.session.flush()
        except (IntegrityError, DataError) as e:
            return self._invalid("create", e)
        except SQLAlchemyError as e:
            return self._failure("create", e)
        return StoreOk(document)

    async def update(self, document: Document, changes: Mapping[str, Any]) -> StoreResult:
        """
        Shallow merge of `changes` into the stored fields of a loaded document.

        Keys not present in `changes` are left untouched. The identifier and
        owner are columns, not body keys, so a merge can never replace them.
        """
        if not changes:
            return StoreOk(document)

        merged = dict(document.body or {})
        merged.update(changes)
        document.body = merged
        document.updated_at = utcnow()
        try:
            await self.session.flush()
        except (IntegrityError, DataError) as e:
            return self._invalid("update", e, document_id=document.id)
        except SQLAlchemyError as e:
            return self._failure("update", e, document_id=document.id)
        return StoreOk(document)

    async def delete(self, document: Document) -> StoreResult:
        try:
            await self.session.delete(document)
            await self.session.flush()
        except SQLAlchemyError as e:
            return self._failure("delete", e, document_id=document.id)
        return StoreOk(document)

    async def commit(self) -> StoreResult:
        """
        Make the pending writes durable before the response is produced.

        A failed commit is reported like any other store outcome; the session
        dependency then rolls the transaction back.
        """
        try:
            await self.session.commit()
        except (IntegrityError, DataError) as e:
            return self._invalid("commit", e)
        except SQLAlchemyError as e:
            return self._failure("commit", e)
        return StoreOk(None)

    # ── Error conversion ──────────────────────────────────────────────────

    def _invalid(self, operation: str, error: SQLAlchemyError, **context: Any) -> StoreInvalid:
        logger.warning(
            "Store rejected %s on %s: %s", operation, self.collection, getattr(error, "orig", error)
        )
        return StoreInvalid(
            message=f"The submitted {self.collection} fields were rejected by the database",
            context={"collection": self.collection, "operation": operation, **context},
        )

    def _failure(self, operation: str, error: SQLAlchemyError, **context: Any) -> StoreFailure:
        logger.error(
            "Store %s on %s failed: %s", operation, self.collection, str(error), exc_info=True
        )
        return StoreFailure(
            message=str(error),
            context={
                "collection": self.collection,
                "operation": operation,
                "error_type": type(error).__name__,
                **context,
            },
        )
