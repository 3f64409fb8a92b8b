"""
Bookshelf API — Document SQLAlchemy Model
==========================================

What:  ORM model for the `documents` table, the storage behind every collection.
Why:   Authors and books are free-form documents; a single table keyed by
       collection name gives us a document store on top of PostgreSQL.
How:   Resource fields live in a JSON column (JSONB on PostgreSQL). Identity,
       ownership and timestamps are real columns so they can be indexed and
       can never be overwritten by a field merge.

Table Design Rationale:
    - id: 32-char hex UUID assigned at creation, immutable afterwards
    - collection: resource plural name ("authors", "books")
    - owner: caller identity, only set when the ownership policy is enabled
    - body: the caller-owned fields, exactly as submitted
    - created_at / updated_at: UTC, used for stable listing order
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Index, String, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.database import Base


def new_document_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(Base):
    """
    A single record in a collection.

    Lifecycle:
        1. Created by DocumentStore.create (id assigned here, never changes)
        2. Updated by DocumentStore.update (body merged, updated_at bumped)
        3. Deleted by DocumentStore.delete (hard delete, no tombstone)
    """

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=new_document_id,
        comment="Opaque identifier assigned at creation",
    )

    collection: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Resource collection name, e.g. authors or books",
    )

    owner: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Caller identity that created the record (ownership policy)",
    )

    body: Mapped[Dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
        default=dict,
        comment="Resource fields owned by the caller",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    # Listing is always "all documents of one collection in insertion order"
    __table_args__ = (
        Index("idx_documents_collection_created_at", "collection", "created_at"),
    )

    def to_record(self) -> Dict[str, Any]:
        """
        Plain representation returned to clients.

        The identifier comes first, then the stored fields. `owner` is only
        present when one was recorded.
        """
        record: Dict[str, Any] = {"id": self.id}
        record.update(self.body or {})
        if self.owner is not None:
            record["owner"] = self.owner
        return record

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, collection='{self.collection}')>"
