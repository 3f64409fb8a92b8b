"""Create documents table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `documents` table backing every resource collection.
How:   JSONB body on PostgreSQL (plain JSON elsewhere); identity, owner and
       timestamps as columns. See bookshelf/models/document.py.

Rollback: downgrade() drops the table (all authors and books are lost).
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "documents",
        sa.Column(
            "id",
            sa.String(32),
            nullable=False,
            comment="Opaque identifier assigned at creation",
        ),
        sa.Column(
            "collection",
            sa.String(64),
            nullable=False,
            comment="Resource collection name, e.g. authors or books",
        ),
        sa.Column(
            "owner",
            sa.String(255),
            nullable=True,
            comment="Caller identity that created the record (ownership policy)",
        ),
        sa.Column(
            "body",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            comment="Resource fields owned by the caller",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_index(
        "idx_documents_collection_created_at",
        "documents",
        ["collection", "created_at"],
    )


def downgrade() -> None:
    op.drop_index("idx_documents_collection_created_at", table_name="documents")
    op.drop_table("documents")
