"""
Bookshelf API — Author Request/Response Schemas
================================================

What:  Pydantic models for the author envelopes.
Why:   Request bodies are validated before the handler runs; unknown fields
       (including `id` and `owner`) are rejected so callers cannot change them.
How:   Create and update variants share field definitions. Create requires
       `name`; update makes everything optional and only the fields actually
       sent are merged (model_dump(exclude_unset=True)).

Envelopes:
    POST  /authors       {"author": AuthorCreate}
    PATCH /authors/{id}  {"author": AuthorUpdate}
    GET   /authors/{id}  {"author": AuthorRecord}
    GET   /authors       {"authors": [AuthorRecord, ...]}
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthorCreate(BaseModel):
    """Fields accepted when creating an author."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=200, description="Display name")
    bio: Optional[str] = Field(default=None, max_length=5000, description="Short biography")
    born: Optional[int] = Field(default=None, ge=-3000, le=3000, description="Year of birth")
    nationality: Optional[str] = Field(default=None, max_length=100)


class AuthorUpdate(BaseModel):
    """Fields accepted when updating an author. Every field is optional."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    bio: Optional[str] = Field(default=None, max_length=5000)
    born: Optional[int] = Field(default=None, ge=-3000, le=3000)
    nationality: Optional[str] = Field(default=None, max_length=100)


class AuthorRecord(BaseModel):
    """
    An author as stored. Only fields that were submitted are present in the
    serialized output (routes use response_model_exclude_unset).
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Opaque identifier assigned at creation")
    name: Optional[str] = None
    bio: Optional[str] = None
    born: Optional[int] = None
    nationality: Optional[str] = None
    owner: Optional[str] = Field(default=None, description="Owner, when ownership is enforced")


class AuthorCreateRequest(BaseModel):
    author: AuthorCreate


class AuthorUpdateRequest(BaseModel):
    author: AuthorUpdate


class AuthorResponse(BaseModel):
    author: AuthorRecord


class AuthorListResponse(BaseModel):
    authors: List[AuthorRecord]
