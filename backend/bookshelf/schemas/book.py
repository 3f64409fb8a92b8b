"""
Bookshelf API — Book Request/Response Schemas
==============================================

Same envelope shapes as authors, keyed by `book` / `books`.
`author_id` is a plain reference; it is stored as given and not resolved.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=300)
    author_id: Optional[str] = Field(default=None, max_length=64, description="Identifier of the author")
    isbn: Optional[str] = Field(default=None, max_length=20)
    published_year: Optional[int] = Field(default=None, ge=-3000, le=3000)
    summary: Optional[str] = Field(default=None, max_length=10000)


class BookUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    author_id: Optional[str] = Field(default=None, max_length=64)
    isbn: Optional[str] = Field(default=None, max_length=20)
    published_year: Optional[int] = Field(default=None, ge=-3000, le=3000)
    summary: Optional[str] = Field(default=None, max_length=10000)


class BookRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    title: Optional[str] = None
    author_id: Optional[str] = None
    isbn: Optional[str] = None
    published_year: Optional[int] = None
    summary: Optional[str] = None
    owner: Optional[str] = None


class BookCreateRequest(BaseModel):
    book: BookCreate


class BookUpdateRequest(BaseModel):
    book: BookUpdate


class BookResponse(BaseModel):
    book: BookRecord


class BookListResponse(BaseModel):
    books: List[BookRecord]
