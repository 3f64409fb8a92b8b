"""
Bookshelf API — Resource Kinds
===============================

What:  Declares every resource kind the API exposes.
Why:   The CRUD lifecycle is identical for authors and books; what differs is
       the envelope key, the collection and the schemas. Keeping that in one
       immutable value lets the router and service stay generic.
"""

from dataclasses import dataclass
from typing import Tuple, Type

from pydantic import BaseModel

from bookshelf.schemas.author import (
    AuthorCreateRequest,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdateRequest,
)
from bookshelf.schemas.book import (
    BookCreateRequest,
    BookListResponse,
    BookResponse,
    BookUpdateRequest,
)


@dataclass(frozen=True)
class ResourceKind:
    """
    Attributes:
        singular:        Envelope key for one record ("author")
        plural:          Envelope key for lists, URL segment and collection name ("authors")
        create_request:  Envelope model for POST bodies
        update_request:  Envelope model for PATCH bodies
        response:        Envelope model for a single record
        list_response:   Envelope model for the collection
    """

    singular: str
    plural: str
    create_request: Type[BaseModel]
    update_request: Type[BaseModel]
    response: Type[BaseModel]
    list_response: Type[BaseModel]

    @property
    def collection(self) -> str:
        return self.plural

    @property
    def title(self) -> str:
        return self.plural.capitalize()


AUTHORS = ResourceKind(
    singular="author",
    plural="authors",
    create_request=AuthorCreateRequest,
    update_request=AuthorUpdateRequest,
    response=AuthorResponse,
    list_response=AuthorListResponse,
)

BOOKS = ResourceKind(
    singular="book",
    plural="books",
    create_request=BookCreateRequest,
    update_request=BookUpdateRequest,
    response=BookResponse,
    list_response=BookListResponse,
)

RESOURCE_KINDS: Tuple[ResourceKind, ...] = (AUTHORS, BOOKS)
