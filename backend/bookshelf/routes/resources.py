"""
Bookshelf API — Resource Router Factory
========================================

What:  Builds the five CRUD routes for one resource kind.
Why:   Authors and books share the exact same HTTP contract; only the
       envelope keys and schemas differ. A factory keeps them identical.
How:   build_resource_router() receives every collaborator explicitly (session
       dependency, store factory, update body filter, ownership policy) and
       returns a new APIRouter. Nothing is registered at import time.

Route Inventory (for kind "authors"):
    GET    /authors        → 200 {"authors": [...]}  + X-Total-Count
    GET    /authors/{id}   → 200 {"author": {...}}   | 404
    POST   /authors        → 201 {"author": {...}}   | 422
    PATCH  /authors/{id}   → 204                     | 404 | 422
    DELETE /authors/{id}   → 204                     | 404

Routes stay thin: read the envelope, build the store, call the service,
shape the response. Errors are raised by the service and translated by the
global handlers in main.py.
"""

from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.database import get_db_session
from bookshelf.middleware.blank_fields import BodyFilter, filtered_body_route, remove_blank_fields
from bookshelf.resources import ResourceKind
from bookshelf.schemas.common import ErrorResponse
from bookshelf.services.document_store import DocumentStore
from bookshelf.services.ownership import OwnershipPolicy
from bookshelf.services.resource_service import ResourceService

StoreFactory = Callable[[AsyncSession, str], DocumentStore]

_NOT_FOUND = {404: {"description": "No record with this identifier"}}
_INVALID = {422: {"description": "Request body failed validation", "model": ErrorResponse}}
_UNAUTHORIZED = {401: {"description": "Caller does not own this record", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


def build_resource_router(
    kind: ResourceKind,
    *,
    session_dependency: Callable = get_db_session,
    store_factory: StoreFactory = DocumentStore,
    update_filter: BodyFilter = remove_blank_fields,
    ownership: Optional[OwnershipPolicy] = None,
) -> APIRouter:
    """
    Create the CRUD router for `kind`.

    Args:
        kind:               Resource kind (envelope keys, schemas, collection)
        session_dependency: FastAPI dependency yielding an AsyncSession
        store_factory:      Builds the persistence collaborator from a session
        update_filter:      Applied to PATCH bodies before validation
        ownership:          Ownership policy; disabled when omitted
    """
    ownership = ownership or OwnershipPolicy()
    service = ResourceService(kind, ownership)
    router = APIRouter(prefix=f"/{kind.plural}", tags=[kind.title])

    create_request = kind.create_request
    update_request = kind.update_request

    async def get_store(session: AsyncSession = Depends(session_dependency)) -> DocumentStore:
        return store_factory(session, kind.collection)

    async def list_resources(
        response: Response,
        store: DocumentStore = Depends(get_store),
    ) -> Dict[str, Any]:
        records = await service.list(store)
        response.headers["X-Total-Count"] = str(len(records))
        return {kind.plural: records}

    async def get_resource(
        resource_id: str,
        store: DocumentStore = Depends(get_store),
    ) -> Dict[str, Any]:
        return {kind.singular: await service.get(store, resource_id)}

    async def create_resource(
        payload: create_request,
        store: DocumentStore = Depends(get_store),
        caller: Optional[str] = Depends(ownership.resolve_caller),
    ) -> Dict[str, Any]:
        fields = getattr(payload, kind.singular).model_dump(exclude_unset=True)
        return {kind.singular: await service.create(store, fields, caller)}

    async def update_resource(
        resource_id: str,
        payload: update_request,
        store: DocumentStore = Depends(get_store),
        caller: Optional[str] = Depends(ownership.resolve_caller),
    ) -> Response:
        changes = getattr(payload, kind.singular).model_dump(exclude_unset=True)
        await service.update(store, resource_id, changes, caller)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    async def delete_resource(
        resource_id: str,
        store: DocumentStore = Depends(get_store),
        caller: Optional[str] = Depends(ownership.resolve_caller),
    ) -> Response:
        await service.delete(store, resource_id, caller)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    router.add_api_route(
        "",
        list_resources,
        methods=["GET"],
        response_model=kind.list_response,
        response_model_exclude_unset=True,
        responses={**_SERVER_ERROR},
        summary=f"List all {kind.plural}",
        name=f"list_{kind.plural}",
    )
    router.add_api_route(
        "/{resource_id}",
        get_resource,
        methods=["GET"],
        response_model=kind.response,
        response_model_exclude_unset=True,
        responses={**_NOT_FOUND, **_SERVER_ERROR},
        summary=f"Get one {kind.singular} by ID",
        name=f"get_{kind.singular}",
    )
    router.add_api_route(
        "",
        create_resource,
        methods=["POST"],
        status_code=status.HTTP_201_CREATED,
        response_model=kind.response,
        response_model_exclude_unset=True,
        responses={**_INVALID, **_UNAUTHORIZED, **_SERVER_ERROR},
        summary=f"Create a {kind.singular}",
        name=f"create_{kind.singular}",
    )
    router.add_api_route(
        "/{resource_id}",
        update_resource,
        methods=["PATCH"],
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses={**_NOT_FOUND, **_INVALID, **_UNAUTHORIZED, **_SERVER_ERROR},
        summary=f"Update a {kind.singular} (blank fields are ignored)",
        name=f"update_{kind.singular}",
        route_class_override=filtered_body_route(update_filter),
    )
    router.add_api_route(
        "/{resource_id}",
        delete_resource,
        methods=["DELETE"],
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses={**_NOT_FOUND, **_UNAUTHORIZED, **_SERVER_ERROR},
        summary=f"Delete a {kind.singular}",
        name=f"delete_{kind.singular}",
    )

    return router
