"""
Bookshelf API — Blank-Field Filter
===================================

What:  Removes empty-string fields from request envelopes before validation.
Why:   HTML forms submit untouched inputs as "". On PATCH that would overwrite
       a stored value with a blank one; dropping the key leaves it unchanged.
How:   A custom APIRoute whose request object rewrites the JSON body on first
       read. FastAPI then validates the filtered body against the route's
       schema, so the filter always runs before the handler sees the payload.

    {"author": {"name": "", "bio": "x"}}  →  {"author": {"bio": "x"}}

Only the first level inside each envelope is filtered, and only exact empty
strings are removed (whitespace and null are kept).
"""

import json
from typing import Any, Callable, Type

from fastapi import Request, Response
from fastapi.routing import APIRoute

BodyFilter = Callable[[Any], Any]


def remove_blank_fields(payload: Any) -> Any:
    """Returns a copy of `payload` with "" values removed from each envelope."""
    if not isinstance(payload, dict):
        return payload
    filtered = {}
    for key, envelope in payload.items():
        if isinstance(envelope, dict):
            envelope = {field: value for field, value in envelope.items() if value != ""}
        filtered[key] = envelope
    return filtered


class FilteredBodyRequest(Request):
    """Request whose JSON body passes through `body_filter` before anyone reads it."""

    body_filter: BodyFilter = staticmethod(remove_blank_fields)

    async def body(self) -> bytes:
        if not hasattr(self, "_filtered_body"):
            raw = await super().body()
            try:
                payload = json.loads(raw)
            except ValueError:
                # Not JSON: let FastAPI report it as a validation error
                self._filtered_body = raw
            else:
                self._filtered_body = json.dumps(self.body_filter(payload)).encode("utf-8")
        return self._filtered_body


def filtered_body_route(body_filter: BodyFilter = remove_blank_fields) -> Type[APIRoute]:
    """
    Build an APIRoute class applying `body_filter` to JSON request bodies.

    Usage:
        router.add_api_route(..., route_class_override=filtered_body_route())
    """
    request_class = type(
        "FilteredBodyRequest",
        (FilteredBodyRequest,),
        {"body_filter": staticmethod(body_filter)},
    )

    class FilteredBodyRoute(APIRoute):
        def get_route_handler(self) -> Callable:
            original_route_handler = super().get_route_handler()

            async def filtered_route_handler(request: Request) -> Response:
                request = request_class(request.scope, request.receive)
                return await original_route_handler(request)

            return filtered_route_handler

    return FilteredBodyRoute
