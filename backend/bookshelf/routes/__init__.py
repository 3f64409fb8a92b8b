# Routes package init
"""
Bookshelf API — Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - resources.py:  build_resource_router(kind) → CRUD routes for one kind
                     (mounted for /authors and /books by main.create_app)
    - health.py:     GET /health (service health check)

Routes stay THIN: they read the envelope, call the resource service and
shape the response. Status codes for failures come from the global
exception handlers.
"""
