# Middleware package init
"""
Bookshelf API — Middleware Package
===================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

Route-level:
    PATCH routes use a filtered-body route class (blank_fields.py) that drops
    empty-string fields before the body is validated.
"""
