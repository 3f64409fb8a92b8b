# Services package init
"""
Bookshelf API — Services Layer
===============================

Service Inventory:
    - DocumentStore:    persistence collaborator returning explicit results
    - OwnershipPolicy:  optional per-caller ownership of records
    - ResourceService:  CRUD lifecycle for one resource kind
"""
