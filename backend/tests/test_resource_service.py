"""
Bookshelf API — Resource Service Unit Tests
============================================

What:  ResourceService result matching and ownership, with a mocked store.
How:   The fake_store fixture returns hand-built StoreOk / StoreNotFound /
       StoreInvalid / StoreFailure values; no database involved.

What we test:
    ✅ Each store result maps to the right return value or exception
    ✅ update/delete look the record up before mutating it
    ✅ Ownership: disabled by default, enforced when configured
"""

import pytest

from bookshelf.exceptions import DatabaseError, NotFoundError, OwnershipError, ValidationError
from bookshelf.resources import AUTHORS, BOOKS
from bookshelf.services.document_store import StoreFailure, StoreInvalid, StoreNotFound, StoreOk
from bookshelf.services.ownership import OwnershipPolicy
from bookshelf.services.resource_service import ResourceService

ADA_ID = "a" * 32


class TestResourceServiceRead:

    def setup_method(self):
        self.service = ResourceService(AUTHORS)

    @pytest.mark.asyncio
    async def test_list_converts_documents(self, fake_store, make_document):
        fake_store.find_all.return_value = StoreOk([
            make_document(ADA_ID, {"name": "Ada"}),
            make_document("b" * 32, {"name": "Grace"}),
        ])

        records = await self.service.list(fake_store)

        assert records == [{"id": ADA_ID, "name": "Ada"}, {"id": "b" * 32, "name": "Grace"}]

    @pytest.mark.asyncio
    async def test_list_failure_raises_database_error(self, fake_store):
        fake_store.find_all.return_value = StoreFailure("connection refused")

        with pytest.raises(DatabaseError):
            await self.service.list(fake_store)

    @pytest.mark.asyncio
    async def test_get_found(self, fake_store, make_document):
        fake_store.find_by_id.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}))

        record = await self.service.get(fake_store, ADA_ID)

        assert record == {"id": ADA_ID, "name": "Ada"}

    @pytest.mark.asyncio
    async def test_get_not_found(self, fake_store):
        fake_store.find_by_id.return_value = StoreNotFound("authors", ADA_ID)

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get(fake_store, ADA_ID)

        assert exc_info.value.resource == "author"
        assert exc_info.value.resource_id == ADA_ID

    @pytest.mark.asyncio
    async def test_not_found_uses_kind_name(self, fake_store):
        fake_store.find_by_id.return_value = StoreNotFound("books", ADA_ID)

        with pytest.raises(NotFoundError) as exc_info:
            await ResourceService(BOOKS).get(fake_store, ADA_ID)

        assert exc_info.value.resource == "book"

    @pytest.mark.asyncio
    async def test_malformed_id_is_generic_error(self, fake_store):
        fake_store.find_by_id.return_value = StoreFailure(
            "Malformed document identifier", {"document_id": "xyz"}
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get(fake_store, "xyz")

        assert exc_info.value.context["record_id"] == "xyz"


class TestResourceServiceWrite:

    def setup_method(self):
        self.service = ResourceService(AUTHORS)

    @pytest.mark.asyncio
    async def test_create_returns_record(self, fake_store, make_document):
        fake_store.create.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}))

        record = await self.service.create(fake_store, {"name": "Ada"})

        assert record == {"id": ADA_ID, "name": "Ada"}
        fake_store.create.assert_awaited_once_with({"name": "Ada"}, owner=None)

    @pytest.mark.asyncio
    async def test_create_invalid_raises_validation_error(self, fake_store):
        fake_store.create.return_value = StoreInvalid("rejected", {"collection": "authors"})

        with pytest.raises(ValidationError, match="rejected"):
            await self.service.create(fake_store, {"name": "Ada"})

    @pytest.mark.asyncio
    async def test_create_commits_before_returning(self, fake_store, make_document):
        fake_store.create.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}))

        await self.service.create(fake_store, {"name": "Ada"})

        fake_store.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rejected_create_is_never_committed(self, fake_store):
        fake_store.create.return_value = StoreInvalid("rejected")

        with pytest.raises(ValidationError):
            await self.service.create(fake_store, {"name": "Ada"})

        fake_store.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_commit_raises_database_error(self, fake_store, make_document):
        fake_store.create.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}))
        fake_store.commit.return_value = StoreFailure("database is locked")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create(fake_store, {"name": "Ada"})

        assert exc_info.value.context["record_id"] == ADA_ID

    @pytest.mark.asyncio
    async def test_update_looks_up_then_merges(self, fake_store, make_document):
        document = make_document(ADA_ID, {"name": "Ada"})
        fake_store.find_by_id.return_value = StoreOk(document)
        fake_store.update.return_value = StoreOk(document)

        result = await self.service.update(fake_store, ADA_ID, {"bio": "Poet's daughter"})

        assert result is None
        fake_store.find_by_id.assert_awaited_once_with(ADA_ID)
        fake_store.update.assert_awaited_once_with(document, {"bio": "Poet's daughter"})
        fake_store.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_never_calls_store_update(self, fake_store):
        fake_store.find_by_id.return_value = StoreNotFound("authors", ADA_ID)

        with pytest.raises(NotFoundError):
            await self.service.update(fake_store, ADA_ID, {"name": "x"})

        fake_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_missing_never_calls_store_delete(self, fake_store):
        fake_store.find_by_id.return_value = StoreNotFound("authors", ADA_ID)

        with pytest.raises(NotFoundError):
            await self.service.delete(fake_store, ADA_ID)

        fake_store.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_failure_raises_database_error(self, fake_store, make_document):
        fake_store.find_by_id.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}))
        fake_store.delete.return_value = StoreFailure("disk I/O error")

        with pytest.raises(DatabaseError):
            await self.service.delete(fake_store, ADA_ID)


class TestResourceServiceOwnership:

    def setup_method(self):
        self.service = ResourceService(AUTHORS, OwnershipPolicy(enabled=True))

    @pytest.mark.asyncio
    async def test_create_stamps_owner(self, fake_store, make_document):
        fake_store.create.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}, owner="u1"))

        record = await self.service.create(fake_store, {"name": "Ada"}, caller="u1")

        fake_store.create.assert_awaited_once_with({"name": "Ada"}, owner="u1")
        assert record["owner"] == "u1"

    @pytest.mark.asyncio
    async def test_create_without_caller_rejected(self, fake_store):
        with pytest.raises(OwnershipError):
            await self.service.create(fake_store, {"name": "Ada"}, caller=None)

        fake_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_by_other_caller_rejected(self, fake_store, make_document):
        fake_store.find_by_id.return_value = StoreOk(make_document(ADA_ID, {"name": "Ada"}, owner="u1"))

        with pytest.raises(OwnershipError):
            await self.service.update(fake_store, ADA_ID, {"name": "Eve"}, caller="u2")

        fake_store.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_by_owner_allowed(self, fake_store, make_document):
        document = make_document(ADA_ID, {"name": "Ada"}, owner="u1")
        fake_store.find_by_id.return_value = StoreOk(document)
        fake_store.delete.return_value = StoreOk(document)

        await self.service.delete(fake_store, ADA_ID, caller="u1")

        fake_store.delete.assert_awaited_once_with(document)
        fake_store.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_not_found_wins_over_ownership(self, fake_store):
        fake_store.find_by_id.return_value = StoreNotFound("authors", ADA_ID)

        with pytest.raises(NotFoundError):
            await self.service.delete(fake_store, ADA_ID, caller="u2")
