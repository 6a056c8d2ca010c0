"""Employee repository against the in-memory collection."""

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.core.errors import StoreValidationError
from app.domains.employees.repository import EmployeeRepository


@pytest.fixture
def repo(fake_db):
    return EmployeeRepository(fake_db)


async def test_create_formats_object_id(repo, employee_payload):
    created = await repo.create(employee_payload)

    assert isinstance(created["_id"], str)
    assert ObjectId.is_valid(created["_id"])


async def test_create_rejects_document_failing_store_model(repo, employee_payload):
    employee_payload["mobileNo"] = "12"

    with pytest.raises(StoreValidationError):
        await repo.create(employee_payload)


async def test_create_raises_duplicate_key(repo, employee_payload):
    await repo.create(dict(employee_payload))

    with pytest.raises(DuplicateKeyError):
        await repo.create(dict(employee_payload))


async def test_update_only_sets_present_fields(repo, employee_payload):
    created = await repo.create(employee_payload)

    updated = await repo.update(created["_id"], {"designation": "Director"})

    assert updated["designation"] == "Director"
    assert updated["name"] == employee_payload["name"]
    assert updated["createDate"] == created["createDate"]


async def test_update_rejects_null_field(repo, employee_payload):
    created = await repo.create(employee_payload)

    with pytest.raises(StoreValidationError):
        await repo.update(created["_id"], {"designation": None})


async def test_update_with_nothing_to_set_returns_current(repo, employee_payload):
    created = await repo.create(employee_payload)

    assert await repo.update(created["_id"], {"_id": "ignored"}) == created


async def test_malformed_id_matches_nothing(repo):
    assert await repo.find_by_id("123") is None
    assert await repo.update("123", {"name": "x"}) is None
    assert await repo.delete("123") is False


async def test_search_builds_text_query(repo, employee_payload):
    await repo.create(employee_payload)

    assert len(await repo.search("kumar")) == 1
    assert await repo.search("nobody") == []
    assert len(await repo.search(None)) == 1
