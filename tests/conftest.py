"""Shared fixtures: an in-memory stand-in for the Motor database and an API client.

The fake collection supports only the calls the repositories make. Unique indexes
raise the real pymongo DuplicateKeyError so error classification is exercised as it
would be against a server.
"""

import copy
import os
import re
from types import SimpleNamespace

import bson
import pytest
from bson import ObjectId
from bson.codec_options import CodecOptions
from httpx import ASGITransport, AsyncClient
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")

from app.db.mongodb import get_database  # noqa: E402
from app.main import app  # noqa: E402

CODEC_OPTIONS = CodecOptions(tz_aware=True)


def _stored(document):
    """What the server hands back for a document: BSON types, UTC dates to the millisecond."""
    return bson.decode(bson.encode(document), codec_options=CODEC_OPTIONS)


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def sort(self, key, direction=1):
        present = [d for d in self._documents if d.get(key) is not None]
        missing = [d for d in self._documents if d.get(key) is None]
        present.sort(key=lambda d: d[key], reverse=direction < 0)
        # Missing values sort first ascending, like MongoDB's null ordering
        self._documents = missing + present if direction > 0 else present + missing
        return self

    async def to_list(self, length=None):
        return [copy.deepcopy(d) for d in self._documents[:length]]


class FakeCollection:
    def __init__(self, name, unique_fields=(), text_fields=(), fail=False):
        self.name = name
        self.unique_fields = unique_fields
        self.text_fields = text_fields
        self.fail = fail
        self.documents = []
        self.indexes = []

    def _check_available(self):
        if self.fail:
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")

    def _matches(self, document, query):
        for key, expected in query.items():
            if key == "$text":
                terms = expected["$search"].lower().split()
                words = set()
                for field in self.text_fields:
                    words.update(re.findall(r"\w+", str(document.get(field, "")).lower()))
                if not any(term in words for term in terms):
                    return False
            elif document.get(key) != expected:
                return False
        return True

    def _check_unique(self, document, exclude_id=None):
        for field in self.unique_fields:
            if field not in document:
                continue
            for other in self.documents:
                if other["_id"] != exclude_id and other.get(field) == document[field]:
                    message = (
                        f"E11000 duplicate key error collection: employeeDB.{self.name} "
                        f"index: {field}_1 dup key"
                    )
                    raise DuplicateKeyError(message, 11000, {
                        "code": 11000,
                        "errmsg": message,
                        "keyPattern": {field: 1},
                        "keyValue": {field: document[field]},
                    })

    async def create_index(self, keys, **kwargs):
        self.indexes.append((list(keys), kwargs))
        return "_".join(f"{k}_{v}" for k, v in keys)

    async def insert_one(self, document):
        self._check_available()
        document.setdefault("_id", ObjectId())
        self._check_unique(document)
        self.documents.append(_stored(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, query):
        self._check_available()
        for document in self.documents:
            if self._matches(document, query):
                return copy.deepcopy(document)
        return None

    def find(self, query=None):
        self._check_available()
        return FakeCursor([d for d in self.documents if self._matches(d, query or {})])

    async def find_one_and_update(self, query, update, return_document=False):
        self._check_available()
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                updated = {**document, **update["$set"]}
                self._check_unique(update["$set"], exclude_id=document["_id"])
                self.documents[index] = _stored(updated)
                return copy.deepcopy(self.documents[index] if return_document else document)
        return None

    async def find_one_and_delete(self, query):
        self._check_available()
        for index, document in enumerate(self.documents):
            if self._matches(document, query):
                return self.documents.pop(index)
        return None


class FakeDatabase:
    def __init__(self, fail=False):
        self.collections = {
            "employees": FakeCollection(
                "employees", unique_fields=("email", "mobileNo"), text_fields=("name",), fail=fail,
            ),
            "users": FakeCollection("users", unique_fields=("userName",), fail=fail),
        }

    def __getitem__(self, name):
        return self.collections[name]


@pytest.fixture
def fake_db():
    return FakeDatabase()


async def _client_for(database):
    app.dependency_overrides[get_database] = lambda: database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def client(fake_db):
    """API client whose database dependency is the in-memory fake."""
    async for c in _client_for(fake_db):
        yield c


@pytest.fixture
async def failing_client():
    """API client whose database is unreachable."""
    async for c in _client_for(FakeDatabase(fail=True)):
        yield c


@pytest.fixture
def employee_payload():
    return {
        "name": "Ravi Kumar",
        "email": "ravi.kumar@example.com",
        "mobileNo": "9876543210",
        "designation": "Manager",
        "gender": "Male",
        "course": ["MCA", "BSC"],
        "imgUpload": "uploads/ravi.png",
    }
