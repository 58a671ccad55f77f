"""
Pytest configuration for unit tests.

Sets the environment before brokerage_db.settings is imported, and provides a
fake motor database so no MongoDB server is needed.
"""
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGODB_DB"] = "test_brokerage"
os.environ["SEED_MODE"] = "strict"


def _make_collection(name, calls):
    col = MagicMock(name=f"collection:{name}")

    async def create_index(keys, unique=False):
        calls.append(("create_index", name, tuple(keys), unique))
        return "_".join(f"{field}_{direction}" for field, direction in keys)

    async def insert_many(docs, ordered=True):
        calls.append(("insert_many", name, len(docs)))
        return MagicMock(inserted_ids=[i for i, _ in enumerate(docs)])

    col.create_index = AsyncMock(side_effect=create_index)
    col.insert_many = AsyncMock(side_effect=insert_many)
    col.distinct = AsyncMock(return_value=[])
    return col


@pytest.fixture
def fake_db():
    """
    MagicMock standing in for an AsyncIOMotorDatabase.

    db.calls records create_collection / create_index / insert_many in order.
    db.collections holds the per-collection mocks handed out by db[name].
    """
    calls = []
    collections = {}

    db = MagicMock(name="db")
    db.name = "test_brokerage"
    db.calls = calls
    db.collections = collections
    db.command = AsyncMock(return_value={"ok": 1.0})

    async def create_collection(name, **kwargs):
        calls.append(("create_collection", name))

    db.create_collection = AsyncMock(side_effect=create_collection)

    def get_collection(name):
        if name not in collections:
            collections[name] = _make_collection(name, calls)
        return collections[name]

    db.__getitem__.side_effect = get_collection
    return db
