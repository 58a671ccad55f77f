# brokerage_db/services/bootstrap.py
"""
One-shot schema bootstrap for the brokerage database.

Runs, in order, against a single database handle:
  1) ping (fails fast if the server is unreachable)
  2) create the validated collections with their $jsonSchema validators
  3) create the indexes in INDEX_SPECS
  4) insert the seed symbols

The first failure stops the sequence; it is raised as BootstrapError with the
driver error chained as __cause__. Nothing is retried or rolled back.
"""
from __future__ import annotations

import datetime as dt
from typing import Iterable, List, get_args

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from brokerage_db.index_specs import INDEX_SPECS, IndexSpec, indexed_collections
from brokerage_db.mongo_collections import SYMBOLS
from brokerage_db.schemas import VALIDATED_COLLECTIONS
from brokerage_db.seed_data import build_seed_symbols
from brokerage_db.services.validation import DocumentValidationError, validate_document
from brokerage_db.settings import SeedMode, settings

SEED_MODES = get_args(SeedMode)


class BootstrapError(RuntimeError):
    """A bootstrap step failed; `step` is connect | validators | indexes | seed."""

    def __init__(self, step: str, message: str, collection: str | None = None):
        self.step = step
        self.collection = collection
        super().__init__(f"[{step}] {message}")


def _log(msg: str) -> None:
    print(f"[bootstrap] {msg}")


def _check_seed_mode(mode: str) -> None:
    if mode not in SEED_MODES:
        raise BootstrapError(
            "seed", f"unknown seed mode {mode!r}; expected one of {SEED_MODES}", collection=SYMBOLS
        )


async def ping(db: AsyncIOMotorDatabase) -> None:
    try:
        await db.command("ping")
    except PyMongoError as e:
        raise BootstrapError("connect", f"cannot reach database '{db.name}': {e}") from e


async def apply_validators(db: AsyncIOMotorDatabase) -> None:
    for name, schema in VALIDATED_COLLECTIONS.items():
        try:
            # let the server decide whether an existing collection conflicts
            await db.create_collection(
                name,
                validator={"$jsonSchema": schema},
                check_exists=False,
            )
        except PyMongoError as e:
            raise BootstrapError(
                "validators", f"failed to create collection '{name}': {e}", collection=name
            ) from e
        _log(f"Created collection '{name}' with validation.")


async def ensure_indexes(
    db: AsyncIOMotorDatabase,
    specs: Iterable[IndexSpec] = INDEX_SPECS,
) -> List[str]:
    """
    Create every index in `specs`. Identical existing indexes are a no-op on
    the server; a unique index over duplicate data fails.
    Returns the index names in creation order.
    """
    names: List[str] = []
    for spec in specs:
        try:
            name = await db[spec.collection].create_index(spec.keys, unique=spec.unique)
        except PyMongoError as e:
            raise BootstrapError(
                "indexes",
                f"failed to create index {spec.name} on '{spec.collection}': {e}",
                collection=spec.collection,
            ) from e
        names.append(name)
    _log(f"Ensured {len(names)} indexes.")
    return names


async def seed_symbols(
    db: AsyncIOMotorDatabase,
    *,
    mode: SeedMode = "strict",
    now: dt.datetime | None = None,
) -> int:
    """
    Insert the seed symbols, stamped with `now`. Returns how many were inserted.
    - strict:  one ordered insert_many; a rerun hits the unique symbol index
    - missing: skip symbols that are already present
    """
    _check_seed_mode(mode)

    docs = build_seed_symbols(now)
    for d in docs:
        try:
            validate_document(SYMBOLS, d)
        except DocumentValidationError as e:
            raise BootstrapError("seed", str(e), collection=SYMBOLS) from e

    col = db[SYMBOLS]
    try:
        if mode == "missing":
            wanted = [d["symbol"] for d in docs]
            present = set(await col.distinct("symbol", {"symbol": {"$in": wanted}}))
            docs = [d for d in docs if d["symbol"] not in present]
            if not docs:
                _log("All seed symbols already present; nothing to insert.")
                return 0

        _log("Inserting initial symbols...")
        result = await col.insert_many(docs, ordered=True)
    except PyMongoError as e:
        raise BootstrapError("seed", f"failed to insert seed symbols: {e}", collection=SYMBOLS) from e

    _log(f"Inserted initial stock symbols: {', '.join(d['symbol'] for d in docs)}")
    return len(result.inserted_ids)


async def run_bootstrap(
    db: AsyncIOMotorDatabase,
    *,
    seed_mode: SeedMode | None = None,
    now: dt.datetime | None = None,
) -> None:
    mode = seed_mode or settings.seed_mode
    # reject bad input before anything is written
    _check_seed_mode(mode)

    _log(f"Using database '{db.name}'")

    # 1) connection
    await ping(db)

    # 2) validated collections
    await apply_validators(db)

    # 3) indexes
    await ensure_indexes(db)

    # 4) seed data
    await seed_symbols(db, mode=mode, now=now)

    _log("Database initialization completed successfully!")
    _log(f"Created collections: {', '.join(indexed_collections())}")
