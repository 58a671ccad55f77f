# scripts/bootstrap_db.py
"""
Initialize the brokerage database: validators, indexes, seed symbols.
Meant to run once per environment. Whether a rerun gets past the validators
step depends on the server: before MongoDB 7.0 creating an existing
collection fails with NamespaceExists. SEED_MODE=missing only makes the seed
step itself rerunnable; use scripts/create_indexes.py to re-ensure indexes.

Run from project root:
  - python scripts/bootstrap_db.py
  - OR: python -m scripts.bootstrap_db
"""

import asyncio
import os
import sys

# --- Make sure 'brokerage_db' package is importable when running this file directly ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from brokerage_db.settings import settings
from brokerage_db.db import connect_to_mongo, close_mongo_connection
from brokerage_db.services.bootstrap import run_bootstrap


async def bootstrap() -> None:
    db = connect_to_mongo()
    try:
        await run_bootstrap(db, seed_mode=settings.seed_mode)
    finally:
        close_mongo_connection()


def main() -> None:
    try:
        asyncio.run(bootstrap())
        print("✅ Database bootstrapped.")
    except Exception as e:
        print(f"❌ Database bootstrap failed: {e}")
        raise


if __name__ == "__main__":
    main()
