# scripts/create_indexes.py
"""
Create/ensure MongoDB indexes for the brokerage database (index step only).
Safe to rerun: identical indexes are a no-op.

Run from project root:
  - python scripts/create_indexes.py
  - OR: python -m scripts.create_indexes
"""

import asyncio
import os
import sys

# --- Make sure 'brokerage_db' package is importable when running this file directly ---
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from brokerage_db.db import connect_to_mongo, close_mongo_connection
from brokerage_db.services.bootstrap import ping, ensure_indexes


async def create_indexes() -> None:
    db = connect_to_mongo()
    try:
        await ping(db)
        await ensure_indexes(db)
    finally:
        close_mongo_connection()


def main() -> None:
    try:
        asyncio.run(create_indexes())
        print("✅ Indexes ensured.")
    except Exception as e:
        print(f"❌ Failed to create indexes: {e}")
        raise


if __name__ == "__main__":
    main()
