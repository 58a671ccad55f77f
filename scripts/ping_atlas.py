import os
import sys

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi
from dotenv import load_dotenv

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from brokerage_db.index_specs import indexed_collections
from brokerage_db.mongo_collections import SYMBOLS


def check_deployment(uri: str, db_name: str) -> None:
    """Ping the server and report which bootstrap collections already exist."""
    client = MongoClient(uri, server_api=ServerApi("1"))
    try:
        client.admin.command("ping")
        print("✅ Pinged your deployment. You successfully connected to MongoDB!")

        db = client[db_name]
        existing = set(db.list_collection_names())
        missing = [name for name in indexed_collections() if name not in existing]
        if missing:
            print(f"Database '{db_name}' is missing: {', '.join(missing)}")
        else:
            print(f"Database '{db_name}' has all bootstrap collections.")
        if SYMBOLS in existing:
            print(f"Symbols: {db[SYMBOLS].count_documents({})}")
    except Exception as e:
        print("❌ Mongo ping failed:", repr(e))
        raise
    finally:
        client.close()


if __name__ == "__main__":
    load_dotenv()  # reads .env in project root
    uri = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    print("Using URI:", uri[:40] + "...")  # don't dump whole secret to console
    check_deployment(uri, os.getenv("MONGODB_DB", "stock_brokerage"))
