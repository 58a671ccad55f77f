"""
Unit tests for the static index table and seed rows.
"""
import datetime as dt
from collections import Counter

from brokerage_db.index_specs import INDEX_SPECS, indexed_collections
from brokerage_db.seed_data import SEED_SYMBOLS, build_seed_symbols


class TestIndexTable:

    def test_indexes_per_collection(self):
        counts = Counter(spec.collection for spec in INDEX_SPECS)
        assert counts == {
            "users": 3,
            "symbols": 3,
            "orders": 5,
            "holdings": 3,
            "wallets": 1,
            "transactions": 5,
            "userWatchlists": 3,
        }

    def test_unique_indexes(self):
        unique = {(s.collection, s.name) for s in INDEX_SPECS if s.unique}
        assert unique == {
            ("users", "email_1"),
            ("symbols", "symbol_1"),
            ("holdings", "userId_1_symbolId_1"),
            ("wallets", "userId_1"),
            ("userWatchlists", "userId_1_symbolId_1"),
        }

    def test_compound_indexes(self):
        compound = {(s.collection, s.name) for s in INDEX_SPECS if len(s.keys) > 1}
        assert compound == {
            ("orders", "userId_1_status_1"),
            ("holdings", "userId_1_symbolId_1"),
            ("transactions", "userId_1_createdAt_1"),
            ("userWatchlists", "userId_1_symbolId_1"),
        }

    def test_no_duplicate_specs(self):
        keys = [(s.collection, s.name) for s in INDEX_SPECS]
        assert len(keys) == len(set(keys))

    def test_collection_order(self):
        assert indexed_collections() == [
            "users", "symbols", "orders", "holdings",
            "wallets", "transactions", "userWatchlists",
        ]


class TestSeedRows:

    def test_build_stamps_copies(self):
        now = dt.datetime(2026, 1, 2)
        docs = build_seed_symbols(now)

        assert [d["symbol"] for d in docs] == ["AAPL", "GOOGL", "MSFT", "TSLA", "AMZN"]
        assert all(d["active"] is True and d["createdAt"] == now for d in docs)
        # static rows stay untouched
        assert all("createdAt" not in row and "active" not in row for row in SEED_SYMBOLS)
