# brokerage_db/index_specs.py
from __future__ import annotations

from typing import List, NamedTuple, Tuple

from pymongo import ASCENDING

from brokerage_db.mongo_collections import (
    USERS,
    SYMBOLS,
    ORDERS,
    HOLDINGS,
    WALLETS,
    TRANSACTIONS,
    USER_WATCHLISTS,
)


class IndexSpec(NamedTuple):
    collection: str
    keys: List[Tuple[str, int]]
    unique: bool = False

    @property
    def name(self) -> str:
        # same naming the server uses by default, e.g. "userId_1_symbolId_1"
        return "_".join(f"{field}_{direction}" for field, direction in self.keys)


def _asc(*fields: str) -> List[Tuple[str, int]]:
    return [(f, ASCENDING) for f in fields]


INDEX_SPECS: List[IndexSpec] = [
    # USERS (email is the login identity)
    IndexSpec(USERS, _asc("email"), unique=True),
    IndexSpec(USERS, _asc("status")),
    IndexSpec(USERS, _asc("createdAt")),

    # SYMBOLS (one doc per ticker)
    IndexSpec(SYMBOLS, _asc("symbol"), unique=True),
    IndexSpec(SYMBOLS, _asc("exchange")),
    IndexSpec(SYMBOLS, _asc("active")),

    # ORDERS
    IndexSpec(ORDERS, _asc("userId")),
    IndexSpec(ORDERS, _asc("symbolId")),
    IndexSpec(ORDERS, _asc("status")),
    IndexSpec(ORDERS, _asc("createdAt")),
    IndexSpec(ORDERS, _asc("userId", "status")),

    # HOLDINGS (one per user + symbol)
    IndexSpec(HOLDINGS, _asc("userId")),
    IndexSpec(HOLDINGS, _asc("symbolId")),
    IndexSpec(HOLDINGS, _asc("userId", "symbolId"), unique=True),

    # WALLETS (one per user)
    IndexSpec(WALLETS, _asc("userId"), unique=True),

    # TRANSACTIONS (history)
    IndexSpec(TRANSACTIONS, _asc("userId")),
    IndexSpec(TRANSACTIONS, _asc("type")),
    IndexSpec(TRANSACTIONS, _asc("status")),
    IndexSpec(TRANSACTIONS, _asc("createdAt")),
    IndexSpec(TRANSACTIONS, _asc("userId", "createdAt")),

    # USER_WATCHLISTS (one per user + symbol)
    IndexSpec(USER_WATCHLISTS, _asc("userId")),
    IndexSpec(USER_WATCHLISTS, _asc("symbolId")),
    IndexSpec(USER_WATCHLISTS, _asc("userId", "symbolId"), unique=True),
]


def indexed_collections() -> List[str]:
    """Collections touched by the index step, in first-seen order."""
    seen: List[str] = []
    for spec in INDEX_SPECS:
        if spec.collection not in seen:
            seen.append(spec.collection)
    return seen
