# brokerage_db/seed_data.py
from __future__ import annotations

import datetime as dt
from datetime import timezone
from typing import Any, Dict, List

SEED_SYMBOLS: List[Dict[str, Any]] = [
    {"symbol": "AAPL", "companyName": "Apple Inc.", "exchange": "NASDAQ", "sector": "Technology"},
    {"symbol": "GOOGL", "companyName": "Alphabet Inc.", "exchange": "NASDAQ", "sector": "Technology"},
    {"symbol": "MSFT", "companyName": "Microsoft Corporation", "exchange": "NASDAQ", "sector": "Technology"},
    {"symbol": "TSLA", "companyName": "Tesla, Inc.", "exchange": "NASDAQ", "sector": "Automotive"},
    {"symbol": "AMZN", "companyName": "Amazon.com, Inc.", "exchange": "NASDAQ", "sector": "E-commerce"},
]


def build_seed_symbols(now: dt.datetime | None = None) -> List[Dict[str, Any]]:
    """
    Fresh copies of the seed rows, marked active and stamped with `now`
    (UTC now when omitted). The static rows above are never mutated.
    """
    ts = now or dt.datetime.now(timezone.utc)
    return [{**row, "active": True, "createdAt": ts} for row in SEED_SYMBOLS]
