# brokerage_db/mongo_collections.py

USERS = "users"
SYMBOLS = "symbols"
ORDERS = "orders"
HOLDINGS = "holdings"
WALLETS = "wallets"
TRANSACTIONS = "transactions"
USER_WATCHLISTS = "userWatchlists"

# Notes:
# - USERS, SYMBOLS and ORDERS carry a $jsonSchema validator (see schemas.py).
# - The other collections are created implicitly by their first index.
# - userId / symbolId reference users._id / symbols._id.
