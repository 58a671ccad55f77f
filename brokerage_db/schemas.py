# brokerage_db/schemas.py
"""
$jsonSchema validators for the validated collections.
The store enforces these on insert/update; services/validation.py runs the
same documents through them in-process.
"""
from brokerage_db.mongo_collections import USERS, SYMBOLS, ORDERS

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
SYMBOL_PATTERN = r"^[A-Z]+$"

USER_STATUSES = ["ACTIVE", "INACTIVE", "SUSPENDED"]
KYC_STATUSES = ["NOT_STARTED", "IN_PROGRESS", "COMPLETED", "REJECTED"]
ORDER_TYPES = ["MARKET", "LIMIT"]
ORDER_SIDES = ["BUY", "SELL"]
ORDER_STATUSES = ["PENDING", "FILLED", "CANCELLED", "REJECTED"]

users_schema = {
    "bsonType": "object",
    "required": ["email", "firstName", "lastName", "password"],
    "properties": {
        "email": {
            "bsonType": "string",
            "pattern": EMAIL_PATTERN,
            "description": "must be a valid email address",
        },
        "firstName": {
            "bsonType": "string",
            "minLength": 1,
            "maxLength": 50,
            "description": "must be a string between 1-50 characters",
        },
        "lastName": {
            "bsonType": "string",
            "minLength": 1,
            "maxLength": 50,
            "description": "must be a string between 1-50 characters",
        },
        "password": {
            "bsonType": "string",
            "minLength": 6,
            "description": "must be a string with minimum 6 characters",
        },
        "status": {
            "enum": USER_STATUSES,
            "description": "must be one of the enum values",
        },
        "kycStatus": {
            "enum": KYC_STATUSES,
            "description": "must be one of the enum values",
        },
    },
}

symbols_schema = {
    "bsonType": "object",
    "required": ["symbol", "companyName", "exchange"],
    "properties": {
        "symbol": {
            "bsonType": "string",
            "pattern": SYMBOL_PATTERN,
            "maxLength": 10,
            "description": "must be uppercase letters only, max 10 characters",
        },
        "companyName": {
            "bsonType": "string",
            "minLength": 1,
            "maxLength": 200,
            "description": "must be a string between 1-200 characters",
        },
        "exchange": {
            "bsonType": "string",
            "minLength": 1,
            "maxLength": 10,
            "description": "must be a string between 1-10 characters",
        },
    },
}

orders_schema = {
    "bsonType": "object",
    "required": ["userId", "symbolId", "orderType", "side", "quantity"],
    "properties": {
        "orderType": {
            "enum": ORDER_TYPES,
            "description": "must be either MARKET or LIMIT",
        },
        "side": {
            "enum": ORDER_SIDES,
            "description": "must be either BUY or SELL",
        },
        "status": {
            "enum": ORDER_STATUSES,
            "description": "must be one of the enum values",
        },
        "quantity": {
            "bsonType": "int",
            "minimum": 1,
            "description": "must be a positive integer",
        },
    },
}

# creation order matters only for the progress output
VALIDATED_COLLECTIONS = {
    USERS: users_schema,
    SYMBOLS: symbols_schema,
    ORDERS: orders_schema,
}
