# brokerage_db/services/validation.py
"""
In-process check of documents against the collections' $jsonSchema validators.

The BSON schemas in brokerage_db/schemas.py are translated into JSON Schema
(bsonType -> type) and run through a jsonschema validator whose type checker
knows the BSON type aliases ("int", "long", "double", "bool", "date",
"objectId", ...). Keywords the two dialects share (required, properties,
enum, pattern, minLength/maxLength, minimum/maximum) pass through unchanged.
"""
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Mapping

from bson import Decimal128, Int64, ObjectId
from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import best_match

from brokerage_db.schemas import VALIDATED_COLLECTIONS

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class DocumentValidationError(ValueError):
    """A document the store's validator would reject."""

    def __init__(self, collection: str, message: str, path: str = ""):
        self.collection = collection
        self.message = message
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(f"{collection}: schema validation error{where}: {message}")


def _is_int(checker, instance) -> bool:
    # Int64 and python ints outside int32 are encoded as BSON long
    if isinstance(instance, (bool, Int64)) or not isinstance(instance, int):
        return False
    return INT32_MIN <= instance <= INT32_MAX


def _is_long(checker, instance) -> bool:
    return isinstance(instance, Int64) or (
        isinstance(instance, int) and not isinstance(instance, bool)
    )


def _is_double(checker, instance) -> bool:
    return isinstance(instance, float)


def _is_number(checker, instance) -> bool:
    if isinstance(instance, bool):
        return False
    return isinstance(instance, (int, float, Int64, Decimal128))


BSON_TYPE_CHECKER = Draft7Validator.TYPE_CHECKER.redefine_many(
    {
        "int": _is_int,
        "long": _is_long,
        "double": _is_double,
        "decimal": lambda checker, instance: isinstance(instance, Decimal128),
        "number": _is_number,
        "bool": lambda checker, instance: isinstance(instance, bool),
        "date": lambda checker, instance: isinstance(instance, dt.datetime),
        "objectId": lambda checker, instance: isinstance(instance, ObjectId),
        "object": lambda checker, instance: isinstance(instance, Mapping),
        "array": lambda checker, instance: isinstance(instance, (list, tuple)),
    }
)

BsonSchemaValidator = validators.extend(Draft7Validator, type_checker=BSON_TYPE_CHECKER)


def bson_to_jsonschema(bson_schema: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in bson_schema.items():
        if key == "bsonType":
            out["type"] = value
        elif key == "properties":
            out["properties"] = {name: bson_to_jsonschema(prop) for name, prop in value.items()}
        elif key in ("items", "not", "additionalProperties") and isinstance(value, dict):
            out[key] = bson_to_jsonschema(value)
        elif key in ("anyOf", "oneOf", "allOf"):
            out[key] = [bson_to_jsonschema(sub) for sub in value]
        else:
            out[key] = value
    return out


_VALIDATOR_CACHE: Dict[str, Draft7Validator] = {}


def _validator_for(collection: str):
    bson_sch = VALIDATED_COLLECTIONS.get(collection)
    if bson_sch is None:
        return None
    if collection not in _VALIDATOR_CACHE:
        _VALIDATOR_CACHE[collection] = BsonSchemaValidator(bson_to_jsonschema(bson_sch))
    return _VALIDATOR_CACHE[collection]


def validate_document(collection: str, doc: Mapping[str, Any]) -> None:
    """
    Raise DocumentValidationError if `doc` would be rejected by the validator
    on `collection`. Collections without a validator accept any document.
    """
    validator = _validator_for(collection)
    if validator is None:
        return

    error = best_match(validator.iter_errors(doc))
    if error is not None:
        path = ".".join(str(p) for p in error.absolute_path)
        raise DocumentValidationError(collection, error.message, path)


def is_valid_document(collection: str, doc: Mapping[str, Any]) -> bool:
    try:
        validate_document(collection, doc)
    except DocumentValidationError:
        return False
    return True
