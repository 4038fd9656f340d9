from __future__ import annotations

from typing import Any

import jsonschema

from .errors import ValidationError

_STRING = {"type": "string"}
_QUANTITY = {"type": ["number", "string"]}
_KEYS = {"type": ["string", "array"], "items": _STRING}

PUBLIC_KEYS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "publicKeys": {"type": "array", "items": _STRING},
    },
}

KEYFILE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "publicKey": _STRING,
        "password": _STRING,
    },
}

TRANSFER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "recipient": _STRING,
        "amount": _QUANTITY,
        "fee": _QUANTITY,
        "sender": _KEYS,
        "changeAddress": _STRING,
        "data": _STRING,
    },
}

ASSET_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        **TRANSFER_SCHEMA["properties"],
        "issuer": _STRING,
        "assetCode": _STRING,
        "assetId": _STRING,
    },
}

CALC_DELAY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "blockId": _STRING,
        "numBlocks": {"type": ["integer", "string"]},
    },
}


def validator_for(schema: dict[str, Any]) -> jsonschema.Validator:
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def validate_params(params: dict[str, Any], schema: dict[str, Any]) -> None:
    """Raise ValidationError for the first type violation in ``params``."""
    order = list(schema.get("properties", {}))

    def position(error: jsonschema.ValidationError) -> int:
        head = error.path[0] if error.path else None
        return order.index(head) if head in order else -1

    errors = sorted(validator_for(schema).iter_errors(params), key=position)
    if errors:
        first = errors[0]
        field = str(first.path[0]) if first.path else None
        raise ValidationError(_format_error(first), field=field)


def _format_error(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(part) for part in error.path) or "<root>"
    return f"{location}: {error.message}"
