"""
Static catalog of the node's JSON-RPC operations.

Each operation is an OperationDescriptor: the route and method it is sent
to, the fields that must be present (checked in order), the fields for
which a numeric zero counts as present, and an optional jsonschema for
parameter types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import ValidationError
from .schemas import (
    ASSET_SCHEMA,
    CALC_DELAY_SCHEMA,
    KEYFILE_SCHEMA,
    PUBLIC_KEYS_SCHEMA,
    TRANSFER_SCHEMA,
    validate_params,
)

WALLET = "wallet/"
ASSET = "asset/"
NODE_VIEW = "nodeView/"
DEBUG = "debug/"

ROUTES = (WALLET, ASSET, NODE_VIEW, DEBUG)

MISSING_PARAMS = "A parameter object must be specified"

_FEE_ONLY = frozenset({"fee"})


@dataclass(frozen=True)
class OperationDescriptor:
    name: str
    route: str
    method: str
    required: tuple[str, ...] = ()
    zero_allowed: frozenset[str] = frozenset()
    takes_params: bool = True
    schema: Optional[dict[str, Any]] = None

    def validate(self, params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        """
        Check ``params`` against this operation's contract.

        Returns a shallow copy of the parameter object ({} for operations
        that take none). Raises ValidationError at the first violation.
        """
        if not self.takes_params:
            return {}
        if params is None:
            raise ValidationError(MISSING_PARAMS)
        if not isinstance(params, Mapping):
            raise ValidationError(f"{MISSING_PARAMS} (got {type(params).__name__})")
        for name in self.required:
            if not is_present(params.get(name), zero_allowed=name in self.zero_allowed):
                raise ValidationError(f"A value for '{name}' must be specified", field=name)
        # tuples serialize as JSON arrays, so check them as lists
        payload = {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in params.items()
        }
        if self.schema is not None:
            validate_params(payload, self.schema)
        return payload


def is_present(value: Any, zero_allowed: bool = False) -> bool:
    # bool is an int subclass; False never counts as zero
    if zero_allowed and isinstance(value, (int, float)) and not isinstance(value, bool):
        return True
    return bool(value)


def _op(name: str, route: str, method: str, *required: str, **kwargs: Any) -> OperationDescriptor:
    return OperationDescriptor(name=name, route=route, method=method, required=required, **kwargs)


def _no_params(name: str, route: str, method: str) -> OperationDescriptor:
    return OperationDescriptor(name=name, route=route, method=method, takes_params=False)


# ---------------------------------------------------------------------------
# Wallet
# ---------------------------------------------------------------------------

GET_BALANCES_BY_KEY = _op("get_balances_by_key", WALLET, "balances", "publicKeys", schema=PUBLIC_KEYS_SCHEMA)
LIST_OPEN_KEYFILES = _no_params("list_open_keyfiles", WALLET, "listOpenKeyfiles")
GENERATE_KEYFILE = _op("generate_keyfile", WALLET, "generateKeyfile", "password", schema=KEYFILE_SCHEMA)
LOCK_KEYFILE = _op("lock_keyfile", WALLET, "lockKeyfile", "publicKey", "password", schema=KEYFILE_SCHEMA)
UNLOCK_KEYFILE = _op("unlock_keyfile", WALLET, "unlockKeyfile", "publicKey", "password", schema=KEYFILE_SCHEMA)
SIGN_TRANSACTION = _op("sign_transaction", WALLET, "signTx", "publicKey", "tx")
BROADCAST_TX = _op("broadcast_tx", WALLET, "broadcastTx", "tx")
TRANSFER_POLYS = _op(
    "transfer_polys", WALLET, "transferPolys",
    "recipient", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=TRANSFER_SCHEMA,
)
TRANSFER_ARBITS = _op(
    "transfer_arbits", WALLET, "transferArbits",
    "recipient", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=TRANSFER_SCHEMA,
)

# ---------------------------------------------------------------------------
# Asset
# ---------------------------------------------------------------------------

CREATE_ASSETS = _op(
    "create_assets", ASSET, "createAssets",
    "issuer", "assetCode", "recipient", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=ASSET_SCHEMA,
)
CREATE_ASSETS_PROTOTYPE = _op(
    "create_assets_prototype", ASSET, "createAssetsPrototype",
    "issuer", "assetCode", "recipient", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=ASSET_SCHEMA,
)
TRANSFER_ASSETS = _op(
    "transfer_assets", ASSET, "transferAssets",
    "issuer", "assetCode", "recipient", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=ASSET_SCHEMA,
)
TRANSFER_ASSETS_PROTOTYPE = _op(
    "transfer_assets_prototype", ASSET, "transferAssetsPrototype",
    "issuer", "assetCode", "recipient", "sender", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=ASSET_SCHEMA,
)
TRANSFER_TARGET_ASSETS = _op(
    "transfer_target_assets", ASSET, "transferTargetAssets",
    "recipient", "assetId", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=ASSET_SCHEMA,
)
TRANSFER_TARGET_ASSETS_PROTOTYPE = _op(
    "transfer_target_assets_prototype", ASSET, "transferTargetAssetsPrototype",
    "recipient", "sender", "assetId", "amount", "fee",
    zero_allowed=_FEE_ONLY, schema=ASSET_SCHEMA,
)

# ---------------------------------------------------------------------------
# NodeView
# ---------------------------------------------------------------------------

GET_TRANSACTION_BY_ID = _op("get_transaction_by_id", NODE_VIEW, "transactionById", "transactionId")
GET_TRANSACTION_FROM_MEMPOOL = _op(
    "get_transaction_from_mempool", NODE_VIEW, "transactionFromMempool", "transactionId"
)
GET_MEMPOOL = _no_params("get_mempool", NODE_VIEW, "mempool")
GET_BLOCK_BY_ID = _op("get_block_by_id", NODE_VIEW, "blockById", "blockId")

# ---------------------------------------------------------------------------
# Debug
# ---------------------------------------------------------------------------

CHAIN_INFO = _no_params("chain_info", DEBUG, "info")
CALC_DELAY = _op("calc_delay", DEBUG, "delay", "blockId", "numBlocks", schema=CALC_DELAY_SCHEMA)
MY_BLOCKS = _no_params("my_blocks", DEBUG, "myBlocks")
BLOCK_GENERATORS = _no_params("block_generators", DEBUG, "generators")
PRINT_CHAIN = _no_params("print_chain", DEBUG, "chain")


OPERATIONS: dict[str, OperationDescriptor] = {
    op.name: op
    for op in (
        GET_BALANCES_BY_KEY,
        LIST_OPEN_KEYFILES,
        GENERATE_KEYFILE,
        LOCK_KEYFILE,
        UNLOCK_KEYFILE,
        SIGN_TRANSACTION,
        BROADCAST_TX,
        TRANSFER_POLYS,
        TRANSFER_ARBITS,
        CREATE_ASSETS,
        CREATE_ASSETS_PROTOTYPE,
        TRANSFER_ASSETS,
        TRANSFER_ASSETS_PROTOTYPE,
        TRANSFER_TARGET_ASSETS,
        TRANSFER_TARGET_ASSETS_PROTOTYPE,
        GET_TRANSACTION_BY_ID,
        GET_TRANSACTION_FROM_MEMPOOL,
        GET_MEMPOOL,
        GET_BLOCK_BY_ID,
        CHAIN_INFO,
        CALC_DELAY,
        MY_BLOCKS,
        BLOCK_GENERATORS,
        PRINT_CHAIN,
    )
}


def get_operation(name: str) -> OperationDescriptor:
    """Look up an operation by name, raising ValidationError if unknown."""
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValidationError(f"Unknown operation: {name}") from None
