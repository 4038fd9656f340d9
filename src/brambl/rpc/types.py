from __future__ import annotations

from typing import Any, TypedDict, Union

Keys = Union[str, list[str]]
Quantity = Union[int, float, str]


class BalancesParams(TypedDict):
    publicKeys: list[str]


class PasswordParams(TypedDict):
    password: str


class KeyfileParams(TypedDict):
    publicKey: str
    password: str


class SignParams(TypedDict):
    publicKey: str
    tx: dict[str, Any]


class BroadcastParams(TypedDict):
    tx: dict[str, Any]


class _TransferOptional(TypedDict, total=False):
    sender: Keys
    changeAddress: str
    data: str


class TransferParams(_TransferOptional):
    recipient: str
    amount: Quantity
    fee: Quantity


class AssetParams(TransferParams):
    issuer: str
    assetCode: str


class TargetAssetParams(TransferParams):
    assetId: str


class TransactionIdParams(TypedDict):
    transactionId: str


class BlockIdParams(TypedDict):
    blockId: str


class DelayParams(TypedDict):
    blockId: str
    numBlocks: Union[int, str]
