"""
Requests - async interface to the Bifrost node's Loki-layer JSON-RPC API.

Every method validates its parameter object locally, then sends exactly
one request through :func:`brambl.rpc.dispatch.dispatch` and returns the
node's ``result`` payload.

Usage::

    requests = Requests("http://localhost:9085/", "topl_the_world!")
    info = await requests.chain_info()
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from .config import DEFAULT_API_KEY, DEFAULT_URL, ClientConfig
from .rpc import operations as ops
from .rpc.dispatch import DEFAULT_ID, RouteInfo, dispatch
from .rpc.operations import OperationDescriptor, get_operation
from .rpc.types import (
    AssetParams,
    BalancesParams,
    BlockIdParams,
    BroadcastParams,
    DelayParams,
    KeyfileParams,
    PasswordParams,
    SignParams,
    TargetAssetParams,
    TransactionIdParams,
    TransferParams,
)

Params = Optional[Mapping[str, Any]]


class Requests:
    def __init__(
        self,
        url: str = DEFAULT_URL,
        api_key: str = DEFAULT_API_KEY,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or ClientConfig(url, api_key)
        self.transport = transport

    @property
    def url(self) -> str:
        return self.config.base_url

    def set_url(self, url: str) -> None:
        self.config.set_url(url)

    def set_api_key(self, api_key: str) -> None:
        self.config.set_api_key(api_key)

    async def _request(self, op: OperationDescriptor, params: Params = None, id: str = DEFAULT_ID) -> Any:
        payload = op.validate(params)
        route_info = RouteInfo(route=op.route, method=op.method, id=id or DEFAULT_ID)
        return await dispatch(route_info, payload, self.config, transport=self.transport)

    async def call(self, name: str, params: Params = None, id: str = DEFAULT_ID) -> Any:
        """Invoke an operation by its catalog name (e.g. ``"get_mempool"``)."""
        return await self._request(get_operation(name), params, id)

    # ============ Wallet ============

    async def get_balances_by_key(self, params: Optional[BalancesParams] = None, id: str = DEFAULT_ID) -> Any:
        """
        Get the balances of public keys held in the node's keyfile directory.

        Args:
            params: ``{"publicKeys": [...]}``
            id: JSON-RPC request id

        Returns:
            Balances keyed by public key
        """
        return await self._request(ops.GET_BALANCES_BY_KEY, params, id)

    async def list_open_keyfiles(self, id: str = DEFAULT_ID) -> Any:
        """List the keyfiles currently unlocked on the node."""
        return await self._request(ops.LIST_OPEN_KEYFILES, id=id)

    async def generate_keyfile(self, params: Optional[PasswordParams] = None, id: str = DEFAULT_ID) -> Any:
        """Generate a new keyfile encrypted with ``params["password"]``."""
        return await self._request(ops.GENERATE_KEYFILE, params, id)

    async def lock_keyfile(self, params: Optional[KeyfileParams] = None, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.LOCK_KEYFILE, params, id)

    async def unlock_keyfile(self, params: Optional[KeyfileParams] = None, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.UNLOCK_KEYFILE, params, id)

    async def sign_transaction(self, params: Optional[SignParams] = None, id: str = DEFAULT_ID) -> Any:
        """
        Have the node sign a JSON-formatted prototype transaction.

        Args:
            params: ``publicKey`` of an unlocked keyfile and the prototype ``tx``
            id: JSON-RPC request id
        """
        return await self._request(ops.SIGN_TRANSACTION, params, id)

    async def broadcast_tx(self, params: Optional[BroadcastParams] = None, id: str = DEFAULT_ID) -> Any:
        """Broadcast a signed transaction (``params["tx"]`` must carry its signatures)."""
        return await self._request(ops.BROADCAST_TX, params, id)

    async def transfer_polys(self, params: Optional[TransferParams] = None, id: str = DEFAULT_ID) -> Any:
        """
        Transfer Polys to a recipient.

        Args:
            params: ``recipient``, ``amount`` and ``fee`` (``fee`` may be 0);
                optionally ``sender``, ``changeAddress`` and ``data``
            id: JSON-RPC request id
        """
        return await self._request(ops.TRANSFER_POLYS, params, id)

    async def transfer_arbits(self, params: Optional[TransferParams] = None, id: str = DEFAULT_ID) -> Any:
        """Transfer Arbits to a recipient. Same parameters as :meth:`transfer_polys`."""
        return await self._request(ops.TRANSFER_ARBITS, params, id)

    # ============ Asset ============

    async def create_assets(self, params: Optional[AssetParams] = None, id: str = DEFAULT_ID) -> Any:
        """
        Create a new asset on chain.

        Args:
            params: ``issuer``, ``assetCode``, ``recipient``, ``amount``, ``fee``;
                optionally ``data``
            id: JSON-RPC request id
        """
        return await self._request(ops.CREATE_ASSETS, params, id)

    async def create_assets_prototype(self, params: Optional[AssetParams] = None, id: str = DEFAULT_ID) -> Any:
        """Like :meth:`create_assets`, but returns an unsigned transaction."""
        return await self._request(ops.CREATE_ASSETS_PROTOTYPE, params, id)

    async def transfer_assets(self, params: Optional[AssetParams] = None, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.TRANSFER_ASSETS, params, id)

    async def transfer_assets_prototype(self, params: Optional[AssetParams] = None, id: str = DEFAULT_ID) -> Any:
        """Unsigned asset transfer. ``sender`` is required here."""
        return await self._request(ops.TRANSFER_ASSETS_PROTOTYPE, params, id)

    async def transfer_target_assets(self, params: Optional[TargetAssetParams] = None, id: str = DEFAULT_ID) -> Any:
        """Transfer a specific asset box (``assetId``) to a recipient."""
        return await self._request(ops.TRANSFER_TARGET_ASSETS, params, id)

    async def transfer_target_assets_prototype(
        self, params: Optional[TargetAssetParams] = None, id: str = DEFAULT_ID
    ) -> Any:
        return await self._request(ops.TRANSFER_TARGET_ASSETS_PROTOTYPE, params, id)

    # ============ NodeView ============

    async def get_transaction_by_id(self, params: Optional[TransactionIdParams] = None, id: str = DEFAULT_ID) -> Any:
        """Look up a transaction in chain history."""
        return await self._request(ops.GET_TRANSACTION_BY_ID, params, id)

    async def get_transaction_from_mempool(
        self, params: Optional[TransactionIdParams] = None, id: str = DEFAULT_ID
    ) -> Any:
        """Look up a transaction that is still in the mempool."""
        return await self._request(ops.GET_TRANSACTION_FROM_MEMPOOL, params, id)

    async def get_mempool(self, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.GET_MEMPOOL, id=id)

    async def get_block_by_id(self, params: Optional[BlockIdParams] = None, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.GET_BLOCK_BY_ID, params, id)

    # ============ Debug ============

    async def chain_info(self, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.CHAIN_INFO, id=id)

    async def calc_delay(self, params: Optional[DelayParams] = None, id: str = DEFAULT_ID) -> Any:
        """
        Average delay between blocks.

        Args:
            params: ``blockId`` to start from and ``numBlocks`` to look back over
            id: JSON-RPC request id
        """
        return await self._request(ops.CALC_DELAY, params, id)

    async def my_blocks(self, id: str = DEFAULT_ID) -> Any:
        """Number of blocks forged by keys held on this node."""
        return await self._request(ops.MY_BLOCKS, id=id)

    async def block_generators(self, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.BLOCK_GENERATORS, id=id)

    async def print_chain(self, id: str = DEFAULT_ID) -> Any:
        return await self._request(ops.PRINT_CHAIN, id=id)
