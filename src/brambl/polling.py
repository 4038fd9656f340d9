"""
Transaction confirmation polling.

Repeatedly asks the node for a transaction until it shows up in chain
history. While the transaction still sits in the mempool the wait goes
on; if it is found in neither place too many times, polling gives up.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any

from loguru import logger

from .rpc.errors import ConfirmationTimeout, ProtocolError

if TYPE_CHECKING:
    from .requests import Requests


async def wait_for_confirmation(
    requests: "Requests",
    transaction_id: str,
    *,
    timeout: float = 90.0,
    interval: float = 3.0,
    max_failed_queries: int = 10,
) -> Any:
    """
    Wait until a transaction is included in a block.

    Args:
        requests: Client used for the lookups
        transaction_id: Id of the transaction to watch
        timeout: Maximum wait time in seconds
        interval: Delay between lookups in seconds
        max_failed_queries: Lookups allowed to miss both history and mempool

    Returns:
        The transaction as returned by ``get_transaction_by_id``

    Raises:
        ConfirmationTimeout: If the transaction is not confirmed in time or
            keeps missing from the mempool
    """
    params = {"transactionId": transaction_id}
    failed = 0
    start = time.monotonic()

    while time.monotonic() - start < timeout:
        try:
            return await requests.get_transaction_by_id(params)
        except ProtocolError:
            pass

        try:
            await requests.get_transaction_from_mempool(params)
            logger.debug(f"Transaction {transaction_id} still in mempool")
        except ProtocolError:
            failed += 1
            logger.debug(f"Transaction {transaction_id} not found ({failed}/{max_failed_queries})")
            if failed >= max_failed_queries:
                raise ConfirmationTimeout(
                    f"Transaction {transaction_id} not found in mempool or history "
                    f"after {failed} queries"
                )

        await asyncio.sleep(interval)

    raise ConfirmationTimeout(f"Transaction {transaction_id} not confirmed within {timeout}s")
