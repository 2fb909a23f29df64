"""
Ultra Module

Ultra lands the transaction itself: we only fetch the order, sign it and
hand it back to /execute. No RPC node is needed.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..client import JupiterClient
from ..errors import SignerError, TransactionError
from ..infra.solana_signer import Signer, sign_base64_transaction
from ..types.result import TxResult
from ..types.ultra import (
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
)

logger = logging.getLogger(__name__)


def _to_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


class UltraExecutor:
    """
    Order -> sign -> execute

    Usage:
        executor = UltraExecutor(client, signer)
        result = await executor.swap(UltraOrderRequest(SOL_MINT, JUP_MINT, 10_000_000))
    """

    def __init__(self, client: JupiterClient, signer: Optional[Signer]):
        self._client = client
        self._signer = signer

    async def order(self, request: UltraOrderRequest) -> UltraOrderResponse:
        """
        Fetch an executable order for our wallet

        Raises:
            TransactionError: The API returned no transaction (e.g. insufficient funds)
        """
        if not self._signer:
            raise SignerError.not_configured()

        request = replace(request, taker=self._signer.pubkey)
        order = await self._client.get_ultra_order(request)

        if not order.has_transaction:
            reason = order.error_message or "Order response carries no transaction"
            logger.warning(f"Ultra order {order.request_id} not executable: {reason}")
            raise TransactionError.invalid(reason)
        return order

    async def execute(self, order: UltraOrderResponse) -> UltraExecuteOrderResponse:
        """Sign an order's transaction and submit it to /execute"""
        if not self._signer:
            raise SignerError.not_configured()

        signed_tx, signature = sign_base64_transaction(self._signer, order.transaction)
        logger.debug(f"Executing Ultra order {order.request_id} ({signature})")
        return await self._client.ultra_execute_order(
            UltraExecuteOrderRequest(signed_transaction=signed_tx, request_id=order.request_id)
        )

    async def swap(self, request: UltraOrderRequest) -> TxResult:
        """
        Run a full Ultra swap

        Returns:
            TxResult; failed when Ultra reports anything but Success
        """
        order = await self.order(request)
        logger.info(
            f"Ultra order {order.input_mint} -> {order.output_mint}: "
            f"{order.in_amount} -> {order.out_amount} ({order.swap_type})"
        )

        response = await self.execute(order)

        if response.is_success:
            logger.info(f"Ultra swap successful: {response.signature}")
            return TxResult.success(
                response.signature,
                slot=_to_int(response.slot),
                in_amount=_to_int(response.input_amount_result),
                out_amount=_to_int(response.output_amount_result),
            )

        logger.warning(f"Ultra swap failed: {response.error} (code={response.code})")
        return TxResult.failed(
            response.error or f"Ultra execution status: {response.status}",
            signature=response.signature,
            error_code=str(response.code) if response.code is not None else None,
        )
