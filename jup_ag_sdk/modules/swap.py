"""
Swap Module

Runs the Swap API flow end to end: quote, build the swap transaction,
sign it locally, then broadcast and confirm it through our own RPC node.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import replace
from typing import Any, Optional

from ..client import JupiterClient
from ..errors import ErrorCode, SignerError, TransactionError
from ..infra.rpc import RpcClient
from ..infra.solana_signer import Signer, sign_base64_transaction
from ..types.quote import QuoteRequest, QuoteResponse
from ..types.result import TxResult
from ..types.swap import SwapRequest, SwapResponse
from ..config import config

logger = logging.getLogger(__name__)


class SwapExecutor:
    """
    Quote -> swap -> sign -> send_and_confirm

    API, transport and signing failures raise; once a signed transaction
    exists the outcome is reported as a TxResult.

    Usage:
        executor = SwapExecutor(client, signer, rpc)
        result = await executor.swap(
            QuoteRequest(SOL_MINT, USDC_MINT, 1_000_000).with_slippage_bps(100),
            dynamic_compute_unit_limit=True,
        )
    """

    def __init__(
        self,
        client: JupiterClient,
        signer: Optional[Signer],
        rpc: RpcClient,
    ):
        self._client = client
        self._signer = signer
        self._rpc = rpc

    @property
    def pubkey(self) -> Optional[str]:
        """Signer public key if available"""
        return self._signer.pubkey if self._signer else None

    async def quote(self, request: QuoteRequest) -> QuoteResponse:
        """Fetch a quote; unset slippage falls back to the configured default"""
        if request.slippage_bps is None:
            request = replace(request, slippage_bps=config.trading.default_slippage_bps)
        return await self._client.get_quote(request)

    async def build(self, quote: QuoteResponse, **swap_options: Any) -> SwapResponse:
        """
        Get the unsigned swap transaction for a quote

        Args:
            quote: Quote to execute exactly as returned
            **swap_options: Optional SwapRequest fields, e.g. wrap_and_unwrap_sol=False
        """
        if not self._signer:
            raise SignerError.not_configured()

        request = SwapRequest(self._signer.pubkey, quote, **swap_options)
        return await self._client.get_swap_transaction(request)

    async def swap(self, quote_request: QuoteRequest, **swap_options: Any) -> TxResult:
        """
        Quote and execute a swap

        Returns:
            TxResult with transaction status
        """
        if not self._signer:
            raise SignerError.not_configured()

        quote = await self.quote(quote_request)
        logger.info(
            f"Quote {quote.input_mint} -> {quote.output_mint}: "
            f"{quote.in_amount} -> {quote.out_amount} via {', '.join(quote.route_labels)}"
        )
        return await self.execute_quote(quote, **swap_options)

    async def execute_quote(self, quote: QuoteResponse, **swap_options: Any) -> TxResult:
        """
        Execute a previously obtained quote

        Returns:
            TxResult; success carries the signature, failures carry the error
        """
        swap = await self.build(quote, **swap_options)
        if swap.simulation_error:
            logger.warning(f"Jupiter reported a simulation error: {swap.simulation_error}")

        signed_b64, signature = sign_base64_transaction(self._signer, swap.swap_transaction)
        signed_tx = base64.b64decode(signed_b64)

        try:
            sig = await self._rpc.send_and_confirm_transaction(signed_tx)
        except TransactionError as e:
            if e.code == ErrorCode.TX_CONFIRMATION_FAILED:
                logger.warning(f"Swap confirmation timeout: {e.signature}")
                return TxResult.timeout(e.signature or signature)
            logger.warning(f"Swap failed: {e}")
            return TxResult.failed(
                e.message,
                signature=e.signature or signature,
                recoverable=e.recoverable,
                error_code=e.code.value,
                logs=e.logs,
            )

        logger.info(f"Swap successful: {sig}")
        return TxResult.success(sig)
