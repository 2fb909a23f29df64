"""
RPC Client for Solana

Minimal async JSON-RPC client used to broadcast signed Jupiter swap
transactions and wait for them to land. One endpoint, one attempt per call.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..errors import ConfigurationError, ErrorCode, RpcError, TransactionError
from ..config import config as global_config

logger = logging.getLogger(__name__)


@dataclass
class RpcClientConfig:
    """
    RPC client runtime configuration

    Per-client overrides; unset values come from the global config.

    Usage:
        rpc = RpcClient(endpoint, config=RpcClientConfig(commitment="finalized"))
    """
    timeout_seconds: float = None
    commitment: str = None
    confirmation_timeout: float = None
    poll_interval: float = None
    skip_preflight: bool = None
    preflight_commitment: str = None

    def __post_init__(self):
        """Apply defaults from global config for any unset values"""
        if self.timeout_seconds is None:
            self.timeout_seconds = global_config.rpc.timeout_seconds
        if self.commitment is None:
            self.commitment = global_config.rpc.commitment
        if self.confirmation_timeout is None:
            self.confirmation_timeout = global_config.tx.confirmation_timeout
        if self.poll_interval is None:
            self.poll_interval = global_config.tx.poll_interval
        if self.skip_preflight is None:
            self.skip_preflight = global_config.tx.skip_preflight
        if self.preflight_commitment is None:
            self.preflight_commitment = global_config.tx.preflight_commitment


class RpcClient:
    """
    Async Solana RPC client

    Usage:
        async with RpcClient("https://api.mainnet-beta.solana.com") as rpc:
            signature = await rpc.send_and_confirm_transaction(signed_tx_bytes)
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        config: Optional[RpcClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize RPC client

        Args:
            endpoint: RPC endpoint URL (default SOLANA_RPC_URL)
            config: RPC configuration options
            http_client: Pre-built httpx.AsyncClient, mainly for tests
        """
        endpoint = endpoint or global_config.rpc.url
        if not endpoint:
            raise ConfigurationError.missing("SOLANA_RPC_URL")

        self._endpoint = endpoint
        self._config = config or RpcClientConfig()
        self._client = http_client
        self._owns_client = http_client is None
        self._request_id = 0

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def commitment(self) -> str:
        """Default commitment level"""
        return self._config.commitment

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                headers={"Content-Type": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def call(self, method: str, params: List[Any], timeout: Optional[float] = None) -> Any:
        """
        Make JSON-RPC call

        Args:
            method: RPC method name
            params: RPC parameters
            timeout: Optional timeout override

        Returns:
            RPC result

        Raises:
            RpcError: On transport failure or a JSON-RPC error object
        """
        client = self._get_client()
        self._request_id += 1
        body = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }
        timeout_val = timeout or self._config.timeout_seconds

        logger.debug(f"RPC {method} -> {self._endpoint}")
        try:
            response = await client.post(self._endpoint, json=body, timeout=timeout_val)
        except httpx.TimeoutException as e:
            logger.warning(f"RPC timeout: {method} {self._endpoint}")
            raise RpcError.timeout(self._endpoint, timeout_val) from e
        except httpx.HTTPError as e:
            logger.warning(f"RPC connection error: {e}")
            raise RpcError.connection_failed(self._endpoint, e) from e

        if response.status_code == 429:
            logger.warning(f"Rate limited by {self._endpoint}")
            raise RpcError.rate_limited(self._endpoint)
        if not response.is_success:
            raise RpcError(f"HTTP error {response.status_code}", endpoint=self._endpoint)

        try:
            result = response.json()
        except ValueError as e:
            raise RpcError(
                f"Invalid JSON from RPC: {e}",
                ErrorCode.RPC_INVALID_RESPONSE,
                original_error=e,
                endpoint=self._endpoint,
            ) from e

        if not isinstance(result, dict):
            raise RpcError(
                f"Unexpected JSON-RPC body for {method}: {type(result).__name__}",
                ErrorCode.RPC_INVALID_RESPONSE,
                endpoint=self._endpoint,
            )

        if "error" in result:
            error = result["error"]
            error_msg = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            rpc_error = RpcError(
                f"RPC error: {error_msg}",
                ErrorCode.RPC_INVALID_RESPONSE,
                endpoint=self._endpoint,
            )
            # Keep the node's error code and data (preflight logs live here)
            if isinstance(error, dict):
                rpc_error.details = dict(rpc_error.details or {})
                rpc_error.details["rpc_error_code"] = error.get("code")
                rpc_error.details["rpc_error_data"] = error.get("data")
            raise rpc_error

        return result.get("result")

    async def get_latest_blockhash(self, commitment: Optional[str] = None) -> Dict[str, Any]:
        """
        Get latest blockhash

        Returns:
            Dict with blockhash and lastValidBlockHeight
        """
        result = await self.call("getLatestBlockhash", [{"commitment": commitment or self.commitment}])
        return result.get("value", {}) if result else {}

    async def get_balance(self, address: str, commitment: Optional[str] = None) -> int:
        """Get SOL balance in lamports"""
        result = await self.call("getBalance", [address, {"commitment": commitment or self.commitment}])
        return result.get("value", 0) if result else 0

    async def send_transaction(
        self,
        transaction: bytes,
        skip_preflight: Optional[bool] = None,
        preflight_commitment: Optional[str] = None,
        max_retries: Optional[int] = None,
    ) -> str:
        """
        Send signed transaction

        Args:
            transaction: Signed transaction bytes
            skip_preflight: Skip preflight simulation (default from config)
            preflight_commitment: Preflight commitment level
            max_retries: Node-side rebroadcast limit, passed through as-is

        Returns:
            Transaction signature (base58)
        """
        tx_data = base64.b64encode(transaction).decode("ascii")
        options: Dict[str, Any] = {
            "skipPreflight": self._config.skip_preflight if skip_preflight is None else skip_preflight,
            "preflightCommitment": preflight_commitment or self._config.preflight_commitment,
            "encoding": "base64",
        }
        if max_retries is not None:
            options["maxRetries"] = max_retries

        return await self.call("sendTransaction", [tx_data, options])

    async def get_signature_statuses(self, signatures: List[str]) -> List[Optional[Dict[str, Any]]]:
        result = await self.call(
            "getSignatureStatuses",
            [signatures, {"searchTransactionHistory": False}],
        )
        return result.get("value", []) if result else []

    async def confirm_transaction(
        self,
        signature: str,
        commitment: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ) -> Optional[bool]:
        """
        Wait for transaction confirmation

        Returns:
            True if confirmed successfully
            False if transaction failed on-chain (has error)
            None if timeout (transaction never landed or status unknown)
        """
        target = commitment or self.commitment
        accepted = ("finalized",) if target == "finalized" else ("confirmed", "finalized")
        timeout_seconds = timeout_seconds if timeout_seconds is not None else self._config.confirmation_timeout

        start_time = time.monotonic()
        last_status = None

        while time.monotonic() - start_time < timeout_seconds:
            try:
                statuses = await self.get_signature_statuses([signature])
                status = statuses[0] if statuses else None
                if status:
                    last_status = status
                    if status.get("err"):
                        logger.warning(f"Transaction {signature} failed on-chain: {status.get('err')}")
                        return False
                    if status.get("confirmationStatus") in accepted:
                        return True
            except RpcError as e:
                # A single failed poll does not decide the outcome
                logger.debug(f"Error checking transaction status: {e}")

            await asyncio.sleep(self._config.poll_interval)

        if last_status is None:
            logger.warning(f"Transaction {signature} was never seen on chain (dropped/expired)")
        else:
            logger.warning(
                f"Transaction {signature} timeout. Last status: {last_status.get('confirmationStatus', 'unknown')}"
            )
        return None

    async def send_and_confirm_transaction(self, transaction: bytes) -> str:
        """
        Broadcast a signed transaction and wait for confirmation

        Returns:
            Transaction signature (base58)

        Raises:
            TransactionError: Send rejected, failed on-chain, or never confirmed
        """
        try:
            signature = await self.send_transaction(transaction)
        except RpcError as e:
            error = TransactionError.send_failed(e.message)
            logs = (e.details or {}).get("rpc_error_data")
            if isinstance(logs, dict):
                error.logs = logs.get("logs") or []
            raise error from e

        logger.info(f"Transaction sent: {signature}")
        confirmed = await self.confirm_transaction(signature)

        if confirmed is True:
            logger.info(f"Transaction confirmed: {signature}")
            return signature
        if confirmed is False:
            raise TransactionError.execution_failed("Transaction failed on-chain", signature=signature)
        raise TransactionError.confirmation_failed(signature, "Confirmation timeout")

    async def aclose(self):
        """Close HTTP client (injected clients are left to their owner)"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
