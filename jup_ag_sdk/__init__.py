"""
Jupiter Exchange SDK - typed async client for Jupiter's HTTP APIs

Provides:
- JupiterClient: Swap, Ultra, Price, Trigger and Recurring endpoints
- Request builders and response models (jup_ag_sdk.types)
- SwapExecutor / UltraExecutor: sign and land swaps end to end
"""

from .client import JupiterClient
from .config import reload_config, setup_logging, enable_file_logging
from .types import (
    SwapMode,
    QuoteRequest,
    QuoteResponse,
    PriorityLevel,
    PrioritizationFeeLamports,
    SwapRequest,
    SwapResponse,
    SwapInstructions,
    UltraOrderRequest,
    UltraOrderResponse,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    TokenBalancesResponse,
    Shield,
    Router,
    TokenPriceRequest,
    TokenPriceResponse,
    TxResult,
    TxStatus,
    SOL_MINT,
    USDC_MINT,
    JUP_MINT,
)
from .errors import (
    ErrorCode,
    JupiterError,
    RequestError,
    ApiError,
    DeserializationError,
    RpcError,
    TransactionError,
    SignerError,
    ConfigurationError,
)
from .infra import RpcClient, LocalSigner, create_signer
from .modules import SwapExecutor, UltraExecutor, sign_base64_transaction

__version__ = "0.1.0"

__all__ = [
    # Client
    "JupiterClient",
    # Config
    "reload_config",
    "setup_logging",
    "enable_file_logging",
    # Types
    "SwapMode",
    "QuoteRequest",
    "QuoteResponse",
    "PriorityLevel",
    "PrioritizationFeeLamports",
    "SwapRequest",
    "SwapResponse",
    "SwapInstructions",
    "UltraOrderRequest",
    "UltraOrderResponse",
    "UltraExecuteOrderRequest",
    "UltraExecuteOrderResponse",
    "TokenBalancesResponse",
    "Shield",
    "Router",
    "TokenPriceRequest",
    "TokenPriceResponse",
    "TxResult",
    "TxStatus",
    "SOL_MINT",
    "USDC_MINT",
    "JUP_MINT",
    # Errors
    "ErrorCode",
    "JupiterError",
    "RequestError",
    "ApiError",
    "DeserializationError",
    "RpcError",
    "TransactionError",
    "SignerError",
    "ConfigurationError",
    # Infra
    "RpcClient",
    "LocalSigner",
    "create_signer",
    # Convenience layer
    "SwapExecutor",
    "UltraExecutor",
    "sign_base64_transaction",
]
