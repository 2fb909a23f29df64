"""
Request builders and response models for the Jupiter APIs
"""

from .base import ApiModel, JsonModelMixin
from .quote import (
    SwapMode,
    QuoteRequest,
    QuoteResponse,
    PlatformFee,
    SwapInfo,
    RoutePlanItem,
    MostReliableAmmsQuoteReport,
)
from .swap import (
    PriorityLevel,
    PriorityLevelWithMaxLamports,
    PrioritizationFeeLamports,
    SwapRequest,
    SwapResponse,
    AccountMetaData,
    InstructionData,
    SwapInstructions,
)
from .ultra import (
    UltraOrderRequest,
    UltraOrderResponse,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    SwapType,
    SwapEvent,
    TokenBalance,
    TokenBalancesResponse,
    TokenWarning,
    Shield,
    Router,
    RouterList,
)
from .token import TokenPriceRequest, TokenPrice, TokenPriceResponse
from .trigger import (
    OrderStatus,
    TriggerParams,
    CreateTriggerOrder,
    ExecuteTriggerOrder,
    CancelTriggerOrder,
    CancelTriggerOrders,
    GetTriggerOrders,
    TriggerResponse,
    ExecuteTriggerResponse,
    TriggerOrder,
    OrderResponse,
)
from .recurring import (
    RecurringOrderType,
    TimeParams,
    PriceParams,
    CreateRecurringOrderRequest,
    CancelRecurringOrderRequest,
    PriceDeposit,
    PriceWithdraw,
    ExecuteRecurringRequest,
    GetRecurringOrders,
    RecurringResponse,
    ExecuteRecurringResponse,
    RecurringOrders,
)
from .result import TxResult, TxStatus
from .solana_tokens import (
    SOL_MINT,
    USDC_MINT,
    USDT_MINT,
    JUP_MINT,
    SOLANA_TOKEN_MINTS,
    resolve_token_mint,
    get_token_decimals,
    to_raw_amount,
    to_ui_amount,
)

__all__ = [
    "ApiModel",
    "JsonModelMixin",
    # Quote
    "SwapMode",
    "QuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "SwapInfo",
    "RoutePlanItem",
    "MostReliableAmmsQuoteReport",
    # Swap
    "PriorityLevel",
    "PriorityLevelWithMaxLamports",
    "PrioritizationFeeLamports",
    "SwapRequest",
    "SwapResponse",
    "AccountMetaData",
    "InstructionData",
    "SwapInstructions",
    # Ultra
    "UltraOrderRequest",
    "UltraOrderResponse",
    "UltraExecuteOrderRequest",
    "UltraExecuteOrderResponse",
    "SwapType",
    "SwapEvent",
    "TokenBalance",
    "TokenBalancesResponse",
    "TokenWarning",
    "Shield",
    "Router",
    "RouterList",
    # Price
    "TokenPriceRequest",
    "TokenPrice",
    "TokenPriceResponse",
    # Trigger
    "OrderStatus",
    "TriggerParams",
    "CreateTriggerOrder",
    "ExecuteTriggerOrder",
    "CancelTriggerOrder",
    "CancelTriggerOrders",
    "GetTriggerOrders",
    "TriggerResponse",
    "ExecuteTriggerResponse",
    "TriggerOrder",
    "OrderResponse",
    # Recurring
    "RecurringOrderType",
    "TimeParams",
    "PriceParams",
    "CreateRecurringOrderRequest",
    "CancelRecurringOrderRequest",
    "PriceDeposit",
    "PriceWithdraw",
    "ExecuteRecurringRequest",
    "GetRecurringOrders",
    "RecurringResponse",
    "ExecuteRecurringResponse",
    "RecurringOrders",
    # Results
    "TxResult",
    "TxStatus",
    # Tokens
    "SOL_MINT",
    "USDC_MINT",
    "USDT_MINT",
    "JUP_MINT",
    "SOLANA_TOKEN_MINTS",
    "resolve_token_mint",
    "get_token_decimals",
    "to_raw_amount",
    "to_ui_amount",
]
