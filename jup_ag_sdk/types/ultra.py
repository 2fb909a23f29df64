"""
Ultra API types

Ultra is Jupiter's managed swap flow: GET /order returns a transaction to
sign, POST /execute lands it. Balances, shield and routers are read-only
helpers on the same API.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import Field, RootModel

from .base import ApiModel, JsonBodyRequest, JsonModelMixin, QueryRequest
from .quote import PlatformFee, RoutePlanItem, SwapMode

# Referral fee bounds accepted by the order endpoint (bps)
MIN_REFERRAL_FEE_BPS = 50
MAX_REFERRAL_FEE_BPS = 255


@dataclass
class UltraOrderRequest(QueryRequest):
    """
    Query parameters for GET /ultra/v1/order

    Without a taker the API still quotes, but the response carries no
    transaction.

    Usage:
        req = UltraOrderRequest(SOL_MINT, JUP_MINT, 1_000_000_000).add_taker(pubkey)
    """
    input_mint: str
    output_mint: str
    amount: int
    taker: Optional[str] = None
    referral_account: Optional[str] = None
    referral_fee: Optional[int] = None
    exclude_routers: Optional[List[str]] = None

    def add_taker(self, taker: str) -> "UltraOrderRequest":
        self.taker = taker
        return self

    def with_referral_account(self, referral_account: str) -> "UltraOrderRequest":
        self.referral_account = referral_account
        return self

    def with_referral_fee(self, referral_fee: int) -> "UltraOrderRequest":
        if not MIN_REFERRAL_FEE_BPS <= referral_fee <= MAX_REFERRAL_FEE_BPS:
            raise ValueError(
                f"referral_fee must be between {MIN_REFERRAL_FEE_BPS} and "
                f"{MAX_REFERRAL_FEE_BPS} bps, got {referral_fee}"
            )
        self.referral_fee = referral_fee
        return self

    def with_exclude_routers(self, routers: List[str]) -> "UltraOrderRequest":
        self.exclude_routers = list(routers)
        return self


class SwapType(str, Enum):
    AGGREGATOR = "aggregator"
    RFQ = "rfq"
    HASHFLOW = "hashflow"


class UltraOrderResponse(ApiModel):
    """
    Order returned by GET /ultra/v1/order

    transaction is a base64 unsigned VersionedTransaction, present only when
    a taker was given and the order is executable. When the API cannot fill
    the order it answers 200 with errorCode/errorMessage set instead.
    """
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    other_amount_threshold: Optional[str] = None
    swap_mode: Optional[SwapMode] = None
    slippage_bps: Optional[int] = None
    price_impact_pct: Optional[str] = None
    route_plan: List[RoutePlanItem] = []
    fee_mint: Optional[str] = None
    fee_bps: Optional[int] = None
    prioritization_fee_lamports: Optional[int] = None
    swap_type: Optional[Union[SwapType, str]] = None
    transaction: Optional[str] = None
    gasless: Optional[bool] = None
    request_id: str
    total_time: Optional[int] = None
    taker: Optional[str] = None
    quote_id: Optional[str] = None
    maker: Optional[str] = None
    platform_fee: Optional[PlatformFee] = None
    expire_at: Optional[Union[int, str]] = None
    router: Optional[str] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def has_transaction(self) -> bool:
        return bool(self.transaction)

    @property
    def is_error(self) -> bool:
        return self.error_code is not None or bool(self.error_message)


@dataclass
class UltraExecuteOrderRequest(JsonBodyRequest):
    """Body for POST /ultra/v1/execute"""
    signed_transaction: str
    request_id: str


class SwapEvent(ApiModel):
    input_mint: str
    input_amount: str
    output_mint: str
    output_amount: str


class UltraExecuteOrderResponse(ApiModel):
    """Result of POST /ultra/v1/execute"""
    status: str
    signature: Optional[str] = None
    slot: Optional[str] = None
    error: Optional[str] = None
    code: Optional[int] = None
    total_input_amount: Optional[str] = None
    total_output_amount: Optional[str] = None
    input_amount_result: Optional[str] = None
    output_amount_result: Optional[str] = None
    swap_events: Optional[List[SwapEvent]] = None

    @property
    def is_success(self) -> bool:
        return self.status == "Success"


class TokenBalance(ApiModel):
    amount: str
    ui_amount: float
    slot: int
    is_frozen: bool


class TokenBalancesResponse(JsonModelMixin, RootModel[Dict[str, TokenBalance]]):
    """Balances keyed by "SOL" or token mint"""

    def get(self, key: str) -> Optional[TokenBalance]:
        return self.root.get(key)

    def __getitem__(self, key: str) -> TokenBalance:
        return self.root[key]

    def __contains__(self, key: str) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)


class TokenWarning(ApiModel):
    warning_type: str = Field(alias="type")
    message: str
    severity: str


class Shield(ApiModel):
    """Token safety warnings keyed by mint"""
    warnings: Dict[str, List[TokenWarning]]


class Router(ApiModel):
    id: str
    name: str
    icon: Optional[str] = None


class RouterList(JsonModelMixin, RootModel[List[Router]]):
    pass
