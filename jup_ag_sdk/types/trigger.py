"""
Trigger API types (limit orders, /trigger/v1)

Create and cancel endpoints return an unsigned transaction plus a request
id; sign it and hand both to execute_trigger_order.
"""

from dataclasses import InitVar, dataclass, field
from enum import Enum
from typing import List, Optional

from .base import ApiModel, JsonBodyRequest, QueryRequest


class OrderStatus(str, Enum):
    ACTIVE = "active"
    HISTORY = "history"


@dataclass
class TriggerParams(JsonBodyRequest):
    """Order parameters; the API takes every value as a string"""
    making_amount: str
    taking_amount: str
    expired_at: Optional[str] = None
    slippage_bps: Optional[str] = None
    fee_bps: Optional[str] = None


@dataclass
class CreateTriggerOrder(JsonBodyRequest):
    """
    Body for POST /trigger/v1/createOrder

    Usage:
        order = CreateTriggerOrder(
            SOL_MINT, USDC_MINT, maker, payer,
            making_amount=1_000_000_000, taking_amount=200_000_000,
        ).with_expired_at("1748622171")
    """
    input_mint: str
    output_mint: str
    maker: str
    payer: str
    making_amount: InitVar[int]
    taking_amount: InitVar[int]
    params: TriggerParams = field(init=False)
    compute_unit_price: Optional[str] = "auto"
    fee_account: Optional[str] = None
    wrap_and_unwrap_sol: Optional[bool] = None

    def __post_init__(self, making_amount: int, taking_amount: int):
        self.params = TriggerParams(
            making_amount=str(making_amount),
            taking_amount=str(taking_amount),
        )

    def with_expired_at(self, expired_at: str) -> "CreateTriggerOrder":
        """Unix timestamp (seconds) after which the order expires"""
        self.params.expired_at = str(expired_at)
        return self

    def with_slippage_bps(self, slippage_bps: int) -> "CreateTriggerOrder":
        self.params.slippage_bps = str(slippage_bps)
        return self

    def with_fee_bps(self, fee_bps: int) -> "CreateTriggerOrder":
        self.params.fee_bps = str(fee_bps)
        return self

    def with_fee_account(self, fee_account: str) -> "CreateTriggerOrder":
        self.fee_account = fee_account
        return self

    def with_compute_unit_price(self, compute_unit_price: str) -> "CreateTriggerOrder":
        self.compute_unit_price = str(compute_unit_price)
        return self

    def with_wrap_and_unwrap_sol(self, value: bool) -> "CreateTriggerOrder":
        self.wrap_and_unwrap_sol = value
        return self


@dataclass
class ExecuteTriggerOrder(JsonBodyRequest):
    signed_transaction: str
    request_id: str


@dataclass
class CancelTriggerOrder(JsonBodyRequest):
    maker: str
    order: str
    compute_unit_price: Optional[str] = "auto"


@dataclass
class CancelTriggerOrders(JsonBodyRequest):
    """Cancel several orders at once; no orders means all of the maker's orders"""
    maker: str
    orders: Optional[List[str]] = None
    compute_unit_price: Optional[str] = "auto"


@dataclass
class GetTriggerOrders(QueryRequest):
    user: str
    order_status: OrderStatus
    page: Optional[int] = None
    input_mint: Optional[str] = None
    output_mint: Optional[str] = None
    include_failed_tx: Optional[bool] = None

    def with_page(self, page: int) -> "GetTriggerOrders":
        self.page = page
        return self

    def with_input_mint(self, mint: str) -> "GetTriggerOrders":
        self.input_mint = mint
        return self

    def with_output_mint(self, mint: str) -> "GetTriggerOrders":
        self.output_mint = mint
        return self

    def with_include_failed_tx(self, include: bool = True) -> "GetTriggerOrders":
        self.include_failed_tx = include
        return self


class TriggerResponse(ApiModel):
    """Unsigned transaction(s) from create/cancel endpoints"""
    request_id: str
    order: Optional[str] = None
    transaction: Optional[str] = None
    transactions: Optional[List[str]] = None


class ExecuteTriggerResponse(ApiModel):
    status: str
    signature: Optional[str] = None
    error: Optional[str] = None
    code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == "Success"


class TriggerOrder(ApiModel):
    user_pubkey: Optional[str] = None
    order_key: Optional[str] = None
    input_mint: Optional[str] = None
    output_mint: Optional[str] = None
    making_amount: Optional[str] = None
    taking_amount: Optional[str] = None
    remaining_making_amount: Optional[str] = None
    remaining_taking_amount: Optional[str] = None
    expired_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    status: Optional[str] = None


class OrderResponse(ApiModel):
    user: str
    order_status: OrderStatus
    orders: List[TriggerOrder]
    total_pages: int
    page: int
