"""
Recurring API types (DCA orders, /recurring/v1)

Time-based orders split in_amount over number_of_orders at a fixed
interval; price-based orders deposit once and buy a fixed USDC increment
per interval.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from .base import ApiModel, JsonBodyRequest, QueryRequest
from .trigger import OrderStatus


class RecurringOrderType(str, Enum):
    TIME = "time"
    PRICE = "price"
    # Only valid when listing orders
    ALL = "all"


@dataclass
class TimeParams(JsonBodyRequest):
    in_amount: int
    number_of_orders: int
    interval: int
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    start_at: Optional[int] = None


@dataclass
class PriceParams(JsonBodyRequest):
    deposit_amount: int
    increment_usdc_value: int
    interval: int
    start_at: Optional[int] = None


@dataclass
class TimeOrderParams(JsonBodyRequest):
    time: TimeParams


@dataclass
class PriceOrderParams(JsonBodyRequest):
    price: PriceParams


@dataclass
class CreateRecurringOrderRequest(JsonBodyRequest):
    """
    Body for POST /recurring/v1/createOrder

    Build with new_time_order() or new_price_order().
    """
    user: str
    input_mint: str
    output_mint: str
    params: Union[TimeOrderParams, PriceOrderParams]

    @classmethod
    def new_time_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        in_amount: int,
        number_of_orders: int,
        interval: int,
    ) -> "CreateRecurringOrderRequest":
        params = TimeParams(
            in_amount=in_amount,
            number_of_orders=number_of_orders,
            interval=interval,
        )
        return cls(user, input_mint, output_mint, TimeOrderParams(time=params))

    @classmethod
    def new_price_order(
        cls,
        user: str,
        input_mint: str,
        output_mint: str,
        deposit_amount: int,
        increment_usdc_value: int,
        interval: int,
    ) -> "CreateRecurringOrderRequest":
        params = PriceParams(
            deposit_amount=deposit_amount,
            increment_usdc_value=increment_usdc_value,
            interval=interval,
        )
        return cls(user, input_mint, output_mint, PriceOrderParams(price=params))

    @property
    def order_type(self) -> RecurringOrderType:
        if isinstance(self.params, TimeOrderParams):
            return RecurringOrderType.TIME
        return RecurringOrderType.PRICE

    def with_start_at(self, start_at: int) -> "CreateRecurringOrderRequest":
        if isinstance(self.params, TimeOrderParams):
            self.params.time.start_at = start_at
        else:
            self.params.price.start_at = start_at
        return self

    # min/max price only apply to time-based orders; ignored otherwise
    def with_min_price(self, price: float) -> "CreateRecurringOrderRequest":
        if isinstance(self.params, TimeOrderParams):
            self.params.time.min_price = price
        return self

    def with_max_price(self, price: float) -> "CreateRecurringOrderRequest":
        if isinstance(self.params, TimeOrderParams):
            self.params.time.max_price = price
        return self


@dataclass
class CancelRecurringOrderRequest(JsonBodyRequest):
    order: str
    recurring_type: RecurringOrderType
    user: str


@dataclass
class PriceDeposit(JsonBodyRequest):
    amount: int
    order: str
    user: str


@dataclass
class PriceWithdraw(JsonBodyRequest):
    """Withdraw from a price order; no amount withdraws everything"""
    order: str
    user: str
    input_or_output: str
    amount: Optional[int] = None


@dataclass
class ExecuteRecurringRequest(JsonBodyRequest):
    request_id: str
    signed_transaction: str


@dataclass
class GetRecurringOrders(QueryRequest):
    recurring_type: RecurringOrderType
    order_status: OrderStatus
    user: str
    page: int = 1
    mint: Optional[str] = None
    include_failed_tx: bool = False

    def with_page(self, page: int) -> "GetRecurringOrders":
        self.page = page
        return self

    def with_mint(self, mint: str) -> "GetRecurringOrders":
        self.mint = mint
        return self

    def include_failed(self) -> "GetRecurringOrders":
        self.include_failed_tx = True
        return self


class RecurringResponse(ApiModel):
    """Unsigned transaction from create/cancel/deposit/withdraw"""
    request_id: str
    transaction: str


class ExecuteRecurringResponse(ApiModel):
    signature: Optional[str] = None
    status: str
    order: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == "Success"


class RecurringOrders(ApiModel):
    user: str
    order_status: OrderStatus
    page: int
    total_pages: int
    time: Optional[List[Any]] = None
    price: Optional[List[Any]] = None
    all: Optional[List[Any]] = None
