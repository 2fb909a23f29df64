"""
Quote API types

Request builder and response models for GET /swap/v1/quote.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .base import ApiModel, QueryRequest


class SwapMode(str, Enum):
    """How the quoted amount is interpreted"""
    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


@dataclass
class QuoteRequest(QueryRequest):
    """
    Query parameters for a swap quote

    Only the mints and amount are required; everything else is left to the
    API's defaults unless set through a with_* builder.

    Usage:
        req = (
            QuoteRequest(SOL_MINT, JUP_MINT, 1_000_000_000)
            .with_slippage_bps(100)
            .with_swap_mode(SwapMode.EXACT_OUT)
        )
        params = req.to_query_params()
    """
    input_mint: str
    output_mint: str
    amount: int
    slippage_bps: Optional[int] = None
    swap_mode: Optional[SwapMode] = None
    dexes: Optional[List[str]] = None
    exclude_dexes: Optional[List[str]] = None
    restrict_intermediate_tokens: Optional[bool] = None
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = None
    platform_fee_bps: Optional[int] = None
    max_accounts: Optional[int] = None
    dynamic_slippage: Optional[bool] = None

    def with_slippage_bps(self, slippage_bps: int) -> "QuoteRequest":
        self.slippage_bps = slippage_bps
        return self

    def with_swap_mode(self, swap_mode: SwapMode) -> "QuoteRequest":
        self.swap_mode = SwapMode(swap_mode)
        return self

    def with_dexes(self, dexes: List[str]) -> "QuoteRequest":
        self.dexes = list(dexes)
        return self

    def with_exclude_dexes(self, exclude_dexes: List[str]) -> "QuoteRequest":
        self.exclude_dexes = list(exclude_dexes)
        return self

    def with_restrict_intermediate_tokens(self, restrict: bool) -> "QuoteRequest":
        self.restrict_intermediate_tokens = restrict
        return self

    def with_only_direct_routes(self, only_direct_routes: bool) -> "QuoteRequest":
        self.only_direct_routes = only_direct_routes
        return self

    def with_as_legacy_transaction(self, as_legacy_transaction: bool) -> "QuoteRequest":
        self.as_legacy_transaction = as_legacy_transaction
        return self

    def with_platform_fee_bps(self, platform_fee_bps: int) -> "QuoteRequest":
        self.platform_fee_bps = platform_fee_bps
        return self

    def with_max_accounts(self, max_accounts: int) -> "QuoteRequest":
        self.max_accounts = max_accounts
        return self

    def with_dynamic_slippage(self, dynamic_slippage: bool) -> "QuoteRequest":
        self.dynamic_slippage = dynamic_slippage
        return self


class PlatformFee(ApiModel):
    amount: str
    fee_bps: int


class SwapInfo(ApiModel):
    """A single AMM hop"""
    amm_key: str
    label: str
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: Optional[str] = None
    fee_mint: Optional[str] = None


class RoutePlanItem(ApiModel):
    swap_info: SwapInfo
    percent: int


class MostReliableAmmsQuoteReport(ApiModel):
    info: Dict[str, str]


class QuoteResponse(ApiModel):
    """
    Quote returned by the Swap API

    Amounts are raw base-unit strings exactly as returned. Pass the whole
    object to SwapRequest; the swap endpoint expects it echoed back unchanged.
    """
    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: str
    route_plan: List[RoutePlanItem]
    score_report: Optional[Any] = None
    context_slot: int
    time_taken: float
    swap_usd_value: Optional[str] = None
    simpler_route_used: Optional[bool] = None
    most_reliable_amms_quote_report: Optional[MostReliableAmmsQuoteReport] = None
    use_incurred_slippage_for_quoting: Optional[Any] = None

    @property
    def route_labels(self) -> List[str]:
        """AMM labels of each hop, in order"""
        return [step.swap_info.label for step in self.route_plan]

    def __str__(self) -> str:
        return (
            f"Quote({self.in_amount} {self.input_mint[:8]}... -> "
            f"{self.out_amount} {self.output_mint[:8]}..., impact={self.price_impact_pct})"
        )
