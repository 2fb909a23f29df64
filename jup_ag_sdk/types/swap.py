"""
Swap API types

Request builder for POST /swap/v1/swap and /swap/v1/swap-instructions,
plus their response models.
"""

import base64
import binascii
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from ..errors import DeserializationError
from .base import ApiModel, JsonBodyRequest
from .quote import QuoteResponse


class PriorityLevel(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


@dataclass
class PriorityLevelWithMaxLamports(JsonBodyRequest):
    max_lamports: int
    priority_level: PriorityLevel


@dataclass
class PrioritizationFeeLamports(JsonBodyRequest):
    """
    Priority fee settings for the swap transaction

    Either a capped priority level estimated by Jupiter, an explicit Jito tip,
    or both.
    """
    priority_level_with_max_lamports: Optional[PriorityLevelWithMaxLamports] = None
    jito_tip_lamports: Optional[int] = None

    @classmethod
    def priority(cls, priority_level: PriorityLevel, max_lamports: int) -> "PrioritizationFeeLamports":
        return cls(
            priority_level_with_max_lamports=PriorityLevelWithMaxLamports(
                max_lamports=max_lamports,
                priority_level=PriorityLevel(priority_level),
            )
        )

    @classmethod
    def jito_tip(cls, lamports: int) -> "PrioritizationFeeLamports":
        return cls(jito_tip_lamports=lamports)


@dataclass
class SwapRequest(JsonBodyRequest):
    """
    Body for the swap and swap-instructions endpoints

    The quote response is embedded verbatim, so the route, amounts and
    slippage of the resulting transaction are exactly those of the quote.

    Usage:
        quote = await client.get_quote(QuoteRequest(SOL_MINT, JUP_MINT, 1_000_000))
        req = SwapRequest(wallet_pubkey, quote).with_dynamic_compute_unit_limit(True)
        swap = await client.get_swap_transaction(req)
    """
    user_public_key: str
    quote_response: QuoteResponse
    wrap_and_unwrap_sol: Optional[bool] = None
    use_shared_accounts: Optional[bool] = None
    fee_account: Optional[str] = None
    tracking_account: Optional[str] = None
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = None
    as_legacy_transaction: Optional[bool] = None
    destination_token_account: Optional[str] = None
    dynamic_compute_unit_limit: Optional[bool] = None
    skip_user_account_rpc_calls: Optional[bool] = None
    dynamic_slippage: Optional[bool] = None
    compute_unit_price_micro_lamports: Optional[int] = None
    blockhash_slots_to_expiry: Optional[int] = None

    def with_wrap_and_unwrap_sol(self, value: bool) -> "SwapRequest":
        self.wrap_and_unwrap_sol = value
        return self

    def with_use_shared_accounts(self, value: bool) -> "SwapRequest":
        self.use_shared_accounts = value
        return self

    def with_fee_account(self, fee_account: str) -> "SwapRequest":
        self.fee_account = fee_account
        return self

    def with_tracking_account(self, tracking_account: str) -> "SwapRequest":
        self.tracking_account = tracking_account
        return self

    def with_prioritization_fee_lamports(self, fee: PrioritizationFeeLamports) -> "SwapRequest":
        self.prioritization_fee_lamports = fee
        return self

    def with_as_legacy_transaction(self, value: bool) -> "SwapRequest":
        self.as_legacy_transaction = value
        return self

    def with_destination_token_account(self, account: str) -> "SwapRequest":
        self.destination_token_account = account
        return self

    def with_dynamic_compute_unit_limit(self, value: bool) -> "SwapRequest":
        self.dynamic_compute_unit_limit = value
        return self

    def with_skip_user_account_rpc_calls(self, value: bool) -> "SwapRequest":
        self.skip_user_account_rpc_calls = value
        return self

    def with_dynamic_slippage(self, value: bool) -> "SwapRequest":
        self.dynamic_slippage = value
        return self

    def with_compute_unit_price_micro_lamports(self, price: int) -> "SwapRequest":
        self.compute_unit_price_micro_lamports = price
        return self

    def with_blockhash_slots_to_expiry(self, slots: int) -> "SwapRequest":
        self.blockhash_slots_to_expiry = slots
        return self


class SwapResponse(ApiModel):
    """Unsigned swap transaction returned by POST /swap"""
    swap_transaction: str
    last_valid_block_height: int
    prioritization_fee_lamports: Optional[int] = None
    compute_unit_limit: Optional[int] = None
    dynamic_slippage_report: Optional[Any] = None
    simulation_error: Optional[Any] = None

    @property
    def transaction_bytes(self) -> bytes:
        """Decoded VersionedTransaction bytes"""
        try:
            return base64.b64decode(self.swap_transaction, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DeserializationError.schema_mismatch("SwapResponse", e) from e


class AccountMetaData(ApiModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class InstructionData(ApiModel):
    """Instruction as returned by swap-instructions; data is base64"""
    program_id: str
    accounts: List[AccountMetaData]
    data: str


class SwapInstructions(ApiModel):
    """Individual instructions for composing a custom swap transaction"""
    token_ledger_instruction: Optional[InstructionData] = None
    compute_budget_instructions: List[InstructionData] = []
    setup_instructions: List[InstructionData] = []
    swap_instruction: InstructionData
    cleanup_instruction: Optional[InstructionData] = None
    other_instructions: List[InstructionData] = []
    address_lookup_table_addresses: List[str] = []
    prioritization_fee_lamports: Optional[int] = None
