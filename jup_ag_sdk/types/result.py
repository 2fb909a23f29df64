"""
Outcome of a signed swap, whether landed through our own RPC or through Ultra
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..errors import ErrorCode


class TxStatus(Enum):
    """Transaction status"""
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"


@dataclass
class TxResult:
    """
    Swap execution result

    Attributes:
        status: Transaction status
        signature: Transaction signature (base58)
        error: Error message if failed
        recoverable: Whether the caller may re-quote and try again
        error_code: Error code for programmatic handling
        slot: Slot the transaction landed in
        in_amount: Raw input amount actually swapped, when known
        out_amount: Raw output amount actually received, when known
        logs: Program logs from a failed simulation or execution
    """
    status: TxStatus
    signature: Optional[str] = None
    error: Optional[str] = None
    recoverable: bool = False
    error_code: Optional[str] = None
    slot: Optional[int] = None
    in_amount: Optional[int] = None
    out_amount: Optional[int] = None
    logs: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.status == TxStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        return self.status == TxStatus.FAILED

    @property
    def is_timeout(self) -> bool:
        return self.status == TxStatus.TIMEOUT

    @classmethod
    def success(cls, signature: str, **kwargs) -> "TxResult":
        return cls(status=TxStatus.SUCCESS, signature=signature, **kwargs)

    @classmethod
    def failed(cls, error: str, signature: str = None, **kwargs) -> "TxResult":
        return cls(status=TxStatus.FAILED, signature=signature, error=error, **kwargs)

    @classmethod
    def timeout(cls, signature: str = None, **kwargs) -> "TxResult":
        """Confirmation timed out; the transaction may still land"""
        return cls(
            status=TxStatus.TIMEOUT,
            signature=signature,
            error="Transaction confirmation timeout",
            recoverable=True,
            error_code=ErrorCode.TX_CONFIRMATION_FAILED.value,
            **kwargs
        )

    def __str__(self) -> str:
        if self.is_success:
            sig_display = f"{self.signature[:16]}..." if self.signature else "no signature"
            return f"TxResult(SUCCESS, {sig_display})"
        return f"TxResult({self.status.value}, error={self.error})"
