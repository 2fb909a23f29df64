"""
Convenience layer over JupiterClient

Provides:
- SwapExecutor: Swap API flow, broadcast through a user RPC endpoint
- UltraExecutor: Ultra API flow, landed by Jupiter
"""

from ..infra.solana_signer import sign_base64_transaction
from .swap import SwapExecutor
from .ultra import UltraExecutor

__all__ = [
    "SwapExecutor",
    "UltraExecutor",
    "sign_base64_transaction",
]
