"""
Infrastructure layer

Provides:
- RpcClient: async Solana JSON-RPC wrapper for broadcasting and confirming
- Signer: Transaction signing abstraction (local keypair)
"""

from .rpc import RpcClient, RpcClientConfig
from .solana_signer import (
    Signer,
    LocalSigner,
    create_signer,
    sign_base64_transaction,
)

__all__ = [
    "RpcClient",
    "RpcClientConfig",
    "Signer",
    "LocalSigner",
    "create_signer",
    "sign_base64_transaction",
]
