"""
Error definitions for the Jupiter SDK
"""

from .exceptions import (
    ErrorCode,
    JupiterError,
    RequestError,
    ApiError,
    DeserializationError,
    RpcError,
    TransactionError,
    SignerError,
    ConfigurationError,
    is_no_route_error,
)

__all__ = [
    "ErrorCode",
    "JupiterError",
    "RequestError",
    "ApiError",
    "DeserializationError",
    "RpcError",
    "TransactionError",
    "SignerError",
    "ConfigurationError",
    "is_no_route_error",
]
