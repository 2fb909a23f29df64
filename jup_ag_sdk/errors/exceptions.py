"""
Exception definitions for the Jupiter SDK
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """
    Unified error codes for SDK operations

    1xxx - Transport errors (Jupiter HTTP API)
    2xxx - API status errors
    3xxx - Response decoding errors
    4xxx - RPC errors
    5xxx - Transaction errors
    6xxx - Signer errors
    9xxx - Configuration errors
    """
    # Transport errors
    REQUEST_FAILED = "1001"
    REQUEST_TIMEOUT = "1002"

    # API status errors
    API_ERROR = "2001"
    RATE_LIMITED = "2002"
    NO_ROUTE = "2003"

    # Response decoding errors
    DESERIALIZATION_FAILED = "3001"
    EMPTY_RESPONSE = "3002"

    # RPC errors
    RPC_CONNECTION_FAILED = "4001"
    RPC_TIMEOUT = "4002"
    RPC_RATE_LIMITED = "4003"
    RPC_INVALID_RESPONSE = "4004"

    # Transaction errors
    TX_SEND_FAILED = "5001"
    TX_CONFIRMATION_FAILED = "5002"
    TX_EXECUTION_FAILED = "5003"
    TX_INVALID = "5004"

    # Signer errors
    SIGNER_NOT_CONFIGURED = "6001"
    SIGNER_FAILED = "6002"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


# Upstream error codes/messages that mean "no viable route"
NO_ROUTE_MARKERS = (
    "COULD_NOT_FIND_ANY_ROUTE",
    "NO_ROUTES_FOUND",
    "TOKEN_NOT_TRADABLE",
    "could not find any route",
)


class JupiterError(Exception):
    """
    Base exception for all SDK errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether the error might succeed if the caller retries
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the caller may retry (the SDK never does)"""
        return self.recoverable


class RequestError(JupiterError):
    """
    Network/transport failure talking to the Jupiter API

    Raised when:
    - Connection to the API host fails
    - Request times out
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.REQUEST_FAILED,
        original_error: Optional[Exception] = None,
        url: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=True,
            original_error=original_error,
            details={"url": url} if url else None,
        )
        self.url = url

    @classmethod
    def connection_failed(cls, url: str, error: Exception = None) -> "RequestError":
        return cls(
            f"Request to {url} failed: {error}",
            ErrorCode.REQUEST_FAILED,
            original_error=error,
            url=url,
        )

    @classmethod
    def timeout(cls, url: str, error: Exception = None) -> "RequestError":
        return cls(
            f"Request to {url} timed out",
            ErrorCode.REQUEST_TIMEOUT,
            original_error=error,
            url=url,
        )


class ApiError(JupiterError):
    """
    Non-2xx HTTP status returned by the Jupiter API

    Attributes:
        status_code: HTTP status code
        body: Raw response body text
        error_code: Upstream error code if the body carried one
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[str] = None,
        error_code: Optional[str] = None,
        code: ErrorCode = ErrorCode.API_ERROR,
        url: Optional[str] = None,
    ):
        recoverable = status_code == 429 or status_code >= 500
        super().__init__(
            message,
            code,
            recoverable=recoverable,
            details={
                "status_code": status_code,
                "error_code": error_code,
                "url": url,
            },
        )
        self.status_code = status_code
        self.body = body
        self.error_code = error_code
        self.url = url

    @property
    def is_no_route(self) -> bool:
        return self.code == ErrorCode.NO_ROUTE

    @classmethod
    def from_response(cls, response: Any) -> "ApiError":
        """
        Build from an httpx.Response with a non-success status

        Jupiter error bodies look like {"error": "...", "errorCode": "..."};
        anything else is kept verbatim as the message.
        """
        status = response.status_code
        try:
            body = response.text
        except Exception:
            body = None

        upstream_message = None
        upstream_code = None
        try:
            payload = response.json()
        except Exception:
            payload = None

        if isinstance(payload, dict):
            upstream_message = payload.get("error") or payload.get("message")
            upstream_code = payload.get("errorCode") or payload.get("code")
            if upstream_code is not None:
                upstream_code = str(upstream_code)

        detail = upstream_message or body or "Unable to get error details"
        message = f"API returned error status: {status} - {detail}"

        if status == 429:
            code = ErrorCode.RATE_LIMITED
        elif is_no_route_error(upstream_code, upstream_message):
            code = ErrorCode.NO_ROUTE
        else:
            code = ErrorCode.API_ERROR

        url = None
        try:
            url = str(response.request.url)
        except (AttributeError, RuntimeError):
            pass

        return cls(
            message,
            status_code=status,
            body=body,
            error_code=upstream_code,
            code=code,
            url=url,
        )


def is_no_route_error(error_code: Optional[str], message: Optional[str]) -> bool:
    """Check upstream error code/message for a no-route business error"""
    haystack = f"{error_code or ''} {message or ''}".lower()
    return any(marker.lower() in haystack for marker in NO_ROUTE_MARKERS)


class DeserializationError(JupiterError):
    """
    Response could not be decoded into the expected type

    Raised when:
    - The body is empty or not valid JSON
    - The JSON does not match the response schema
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DESERIALIZATION_FAILED,
        original_error: Optional[Exception] = None,
        type_name: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            original_error=original_error,
            details={"type": type_name} if type_name else None,
        )
        self.type_name = type_name

    @classmethod
    def empty(cls, type_name: str) -> "DeserializationError":
        return cls(
            f"Empty response body for {type_name}",
            ErrorCode.EMPTY_RESPONSE,
            type_name=type_name,
        )

    @classmethod
    def invalid_json(cls, type_name: str, error: Exception) -> "DeserializationError":
        return cls(
            f"Failed to parse JSON response for {type_name}: {error}",
            original_error=error,
            type_name=type_name,
        )

    @classmethod
    def schema_mismatch(cls, type_name: str, error: Exception) -> "DeserializationError":
        return cls(
            f"Response does not match {type_name} schema: {error}",
            original_error=error,
            type_name=type_name,
        )


class RpcError(JupiterError):
    """
    Solana RPC errors - typically recoverable

    Raised when:
    - Connection to RPC endpoint fails
    - Request times out
    - Rate limit is hit
    - The node answers with a JSON-RPC error
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RPC_CONNECTION_FAILED,
        original_error: Optional[Exception] = None,
        endpoint: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=True,
            original_error=original_error,
            details={"endpoint": endpoint} if endpoint else None,
        )
        self.endpoint = endpoint

    @classmethod
    def connection_failed(cls, endpoint: str, error: Exception = None) -> "RpcError":
        return cls(
            f"Failed to connect to RPC endpoint: {endpoint}",
            ErrorCode.RPC_CONNECTION_FAILED,
            original_error=error,
            endpoint=endpoint,
        )

    @classmethod
    def timeout(cls, endpoint: str, timeout_seconds: float) -> "RpcError":
        return cls(
            f"RPC request timed out after {timeout_seconds}s",
            ErrorCode.RPC_TIMEOUT,
            endpoint=endpoint,
        )

    @classmethod
    def rate_limited(cls, endpoint: str) -> "RpcError":
        return cls(
            "RPC rate limit exceeded",
            ErrorCode.RPC_RATE_LIMITED,
            endpoint=endpoint,
        )


class TransactionError(JupiterError):
    """
    Transaction execution errors

    Raised when:
    - Transaction send fails
    - Confirmation fails or times out
    - Ultra/Trigger execution reports a failure
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TX_SEND_FAILED,
        signature: Optional[str] = None,
        logs: Optional[list] = None,
        recoverable: bool = False,
    ):
        super().__init__(
            message,
            code,
            recoverable=recoverable,
            details={"signature": signature, "logs": logs},
        )
        self.signature = signature
        self.logs = logs or []

    @classmethod
    def send_failed(cls, error: str) -> "TransactionError":
        recoverable = "timeout" in error.lower() or "connection" in error.lower()
        return cls(
            f"Failed to send transaction: {error}",
            ErrorCode.TX_SEND_FAILED,
            recoverable=recoverable,
        )

    @classmethod
    def confirmation_failed(cls, signature: str, error: str) -> "TransactionError":
        return cls(
            f"Transaction confirmation failed: {error}",
            ErrorCode.TX_CONFIRMATION_FAILED,
            signature=signature,
            recoverable=True,
        )

    @classmethod
    def execution_failed(cls, error: str, signature: Optional[str] = None) -> "TransactionError":
        return cls(
            f"Transaction execution failed: {error}",
            ErrorCode.TX_EXECUTION_FAILED,
            signature=signature,
        )

    @classmethod
    def invalid(cls, reason: str) -> "TransactionError":
        return cls(f"Invalid transaction: {reason}", ErrorCode.TX_INVALID)


class SignerError(JupiterError):
    """
    Signing-related errors

    Raised when:
    - No signer configured
    - Signing operation fails
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SIGNER_FAILED,
        recoverable: bool = False,
    ):
        super().__init__(message, code, recoverable=recoverable)

    @classmethod
    def not_configured(cls) -> "SignerError":
        return cls(
            "No signer configured. Provide a keypair, SOLANA_PRIVATE_KEY or SOLANA_KEYPAIR_PATH.",
            ErrorCode.SIGNER_NOT_CONFIGURED,
        )

    @classmethod
    def failed(cls, reason: str) -> "SignerError":
        return cls(f"Signing failed: {reason}", ErrorCode.SIGNER_FAILED)


class ConfigurationError(JupiterError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)
