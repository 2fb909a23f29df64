"""
Shared configuration and fixtures for live Jupiter API tests.

Read-only tests (quotes, prices, balances) run when JUPITER_LIVE_TESTS=1.
Tests that sign and send transactions additionally need
JUPITER_LIVE_SWAPS=1 and a funded wallet.

WARNING: With JUPITER_LIVE_SWAPS=1 these tests execute real swaps and spend real tokens!

Environment Variables:
    JUPITER_LIVE_TESTS: Set to 1 to hit the real API
    JUPITER_LIVE_SWAPS: Set to 1 to also execute swaps
    JUPITER_BASE_URL / JUPITER_API_KEY: API endpoint and key (optional)
    SOLANA_RPC_URL: RPC endpoint URL (required for Swap API execution)
    SOLANA_PRIVATE_KEY: Base58 or JSON-array private key (required if no keypair path)
    SOLANA_KEYPAIR_PATH: Path to keypair JSON file (alternative to private key)
"""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

# Load .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def get_env_or_fail(key: str) -> str:
    """Get required environment variable or raise error"""
    value = os.getenv(key)
    if not value:
        raise EnvironmentError(
            f"Missing required environment variable: {key}\n"
            f"Please set {key} in your .env file or environment."
        )
    return value


def skip_if_not_live():
    """Return skip message unless live API tests are enabled"""
    if os.getenv("JUPITER_LIVE_TESTS") != "1":
        return "Set JUPITER_LIVE_TESTS=1 to run live Jupiter API tests"
    return None


def skip_if_no_wallet():
    """Return skip message unless swaps are enabled and a wallet is configured"""
    skip_msg = skip_if_not_live()
    if skip_msg:
        return skip_msg
    if os.getenv("JUPITER_LIVE_SWAPS") != "1":
        return "Set JUPITER_LIVE_SWAPS=1 to execute real swaps"
    if not (os.getenv("SOLANA_PRIVATE_KEY") or os.getenv("SOLANA_KEYPAIR_PATH")):
        return (
            "No wallet configured. Set either:\n"
            "  SOLANA_PRIVATE_KEY - base58 encoded private key\n"
            "  SOLANA_KEYPAIR_PATH - path to keypair JSON file"
        )
    return None


def create_signer():
    """Load the test wallet through the SDK's own factory"""
    from jup_ag_sdk.config import reload_config
    from jup_ag_sdk.infra import create_signer as sdk_create_signer

    reload_config()
    return sdk_create_signer()


# Pytest fixtures
@pytest.fixture
def client():
    """JupiterClient against the configured base URL"""
    skip_msg = skip_if_not_live()
    if skip_msg:
        pytest.skip(skip_msg)

    from jup_ag_sdk import JupiterClient
    return JupiterClient()


@pytest.fixture(scope="module")
def signer():
    """Local signer for the funded test wallet"""
    skip_msg = skip_if_no_wallet()
    if skip_msg:
        pytest.skip(skip_msg)
    return create_signer()


@pytest.fixture
def rpc():
    """RpcClient against SOLANA_RPC_URL"""
    skip_msg = skip_if_no_wallet()
    if skip_msg:
        pytest.skip(skip_msg)

    from jup_ag_sdk.infra import RpcClient
    return RpcClient(get_env_or_fail("SOLANA_RPC_URL"))
