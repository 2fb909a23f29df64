"""
Ultra API Integration Tests

WARNING: test_execute_ultra_swap executes a REAL swap and spends REAL tokens!

Environment Variables Required:
    JUPITER_LIVE_TESTS      - Set to 1
    JUPITER_LIVE_SWAPS      - Set to 1 for the executing test
    SOLANA_PRIVATE_KEY      - Base58 private key (or SOLANA_KEYPAIR_PATH)
"""

import asyncio
import os
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from jup_ag_sdk.types import JUP_MINT, SOL_MINT, USDC_MINT, UltraOrderRequest  # noqa: E402

READ_ONLY_USER = os.getenv("JUPITER_TEST_PUBKEY", "EXBdeRCdiNChKyD7akt64n9HgSXEpUtpPEhmbnm4L6iH")


def test_order_without_taker(client):
    """Without a taker Ultra quotes but returns no transaction"""
    print("Testing live Ultra order (no taker)...")

    async def run():
        async with client:
            return await client.get_ultra_order(UltraOrderRequest(SOL_MINT, JUP_MINT, 10_000_000))

    order = asyncio.run(run())

    assert order.request_id
    assert order.in_amount == "10000000"
    assert not order.has_transaction

    print("  Live Ultra order (no taker): PASSED")


def test_balances_shield_routers(client):
    print("Testing live Ultra balances/shield/routers...")

    async def run():
        async with client:
            balances = await client.get_token_balances(READ_ONLY_USER)
            shield = await client.shield([SOL_MINT, USDC_MINT])
            routers = await client.routers()
            return balances, shield, routers

    balances, shield, routers = asyncio.run(run())

    assert all(int(balance.amount) >= 0 for balance in balances.root.values())
    assert isinstance(shield.warnings, dict)
    assert routers
    assert all(router.id for router in routers)

    print(f"  Routers: {[router.id for router in routers]}")
    print("  Live Ultra balances/shield/routers: PASSED")


def test_execute_ultra_swap(client, signer):
    """Swap 0.001 SOL to USDC through Ultra"""
    from jup_ag_sdk.modules import UltraExecutor

    print("Testing live Ultra swap...")

    async def run():
        async with client:
            return await UltraExecutor(client, signer).swap(
                UltraOrderRequest(SOL_MINT, USDC_MINT, 1_000_000)
            )

    result = asyncio.run(run())
    print(f"  Result: {result}")

    assert result.is_success, f"Ultra swap failed: {result.error} (code={result.error_code})"

    print("  Live Ultra swap: PASSED")
