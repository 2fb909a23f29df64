"""
Ultra API example: check balances and token warnings, then swap
SOL -> JUP through Ultra (Jupiter lands the transaction).

WARNING: This executes a REAL swap and spends REAL tokens!

Environment Variables:
    SOLANA_PRIVATE_KEY: Base58 or JSON array private key
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from jup_ag_sdk import (
    JUP_MINT,
    SOL_MINT,
    JupiterClient,
    UltraExecutor,
    UltraOrderRequest,
    create_signer,
    setup_logging,
)


async def ultra():
    signer = create_signer()
    print(f"Wallet: {signer.pubkey}")

    async with JupiterClient() as client:
        balances = await client.get_token_balances(signer.pubkey)
        sol = balances.get("SOL")
        print(f"SOL balance: {sol.ui_amount if sol else 0}")

        shield = await client.shield([JUP_MINT])
        for mint, warnings in shield.warnings.items():
            for warning in warnings:
                print(f"  {mint}: [{warning.severity}] {warning.message}")

        routers = await client.routers()
        print(f"Ultra routers: {', '.join(r.name for r in routers)}")

        executor = UltraExecutor(client, signer)
        result = await executor.swap(UltraOrderRequest(SOL_MINT, JUP_MINT, 10_000_000))
        print(f"Result: {result}")
        if result.is_success:
            print(f"  Received {result.out_amount} JUP base units")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(ultra())
