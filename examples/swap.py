"""
Swap API example: quote SOL -> JUP, build the swap, sign it locally and
land it through your own RPC node.

WARNING: This executes a REAL swap and spends REAL tokens!

Environment Variables:
    SOLANA_PRIVATE_KEY: Base58 or JSON array private key
    SOLANA_RPC_URL: RPC endpoint used to broadcast the transaction
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
    QuoteRequest,
    RpcClient,
    SwapExecutor,
    SwapRequest,
    create_signer,
    setup_logging,
)


async def swap():
    signer = create_signer()
    print(f"Wallet: {signer.pubkey}")

    async with JupiterClient() as client, RpcClient() as rpc:
        quote_request = QuoteRequest(SOL_MINT, JUP_MINT, 1_000_000).with_slippage_bps(100)

        quote = await client.get_quote(quote_request)
        print(f"Quote: {quote}")

        # Inspect the instructions without building a full transaction
        instructions = await client.get_swap_instructions(SwapRequest(signer.pubkey, quote))
        print(f"Swap program: {instructions.swap_instruction.program_id}")
        print(f"Lookup tables: {len(instructions.address_lookup_table_addresses)}")

        executor = SwapExecutor(client, signer, rpc)
        result = await executor.execute_quote(quote, dynamic_compute_unit_limit=True)
        print(f"Result: {result}")
        if result.signature:
            print(f"  https://solscan.io/tx/{result.signature}")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(swap())
