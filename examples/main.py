"""
Run both examples: Ultra first (simplest flow, no RPC node needed), then
the Swap API flow.
"""

import asyncio

from swap import swap
from ultra import ultra

from jup_ag_sdk import setup_logging


async def main():
    await ultra()
    await swap()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
