"""
Well-known Solana mints

Lets callers write QuoteRequest(SOL_MINT, USDC_MINT, ...) or resolve a
symbol like "jup" to its mint address.
"""

from decimal import Decimal
from typing import Dict, Optional, Union

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"
JUP_MINT = "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"

# Keys are uppercase for case-insensitive lookup
SOLANA_TOKEN_MINTS: Dict[str, str] = {
    "SOL": SOL_MINT,
    "WSOL": SOL_MINT,

    # Stablecoins
    "USDC": USDC_MINT,
    "USDT": USDT_MINT,

    "JUP": JUP_MINT,
    "BONK": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
    "RAY": "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
    "ORCA": "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE",
    "MSOL": "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So",
    "JITOSOL": "J1toso1uCk3RLmjorhTtrVwY9HJ7X8V9yYac6Y7kGCPn",
    "PYTH": "HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3",
    "WIF": "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm",
}

SOLANA_TOKEN_DECIMALS: Dict[str, int] = {
    SOL_MINT: 9,
    USDC_MINT: 6,
    USDT_MINT: 6,
    JUP_MINT: 6,
    "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263": 5,  # BONK
    "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R": 6,  # RAY
    "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE": 6,   # ORCA
    "mSoLzYCxHdYgdzU16g5QSh3i5K3z3KZK7ytfqcJm7So": 9,   # mSOL
    "J1toso1uCk3RLmjorhTtrVwY9HJ7X8V9yYac6Y7kGCPn": 9,  # jitoSOL
    "HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3": 6,  # PYTH
    "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm": 6,  # WIF
}


def resolve_token_mint(token: str) -> str:
    """
    Resolve a symbol or mint address to a mint address

    Unknown symbols are returned as-is.
    """
    token = token.strip()

    # Anything this long is already a base58 address
    if len(token) > 30:
        return token

    return SOLANA_TOKEN_MINTS.get(token.upper(), token)


def get_token_decimals(mint: str) -> Optional[int]:
    return SOLANA_TOKEN_DECIMALS.get(resolve_token_mint(mint))


def to_raw_amount(token: str, ui_amount: Union[Decimal, float, str]) -> int:
    """
    Convert a human amount (1.5 SOL) to base units (1_500_000_000)

    Raises:
        ValueError: If the token's decimals are unknown
    """
    decimals = get_token_decimals(token)
    if decimals is None:
        raise ValueError(f"Unknown decimals for token: {token}")
    return int(Decimal(str(ui_amount)) * (Decimal(10) ** decimals))


def to_ui_amount(token: str, raw_amount: Union[int, str]) -> Decimal:
    """Convert base units back to a human amount"""
    decimals = get_token_decimals(token)
    if decimals is None:
        raise ValueError(f"Unknown decimals for token: {token}")
    return Decimal(int(raw_amount)) / (Decimal(10) ** decimals)
