"""
Token Price API types (GET /price/v2)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import ApiModel, QueryRequest


@dataclass
class TokenPriceRequest(QueryRequest):
    """
    Prices for one or more mints

    Prices are denominated in USD unless vs_token is set; show_extra_info
    cannot be combined with vs_token.
    """
    token_mints: List[str] = field(metadata={"alias": "ids"})
    vs_token: Optional[str] = None
    show_extra_info: Optional[bool] = None

    def with_vs_token(self, vs_token: str) -> "TokenPriceRequest":
        self.vs_token = vs_token
        return self

    def with_show_extra_info(self, show_extra_info: bool) -> "TokenPriceRequest":
        self.show_extra_info = show_extra_info
        return self


class TokenPrice(ApiModel):
    id: str
    data_type: str = Field(alias="type")
    price: str
    extra_info: Optional[Any] = None


class TokenPriceResponse(ApiModel):
    # Unknown mints come back as null
    data: Dict[str, Optional[TokenPrice]]
    time_taken: float

    def price_of(self, mint: str) -> Optional[str]:
        entry = self.data.get(mint)
        return entry.price if entry else None
