"""
Jupiter API Client

Async REST client for the Jupiter Swap, Ultra, Price, Trigger and
Recurring APIs. Every method is a single round trip: the request object is
serialized, sent, and the body parsed into its response model. Failures
surface as JupiterError subclasses; nothing is retried.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx

from .config import config as global_config
from .errors import ApiError, RequestError
from .types.quote import QuoteRequest, QuoteResponse
from .types.swap import SwapInstructions, SwapRequest, SwapResponse
from .types.token import TokenPriceRequest, TokenPriceResponse
from .types.trigger import (
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateTriggerOrder,
    ExecuteTriggerOrder,
    ExecuteTriggerResponse,
    GetTriggerOrders,
    OrderResponse,
    TriggerResponse,
)
from .types.recurring import (
    CancelRecurringOrderRequest,
    CreateRecurringOrderRequest,
    ExecuteRecurringRequest,
    ExecuteRecurringResponse,
    GetRecurringOrders,
    PriceDeposit,
    PriceWithdraw,
    RecurringOrders,
    RecurringResponse,
)
from .types.ultra import (
    Router,
    RouterList,
    Shield,
    TokenBalancesResponse,
    UltraExecuteOrderRequest,
    UltraExecuteOrderResponse,
    UltraOrderRequest,
    UltraOrderResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_KEY_HEADER = "x-api-key"


class JupiterClient:
    """
    Jupiter REST API client

    Usage:
        async with JupiterClient() as client:
            quote = await client.get_quote(QuoteRequest(SOL_MINT, USDC_MINT, 1_000_000))
            swap = await client.get_swap_transaction(SwapRequest(pubkey, quote))
    """

    def __init__(
        self,
        base_url: str = None,
        api_key: str = None,
        timeout: float = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Jupiter API client

        Args:
            base_url: API host (default from config, https://lite-api.jup.ag)
            api_key: Sent as x-api-key when set (default from config)
            timeout: Request timeout in seconds (default from config)
            http_client: Pre-built httpx.AsyncClient, mainly for tests
        """
        base_url = base_url if base_url is not None else global_config.jupiter.base_url
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key if api_key is not None else global_config.jupiter.api_key
        self._timeout = timeout if timeout is not None else global_config.jupiter.timeout
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Any] = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        client = self._get_client()

        logger.debug(f"{method} {url} params={params}")
        try:
            response = await client.request(
                method,
                url,
                params=params,
                json=body,
                headers=self._headers(json_body=body is not None),
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Jupiter request timed out: {method} {url}")
            raise RequestError.timeout(url, e) from e
        except httpx.HTTPError as e:
            logger.warning(f"Jupiter request failed: {method} {url}: {e}")
            raise RequestError.connection_failed(url, e) from e

        if not response.is_success:
            error = ApiError.from_response(response)
            logger.warning(f"Jupiter API error: {error}")
            raise error

        return response

    async def _get(self, path: str, model: Type[T], params: Optional[Dict[str, str]] = None) -> T:
        response = await self._request("GET", path, params=params)
        return model.from_json(response.content)

    async def _post(self, path: str, model: Type[T], body: Any) -> T:
        response = await self._request("POST", path, body=body)
        return model.from_json(response.content)

    # ---- Swap API ----

    async def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """
        Get the best route for a swap

        Raises:
            ApiError: Non-2xx status (ErrorCode.NO_ROUTE when no route exists)
            RequestError: Transport failure
            DeserializationError: Body does not match QuoteResponse
        """
        return await self._get("/swap/v1/quote", QuoteResponse, request.to_query_params())

    async def get_swap_transaction(self, request: SwapRequest) -> SwapResponse:
        """Build an unsigned swap transaction for a quote"""
        return await self._post("/swap/v1/swap", SwapResponse, request.to_json())

    async def get_swap_instructions(self, request: SwapRequest) -> SwapInstructions:
        """Get the swap as individual instructions instead of a full transaction"""
        return await self._post("/swap/v1/swap-instructions", SwapInstructions, request.to_json())

    # ---- Ultra API ----

    async def get_ultra_order(self, request: UltraOrderRequest) -> UltraOrderResponse:
        return await self._get("/ultra/v1/order", UltraOrderResponse, request.to_query_params())

    async def ultra_execute_order(self, request: UltraExecuteOrderRequest) -> UltraExecuteOrderResponse:
        """Submit a signed Ultra order; Jupiter lands it and reports the outcome"""
        return await self._post("/ultra/v1/execute", UltraExecuteOrderResponse, request.to_json())

    async def get_token_balances(self, address: str) -> TokenBalancesResponse:
        return await self._get(f"/ultra/v1/balances/{address}", TokenBalancesResponse)

    async def shield(self, mints: List[str]) -> Shield:
        """Token safety warnings for the given mints"""
        return await self._get("/ultra/v1/shield", Shield, {"mints": ",".join(mints)})

    async def routers(self) -> List[Router]:
        router_list = await self._get("/ultra/v1/order/routers", RouterList)
        return router_list.root

    # ---- Price API ----

    async def get_token_price(self, request: TokenPriceRequest) -> TokenPriceResponse:
        return await self._get("/price/v2", TokenPriceResponse, request.to_query_params())

    # ---- Trigger API ----

    async def create_trigger_order(self, request: CreateTriggerOrder) -> TriggerResponse:
        return await self._post("/trigger/v1/createOrder", TriggerResponse, request.to_json())

    async def execute_trigger_order(self, request: ExecuteTriggerOrder) -> ExecuteTriggerResponse:
        return await self._post("/trigger/v1/execute", ExecuteTriggerResponse, request.to_json())

    async def cancel_trigger_order(self, request: CancelTriggerOrder) -> TriggerResponse:
        return await self._post("/trigger/v1/cancelOrder", TriggerResponse, request.to_json())

    async def cancel_trigger_orders(self, request: CancelTriggerOrders) -> TriggerResponse:
        return await self._post("/trigger/v1/cancelOrders", TriggerResponse, request.to_json())

    async def get_trigger_orders(self, request: GetTriggerOrders) -> OrderResponse:
        return await self._get("/trigger/v1/getTriggerOrders", OrderResponse, request.to_query_params())

    # ---- Recurring API ----

    async def create_recurring_order(self, request: CreateRecurringOrderRequest) -> RecurringResponse:
        return await self._post("/recurring/v1/createOrder", RecurringResponse, request.to_json())

    async def cancel_recurring_order(self, request: CancelRecurringOrderRequest) -> RecurringResponse:
        return await self._post("/recurring/v1/cancelOrder", RecurringResponse, request.to_json())

    async def price_deposit(self, request: PriceDeposit) -> RecurringResponse:
        return await self._post("/recurring/v1/priceDeposit", RecurringResponse, request.to_json())

    async def price_withdraw(self, request: PriceWithdraw) -> RecurringResponse:
        return await self._post("/recurring/v1/priceWithdraw", RecurringResponse, request.to_json())

    async def execute_recurring_order(self, request: ExecuteRecurringRequest) -> ExecuteRecurringResponse:
        return await self._post("/recurring/v1/execute", ExecuteRecurringResponse, request.to_json())

    async def get_recurring_orders(self, request: GetRecurringOrders) -> RecurringOrders:
        return await self._get("/recurring/v1/getRecurringOrders", RecurringOrders, request.to_query_params())

    async def aclose(self):
        """Close HTTP client (injected clients are left to their owner)"""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
