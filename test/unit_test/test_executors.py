"""
Test Executors

Tests for SwapExecutor and UltraExecutor with mocked Jupiter/RPC clients
and a real local signer.
"""

import asyncio
import base64
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from solders.hash import Hash
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import VersionedTransaction

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from sample_responses import (  # noqa: E402
    JUP_MINT,
    QUOTE_RESPONSE,
    SOL_MINT,
    SWAP_RESPONSE,
    ULTRA_EXECUTE_FAILED,
    ULTRA_EXECUTE_SUCCESS,
    ULTRA_ORDER_RESPONSE,
    USDC_MINT,
)

MEMO_PROGRAM = Pubkey.from_string("MemoSq4gqABAXKb96qnH8TysNcWxMyWCqXgDLGmfcHr")


def unsigned_tx_b64(payer: Keypair) -> str:
    ix = Instruction(MEMO_PROGRAM, b"swap", [])
    message = MessageV0.try_compile(payer.pubkey(), [ix], [], Hash.default())
    tx = VersionedTransaction.populate(message, [Signature.default()])
    return base64.b64encode(bytes(tx)).decode()


def make_swap_executor(keypair, rpc=None):
    from jup_ag_sdk.infra.solana_signer import LocalSigner
    from jup_ag_sdk.modules.swap import SwapExecutor
    from jup_ag_sdk.types import QuoteResponse, SwapResponse

    client = MagicMock()
    client.get_quote = AsyncMock(return_value=QuoteResponse.model_validate(QUOTE_RESPONSE))
    client.get_swap_transaction = AsyncMock(return_value=SwapResponse.model_validate(
        dict(SWAP_RESPONSE, swapTransaction=unsigned_tx_b64(keypair))
    ))
    rpc = rpc or MagicMock()
    return SwapExecutor(client, LocalSigner(keypair), rpc), client, rpc


def test_swap_executor_success():
    from jup_ag_sdk.config import config
    from jup_ag_sdk.types import QuoteRequest

    print("Testing SwapExecutor success...")

    keypair = Keypair()
    rpc = MagicMock()
    rpc.send_and_confirm_transaction = AsyncMock(side_effect=lambda tx: str(
        VersionedTransaction.from_bytes(tx).signatures[0]
    ))
    executor, client, _ = make_swap_executor(keypair, rpc)

    request = QuoteRequest(SOL_MINT, USDC_MINT, 1_000_000)
    result = asyncio.run(executor.swap(request, dynamic_compute_unit_limit=True))

    assert result.is_success
    assert executor.pubkey == str(keypair.pubkey())

    # Default slippage filled in on a copy; the caller's request is untouched
    assert client.get_quote.call_args.args[0].slippage_bps == config.trading.default_slippage_bps
    assert request.slippage_bps is None

    swap_request = client.get_swap_transaction.call_args.args[0]
    assert swap_request.user_public_key == str(keypair.pubkey())
    assert swap_request.dynamic_compute_unit_limit is True
    assert swap_request.quote_response.out_amount == QUOTE_RESPONSE["outAmount"]

    # Broadcast transaction is signed by the wallet
    sent = VersionedTransaction.from_bytes(rpc.send_and_confirm_transaction.call_args.args[0])
    assert sent.verify_with_results() == [True]
    assert result.signature == str(sent.signatures[0])

    print("  SwapExecutor success: PASSED")


def test_swap_executor_keeps_caller_slippage():
    from jup_ag_sdk.types import QuoteRequest

    print("Testing SwapExecutor quote slippage...")

    executor, client, _ = make_swap_executor(Keypair())
    request = QuoteRequest(SOL_MINT, USDC_MINT, 1_000_000).with_slippage_bps(300)
    asyncio.run(executor.quote(request))

    assert client.get_quote.call_args.args[0].slippage_bps == 300

    print("  SwapExecutor quote slippage: PASSED")


def test_swap_executor_failures():
    from jup_ag_sdk.errors import TransactionError
    from jup_ag_sdk.types import QuoteResponse, TxStatus

    print("Testing SwapExecutor failures...")

    quote = QuoteResponse.model_validate(QUOTE_RESPONSE)

    rpc = MagicMock()
    rpc.send_and_confirm_transaction = AsyncMock(
        side_effect=TransactionError.execution_failed("Transaction failed on-chain", signature="sig-failed")
    )
    executor, _, _ = make_swap_executor(Keypair(), rpc)
    result = asyncio.run(executor.execute_quote(quote))
    assert result.status == TxStatus.FAILED
    assert result.signature == "sig-failed"
    assert result.error_code == "5003"

    rpc.send_and_confirm_transaction = AsyncMock(
        side_effect=TransactionError.confirmation_failed("sig-slow", "Confirmation timeout")
    )
    result = asyncio.run(executor.execute_quote(quote))
    assert result.is_timeout
    assert result.signature == "sig-slow"
    assert result.recoverable is True

    error = TransactionError.send_failed("Transaction simulation failed")
    error.logs = ["Program log: slippage tolerance exceeded"]
    rpc.send_and_confirm_transaction = AsyncMock(side_effect=error)
    result = asyncio.run(executor.execute_quote(quote))
    assert result.is_failed
    assert result.logs == ["Program log: slippage tolerance exceeded"]
    # Signature computed locally when the node rejected the send
    assert result.signature

    print("  SwapExecutor failures: PASSED")


def test_swap_executor_corrupt_transaction():
    """A swapTransaction that is not base64 raises an SDK error before broadcast"""
    from jup_ag_sdk.errors import DeserializationError, JupiterError, SignerError
    from jup_ag_sdk.types import QuoteResponse, SwapResponse

    print("Testing SwapExecutor corrupt transaction...")

    executor, client, rpc = make_swap_executor(Keypair())
    rpc.send_and_confirm_transaction = AsyncMock()
    client.get_swap_transaction = AsyncMock(return_value=SwapResponse.model_validate(
        dict(SWAP_RESPONSE, swapTransaction="not*base64!!")
    ))

    with pytest.raises(SignerError) as exc_info:
        asyncio.run(executor.execute_quote(QuoteResponse.model_validate(QUOTE_RESPONSE)))
    assert isinstance(exc_info.value, JupiterError)
    rpc.send_and_confirm_transaction.assert_not_called()

    swap = client.get_swap_transaction.return_value
    with pytest.raises(DeserializationError):
        swap.transaction_bytes

    print("  SwapExecutor corrupt transaction: PASSED")


def test_swap_executor_requires_signer():
    from jup_ag_sdk.errors import SignerError
    from jup_ag_sdk.modules.swap import SwapExecutor
    from jup_ag_sdk.types import QuoteRequest, QuoteResponse

    print("Testing SwapExecutor without signer...")

    executor = SwapExecutor(MagicMock(), None, MagicMock())
    assert executor.pubkey is None

    with pytest.raises(SignerError):
        asyncio.run(executor.swap(QuoteRequest(SOL_MINT, USDC_MINT, 1_000_000)))
    with pytest.raises(SignerError):
        asyncio.run(executor.build(QuoteResponse.model_validate(QUOTE_RESPONSE)))

    print("  SwapExecutor without signer: PASSED")


def make_ultra_executor(keypair, order_overrides=None, execute_response=None):
    from jup_ag_sdk.infra.solana_signer import LocalSigner
    from jup_ag_sdk.modules.ultra import UltraExecutor
    from jup_ag_sdk.types import UltraExecuteOrderResponse, UltraOrderResponse

    order = dict(ULTRA_ORDER_RESPONSE, transaction=unsigned_tx_b64(keypair))
    order.update(order_overrides or {})

    client = MagicMock()
    client.get_ultra_order = AsyncMock(return_value=UltraOrderResponse.model_validate(order))
    client.ultra_execute_order = AsyncMock(return_value=UltraExecuteOrderResponse.model_validate(
        execute_response or ULTRA_EXECUTE_SUCCESS
    ))
    return UltraExecutor(client, LocalSigner(keypair)), client


def test_ultra_executor_success():
    from jup_ag_sdk.types import UltraOrderRequest

    print("Testing UltraExecutor success...")

    keypair = Keypair()
    executor, client = make_ultra_executor(keypair)

    request = UltraOrderRequest(SOL_MINT, JUP_MINT, 10_000_000)
    result = asyncio.run(executor.swap(request))

    assert result.is_success
    assert request.taker is None
    assert result.signature == ULTRA_EXECUTE_SUCCESS["signature"]
    assert result.slot == 341234600
    assert result.in_amount == 10_000_000
    assert result.out_amount == 3_120_000

    # Taker set to our wallet before ordering
    assert client.get_ultra_order.call_args.args[0].taker == str(keypair.pubkey())

    execute_request = client.ultra_execute_order.call_args.args[0]
    assert execute_request.request_id == ULTRA_ORDER_RESPONSE["requestId"]
    signed = VersionedTransaction.from_bytes(base64.b64decode(execute_request.signed_transaction))
    assert signed.verify_with_results() == [True]

    print("  UltraExecutor success: PASSED")


def test_ultra_executor_failed_execution():
    from jup_ag_sdk.types import UltraOrderRequest

    print("Testing UltraExecutor failed execution...")

    executor, _ = make_ultra_executor(Keypair(), execute_response=ULTRA_EXECUTE_FAILED)
    result = asyncio.run(executor.swap(UltraOrderRequest(SOL_MINT, JUP_MINT, 10_000_000)))

    assert result.is_failed
    assert result.error == "Slippage tolerance exceeded"
    assert result.error_code == "-1005"
    assert result.signature == ULTRA_EXECUTE_FAILED["signature"]

    print("  UltraExecutor failed execution: PASSED")


def test_ultra_executor_order_without_transaction():
    from jup_ag_sdk.errors import ErrorCode, TransactionError
    from jup_ag_sdk.types import UltraOrderRequest

    print("Testing UltraExecutor order without transaction...")

    executor, client = make_ultra_executor(Keypair(), order_overrides={
        "transaction": None,
        "errorCode": 1,
        "errorMessage": "Insufficient funds",
    })

    with pytest.raises(TransactionError) as exc_info:
        asyncio.run(executor.swap(UltraOrderRequest(SOL_MINT, JUP_MINT, 10_000_000)))

    assert exc_info.value.code == ErrorCode.TX_INVALID
    assert "Insufficient funds" in exc_info.value.message
    client.ultra_execute_order.assert_not_called()

    print("  UltraExecutor order without transaction: PASSED")


def main():
    """Run all executor tests"""
    print("=" * 60)
    print("Jupiter SDK Executor Tests")
    print("=" * 60)

    tests = [
        test_swap_executor_success,
        test_swap_executor_keeps_caller_slippage,
        test_swap_executor_failures,
        test_swap_executor_corrupt_transaction,
        test_swap_executor_requires_signer,
        test_ultra_executor_success,
        test_ultra_executor_failed_execution,
        test_ultra_executor_order_without_transaction,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"  FAILED: {e}")
            failed += 1

    print("=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
