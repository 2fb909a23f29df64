"""
Transaction signing abstractions

Jupiter hands back unsigned base64 transactions; a Signer fills in the
wallet's signature slot and leaves every other slot untouched (Ultra RFQ
orders are co-signed by the market maker after we sign).
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import os
from typing import Optional, Protocol, Tuple, runtime_checkable

import base58
from solders.keypair import Keypair
from solders.message import to_bytes_versioned
from solders.signature import Signature
from solders.transaction import VersionedTransaction

from ..errors import SignerError, ConfigurationError
from ..config import config as global_config

logger = logging.getLogger(__name__)


@runtime_checkable
class Signer(Protocol):
    """
    Protocol for transaction signers

    Implementations must provide:
    - pubkey: The signer's public key (base58)
    - sign(): Sign a message
    - sign_transaction(): Sign serialized transaction bytes
    """

    @property
    def pubkey(self) -> str:
        """Signer's public key (base58)"""
        ...

    def sign(self, message: bytes) -> bytes:
        """Sign a message, returning the 64-byte signature"""
        ...

    def sign_transaction(self, unsigned_tx: bytes) -> Tuple[bytes, str]:
        """
        Sign a transaction

        Args:
            unsigned_tx: Unsigned transaction bytes

        Returns:
            (signed_tx_bytes, signature_base58)
        """
        ...


class LocalSigner:
    """
    Local signer using a solders Keypair

    Usage:
        signer = LocalSigner.from_base58(os.environ["SOLANA_PRIVATE_KEY"])
        signed_tx, sig = signer.sign_transaction(unsigned_tx_bytes)
    """

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @property
    def pubkey(self) -> str:
        """Public key as base58 string"""
        return str(self._keypair.pubkey())

    @property
    def keypair(self) -> Keypair:
        return self._keypair

    def sign(self, message: bytes) -> bytes:
        """Sign message bytes"""
        return bytes(self._keypair.sign_message(message))

    def sign_transaction(self, unsigned_tx: bytes) -> Tuple[bytes, str]:
        """
        Sign a VersionedTransaction (legacy or v0 message)

        Args:
            unsigned_tx: Serialized transaction bytes

        Returns:
            (signed_tx_bytes, signature_base58)

        Raises:
            SignerError: Malformed bytes, or the wallet is not a required signer
        """
        try:
            tx = VersionedTransaction.from_bytes(unsigned_tx)
        except ValueError as e:
            raise SignerError.failed(f"Cannot parse transaction: {e}") from e

        message = tx.message
        num_required_signatures = message.header.num_required_signatures
        account_keys = message.account_keys
        our_pubkey = self._keypair.pubkey()

        # The first num_required_signatures account keys are the signers
        signer_index = None
        for i in range(min(num_required_signatures, len(account_keys))):
            if account_keys[i] == our_pubkey:
                signer_index = i
                break

        if signer_index is None:
            expected = [str(account_keys[i]) for i in range(min(num_required_signatures, len(account_keys)))]
            raise SignerError.failed(
                f"Wallet {our_pubkey} is not in the required signers list. Expected signers: {expected}"
            )

        # v0 messages are signed with their 0x80 version prefix
        signature = self._keypair.sign_message(to_bytes_versioned(message))

        signatures = list(tx.signatures)
        if len(signatures) < num_required_signatures:
            signatures += [Signature.default()] * (num_required_signatures - len(signatures))
        signatures[signer_index] = signature
        signed_tx = VersionedTransaction.populate(message, signatures)

        logger.debug(f"Signed transaction {signature} in slot {signer_index}")
        return bytes(signed_tx), str(signature)

    @classmethod
    def from_bytes(cls, secret_key: bytes) -> "LocalSigner":
        """Create signer from secret key bytes (64 bytes)"""
        try:
            keypair = Keypair.from_bytes(secret_key)
        except ValueError as e:
            raise ConfigurationError.invalid("private_key", str(e)) from e
        return cls(keypair)

    @classmethod
    def from_base58(cls, secret_key: str) -> "LocalSigner":
        """Create signer from base58 secret key"""
        try:
            secret_bytes = base58.b58decode(secret_key.strip())
        except ValueError as e:
            raise ConfigurationError.invalid("private_key", "not valid base58") from e
        return cls.from_bytes(secret_bytes)

    @classmethod
    def from_private_key(cls, private_key: str) -> "LocalSigner":
        """
        Create signer from a private key string

        Accepts base58 (Phantom export) or a JSON byte array (Solana CLI).
        """
        private_key = private_key.strip()
        if private_key.startswith("["):
            try:
                return cls.from_bytes(bytes(json.loads(private_key)))
            except (json.JSONDecodeError, TypeError, ValueError) as e:
                raise ConfigurationError.invalid("private_key", f"bad JSON byte array: {e}") from e
        return cls.from_base58(private_key)

    @classmethod
    def from_file(cls, path: str) -> "LocalSigner":
        """
        Create signer from keypair file

        Supports:
        - JSON array format (Solana CLI): [1,2,3,...]
        - Raw bytes file (64 bytes)
        """
        with open(path, "rb") as f:
            content = f.read()

        try:
            data = json.loads(content.decode("utf-8"))
            if isinstance(data, list):
                return cls.from_bytes(bytes(data))
        except (json.JSONDecodeError, UnicodeDecodeError):
            pass

        if len(content) == 64:
            return cls.from_bytes(content)

        raise ConfigurationError.invalid("keypair_file", f"Cannot parse keypair file: {path}")


def sign_base64_transaction(signer: Signer, transaction_b64: str) -> Tuple[str, str]:
    """
    Sign a base64 transaction as returned by the Jupiter APIs

    Returns:
        (signed_transaction_base64, signature_base58)
    """
    try:
        unsigned_tx = base64.b64decode(transaction_b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise SignerError.failed(f"Transaction is not valid base64: {e}") from e

    signed_tx, signature = signer.sign_transaction(unsigned_tx)
    return base64.b64encode(signed_tx).decode("ascii"), signature


def create_signer(
    keypair: Optional[Keypair] = None,
    keypair_path: Optional[str] = None,
    private_key: Optional[str] = None,
) -> Signer:
    """
    Create signer based on configuration

    Priority:
    1. keypair: Use LocalSigner with provided keypair
    2. keypair_path: Load keypair from file
    3. private_key: base58 or JSON array string
    4. Environment: SOLANA_PRIVATE_KEY, then SOLANA_KEYPAIR_PATH

    Raises:
        SignerError: If no valid signer configuration found
    """
    if keypair is not None:
        return LocalSigner(keypair)

    if keypair_path is not None:
        return LocalSigner.from_file(keypair_path)

    if private_key is not None:
        return LocalSigner.from_private_key(private_key)

    if global_config.signer.private_key:
        return LocalSigner.from_private_key(global_config.signer.private_key)

    if global_config.signer.keypair_path and os.path.isfile(global_config.signer.keypair_path):
        return LocalSigner.from_file(global_config.signer.keypair_path)

    raise SignerError.not_configured()
