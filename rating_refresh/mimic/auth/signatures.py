"""
Signature generation utilities for Mimic API authentication.

Login nonces are signed as EIP-191 personal messages. Configurations and execution requests are
signed over the keccak-256 digest of their canonical JSON encoding.
"""

from typing import Any

import json

from eth_account import Account
from eth_account.messages import encode_defunct
from web3 import Web3

from rating_refresh.utils.converters import to_0x_hex

LOGIN_MESSAGE_PREFIX = "Mimic Protocol authentication nonce: "


def login_message(nonce: str) -> str:
    """The message a wallet signs to prove ownership during login."""
    return f"{LOGIN_MESSAGE_PREFIX}{nonce}"


def payload_digest(payload: dict[str, Any]) -> bytes:
    """keccak-256 of the canonical JSON encoding (sorted keys, no whitespace)."""
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return bytes(Web3.keccak(text=canonical))


class SignatureGenerator:
    """Generate signatures for Mimic API requests."""

    def __init__(self, private_key: str):
        """
        Initialize the signature generator.

        Args:
            private_key: Hex private key of the signing wallet
        """
        if not private_key:
            raise ValueError("Private key is required for signing")

        self._account = Account.from_key(private_key)
        self._public_address: str = str(self._account.address)

    @property
    def public_address(self) -> str:
        """Get the public address derived from the private key."""
        return self._public_address

    def sign_nonce(self, nonce: str) -> str:
        message = encode_defunct(text=login_message(nonce))
        signed = self._account.sign_message(message)
        return to_0x_hex(signed.signature)

    def sign_payload(self, payload: dict[str, Any]) -> str:
        """Sign the digest of a JSON payload as a personal message."""
        message = encode_defunct(primitive=payload_digest(payload))
        signed = self._account.sign_message(message)
        return to_0x_hex(signed.signature)
