#!/usr/bin/env python3
"""Retrieve a Mimic API key through the wallet-signature login flow.

Usage:
    PRIVATE_KEY=0x... rating-refresh-get-api-key
"""

from typing import Optional

import asyncio
import logging
import os
import sys

from rating_refresh.commands import configure_logging
from rating_refresh.config import MimicConfig
from rating_refresh.exceptions import MimicAuthError
from rating_refresh.mimic import SignatureGenerator
from rating_refresh.mimic.auth.signatures import login_message
from rating_refresh.mimic.resources import UsersResource

logger = logging.getLogger("rating_refresh.get_api_key")


async def fetch_api_key(
    users: UsersResource,
    private_key: Optional[str] = None,
    wallet_address: Optional[str] = None,
) -> str:
    """
    Log in with a wallet and return its API key.

    Args:
        users: Login resource
        private_key: Key used to sign the login nonce
        wallet_address: Address to log in with when no private key is available

    Raises:
        MimicAuthError: If no wallet is configured, or the nonce cannot be signed
    """
    signer = SignatureGenerator(private_key) if private_key else None
    address = signer.public_address if signer else wallet_address
    if not address:
        raise MimicAuthError("Either PRIVATE_KEY or WALLET_ADDRESS must be set in .env")
    logger.info(f"Using wallet: {address}")

    logger.info(f"[1/4] Requesting nonce for address: {address}")
    nonce = await users.request_nonce(address)
    logger.info(f"[1/4] Nonce received: {nonce}")

    logger.info("[2/4] Signing nonce...")
    if signer is None:
        logger.info(f"[2/4] Message to sign with an EIP-191 wallet: {login_message(nonce)}")
        raise MimicAuthError("Private key required. Set PRIVATE_KEY in .env to sign the login nonce.")
    signature = signer.sign_nonce(nonce)
    logger.info("[2/4] Nonce signed with private key")

    logger.info("[3/4] Authenticating with signature...")
    token = await users.authenticate(address, signature)
    logger.info("[3/4] Authentication successful")

    logger.info("[4/4] Fetching API key...")
    api_key = await users.get_api_key(token)
    logger.info("[4/4] API key retrieved")
    return api_key


async def main() -> None:
    config = MimicConfig.from_env()
    api_key = await fetch_api_key(
        UsersResource(config),
        private_key=config.private_key,
        wallet_address=os.environ.get("WALLET_ADDRESS"),
    )

    print("\nAPI Key retrieved successfully!\n")
    print("=" * 60)
    print("Add this to your .env file:")
    print("=" * 60)
    print(f"MIMIC_API_KEY={api_key}")
    print("=" * 60)


def run() -> None:
    configure_logging()
    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
