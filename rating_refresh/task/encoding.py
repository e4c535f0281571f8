"""
Contract call encoding for task intents.

Call data is the 4-byte selector (keccak-256 of the function signature) followed by the
standard ABI encoding of the arguments, so it must be bit-exact for the contract to decode it.
"""

from typing import Any

import re
from collections.abc import Sequence

from eth_abi import encode
from eth_abi.exceptions import EncodingError
from web3 import Web3

from rating_refresh.exceptions import InvalidEncodingError

_HEX_BODY = re.compile(r"^[0-9a-fA-F]*$")
_SIGNATURE = re.compile(r"^([A-Za-z_$][A-Za-z0-9_$]*)\((.*)\)$")


def decode_hex(value: Any) -> bytes:
    """
    Strictly decode a hex string (with or without 0x prefix) into bytes.

    Raises:
        InvalidEncodingError: On odd length or non-hex characters
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise InvalidEncodingError(f"Expected a hex string, got {type(value).__name__}")

    body = value[2:] if value[:2] in ("0x", "0X") else value
    if len(body) % 2 != 0:
        raise InvalidEncodingError(f"Hex string has odd length ({len(body)} digits)")
    if not _HEX_BODY.match(body):
        raise InvalidEncodingError("Hex string contains non-hex characters")
    return bytes.fromhex(body)


def to_address(value: str) -> str:
    """Validate an address and return its checksummed form."""
    if not isinstance(value, str) or not Web3.is_address(value):
        raise InvalidEncodingError(f"Invalid address: {value!r}")
    return Web3.to_checksum_address(value)


def function_selector(signature: str) -> bytes:
    """First four bytes of keccak-256 of the ASCII function signature."""
    return bytes(Web3.keccak(text=signature)[:4])


def _parse_signature(signature: str) -> tuple[str, list[str]]:
    match = _SIGNATURE.match(re.sub(r"\s", "", signature))
    if not match:
        raise InvalidEncodingError(f"Malformed function signature: {signature!r}")
    name, params = match.groups()
    # TODO: split on top-level commas once tuple parameters are needed
    if "(" in params:
        raise InvalidEncodingError(f"Tuple parameters are not supported: {signature!r}")
    types = params.split(",") if params else []
    if "" in types:
        raise InvalidEncodingError(f"Malformed function signature: {signature!r}")
    return name, types


def signature_types(signature: str) -> list[str]:
    """Parameter types of a flat function signature such as ``f(address,bytes)``."""
    return _parse_signature(signature)[1]


def canonical_signature(signature: str) -> str:
    """The signature as the selector is computed from: ``name(type1,type2)`` without whitespace."""
    name, types = _parse_signature(signature)
    return f"{name}({','.join(types)})"


def _normalize_argument(abi_type: str, value: Any) -> Any:
    if abi_type == "address":
        return to_address(value)
    if abi_type == "bytes" or re.fullmatch(r"bytes([1-9]|[12][0-9]|3[0-2])", abi_type):
        return decode_hex(value)
    return value


def encode_call(signature: str, argument_specs: Sequence[tuple[str, Any]]) -> bytes:
    """
    Build call data for a contract function.

    Args:
        signature: Canonical function signature, e.g. ``refreshRatingWithReport(address,bytes)``
        argument_specs: Ordered (abi type, value) pairs; hex strings are accepted for bytes types

    Returns:
        Selector followed by the ABI-encoded arguments

    Raises:
        InvalidEncodingError: If the arguments do not match the signature or cannot be encoded
    """
    canonical = canonical_signature(signature)
    declared = signature_types(canonical)
    arg_types = [abi_type for abi_type, _ in argument_specs]
    if arg_types != declared:
        raise InvalidEncodingError(f"Argument types {arg_types} do not match signature {signature}")

    values = [_normalize_argument(abi_type, value) for abi_type, value in argument_specs]
    try:
        encoded_args = encode(arg_types, values)
    except (EncodingError, TypeError, ValueError) as e:
        raise InvalidEncodingError(f"Failed to encode arguments for {signature}: {e}") from e

    return function_selector(canonical) + encoded_args
