"""TRON address encoding helpers."""

from decimal import Decimal, InvalidOperation
from typing import Union

import base58
from eth_keys import keys
from eth_keys.exceptions import ValidationError

from .constants import ADDRESS_PREFIX, SUN_PER_TRX
from .exceptions import InvalidAddressError

_HEX_LENGTH = 42  # 0x41 prefix + 20 bytes


def _strip_0x(value: str) -> str:
    if value[:2].lower() == "0x":
        return value[2:]
    return value


def is_hex_address(address: str) -> bool:
    """
    Check whether a string is a 41-prefixed hex address.

    Args:
        address: Candidate address, with or without 0x

    Returns:
        True for 21-byte hex starting with 41, False otherwise
    """
    raw = _strip_0x(address).lower()
    if len(raw) != _HEX_LENGTH or not raw.startswith("41"):
        return False
    try:
        bytes.fromhex(raw)
    except ValueError:
        return False
    return True


def to_hex(address: str) -> str:
    """
    Convert an address to the node's internal hex form.

    Args:
        address: Base58check address or 41-prefixed hex

    Returns:
        Lowercase hex string starting with "41", no 0x prefix

    Raises:
        InvalidAddressError: If address is neither form
    """
    if is_hex_address(address):
        return _strip_0x(address).lower()

    try:
        raw = base58.b58decode_check(address)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid TRON address: {address!r}") from e

    if len(raw) != 21 or raw[0] != ADDRESS_PREFIX:
        raise InvalidAddressError(f"Invalid TRON address: {address!r}")

    return raw.hex()


def to_base58(address: str) -> str:
    """
    Convert an address to its human-readable base58check form.

    Args:
        address: 41-prefixed hex (as returned by the node) or base58check

    Returns:
        Base58check address starting with "T"

    Raises:
        InvalidAddressError: If address is neither form
    """
    raw = bytes.fromhex(to_hex(address))
    return base58.b58encode_check(raw).decode("ascii")


def to_evm_hex(address: str) -> str:
    """
    Convert an address to the 20-byte form used in ABI-encoded arguments.

    Args:
        address: Base58check or 41-prefixed hex

    Returns:
        0x-prefixed 20-byte hex string
    """
    return "0x" + to_hex(address)[2:]


def load_private_key(private_key: str) -> keys.PrivateKey:
    """
    Parse a secp256k1 private key.

    Args:
        private_key: 32-byte hex key, with or without 0x/0X

    Returns:
        eth_keys PrivateKey

    Raises:
        InvalidAddressError: If the key is not valid 32-byte hex
    """
    try:
        return keys.PrivateKey(bytes.fromhex(_strip_0x(private_key)))
    except (ValueError, ValidationError) as e:
        raise InvalidAddressError("Private key must be 32 bytes of hex") from e


def address_from_private_key(private_key: str) -> str:
    """
    Derive the base58check address controlled by a secp256k1 private key.

    Args:
        private_key: 32-byte hex key, with or without 0x

    Returns:
        Base58check address

    Raises:
        InvalidAddressError: If the key is not valid 32-byte hex
    """
    key = load_private_key(private_key)
    raw = bytes([ADDRESS_PREFIX]) + key.public_key.to_canonical_address()
    return base58.b58encode_check(raw).decode("ascii")


def to_sun(amount: Union[int, str, Decimal]) -> int:
    """
    Convert a whole-unit amount to base units (1 unit = 1,000,000 sun).

    Args:
        amount: Amount in whole units, e.g. 1 or "0.5"

    Returns:
        Integer amount in sun

    Raises:
        ValueError: If amount is not numeric or has sub-sun precision
    """
    try:
        value = Decimal(str(amount)) * SUN_PER_TRX
    except InvalidOperation as e:
        raise ValueError(f"Not a numeric amount: {amount!r}") from e

    if value != value.to_integral_value():
        raise ValueError(f"Amount {amount!r} is below 1 sun precision")
    return int(value)
