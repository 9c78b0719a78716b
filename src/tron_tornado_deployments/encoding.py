"""ABI encoding of constructor and function call parameters."""

import re
from typing import Any, Dict, List, Sequence

from eth_abi import encode

from .addresses import to_evm_hex

_SIGNATURE_PATTERN = re.compile(r"^\w+\((.*)\)$")


def constructor_input_types(abi: List[Dict[str, Any]]) -> List[str]:
    """
    Get the constructor argument types from a contract ABI.

    Args:
        abi: Contract ABI

    Returns:
        List of ABI type strings; empty if the ABI has no constructor
    """
    for item in abi:
        if item.get("type") == "constructor":
            return [arg["type"] for arg in item.get("inputs", [])]
    return []


def function_input_types(signature: str) -> List[str]:
    """
    Split a function signature into its argument types.

    Args:
        signature: Canonical signature, e.g. "mint(address,uint256)"

    Returns:
        List of ABI type strings
    """
    match = _SIGNATURE_PATTERN.match(signature.replace(" ", ""))
    if match is None:
        raise ValueError(f"Malformed function signature: {signature!r}")
    args = match.group(1)
    return args.split(",") if args else []


def coerce_value(abi_type: str, value: Any) -> Any:
    """
    Convert a configuration value to what the ABI encoder expects.

    Environment values arrive as strings, and addresses arrive in
    base58check form; both are normalized here.
    """
    if abi_type.endswith("]"):
        return value
    if abi_type == "address":
        return to_evm_hex(str(value))
    if abi_type.startswith(("uint", "int")):
        return int(value)
    if abi_type == "bool":
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes")
        return bool(value)
    if abi_type.startswith("bytes") and isinstance(value, str):
        return bytes.fromhex(value[2:] if value.startswith("0x") else value)
    return value


def encode_parameters(types: Sequence[str], values: Sequence[Any]) -> str:
    """
    ABI-encode an argument list.

    Args:
        types: ABI type strings
        values: Argument values, coerced per type

    Returns:
        Hex string without 0x prefix; empty string for no arguments

    Raises:
        ValueError: If the number of values does not match the types
    """
    if len(types) != len(values):
        raise ValueError(
            f"Expected {len(types)} parameters ({', '.join(types)}), got {len(values)}"
        )
    if not types:
        return ""

    coerced = [coerce_value(t, v) for t, v in zip(types, values)]
    return encode(list(types), coerced).hex()


def encode_constructor_args(abi: List[Dict[str, Any]], values: Sequence[Any]) -> str:
    """ABI-encode constructor arguments using the constructor entry of an ABI."""
    return encode_parameters(constructor_input_types(abi), values)


def encode_function_args(signature: str, values: Sequence[Any]) -> str:
    """ABI-encode arguments for a function signature such as "mint(address,uint256)"."""
    return encode_parameters(function_input_types(signature), values)
