"""Encoding utilities shared by the signer and the recoverer."""

from eth_typing import HexStr
from eth_utils import decode_hex, is_hexstr, remove_0x_prefix

SCALAR_LENGTH: int = 32
SCALAR_BITS: int = 8 * SCALAR_LENGTH
UNCOMPRESSED_PREFIX: str = "04"
UNCOMPRESSED_HEX_LENGTH: int = 2 * (1 + 2 * SCALAR_LENGTH)


def coerce_bytes(value: bytes | bytearray | memoryview, name: str) -> bytes:
    """Return `value` as immutable bytes, rejecting anything that is not bytes-like."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    msg = f"Unsupported {name} type: {type(value)}"
    raise TypeError(msg)


def scalar_to_bytes(value: int) -> bytes:
    """Serialize a scalar as 32 big-endian bytes, left-padded with zeros."""
    return value.to_bytes(SCALAR_LENGTH, "big")


def bytes_to_scalar(data: bytes) -> int:
    return int.from_bytes(data, "big")


def digest_to_int(digest: bytes, bits: int) -> int:
    """
    Convert a digest to an integer the way ECDSA does.

    Digests longer than the curve order keep only their leftmost `bits` bits.
    """
    e = int.from_bytes(digest, "big")
    excess = 8 * len(digest) - bits
    if excess > 0:
        e >>= excess
    return e


def normalize_s(s: int, order: int) -> int:
    """Normalize s to the lower half of the curve order according to EIP-2."""
    if s > order // 2:
        s = order - s
    return s


def _decode_hex(value: str) -> bytes | None:
    if not is_hexstr(value):
        return None
    try:
        return decode_hex(value)
    except ValueError:
        return None


def normalize_private_key(private_key: bytes | bytearray | str | int) -> int | None:
    """
    Convert a private key to its scalar value.

    Accepts raw big-endian bytes, a hex string (with or without 0x), hex text
    passed as 64 ASCII bytes, or an int. Range checks against the curve order
    are left to the caller.

    Returns:
        int | None: The scalar, or None if the input cannot be decoded
    """
    if isinstance(private_key, bool):
        msg = f"Unsupported private key type: {type(private_key)}"
        raise TypeError(msg)
    if isinstance(private_key, int):
        return private_key
    if isinstance(private_key, str):
        raw = _decode_hex(private_key)
        if raw is None:
            return None
    else:
        raw = coerce_bytes(private_key, "private key")
        if len(raw) >= 2 * SCALAR_LENGTH:
            # hex text handed over as bytes
            try:
                raw = _decode_hex(raw.decode("ascii"))
            except UnicodeDecodeError:
                return None
            if raw is None:
                return None
    if not raw or len(raw) > SCALAR_LENGTH:
        return None
    return bytes_to_scalar(raw)


def normalize_public_key_hex(public_key: str | bytes) -> HexStr | None:
    """
    Normalize an uncompressed public key to lowercase `04`-prefixed hex.

    Accepts the 65-byte SEC form or the 64-byte x||y form, either as bytes or
    as hex with an optional 0x prefix.
    """
    if isinstance(public_key, str):
        if not is_hexstr(public_key):
            return None
        key_hex = remove_0x_prefix(HexStr(public_key)).lower()
    else:
        key_hex = coerce_bytes(public_key, "public key").hex()

    if len(key_hex) == UNCOMPRESSED_HEX_LENGTH - 2:
        key_hex = UNCOMPRESSED_PREFIX + key_hex
    if len(key_hex) != UNCOMPRESSED_HEX_LENGTH or not key_hex.startswith(UNCOMPRESSED_PREFIX):
        return None
    return HexStr(key_hex)
