"""Public key recovery from compact signatures."""

from eth_typing import HexStr

from recoverable_sig.backend import ensure_ready
from recoverable_sig.logger import get_logger
from recoverable_sig.types.compact_types import MAX_RECOVERY_ID, SIGNATURE_LENGTH, CompactSignature
from recoverable_sig.utils import SCALAR_LENGTH, bytes_to_scalar, coerce_bytes, digest_to_int

logger = get_logger(__name__)


def coerce_signature(signature: bytes | bytearray | CompactSignature) -> bytes:
    if isinstance(signature, CompactSignature):
        return signature.to_bytes()
    return coerce_bytes(signature, "signature")


def recover_public_key(
    digest: bytes,
    signature: bytes | bytearray | CompactSignature,
    recovery_id: int,
    compressed: bool = False,
) -> HexStr | None:
    """
    Recover the signer's public key from a compact signature.

    The recovery id picks the ephemeral point R: bit 1 says whether its
    x-coordinate is r or r + n, bit 0 gives the parity of its y-coordinate.
    The key is then Q = r^-1 * (s * R - e * G).

    Args:
        digest: Message digest that was signed
        signature: 65-byte compact signature (header byte, r, s)
        recovery_id: Recovery id in 0..3
        compressed: Return the 33-byte compressed encoding instead of the 65-byte one

    Returns:
        HexStr | None: Lowercase hex of the recovered key, or None if recovery fails

    Example:
        >>> recover_public_key(digest, signature, signature[0] - 27)
    """
    signature = coerce_signature(signature)
    digest = coerce_bytes(digest, "digest")
    if isinstance(recovery_id, bool) or not isinstance(recovery_id, int):
        msg = f"Unsupported recovery id type: {type(recovery_id)}"
        raise TypeError(msg)

    if not 0 <= recovery_id <= MAX_RECOVERY_ID:
        logger.debug("Recovery id %d out of range", recovery_id)
        return None
    if len(signature) != SIGNATURE_LENGTH:
        logger.debug("Invalid signature length: %d", len(signature))
        return None

    backend = ensure_ready()
    n = backend.n

    r = bytes_to_scalar(signature[1 : 1 + SCALAR_LENGTH])
    s = bytes_to_scalar(signature[1 + SCALAR_LENGTH : SIGNATURE_LENGTH])

    x = n * (recovery_id // 2) + r
    if x >= backend.p:
        logger.debug("R x-coordinate exceeds the field prime for recovery id %d", recovery_id)
        return None

    big_r = backend.decompress(x, odd=bool(recovery_id % 2))
    if big_r is None:
        logger.debug("R x-coordinate is not on the curve")
        return None

    e = digest_to_int(digest, backend.bits)

    r_inv = backend.inverse(r)
    if r_inv is None:
        logger.debug("r has no inverse modulo the curve order")
        return None
    s_over_r = s * r_inv % n
    e_over_r = -e * r_inv % n

    big_q = backend.combined_mul(e_over_r, s_over_r, big_r)
    if backend.is_infinity(big_q):
        logger.debug("Recovered point is at infinity")
        return None

    return HexStr(backend.encode_point(big_q, compressed).hex())
