from eth_typing import HexStr

from recoverable_sig.backend import ensure_ready
from recoverable_sig.config import SignerSettings, get_settings
from recoverable_sig.logger import get_logger
from recoverable_sig.recovery import recover_public_key
from recoverable_sig.types.compact_types import MAX_RECOVERY_ID, ChainContext
from recoverable_sig.utils import (
    SCALAR_BITS,
    coerce_bytes,
    normalize_private_key,
    normalize_public_key_hex,
    normalize_s,
    scalar_to_bytes,
)

logger = get_logger(__name__)


def sign_compact(
    digest: bytes,
    private_key: bytes | str | int,
    expected_public_key: HexStr | str | bytes,
    chain: ChainContext | None = None,
    *,
    settings: SignerSettings | None = None,
) -> bytes | None:
    """
    Sign a digest and encode the recovery id in the header byte.

    Recovery ids are tried in order 0..3 and the first one that recovers
    `expected_public_key` is kept.

    Args:
        digest: Message digest to sign
        private_key: Raw key bytes, hex string, or int
        expected_public_key: Uncompressed public key of `private_key`, as hex or bytes
        chain: Header convention; defaults to the chain id in the settings
        settings: Overrides the process-wide settings

    Returns:
        bytes | None: 65-byte compact signature, or None if signing fails

    Example:
        >>> signature = sign_compact(digest, "0x4c0883a6...", public_key_hex)
    """
    settings = settings or get_settings()
    if chain is None:
        chain = settings.chain_context()
    digest = coerce_bytes(digest, "digest")
    # python-ecdsa cannot derive a nonce from an empty digest
    if not digest:
        logger.debug("Refusing to sign an empty digest")
        return None

    backend = ensure_ready()

    secret = normalize_private_key(private_key)
    if secret is None or not 0 < secret < backend.n:
        logger.debug("Private key is malformed or outside the curve order")
        return None

    expected = normalize_public_key_hex(expected_public_key)
    if expected is None:
        logger.debug("Expected public key is not an uncompressed secp256k1 key")
        return None

    if settings.verify_expected_key:
        derived = backend.encode_point(backend.derive_public_point(secret), compressed=False).hex()
        if derived != expected:
            logger.debug("Expected public key does not belong to the private key")
            return None

    r, s = backend.sign_digest(digest, secret, deterministic=settings.deterministic)
    if r.bit_length() > SCALAR_BITS or s.bit_length() > SCALAR_BITS:
        logger.debug("Signature component wider than %d bits", SCALAR_BITS)
        return None

    if settings.low_s:
        s = normalize_s(s, backend.n)
    body = scalar_to_bytes(r) + scalar_to_bytes(s)

    for recovery_id in range(MAX_RECOVERY_ID + 1):
        candidate = bytes([chain.v_base + recovery_id]) + body
        if recover_public_key(digest, candidate, recovery_id, compressed=False) == expected:
            return candidate

    logger.debug("No recovery id reproduces the expected public key")
    return None
