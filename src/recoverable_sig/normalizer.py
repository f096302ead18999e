"""Header byte normalization for compact signatures."""

from eth_typing import HexStr

from recoverable_sig.config import SignerSettings, get_settings
from recoverable_sig.logger import get_logger
from recoverable_sig.recovery import coerce_signature, recover_public_key
from recoverable_sig.types.compact_types import (
    LEGACY_V_BASE,
    MAX_RECOVERY_ID,
    SIGNATURE_LENGTH,
    ChainContext,
    CompactSignature,
)

logger = get_logger(__name__)


def recover_compact(
    digest: bytes,
    signature: bytes | bytearray | CompactSignature,
    chain: ChainContext | None = None,
    *,
    settings: SignerSettings | None = None,
) -> HexStr | None:
    """
    Recover the uncompressed public key from a compact signature's header byte.

    Headers below 27 are raw recovery ids as emitted by some hardware signers
    and are shifted to the legacy range first. Headers 27/28 always use the
    legacy base; anything else is read against the chain's EIP-155 base.

    Returns:
        HexStr | None: Lowercase uncompressed key hex, or None if recovery fails
    """
    signature = coerce_signature(signature)
    if len(signature) != SIGNATURE_LENGTH:
        logger.debug("Invalid signature length: %d", len(signature))
        return None

    if chain is None:
        chain = (settings or get_settings()).chain_context()

    version = signature[0]
    if version < LEGACY_V_BASE:
        version += LEGACY_V_BASE

    v_base = LEGACY_V_BASE if chain.is_replayable_v(version) else chain.v_base
    if version < v_base:
        logger.debug("Header byte %d is below the base %d", version, v_base)
        return None

    recovery_id = version - v_base
    if recovery_id > MAX_RECOVERY_ID:
        logger.debug("Header byte %d gives recovery id %d", version, recovery_id)
        return None

    return recover_public_key(digest, signature, recovery_id, compressed=False)
