from recoverable_sig.backend import ensure_ready
from recoverable_sig.config import SignerSettings, get_settings
from recoverable_sig.exceptions import BackendError, ConfigurationError, RecoverableSignatureError
from recoverable_sig.normalizer import recover_compact
from recoverable_sig.recovery import recover_public_key
from recoverable_sig.signer import sign_compact
from recoverable_sig.types.compact_types import ChainContext, CompactSignature

__all__ = [
    "BackendError",
    "ChainContext",
    "CompactSignature",
    "ConfigurationError",
    "RecoverableSignatureError",
    "SignerSettings",
    "ensure_ready",
    "get_settings",
    "recover_compact",
    "recover_public_key",
    "sign_compact",
]
