"""Unit tests for header byte normalization."""
import pytest

from recoverable_sig.config import SignerSettings
from recoverable_sig.normalizer import recover_compact
from recoverable_sig.signer import sign_compact
from recoverable_sig.types.compact_types import ChainContext, CompactSignature


def _with_header(signature: bytes, header: int) -> bytes:
    return bytes([header]) + signature[1:]


def test_recover_compact_legacy(legacy_signature: bytes, test_digest: bytes, test_public_key: str):
    """Test recovery of a legacy 27/28 signature."""
    assert recover_compact(test_digest, legacy_signature, ChainContext()) == test_public_key


def test_recover_compact_accepts_model(legacy_signature: bytes, test_digest: bytes, test_public_key: str):
    signature = CompactSignature.from_bytes(legacy_signature)
    assert recover_compact(test_digest, signature, ChainContext()) == test_public_key


def test_recover_compact_raw_header(legacy_signature: bytes, test_digest: bytes, test_public_key: str):
    """Test that raw 0/1 headers from hardware signers are shifted to 27/28."""
    raw = _with_header(legacy_signature, legacy_signature[0] - 27)
    assert raw[0] in (0, 1, 2, 3)
    assert recover_compact(test_digest, raw, ChainContext()) == test_public_key


@pytest.mark.parametrize("raw_header", [0, 1])
def test_recover_compact_raw_matches_legacy(legacy_signature: bytes, test_digest: bytes, raw_header: int):
    """Test that header 0 behaves like 27 and 1 like 28."""
    raw = _with_header(legacy_signature, raw_header)
    legacy = _with_header(legacy_signature, raw_header + 27)
    assert recover_compact(test_digest, raw, ChainContext()) == recover_compact(test_digest, legacy, ChainContext())


def test_recover_compact_eip155(
    test_digest: bytes, test_private_key: str, test_public_key: str, settings: SignerSettings
):
    """Test recovery of a replay-protected header with its chain context."""
    chain = ChainContext(chain_id=1)
    signature = sign_compact(test_digest, test_private_key, test_public_key, chain, settings=settings)

    assert recover_compact(test_digest, signature, chain) == test_public_key
    # without the chain the header maps to an id above 3
    assert recover_compact(test_digest, signature, ChainContext()) is None


def test_recover_compact_chain_from_settings(
    test_digest: bytes, test_private_key: str, test_public_key: str
):
    """Test that the settings chain id is used when no context is passed."""
    settings = SignerSettings(chain_id=5)
    signature = sign_compact(test_digest, test_private_key, test_public_key, settings=settings)
    assert recover_compact(test_digest, signature, settings=settings) == test_public_key


def test_recover_compact_legacy_with_chain(legacy_signature: bytes, test_digest: bytes, test_public_key: str):
    """Test that 27/28 headers stay valid when a chain context is configured."""
    if legacy_signature[0] not in (27, 28):
        pytest.skip("signature uses an overflow recovery id")
    assert recover_compact(test_digest, legacy_signature, ChainContext(chain_id=1)) == test_public_key


def test_recover_compact_below_base(legacy_signature: bytes, test_digest: bytes):
    """Test that headers between the legacy and EIP-155 ranges are rejected."""
    signature = _with_header(legacy_signature, 33)
    assert recover_compact(test_digest, signature, ChainContext(chain_id=1)) is None


@pytest.mark.parametrize("header", [31, 34, 0xFF])
def test_recover_compact_rejects_large_recovery_id(legacy_signature: bytes, test_digest: bytes, header: int):
    """Test that headers giving a recovery id above 3 are rejected."""
    signature = _with_header(legacy_signature, header)
    assert recover_compact(test_digest, signature, ChainContext()) is None


@pytest.mark.parametrize("length", [0, 64, 66])
def test_recover_compact_rejects_malformed_length(test_digest: bytes, length: int):
    assert recover_compact(test_digest, bytes([27]) * length, ChainContext()) is None


def test_recover_compact_wrong_digest(legacy_signature: bytes, test_public_key: str):
    """Test that another digest recovers another key."""
    assert recover_compact(bytes(32), legacy_signature, ChainContext()) != test_public_key
