import pytest
from eth_keys import keys
from eth_utils import keccak

from recoverable_sig.config import SignerSettings, get_settings
from recoverable_sig.signer import sign_compact

from tests.constants import TEST_MESSAGE, TEST_PRIVATE_KEY


@pytest.fixture
def test_digest() -> bytes:
    """Keccak digest of the test message."""
    return keccak(text=TEST_MESSAGE)


@pytest.fixture
def test_private_key() -> str:
    return TEST_PRIVATE_KEY


@pytest.fixture
def test_public_key() -> str:
    """Uncompressed hex public key of the test private key, derived with eth_keys."""
    private_key = keys.PrivateKey(bytes.fromhex(TEST_PRIVATE_KEY[2:]))
    return "04" + private_key.public_key.to_bytes().hex()


@pytest.fixture
def settings() -> SignerSettings:
    """Default settings, independent of the environment."""
    return SignerSettings()


@pytest.fixture
def legacy_signature(test_digest: bytes, test_private_key: str, test_public_key: str, settings: SignerSettings) -> bytes:
    """A compact signature with a legacy 27/28 header."""
    signature = sign_compact(test_digest, test_private_key, test_public_key, settings=settings)
    assert signature is not None
    return signature


@pytest.fixture
def fresh_backend(monkeypatch: pytest.MonkeyPatch):
    """Run the test against an uninitialized backend, restoring the shared one afterwards."""
    monkeypatch.setattr("recoverable_sig.backend._backend", None)


@pytest.fixture
def clean_settings_cache():
    """Drop cached process-wide settings around the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
