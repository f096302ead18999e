"""Process-wide curve backend, initialized exactly once."""

import threading

from recoverable_sig.exceptions import BackendError
from recoverable_sig.logger import get_logger
from recoverable_sig.providers.base import CurveBackend
from recoverable_sig.providers.python_ecdsa import PythonEcdsaBackend

logger = get_logger(__name__)

_lock = threading.Lock()
_backend: CurveBackend | None = None


def ensure_ready() -> CurveBackend:
    """
    Return the initialized curve backend, initializing it on first use.

    Concurrent first callers block until a single initialization has finished
    and then all observe the same backend.

    Raises:
        BackendError: If the backend cannot be created or fails its self-test
    """
    global _backend

    backend = _backend
    if backend is not None:
        return backend

    with _lock:
        if _backend is None:
            try:
                candidate = PythonEcdsaBackend()
                candidate.self_test()
            except BackendError:
                logger.error("Curve backend failed its self-test")
                raise
            except Exception as e:
                logger.error("Curve backend failed to initialize: %r", e)
                msg = f"Failed to initialize curve backend: {e!s}"
                raise BackendError(msg, backend=PythonEcdsaBackend.name) from e
            logger.info("Initialized %s curve backend %s", candidate.name, candidate.version)
            _backend = candidate
        return _backend
