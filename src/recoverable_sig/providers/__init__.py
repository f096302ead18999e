from recoverable_sig.providers.base import CurveBackend
from recoverable_sig.providers.python_ecdsa import PythonEcdsaBackend

__all__ = ["CurveBackend", "PythonEcdsaBackend"]
