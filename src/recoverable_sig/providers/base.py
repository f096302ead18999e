from abc import ABC, abstractmethod
from typing import Any


class CurveBackend(ABC):
    """Base class for secp256k1 arithmetic backends.

    Points are opaque backend objects; they are created per call and never
    shared between calls.
    """

    name: str = "abstract"

    @property
    @abstractmethod
    def p(self) -> int:
        """Field prime."""
        pass

    @property
    @abstractmethod
    def n(self) -> int:
        """Group order."""
        pass

    @property
    @abstractmethod
    def bits(self) -> int:
        """Bit length of the group order, used for digest truncation."""
        pass

    @abstractmethod
    def derive_public_point(self, secret: int) -> Any:
        """Compute secret * G."""
        pass

    @abstractmethod
    def decompress(self, x: int, odd: bool) -> Any | None:
        """Point with x-coordinate `x` and the requested y parity, or None if x is not on the curve."""
        pass

    @abstractmethod
    def inverse(self, value: int) -> int | None:
        """Inverse of `value` modulo the group order, or None if it has none."""
        pass

    @abstractmethod
    def combined_mul(self, generator_mul: int, point_mul: int, point: Any) -> Any:
        """Compute generator_mul * G + point_mul * point."""
        pass

    @abstractmethod
    def is_infinity(self, point: Any) -> bool:
        pass

    @abstractmethod
    def encode_point(self, point: Any, compressed: bool) -> bytes:
        """SEC encoding of a point: 33 bytes compressed, 65 bytes uncompressed."""
        pass

    @abstractmethod
    def sign_digest(self, digest: bytes, secret: int, deterministic: bool) -> tuple[int, int]:
        """Produce a raw (r, s) signature; nonce generation belongs to the backend."""
        pass

    @abstractmethod
    def self_test(self) -> None:
        """Check the backend is usable, raising BackendError if it is not."""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
