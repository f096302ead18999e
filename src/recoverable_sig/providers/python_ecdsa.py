"""secp256k1 backend built on python-ecdsa."""

import hashlib

import ecdsa
from ecdsa import SECP256k1, SigningKey
from ecdsa.curves import Curve
from ecdsa.ellipticcurve import INFINITY, PointJacobi
from ecdsa.errors import MalformedPointError
from ecdsa.numbertheory import inverse_mod

from recoverable_sig.exceptions import BackendError
from recoverable_sig.providers.base import CurveBackend

SECP256K1_B = 7


def _sigencode_ints(r: int, s: int, order: int) -> tuple[int, int]:
    return r, s


class PythonEcdsaBackend(CurveBackend):
    """python-ecdsa implementation of the curve backend."""

    name = "python-ecdsa"

    def __init__(self, curve: Curve = SECP256k1):
        self._curve = curve

    @property
    def version(self) -> str:
        return ecdsa.__version__

    @property
    def p(self) -> int:
        return self._curve.curve.p()

    @property
    def n(self) -> int:
        return self._curve.order

    @property
    def bits(self) -> int:
        return self._curve.order.bit_length()

    def derive_public_point(self, secret: int) -> PointJacobi:
        return self._curve.generator * secret

    def decompress(self, x: int, odd: bool) -> PointJacobi | None:
        prefix = b"\x03" if odd else b"\x02"
        encoded = prefix + x.to_bytes(self._curve.baselen, "big")
        try:
            return PointJacobi.from_bytes(self._curve.curve, encoded)
        except MalformedPointError:
            return None

    def inverse(self, value: int) -> int | None:
        if value % self.n == 0:
            return None
        return inverse_mod(value, self.n)

    def combined_mul(self, generator_mul: int, point_mul: int, point: PointJacobi) -> PointJacobi:
        return self._curve.generator.mul_add(generator_mul, point, point_mul)

    def is_infinity(self, point: PointJacobi) -> bool:
        return point == INFINITY

    def encode_point(self, point: PointJacobi, compressed: bool) -> bytes:
        return point.to_bytes("compressed" if compressed else "uncompressed")

    def sign_digest(self, digest: bytes, secret: int, deterministic: bool) -> tuple[int, int]:
        key = SigningKey.from_secret_exponent(secret, curve=self._curve, hashfunc=hashlib.sha256)
        if deterministic:
            # RFC 6979 nonce
            return key.sign_digest_deterministic(digest, sigencode=_sigencode_ints, allow_truncate=True)
        return key.sign_digest(digest, sigencode=_sigencode_ints, allow_truncate=True)

    def self_test(self) -> None:
        """Check the curve parameters and basic point arithmetic."""
        curve = self._curve.curve
        if curve.a() != 0 or curve.b() != SECP256K1_B:
            msg = f"Backend curve is not secp256k1: a={curve.a()}, b={curve.b()}"
            raise BackendError(msg, backend=self.name)

        generator = self._curve.generator
        if not self.is_infinity(generator * self.n):
            msg = "Generator does not have the expected order"
            raise BackendError(msg, backend=self.name)

        decompressed = self.decompress(generator.x(), odd=bool(generator.y() & 1))
        if decompressed is None or decompressed != generator:
            msg = "Point decompression does not reproduce the generator"
            raise BackendError(msg, backend=self.name)
