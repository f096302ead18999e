from pydantic import BaseModel, Field, field_validator

from recoverable_sig.utils import SCALAR_LENGTH

SIGNATURE_LENGTH: int = 65
MAX_RECOVERY_ID: int = 3
LEGACY_V_BASE: int = 27
EIP155_V_OFFSET: int = 35
# largest chain id whose headers still fit in one byte
MAX_CHAIN_ID: int = (0xFF - MAX_RECOVERY_ID - EIP155_V_OFFSET) // 2


def check_chain_id(v: int | None) -> int | None:
    """Validate an EIP-155 chain id; None selects the legacy convention."""
    if v is None:
        return v
    if v < 1:
        msg = "chain_id must be positive"
        raise ValueError(msg)
    if v > MAX_CHAIN_ID:
        msg = f"chain_id must be at most {MAX_CHAIN_ID} to fit a one byte header, got {v}"
        raise ValueError(msg)
    return v


class ChainContext(BaseModel):
    """Selects the header offset used to encode recovery ids."""

    chain_id: int | None = Field(None, description="EIP-155 chain id, None for the legacy 27/28 convention")

    @field_validator("chain_id")
    @classmethod
    def validate_chain_id(cls, v: int | None) -> int | None:
        return check_chain_id(v)

    @property
    def v_base(self) -> int:
        """Offset added to the recovery id to form the header byte."""
        if self.chain_id:
            return EIP155_V_OFFSET + 2 * self.chain_id
        return LEGACY_V_BASE

    @staticmethod
    def is_replayable_v(v: int) -> bool:
        """Whether `v` uses the legacy encoding without replay protection."""
        return v in (LEGACY_V_BASE, LEGACY_V_BASE + 1)

    class Config:
        frozen = True


class CompactSignature(BaseModel):
    """A 65-byte compact signature: header byte, then r and s."""

    v: int = Field(..., ge=0, le=0xFF, description="Header byte")
    r: bytes = Field(..., description="R component of signature")
    s: bytes = Field(..., description="S component of signature")

    @field_validator("r", "s")
    @classmethod
    def validate_length(cls, v: bytes) -> bytes:
        if len(v) != SCALAR_LENGTH:
            msg = f"Length must be 32 bytes, got {len(v)} bytes"
            raise ValueError(msg)
        return v

    def to_bytes(self) -> bytes:
        return bytes([self.v]) + self.r + self.s

    @classmethod
    def from_bytes(cls, data: bytes) -> "CompactSignature":
        """Create signature from its 65-byte wire form."""
        if len(data) != SIGNATURE_LENGTH:
            msg = f"Invalid signature length: {len(data)}"
            raise ValueError(msg)
        return cls(v=data[0], r=data[1:33], s=data[33:65])

    def to_hex(self) -> str:
        """Convert signature to hex string in wire order."""
        return "0x" + self.to_bytes().hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> "CompactSignature":
        """Create signature from hex string in wire order."""
        if hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return cls.from_bytes(bytes.fromhex(hex_str))

    def to_rsv(self) -> str:
        """Convert signature to the r || s || v hex layout used by Ethereum tooling."""
        return "0x" + (self.r + self.s + bytes([self.v])).hex()
