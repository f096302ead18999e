from recoverable_sig.types.compact_types import ChainContext, CompactSignature

__all__ = ["ChainContext", "CompactSignature"]
