"""FNV-1a 32-bit hash families for MinHash signatures."""

FNV1A_OFFSET_32: int = 2166136261
FNV1A_PRIME_32: int = 16777619
_MASK32: int = 0xFFFFFFFF
_MASK64: int = 0xFFFFFFFFFFFFFFFF


def _fnv1a_u32(data: bytes) -> int:
    h = FNV1A_OFFSET_32
    for byte in data:
        h ^= byte
        h = (h * FNV1A_PRIME_32) & _MASK32
    return h


def str_hash32(s: str) -> int:
    """Compute FNV-1a 32-bit hash of a string (UTF-8 bytes)."""
    return _fnv1a_u32(s.encode("utf-8"))


def int_hash32(n: int) -> int:
    """Compute FNV-1a 32-bit hash of an integer.

    The integer is hashed as its 8-byte little-endian two's-complement
    encoding (wider values wrap to 64 bits), so ``1`` and ``"1"`` land in
    different hash families.
    """
    return _fnv1a_u32((n & _MASK64).to_bytes(8, "little"))
