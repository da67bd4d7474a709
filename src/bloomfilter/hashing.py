import hashlib
from typing import Callable, Iterator, Tuple, Union

FNV32_OFFSET = 2166136261
FNV32_PRIME = 16777619
MASK32 = 0xFFFFFFFF

Key = Union[bytes, bytearray, memoryview, str]
HashPair = Callable[[bytes], Tuple[int, int]]


def to_bytes(item: Key) -> bytes:
    """Normalize a key to the raw bytes that get hashed"""
    if isinstance(item, (bytes, bytearray, memoryview)):
        return bytes(item)
    if isinstance(item, str):
        return item.encode('utf-8')
    raise TypeError(f"unsupported key type: {type(item).__name__}")


def fnv1a_32(data: bytes) -> int:
    """32-bit FNV-1a over raw bytes"""
    h = FNV32_OFFSET
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & MASK32
    return h


def fnv1a_pair(data: bytes) -> Tuple[int, int]:
    """Base hashes as computed by the reference filter.

    Both halves come from the same FNV-1a call on the same input, so
    ``h1 == h2`` and the probe sequence degenerates to ``h * (i + 1)``.
    Kept as the default because the published test vectors (including
    the known FNV-1a collision pairs) depend on it.
    """
    h = fnv1a_32(data)
    return h, h


def independent_pair(data: bytes) -> Tuple[int, int]:
    """Two distinguishable base hashes: FNV-1a and a truncated BLAKE2s"""
    h2 = int.from_bytes(hashlib.blake2s(data).digest()[:4], 'big')
    return fnv1a_32(data), h2


def probe_indexes(h1: int, h2: int, k: int, m: int) -> Iterator[int]:
    """Kirsch-Mitzenmacher probes, wrapped to 32 bits before reducing mod m"""
    for i in range(k):
        yield ((h1 + h2 * i) & MASK32) % m
