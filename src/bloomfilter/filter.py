import abc
import logging
import math
import operator
from typing import Iterable

import numpy as np
import pyarrow as pa

from bloomfilter.errors import InvalidArgument
from bloomfilter.hashing import HashPair, Key, fnv1a_pair, probe_indexes, to_bytes

logger = logging.getLogger(__name__)

WORD_BITS = 32
DEFAULT_PROBES = 4


class MembershipFilter(abc.ABC):
    """Approximate set membership: may answer yes wrongly, never no wrongly."""

    @abc.abstractmethod
    def add(self, item: Key) -> None:
        """Register item as a member"""

    @abc.abstractmethod
    def test(self, item: Key) -> bool:
        """Return True if item is possibly a member"""

    @abc.abstractmethod
    def estimated_fill_ratio(self) -> float:
        """Analytic false positive estimate for the current insert count"""

    def update(self, items: Iterable[Key]):
        for item in items:
            self.add(item)

    def __contains__(self, item: Key) -> bool:
        return self.test(item)


class BloomFilter(MembershipFilter):
    """Insert-only Bloom filter over a fixed array of 32-bit words.

    The ``m``-bit array is packed into ``b = m // 32`` unsigned words held
    in a NumPy ``uint32`` buffer. Every key is reduced to two 32-bit base
    hashes, and ``k = 4`` probe positions are derived from them by double
    hashing (``h1 + i*h2`` with 32-bit wraparound, then ``mod m``). Each
    position addresses word ``(index // 32) % b`` and bit ``index % 32``.

    Queries answer True as soon as any probe bit is found set, so a key
    that was added is always reported. Nothing is ever cleared.

    Attributes:
        m (int): Declared capacity in bits.
        k (int): Number of probe positions per key.
        n (int): Number of ``add`` calls so far, duplicates included.
        b (int): Number of 32-bit words backing the array.
        bits (numpy.ndarray): The ``uint32`` word array, mutated in place.

    Example:
        >>> bf = BloomFilter(1000)
        >>> bf.add("Bess")
        >>> bf.test("Bess")
        True
        >>> "Jane" in bf
        False
        >>> round(bf.estimated_fill_ratio(), 6)
        0.003992

    Sizes that are not a multiple of 32 waste the trailing partial word:
    indexes that land past the last whole word fold back onto the front
    of the array through the bucket modulo.
    """
    def __init__(self, size: int, hash_pair: HashPair = fnv1a_pair):
        if isinstance(size, bool):
            raise TypeError("size must be an integer, not bool")
        size = operator.index(size)
        if size <= 0:
            raise InvalidArgument(f"size must be positive, got {size}")
        if size < WORD_BITS:
            raise InvalidArgument(
                f"size must hold at least one {WORD_BITS}-bit word, got {size}"
            )
        if size % WORD_BITS:
            logger.warning(
                "size %d is not a multiple of %d; the last %d bits are unused",
                size, WORD_BITS, size % WORD_BITS,
            )

        self._m = size
        self._k = DEFAULT_PROBES
        self._n = 0
        self._b = size // WORD_BITS
        self._hash_pair = hash_pair
        self.bits = np.zeros(self._b, dtype=np.uint32)
        logger.debug(
            "bloom filter created: m=%d b=%d k=%d hash=%s",
            self._m, self._b, self._k,
            getattr(hash_pair, '__name__', repr(hash_pair)),
        )

    @property
    def m(self) -> int:
        return self._m

    @property
    def k(self) -> int:
        return self._k

    @property
    def n(self) -> int:
        return self._n

    @property
    def b(self) -> int:
        return self._b

    def _locate(self, item: Key):
        h1, h2 = self._hash_pair(to_bytes(item))
        for index in probe_indexes(h1, h2, self._k, self._m):
            bucket = (index // WORD_BITS) % self._b
            yield bucket, np.uint32(1 << (index % WORD_BITS))

    def add(self, item: Key) -> None:
        """Set every probe bit for item and count the insert"""
        for bucket, mask in self._locate(item):
            self.bits[bucket] |= mask
        self._n += 1

    def test(self, item: Key) -> bool:
        """Check item membership, stopping at the first set probe bit"""
        for bucket, mask in self._locate(item):
            if self.bits[bucket] & mask:
                return True
        return False

    def estimated_fill_ratio(self) -> float:
        """1 - e^(-nk/m), computed from counters only"""
        return 1 - math.exp(-(self._n * self._k) / self._m)

    def set_bit_count(self) -> int:
        """Number of bits actually set across the word array"""
        return int(np.unpackbits(self.bits.view(np.uint8)).sum())

    def to_arrow(self) -> pa.UInt32Array:
        """Read-only Arrow copy of the word array"""
        return pa.array(self.bits.copy(), type=pa.uint32())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(m={self._m}, k={self._k}, n={self._n})"


def new(size: int) -> BloomFilter:
    """Create an empty filter of ``size`` bits using the reference hashing"""
    return BloomFilter(size)
