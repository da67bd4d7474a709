"""Fixed-size, insert-only Bloom filter packed into 32-bit words."""

from bloomfilter.errors import InvalidArgument
from bloomfilter.filter import (
    DEFAULT_PROBES,
    WORD_BITS,
    BloomFilter,
    MembershipFilter,
    new,
)
from bloomfilter.hashing import fnv1a_32, fnv1a_pair, independent_pair

__all__ = [
    "DEFAULT_PROBES",
    "WORD_BITS",
    "BloomFilter",
    "InvalidArgument",
    "MembershipFilter",
    "fnv1a_32",
    "fnv1a_pair",
    "independent_pair",
    "new",
]
