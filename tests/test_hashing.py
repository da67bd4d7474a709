import pytest
from hypothesis import given, strategies as st

from bloomfilter.hashing import (
    FNV32_OFFSET,
    fnv1a_32,
    fnv1a_pair,
    independent_pair,
    probe_indexes,
    to_bytes,
)


class TestFnv1a:
    def test_known_vectors(self):
        assert fnv1a_32(b"") == FNV32_OFFSET
        assert fnv1a_32(b"a") == 0xE40C292C
        assert fnv1a_32(b"foobar") == 0xBF9CF968
        assert fnv1a_32(bytes([0, 0, 0, 100])) == 0x67962129

    def test_known_collisions(self):
        assert fnv1a_32(b"costarring") == fnv1a_32(b"liquid")
        assert fnv1a_32(b"declinate") == fnv1a_32(b"macallums")
        assert fnv1a_32(b"altarage") == fnv1a_32(b"zinke")
        assert fnv1a_32(b"altarages") == fnv1a_32(b"zinkes")

    @given(st.binary())
    def test_fits_in_32_bits(self, data):
        assert 0 <= fnv1a_32(data) <= 0xFFFFFFFF


class TestHashPairs:
    @given(st.binary())
    def test_reference_pair_is_degenerate(self, data):
        h1, h2 = fnv1a_pair(data)
        assert h1 == h2 == fnv1a_32(data)

    @given(st.binary())
    def test_independent_pair_range(self, data):
        h1, h2 = independent_pair(data)
        assert h1 == fnv1a_32(data)
        assert 0 <= h2 <= 0xFFFFFFFF

    def test_independent_pair_differs(self):
        pairs = [independent_pair(w) for w in (b"Bess", b"Jane", b"abc", b"wtf")]
        assert any(h1 != h2 for h1, h2 in pairs)


class TestProbeIndexes:
    def test_wraps_at_32_bits(self):
        assert list(probe_indexes(0xFFFFFFFF, 1, 4, 1000)) == [295, 0, 1, 2]

    def test_reference_positions(self):
        h1, h2 = fnv1a_pair(b"Bess")
        assert list(probe_indexes(h1, h2, 4, 1000)) == [750, 500, 250, 0]

    @given(
        st.integers(0, 0xFFFFFFFF),
        st.integers(0, 0xFFFFFFFF),
        st.integers(1, 1 << 20)
    )
    def test_in_range(self, h1, h2, m):
        for index in probe_indexes(h1, h2, 4, m):
            assert 0 <= index < m


class TestToBytes:
    def test_accepts_bytes_like_and_str(self):
        assert to_bytes(b"ab") == b"ab"
        assert to_bytes(bytearray(b"ab")) == b"ab"
        assert to_bytes(memoryview(b"ab")) == b"ab"
        assert to_bytes("é") == b"\xc3\xa9"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_bytes(42)

# --------------------------
# Running Tests
# --------------------------
#if __name__ == "__main__":
#    pytest.main([
#        "-v",
#        "--hypothesis-show-statistics",
#        "--cov=bloomfilter",
#        "--cov-report=html:coverage"
#    ])
# --------------------------
