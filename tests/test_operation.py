"""
Tests for Spectrum operations (bitwise, circular shifts, merge)
"""

import pytest
import numpy as np

from bitspectrum import (
    Spectrum,
    AdjustConfig,
    AdjustStrategy,
    SpectrumError,
    LengthExceededError,
    LengthMismatchError,
    and_,
    or_,
    and_not,
    xor,
    rsh,
    lsh,
    merge,
)


BITS32 = 0xFFFFFFFF
BITS64 = 0xFFFFFFFFFFFFFFFF

PATTERNS = ["11111111", "10101010", "01010101", "00000000"]


@pytest.fixture
def pair64():
    spctr32 = Spectrum(64).set_uint64(BITS32)
    spctr64 = Spectrum(64).set_uint64(BITS64)
    return spctr32, spctr64


def step_rsh(value, length, n):
    """Right rotation one position at a time."""
    for _ in range(n):
        if value & 1:
            value |= 1 << length
        value >>= 1
    return value


def step_lsh(value, length, n):
    """Left rotation one position at a time."""
    for _ in range(n):
        value <<= 1
        if value.bit_length() > length:
            value &= ~(1 << length)
            value |= 1
    return value


class TestBitwise:
    def test_and(self, pair64):
        spctr32, spctr64 = pair64
        assert and_(spctr64, spctr32) == BITS32

    def test_or(self, pair64):
        spctr32, spctr64 = pair64
        assert or_(spctr64, spctr32) == BITS64

    def test_and_not(self):
        spctr32 = Spectrum(64).set_uint64(BITS32)
        spctr64 = Spectrum(64).set_uint64(BITS64 - 1)
        assert and_not(spctr32, spctr64) == 0x00000001
        assert and_not(spctr64, spctr32) == 0xFFFFFFFF00000000

    def test_xor(self, pair64):
        spctr32, spctr64 = pair64
        assert xor(spctr64, spctr32) == 0xFFFFFFFF00000000

    def test_operands_unchanged(self, pair64):
        spctr32, spctr64 = pair64
        for op in (and_, or_, and_not, xor):
            op(spctr32, spctr64)
        assert spctr32.big_int() == BITS32
        assert spctr64.big_int() == BITS64

    def test_mismatched_lengths_zero_extend(self):
        short = Spectrum(8).set(0xFF)
        wide = Spectrum(16).set(0xFF00)
        assert or_(short, wide) == 0xFFFF
        assert and_(short, wide) == 0
        assert xor(wide, short) == 0xFFFF
        assert and_not(wide, short) == 0xFF00

    def test_strict_lengths(self):
        short = Spectrum(8).set(0xFF)
        wide = Spectrum(16).set(0xFF00)
        for op in (and_, or_, and_not, xor):
            with pytest.raises(LengthMismatchError):
                op(short, wide, strict=True)
        assert and_(short, Spectrum(8).set(0x0F), strict=True) == 0x0F

    def test_result_is_not_revalidated(self):
        short = Spectrum(8).set(0xFF)
        wide = Spectrum(16).set(0xFF00)
        result = or_(short, wide)
        with pytest.raises(LengthExceededError):
            Spectrum.from_int(8, result)
        assert Spectrum.from_int(16, result).ones_count() == 16


class TestRotation:
    @pytest.mark.parametrize("op", [rsh, lsh])
    def test_patterns(self, op):
        spctr = Spectrum(8)
        for s in PATTERNS:
            spctr.set_string(s, 2)
            assert op(spctr, 2).bit() == "0b" + s

    def test_single_step(self):
        s = Spectrum.from_string(8, "00000001", 2)
        assert rsh(s, 1).bit() == "0b10000000"
        assert lsh(s, 1).bit() == "0b00000010"
        t = Spectrum.from_string(8, "10000000", 2)
        assert lsh(t, 1).bit() == "0b00000001"
        assert rsh(t, 1).bit() == "0b01000000"

    def test_returns_new_spectrum(self):
        s = Spectrum.from_string(8, "00000011", 2)
        rotated = rsh(s, 1)
        assert rotated is not s
        assert rotated.length == 8
        assert s.bit() == "0b00000011"
        assert rotated.bit() == "0b10000001"

    @pytest.mark.parametrize("op", [rsh, lsh])
    def test_full_turns(self, op):
        rng = np.random.default_rng(4)
        for length in (1, 5, 8, 64, 97):
            s = Spectrum(length)
            s.seed(int(rng.integers(1000)))
            s.adjust_ones_count(int(rng.integers(length + 1)))
            for k in range(4):
                assert op(s, k * length) == s

    @pytest.mark.parametrize("op, reference", [(rsh, step_rsh), (lsh, step_lsh)])
    def test_matches_step_by_step(self, op, reference):
        s = Spectrum(13)
        s.seed(9)
        for n in range(30):
            s.adjust_ones_count(n % 14)
            v = s.big_int()
            assert op(s, n).big_int() == reference(v, 13, n)

    def test_modulo_equivalence(self):
        s = Spectrum.from_int(10, 0b1100100111)
        for n in range(25):
            assert rsh(s, n) == rsh(s, n % 10)
            assert lsh(s, n) == lsh(s, n % 10)

    def test_preserves_weight(self):
        s = Spectrum(100)
        s.seed(1)
        s.adjust_ones_count(37)
        assert rsh(s, 123).ones_count() == 37
        assert lsh(s, 7).ones_count() == 37

    def test_inverse(self):
        s = Spectrum.from_int(16, 0xBEEF)
        assert lsh(rsh(s, 5), 5) == s

    def test_zero_length(self):
        s = Spectrum(0)
        assert rsh(s, 3) == s
        assert lsh(s, 3) == s

    def test_negative_shift(self):
        with pytest.raises(SpectrumError):
            rsh(Spectrum(8), -1)
        with pytest.raises(SpectrumError):
            lsh(Spectrum(8), -1)


class TestMerge:
    def test_merge(self):
        x = Spectrum.from_string(8, "10101010", 2)
        y = Spectrum.from_string(8, "10011001", 2)
        got = merge(x, y)
        assert got.length == 16
        assert got.text(2) == "1010101010011001"

    def test_high_and_low_parts(self):
        x = Spectrum.from_int(5, 0b1)
        y = Spectrum.from_int(11, 0b101)
        got = merge(x, y)
        assert got.length == x.length + y.length
        assert got.big_int() & ((1 << y.length) - 1) == y.big_int()
        assert got.big_int() >> y.length == x.big_int()
        assert got.bit() == "0b00001" + "00000000101"

    def test_operands_unchanged(self):
        x = Spectrum.from_int(4, 0xA)
        y = Spectrum.from_int(4, 0x5)
        merge(x, y)
        assert x.big_int() == 0xA
        assert y.big_int() == 0x5

    def test_merge_many(self):
        parts = [Spectrum.from_int(4, v) for v in (0x1, 0x2, 0x3, 0xF)]
        got = merge(*parts)
        assert got.length == 16
        assert got.hex() == "0x123f"

    def test_merge_zero_length(self):
        x = Spectrum.from_int(8, 0x81)
        assert merge(x, Spectrum(0)) == x
        assert merge(Spectrum(0), x) == x

    def test_merge_takes_config_from_high_operand(self):
        config = AdjustConfig(strategy=AdjustStrategy.SAMPLE)
        x = Spectrum(4, config=config)
        y = Spectrum(4)
        assert merge(x, y).config is config


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
