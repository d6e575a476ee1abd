# bitspectrum/spectrum.py
"""
Spectrum - Fixed-Length Bit Vector with Controlled Hamming Weight

A Spectrum declares its bit length at construction and protects its value
from unintended changes: the value lives in a private attribute and every
assignment is validated against the declared length before it is committed.

Design principles:
- 0 <= value < 2**length holds after every operation
- Validation precedes mutation: a failed setter leaves the Spectrum untouched
- Getters return copies (Python ints), never references to internal state
- Each Spectrum owns a private numpy Generator; no global random state

Usage:
    s = Spectrum(64)
    s.set_uint64(0xFFFFFFFF)
    s.ones_count()              # 32
    s.hex()                     # '0x00000000ffffffff'

    # Random pattern with exactly 8 ones
    s.seed(1)
    s.adjust_ones_count(8)

    # Random 64-bit value with weight 4, s itself is unchanged
    v = s.random_uint64(4)

Bit numbering:
    Bit 0 is the least significant bit. Text encodings print the most
    significant bit first; to_numpy() returns bit i at index i.
"""

from __future__ import annotations
from typing import Optional, Union
import logging
import operator

import numpy as np

from .config import AdjustConfig, AdjustStrategy, DEFAULT_ADJUST_CONFIG
from .constants import (
    BIN_PREFIX, HEX_PREFIX, BITS_PER_HEX_DIGIT,
    MIN_BASE, MAX_BASE, DIGITS, TEXT_CHUNK_DIGITS, UINT64_MAX,
)
from .errors import (
    SpectrumError,
    LengthExceededError,
    ParseError,
    NotRepresentableError,
    WeightOutOfRangeError,
)


logger = logging.getLogger(__name__)

# format() type codes; other bases go through np.base_repr
_FORMAT_CODES = {2: "b", 8: "o", 10: "d", 16: "x"}

# set_string() with base 0
_PREFIX_BASES = {"0b": 2, "0o": 8, "0x": 16}


# =============================================================================
# BIT ARRAY CONVERSION
# =============================================================================

def _unpack_bits(value: int, length: int) -> np.ndarray:
    """Expand value into a uint8 array of `length` bits, bit i at index i."""
    n_bytes = (length + 7) // 8
    raw = np.frombuffer(value.to_bytes(n_bytes, "little"), dtype=np.uint8)
    return np.unpackbits(raw, bitorder="little")[:length]


def _pack_bits(bits: np.ndarray) -> int:
    """Inverse of _unpack_bits()."""
    packed = np.packbits(bits.astype(np.uint8), bitorder="little")
    return int.from_bytes(packed.tobytes(), "little")


# =============================================================================
# TEXT CONVERSION
# =============================================================================
# CPython refuses int <-> str conversions above 4300 digits unless the base is
# a power of two. Other bases are converted TEXT_CHUNK_DIGITS at a time.

def _check_base(base: int) -> int:
    base = operator.index(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise SpectrumError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")
    return base


def _is_power_of_two(base: int) -> bool:
    return base & (base - 1) == 0


def _small_text(value: int, base: int) -> str:
    code = _FORMAT_CODES.get(base)
    if code is not None:
        return format(value, code)
    return np.base_repr(value, base).lower()


def _int_to_digits(value: int, base: int) -> str:
    """Digits of value in base, most significant first, no length limit."""
    if _is_power_of_two(base):
        return _small_text(value, base)

    unit = base ** TEXT_CHUNK_DIGITS
    chunks = []
    while value >= unit:
        value, low = divmod(value, unit)
        chunks.append(low)
    return _small_text(value, base) + "".join(
        _small_text(low, base).zfill(TEXT_CHUNK_DIGITS) for low in reversed(chunks)
    )


def _digits_to_int(digits: str, base: int) -> int:
    """Inverse of _int_to_digits(); digits must already be validated."""
    if _is_power_of_two(base):
        return int(digits, base)

    x = 0
    for i in range(0, len(digits), TEXT_CHUNK_DIGITS):
        chunk = digits[i:i + TEXT_CHUNK_DIGITS]
        x = x * base ** len(chunk) + int(chunk, base)
    return x


class Spectrum:
    """
    Bit vector of a declared length backed by an arbitrary-precision int.

    Mutate only through set(), set_uint64(), set_string() and
    adjust_ones_count(). Combinators, rotations and merge live in
    bitspectrum.operation and never modify their operands.
    """

    # Class-level default configuration
    _default_config: AdjustConfig = DEFAULT_ADJUST_CONFIG

    def __init__(self, length: int, config: Optional[AdjustConfig] = None):
        """
        Create a Spectrum with value 0.

        Args:
            length: Declared bit length (0 is valid, the value stays 0)
            config: Weight adjustment settings (class default if omitted)
        """
        length = operator.index(length)
        if length < 0:
            raise SpectrumError(f"length must be non-negative, got {length}")

        self._length = length
        self._value = 0
        self._config = config if config is not None else type(self)._default_config
        self._rng = np.random.default_rng()

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, length: int, value: int,
                 config: Optional[AdjustConfig] = None) -> Spectrum:
        """Create a Spectrum of `length` bits holding `value`."""
        return cls(length, config=config).set(value)

    @classmethod
    def from_string(cls, length: int, text: str, base: int = 10,
                    config: Optional[AdjustConfig] = None) -> Spectrum:
        """Create a Spectrum of `length` bits from text in `base`."""
        return cls(length, config=config).set_string(text, base)

    @classmethod
    def from_numpy(cls, bits: Union[np.ndarray, list],
                   config: Optional[AdjustConfig] = None) -> Spectrum:
        """
        Create a Spectrum from a 1-D array of 0/1 values.

        The array length becomes the Spectrum length and element i becomes
        bit i, so from_numpy(s.to_numpy()) == s.
        """
        arr = np.asarray(bits)
        if arr.ndim != 1:
            raise SpectrumError(f"bit array must be 1-D, got shape {arr.shape}")
        if not np.isin(arr, (0, 1)).all():
            raise SpectrumError("bit array may only contain 0 and 1")
        return cls(arr.shape[0], config=config).set(_pack_bits(arr))

    @classmethod
    def get_default_config(cls) -> AdjustConfig:
        """Get the default weight adjustment configuration."""
        return cls._default_config

    @classmethod
    def set_default_config(cls, config: AdjustConfig):
        """
        Set the default weight adjustment configuration.

        Only Spectrum instances created afterwards pick it up.
        """
        cls._default_config = config

    def copy(self) -> Spectrum:
        """
        Independent Spectrum with the same length, value and config.

        The random source is NOT copied: the copy is seeded from OS entropy
        until seed() is called on it.
        """
        dup = type(self)(self._length, config=self._config)
        dup._value = self._value
        return dup

    # -------------------------------------------------------------------------
    # Setters (validated)
    # -------------------------------------------------------------------------

    def _validate(self, x: int) -> int:
        x = operator.index(x)
        if x < 0:
            raise SpectrumError(f"Spectrum values are unsigned, got {x}")
        if x.bit_length() > self._length:
            raise LengthExceededError(x.bit_length(), self._length)
        return x

    def set(self, x: int) -> Spectrum:
        """
        Set the value to x.

        Raises:
            LengthExceededError: x needs more bits than the declared length
            SpectrumError: x is negative
            TypeError: x is not an integer
        """
        self._value = self._validate(x)
        return self

    def set_uint64(self, x: int) -> Spectrum:
        """Set the value from an unsigned 64-bit integer."""
        x = operator.index(x)
        if not 0 <= x <= UINT64_MAX:
            raise NotRepresentableError(f"{x} is not an unsigned 64-bit integer")
        return self.set(x)

    def set_string(self, text: str, base: int = 10) -> Spectrum:
        """
        Set the value from its text representation in `base`.

        Only plain digits are accepted (either case): no sign, whitespace,
        underscores or prefix. With base 0 a '0b', '0o' or '0x' prefix picks
        the base, otherwise the text is decimal. Parse failures are reported
        as ParseError and checked before the length.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        requested = operator.index(base)
        digits = text.lower()
        if requested == 0:
            base = _PREFIX_BASES.get(digits[:2], 10)
            if base != 10:
                digits = digits[2:]
        else:
            base = _check_base(requested)

        if not digits or not set(digits) <= set(DIGITS[:base]):
            raise ParseError(text, requested)
        return self.set(_digits_to_int(digits, base))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Declared bit length."""
        return self._length

    @property
    def config(self) -> AdjustConfig:
        """Weight adjustment configuration of this Spectrum."""
        return self._config

    def ones_count(self) -> int:
        """Number of 1-bits (Hamming weight)."""
        return self._value.bit_count()

    def test_bit(self, i: int) -> int:
        """Value (0 or 1) of bit i, bit 0 being the least significant."""
        i = operator.index(i)
        if not 0 <= i < self._length:
            raise IndexError(f"bit index {i} out of range for length {self._length}")
        return (self._value >> i) & 1

    def uint64(self) -> int:
        """Value as an unsigned 64-bit integer."""
        if self._value > UINT64_MAX:
            raise NotRepresentableError(
                f"value needs {self._value.bit_length()} bits, does not fit in uint64"
            )
        return self._value

    def big_int(self) -> int:
        """Value as a Python int (immutable, safe to hand out)."""
        return self._value

    def to_numpy(self) -> np.ndarray:
        """Bits as a new uint8 array of shape (length,), bit i at index i."""
        return _unpack_bits(self._value, self._length)

    # -------------------------------------------------------------------------
    # Text encodings
    # -------------------------------------------------------------------------

    def bit(self) -> str:
        """Base-2 digits zero-padded to the declared length, prefixed '0b'."""
        return BIN_PREFIX + format(self._value, "b").zfill(self._length)

    def text(self, base: int = 10) -> str:
        """Lowercase digits in `base`, no prefix and no padding."""
        return _int_to_digits(self._value, _check_base(base))

    def hex(self) -> str:
        """Base-16 digits zero-padded to ceil(length / 4), prefixed '0x'."""
        width = -(-self._length // BITS_PER_HEX_DIGIT)
        return HEX_PREFIX + format(self._value, "x").zfill(width)

    # -------------------------------------------------------------------------
    # Randomness
    # -------------------------------------------------------------------------

    def seed(self, seed: int):
        """
        Reseed the private random source.

        Two Spectrum instances reseeded with the same value and driven through
        the same randomized operations produce identical bit patterns. Not
        suitable for cryptographic use.
        """
        seed = operator.index(seed)
        if seed < 0:
            # int64 seeds map onto their two's complement
            seed &= UINT64_MAX
        self._rng = np.random.default_rng(seed)
        logger.debug("Spectrum(length=%d) reseeded with %d", self._length, seed)

    def adjust_ones_count(self, n: int) -> Spectrum:
        """
        Set or clear random bits until exactly n bits are 1.

        The algorithm is chosen by config.strategy (see bitspectrum.config).
        With FLIP and FILL the number of random draws is unbounded: the loop
        terminates with probability 1 and needs O(L log L) draws in
        expectation for extreme targets. SAMPLE always finishes in O(L).

        Args:
            n: Target ones count, 0 <= n <= length

        Returns:
            self, for chaining

        Raises:
            WeightOutOfRangeError: n is outside [0, length]
        """
        n = operator.index(n)
        if not 0 <= n <= self._length:
            raise WeightOutOfRangeError(n, self._length)

        current = self.ones_count()
        if current == n:
            return self

        strategy = self._config.strategy
        if strategy == AdjustStrategy.SAMPLE:
            draws = self._adjust_by_sample(current, n)
        else:
            if self._config.prefills(current, n, self._length):
                self._value = (1 << self._length) - 1
                current = self._length
            draws = self._adjust_by_flip(current, n)

        logger.debug(
            "adjust_ones_count(%d) on length %d: strategy=%s, draws=%d",
            n, self._length, strategy.value, draws,
        )
        return self

    def _adjust_by_flip(self, current: int, n: int) -> int:
        value = self._value
        draws = 0
        while current != n:
            mask = 1 << int(self._rng.integers(self._length))
            draws += 1
            if current < n:
                if not value & mask:
                    value |= mask
                    current += 1
            elif value & mask:
                value &= ~mask
                current -= 1
        self._value = value
        return draws

    def _adjust_by_sample(self, current: int, n: int) -> int:
        bits = self.to_numpy()
        if current < n:
            candidates = np.flatnonzero(bits == 0)
            chosen = self._rng.choice(candidates, size=n - current, replace=False)
            bits[chosen] = 1
        else:
            candidates = np.flatnonzero(bits)
            chosen = self._rng.choice(candidates, size=current - n, replace=False)
            bits[chosen] = 0
        self._value = _pack_bits(bits)
        return len(chosen)

    def random_int(self, n: int) -> int:
        """
        Random value of this length with exactly n ones.

        Works on a throwaway copy, so this Spectrum's value is unchanged. The
        copy draws from a child stream of this Spectrum's generator, which
        makes results reproducible after seed().
        """
        scratch = self.copy()
        scratch._rng = self._rng.spawn(1)[0]
        return scratch.adjust_ones_count(n).big_int()

    def random_uint64(self, n: int) -> int:
        """Like random_int(), but the result must fit in 64 bits."""
        value = self.random_int(n)
        if value > UINT64_MAX:
            raise NotRepresentableError(
                f"value needs {value.bit_length()} bits, does not fit in uint64"
            )
        return value

    # -------------------------------------------------------------------------
    # Python Protocols
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Spectrum):
            return NotImplemented
        return self._length == other._length and self._value == other._value

    # Mutable: equal instances may diverge later
    __hash__ = None

    def __copy__(self) -> Spectrum:
        return self.copy()

    def __deepcopy__(self, memo) -> Spectrum:
        return self.copy()

    def __str__(self) -> str:
        return self.text(10)

    def __repr__(self) -> str:
        return f"Spectrum(length={self._length}, value={self.hex()})"


# Export
__all__ = [
    'Spectrum',
]
