# bitspectrum/operation.py
"""
Spectrum Operations - Pure Functions Over Spectrum Values

None of these functions modify their operands.

Bitwise combinators (return a raw int):
    and_(a, b)      a & b
    or_(a, b)       a | b
    and_not(a, b)   a & ~b
    xor(a, b)       a ^ b

    Operands of different lengths are zero-extended to the longer one, which
    is plain int semantics. Pass strict=True to require equal lengths. The
    result is not re-validated; wrap it with Spectrum.from_int() to get a
    length-checked Spectrum back.

Circular shifts (return a new Spectrum of the same length):
    rsh(s, n)       bits leaving the low end re-enter at the high end
    lsh(s, n)       bits leaving the high end re-enter at the low end

    Shifting by n and by n % length gives the same pattern.

Concatenation (return a new, longer Spectrum):
    merge(x, y)     x in the high bits, y in the low bits

Example:
    >>> a = Spectrum.from_int(64, 0xFFFFFFFF)
    >>> b = Spectrum.from_int(64, 0xFFFFFFFFFFFFFFFF)
    >>> hex(xor(a, b))
    '0xffffffff00000000'
"""

from __future__ import annotations
from functools import reduce
import operator

from .errors import LengthMismatchError, SpectrumError
from .spectrum import Spectrum


# =============================================================================
# BITWISE COMBINATORS
# =============================================================================

def _check_lengths(source: Spectrum, target: Spectrum, strict: bool):
    if strict and source.length != target.length:
        raise LengthMismatchError(source.length, target.length)


def and_(source: Spectrum, target: Spectrum, strict: bool = False) -> int:
    """Bitwise AND of the two values."""
    _check_lengths(source, target, strict)
    return source.big_int() & target.big_int()


def or_(source: Spectrum, target: Spectrum, strict: bool = False) -> int:
    """Bitwise OR of the two values."""
    _check_lengths(source, target, strict)
    return source.big_int() | target.big_int()


def and_not(source: Spectrum, target: Spectrum, strict: bool = False) -> int:
    """Bits set in source and clear in target."""
    _check_lengths(source, target, strict)
    return source.big_int() & ~target.big_int()


def xor(source: Spectrum, target: Spectrum, strict: bool = False) -> int:
    """Bitwise XOR of the two values."""
    _check_lengths(source, target, strict)
    return source.big_int() ^ target.big_int()


# =============================================================================
# CIRCULAR SHIFTS
# =============================================================================

def _rotation(s: Spectrum, n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise SpectrumError(f"shift count must be non-negative, got {n}")
    return n % s.length if s.length else 0


def rsh(s: Spectrum, n: int) -> Spectrum:
    """
    Rotate right by n positions within the declared length.

    Equivalent to n single steps where the least significant bit moves to
    position length - 1 and every other bit moves down by one.
    """
    k = _rotation(s, n)
    if k == 0:
        return s.copy()

    value = s.big_int()
    mask = (1 << s.length) - 1
    return s.copy().set(((value >> k) | (value << (s.length - k))) & mask)


def lsh(s: Spectrum, n: int) -> Spectrum:
    """
    Rotate left by n positions within the declared length.

    Equivalent to n single steps where the bit at position length - 1 moves
    to position 0 and every other bit moves up by one.
    """
    k = _rotation(s, n)
    if k == 0:
        return s.copy()

    value = s.big_int()
    mask = (1 << s.length) - 1
    return s.copy().set(((value << k) | (value >> (s.length - k))) & mask)


# =============================================================================
# CONCATENATION
# =============================================================================

def _concat(high: Spectrum, low: Spectrum) -> Spectrum:
    merged = Spectrum(high.length + low.length, config=high.config)
    return merged.set((high.big_int() << low.length) | low.big_int())


def merge(x: Spectrum, y: Spectrum, *rest: Spectrum) -> Spectrum:
    """
    Concatenate bit patterns, first operand in the most significant bits.

    The result has length x.length + y.length (+ the lengths of any extra
    operands, folded left to right) and takes its config from x.

    Example:
        >>> x = Spectrum.from_string(8, "10101010", 2)
        >>> y = Spectrum.from_string(8, "10011001", 2)
        >>> merge(x, y).text(2)
        '1010101010011001'
    """
    return reduce(_concat, (y,) + rest, x)


__all__ = [
    'and_',
    'or_',
    'and_not',
    'xor',
    'rsh',
    'lsh',
    'merge',
]
