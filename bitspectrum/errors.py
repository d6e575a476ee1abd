# bitspectrum/errors.py
"""
Exception taxonomy for bitspectrum.

Every error is raised synchronously, before any state is modified, and can
be handled by the caller. All of them derive from SpectrumError, which is a
ValueError so that generic argument checks keep working.
"""


class SpectrumError(ValueError):
    """Base class for all bitspectrum errors."""


class LengthExceededError(SpectrumError):
    """A value needs more bits than the declared length of the Spectrum."""

    def __init__(self, bit_length: int, length: int):
        self.bit_length = bit_length
        self.length = length
        super().__init__(
            f"value needs {bit_length} bits, Spectrum length is {length}"
        )


class ParseError(SpectrumError):
    """Text does not parse as an unsigned integer in the given base."""

    def __init__(self, text: str, base: int):
        self.text = text
        self.base = base
        super().__init__(f"cannot parse {text!r} in base {base}")


class NotRepresentableError(SpectrumError, OverflowError):
    """A value does not fit in the requested fixed-width representation."""


class LengthMismatchError(SpectrumError):
    """Two Spectrum operands have different declared lengths."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Spectrum lengths differ: {left} != {right}")


class WeightOutOfRangeError(SpectrumError):
    """Requested ones count lies outside [0, length]."""

    def __init__(self, weight: int, length: int):
        self.weight = weight
        self.length = length
        super().__init__(f"ones count must be in [0, {length}], got {weight}")


__all__ = [
    'SpectrumError',
    'LengthExceededError',
    'ParseError',
    'NotRepresentableError',
    'LengthMismatchError',
    'WeightOutOfRangeError',
]
