"""
bitspectrum - Fixed-Length Bit Vectors with Controlled Hamming Weight

Generates and manipulates bit patterns of a declared length, for test-vector
and stimulus generation where the number of set bits must be exact.

- Spectrum: length-checked bit vector with a private seedable random source
- operation: AND / OR / AND-NOT / XOR, circular shifts, concatenation
- config: weight adjustment strategies
- errors: exception taxonomy (all derive from SpectrumError)
"""

__version__ = "0.1.0"

from .config import AdjustConfig, AdjustStrategy, DEFAULT_ADJUST_CONFIG
from .errors import (
    SpectrumError,
    LengthExceededError,
    ParseError,
    NotRepresentableError,
    LengthMismatchError,
    WeightOutOfRangeError,
)
from .spectrum import Spectrum
from .operation import and_, or_, and_not, xor, rsh, lsh, merge

__all__ = [
    "Spectrum",
    "AdjustConfig",
    "AdjustStrategy",
    "DEFAULT_ADJUST_CONFIG",
    "SpectrumError",
    "LengthExceededError",
    "ParseError",
    "NotRepresentableError",
    "LengthMismatchError",
    "WeightOutOfRangeError",
    "and_",
    "or_",
    "and_not",
    "xor",
    "rsh",
    "lsh",
    "merge",
]
