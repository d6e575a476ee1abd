# bitspectrum/constants.py
"""
Bit Spectrum Constants

Shared constants for the Spectrum entity and its operations:

- UINT64_BITS / UINT64_MAX: range accepted by the 64-bit setters/getters
- BIN_PREFIX / HEX_PREFIX: prefixes of the padded text encodings
- BITS_PER_HEX_DIGIT: padding unit of the hex encoding
- MIN_BASE / MAX_BASE / DIGITS: bases and digits accepted by text() and set_string()
- TEXT_CHUNK_DIGITS: digits converted per step for bases that are not powers of two
"""


# =============================================================================
# 64-bit range
# =============================================================================

UINT64_BITS = 64
UINT64_MAX = (1 << UINT64_BITS) - 1


# =============================================================================
# Text encodings
# =============================================================================

BIN_PREFIX = "0b"
HEX_PREFIX = "0x"
BITS_PER_HEX_DIGIT = 4

# base 0 is also accepted by set_string(): the prefix of the text decides
MIN_BASE = 2
MAX_BASE = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Base-10 style int <-> str conversion is capped at 4300 digits by CPython;
# longer text is converted in chunks of this many digits
TEXT_CHUNK_DIGITS = 1000


# =============================================================================
# Weight adjustment
# =============================================================================

# FILL strategy: pre-fill to all ones when target > threshold * length
DEFAULT_FILL_THRESHOLD = 0.5
