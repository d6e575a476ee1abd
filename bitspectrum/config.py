# bitspectrum/config.py
"""
Weight Adjustment Configuration

Spectrum.adjust_ones_count() can reach its target weight in several ways.
They all end with exactly the requested number of 1-bits, but they differ in
running time and in the distribution of reachable patterns:

    FLIP    Draw a random position, set it (weight too low) or clear it
            (weight too high), repeat until the weight matches. Expected
            O(L log L) draws for extreme targets, no fixed bound.

    FILL    Same loop, but when raising the weight above
            fill_threshold * length the vector is first filled with ones and
            then shrunk. Fewer wasted draws for dense targets; the existing
            1-bits are not preserved.

    SAMPLE  Pick exactly the number of positions that must change among the
            bits that can change (draw without replacement). Always O(L).

Example:
    >>> config = AdjustConfig(strategy=AdjustStrategy.SAMPLE)
    >>> s = Spectrum(64, config=config).adjust_ones_count(8)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_FILL_THRESHOLD


class AdjustStrategy(Enum):
    """Supported weight adjustment algorithms."""
    FLIP = "flip"        # random single-bit set/clear loop
    FILL = "fill"        # pre-fill to all ones, then shrink
    SAMPLE = "sample"    # exact draw without replacement


@dataclass(frozen=True)
class AdjustConfig:
    """
    Immutable weight adjustment settings.

    Attributes:
        strategy: Algorithm used by adjust_ones_count()
        fill_threshold: Fraction of the length above which FILL pre-fills
    """
    strategy: AdjustStrategy = AdjustStrategy.FLIP
    fill_threshold: float = DEFAULT_FILL_THRESHOLD

    def __post_init__(self):
        if not isinstance(self.strategy, AdjustStrategy):
            raise TypeError(f"strategy must be an AdjustStrategy, got {self.strategy!r}")
        if not 0.0 <= self.fill_threshold <= 1.0:
            raise ValueError(
                f"fill_threshold must be in [0, 1], got {self.fill_threshold}"
            )

    def prefills(self, current: int, target: int, length: int) -> bool:
        """True if FILL should start from an all-ones vector."""
        return (
            self.strategy == AdjustStrategy.FILL
            and current < target
            and target > self.fill_threshold * length
        )


DEFAULT_ADJUST_CONFIG = AdjustConfig()


__all__ = [
    'AdjustStrategy',
    'AdjustConfig',
    'DEFAULT_ADJUST_CONFIG',
]
