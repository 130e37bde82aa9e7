"""
Verification tools for the blackjack_core package.

This package checks statistical properties of the engine, such as whether
shuffles are uniform.
"""

from blackjack_core.verification.shuffle import (
    ShuffleUniformity,
    check_shuffle_uniformity,
    position_frequencies,
)

__all__ = ["ShuffleUniformity", "check_shuffle_uniformity", "position_frequencies"]
