"""
Statistical validation of deck shuffling.

This module checks that `shuffled_deck` produces uniform permutations. It
counts where each card lands over many shuffles and runs a chi-square
goodness-of-fit test against the uniform expectation.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np
import scipy.stats as stats

from blackjack_core.common.deck import canonical_order, shuffled_deck, standard_deck

logger = logging.getLogger("blackjack_core.verification.shuffle")

DECK_SIZE = len(standard_deck())

# Each row and each column of the position matrix sums to a fixed total,
# which leaves (n - 1) ** 2 free cells.
DEGREES_OF_FREEDOM = (DECK_SIZE - 1) ** 2


@dataclass
class ShuffleUniformity:
    """
    Result of a shuffle uniformity check.

    Attributes:
        trials: Number of shuffles sampled
        chi_square: The chi-square statistic over the position matrix
        p_value: Probability of a statistic at least this large under uniform shuffling
        degrees_of_freedom: Degrees of freedom used for the test
    """

    trials: int
    chi_square: float
    p_value: float
    degrees_of_freedom: int

    def is_uniform(self, alpha: float = 0.01) -> bool:
        """Whether uniformity survives a test at significance level `alpha`."""
        return self.p_value >= alpha

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary."""
        return {
            "trials": self.trials,
            "chi_square": self.chi_square,
            "p_value": self.p_value,
            "degrees_of_freedom": self.degrees_of_freedom,
        }


def position_frequencies(
    trials: int, random_source: Optional[random.Random] = None
) -> np.ndarray:
    """
    Count where each card lands over repeated shuffles.

    Args:
        trials: Number of decks to shuffle
        random_source: Source passed to every shuffle

    Returns:
        A DECK_SIZE x DECK_SIZE matrix whose cell (i, j) counts how often the
        i-th card of an unshuffled deck ended up at position j
    """
    if trials <= 0:
        raise ValueError("trials must be positive")

    index_of = {card: i for i, card in enumerate(canonical_order())}

    counts = np.zeros((DECK_SIZE, DECK_SIZE), dtype=np.int64)
    for _ in range(trials):
        for position, card in enumerate(shuffled_deck(random_source)):
            counts[index_of[card], position] += 1
    return counts


def check_shuffle_uniformity(
    trials: int = 2000, random_source: Optional[random.Random] = None
) -> ShuffleUniformity:
    """
    Test whether shuffles place every card at every position equally often.

    Args:
        trials: Number of decks to shuffle
        random_source: Source passed to every shuffle

    Returns:
        The chi-square statistic and p-value of the test
    """
    counts = position_frequencies(trials, random_source)
    observed = counts.ravel()
    expected = np.full(observed.shape, trials / DECK_SIZE)

    # chisquare uses len(observed) - 1 - ddof degrees of freedom
    ddof = observed.size - 1 - DEGREES_OF_FREEDOM
    chi_square, p_value = stats.chisquare(observed, expected, ddof=ddof)

    result = ShuffleUniformity(
        trials=trials,
        chi_square=float(chi_square),
        p_value=float(p_value),
        degrees_of_freedom=DEGREES_OF_FREEDOM,
    )
    logger.info(
        "Shuffle uniformity over %d trials: chi2=%.2f p=%.4f",
        trials,
        result.chi_square,
        result.p_value,
    )
    return result
