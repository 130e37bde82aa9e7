import random

import numpy as np
import pytest

from blackjack_core.verification.shuffle import (
    DEGREES_OF_FREEDOM,
    ShuffleUniformity,
    check_shuffle_uniformity,
    position_frequencies,
)


class NoShuffle:
    def shuffle(self, cards):
        pass


def test_position_frequencies_shape_and_totals():
    counts = position_frequencies(100, random.Random(3))
    assert counts.shape == (52, 52)
    assert np.all(counts.sum(axis=0) == 100)
    assert np.all(counts.sum(axis=1) == 100)


def test_position_frequencies_without_shuffling():
    counts = position_frequencies(10, NoShuffle())
    assert np.array_equal(counts, np.eye(52, dtype=np.int64) * 10)


def test_position_frequencies_rejects_non_positive_trials():
    with pytest.raises(ValueError):
        position_frequencies(0)


def test_seeded_shuffle_is_uniform():
    result = check_shuffle_uniformity(trials=2000, random_source=random.Random(1234))
    assert isinstance(result, ShuffleUniformity)
    assert result.trials == 2000
    assert result.degrees_of_freedom == DEGREES_OF_FREEDOM == 2601
    assert result.is_uniform(alpha=0.001)


def test_unshuffled_deck_is_not_uniform():
    result = check_shuffle_uniformity(trials=200, random_source=NoShuffle())
    assert not result.is_uniform()
    assert result.p_value < 1e-6


def test_result_to_dict():
    result = ShuffleUniformity(trials=10, chi_square=1.5, p_value=0.5, degrees_of_freedom=4)
    assert result.to_dict() == {
        "trials": 10,
        "chi_square": 1.5,
        "p_value": 0.5,
        "degrees_of_freedom": 4,
    }
