"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the card, deck and hand tests.
"""

import random

import pytest

from blackjack_core.common.card import Card, Rank, Suit


@pytest.fixture
def seeded_random():
    """A reproducible random source."""
    return random.Random(20181)


@pytest.fixture
def make_hand_cards():
    """Build cards from ranks, cycling suits so repeated ranks stay distinct."""

    def _make(*ranks):
        suits = list(Suit)
        return [Card(rank, suits[i % len(suits)]) for i, rank in enumerate(ranks)]

    return _make


@pytest.fixture
def ace_of_spades():
    return Card(Rank.ACE, Suit.SPADES)


@pytest.fixture
def king_of_hearts():
    return Card(Rank.KING, Suit.HEARTS)
