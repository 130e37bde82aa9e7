"""
Blackjack scoring engine.

This package scores Blackjack hands, handling the ace's dual value, and
supplies shuffled standard decks to draw from.
"""

from blackjack_core.blackjack.constants import MAX_LEGAL_SCORE
from blackjack_core.blackjack.hand import BlackjackHand, deal_hand, hit
from blackjack_core.common.card import Card, InvalidCardError, Rank, Suit
from blackjack_core.common.deck import (
    ALL_RANKS,
    ALL_SUITS,
    Deck,
    canonical_order,
    shuffled_deck,
    standard_deck,
)
from blackjack_core.common.hand import InvalidHandError

__all__ = [
    "ALL_RANKS",
    "ALL_SUITS",
    "BlackjackHand",
    "Card",
    "canonical_order",
    "Deck",
    "InvalidCardError",
    "InvalidHandError",
    "MAX_LEGAL_SCORE",
    "Rank",
    "Suit",
    "deal_hand",
    "hit",
    "shuffled_deck",
    "standard_deck",
]
