"""
This module contains the immutable base class for a hand of cards.

A hand never changes once built. Games that grow a hand build a new one
from the old cards plus the new card, so earlier snapshots stay valid.

Classes:

AbstractHand: An immutable, ordered hand of cards.
InvalidHandError: Raised when a hand is built from a missing card.
"""
from abc import ABC
from typing import Iterator, Tuple

from blackjack_core.common.card import Card


class InvalidHandError(ValueError):
    """Raised when a hand is built or extended with a missing or foreign card."""


class AbstractHand(ABC):
    """
    An abstract base class for an immutable hand of cards.

    Subclasses add the scoring rules of a particular game.
    """

    __slots__ = ("_cards",)

    def __init__(self, *cards: Card):
        for position, card in enumerate(cards):
            if card is None:
                raise InvalidHandError(f"card at position {position} must not be None")
            if not isinstance(card, Card):
                raise InvalidHandError(f"Invalid card at position {position}: {card!r}")
        self._cards: Tuple[Card, ...] = tuple(cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Returns the cards in the hand, in the order they were dealt."""
        return self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __eq__(self, other):
        if type(other) is type(self):
            return self._cards == other._cards
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self._cards))

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "BlackjackHand(Card(...), ...)".
        """
        return f"{type(self).__name__}({', '.join(repr(card) for card in self._cards)})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            A string in the form "ACE of SPADES, KING of HEARTS".
        """
        return ", ".join(str(card) for card in self._cards)
