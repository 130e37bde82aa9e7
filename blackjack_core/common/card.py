"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Spades, Hearts, Clubs, and Diamonds.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace. Every rank carries the
fixed number of points it scores in Blackjack.

- `Card`: An immutable playing card made of a rank and a suit. Cards compare
and hash by value, and render as "ACE of SPADES" for display.

This module is part of the `blackjack_core` package, a Blackjack scoring engine.
"""

from enum import Enum, unique
from functools import total_ordering


class InvalidCardError(TypeError):
    """Raised when a card is built from a missing or unknown rank or suit."""


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "♦"

    @property
    def symbol(self) -> str:
        """The unicode pip for the suit."""
        return self.value

    def __str__(self) -> str:
        return self.name


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.

    Values only order the ranks; use `points` for scoring.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def points(self) -> int:
        """The points the rank scores, with the ace at its hard value."""
        return _POINTS[self]

    @property
    def rank_str(self) -> str:
        """A short string representation of the rank."""
        if self in (Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE):
            return self.name[0]
        return str(self.value)

    def __str__(self) -> str:
        return self.name


_POINTS = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.ACE: 11,
}

_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


@total_ordering
class Card:
    """
    Class representing a playing card. This class is a member of a card deck.

    Cards order by rank, then by suit in declaration order.

    >>> card = Card(Rank.ACE, Suit.SPADES)
    >>> print(card)
    ACE of SPADES
    >>> card.points
    11
    >>> card == Card(Rank.ACE, Suit.SPADES)
    True
    >>> sorted([card, Card(Rank.TWO, Suit.HEARTS)])
    [Card(Rank.TWO, Suit.HEARTS), Card(Rank.ACE, Suit.SPADES)]
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank, suit: Suit):
        """
        Initialize a Card instance.

        :param rank: Rank of the card (one of the Rank enums)
        :param suit: Suit of the card (one of the Suit enums)
        :raises InvalidCardError: If either argument is missing or of the wrong type.
        """
        if rank is None:
            raise InvalidCardError("rank must not be None")
        if suit is None:
            raise InvalidCardError("suit must not be None")
        if not isinstance(rank, Rank):
            raise InvalidCardError(f"Invalid rank: {rank!r}")
        if not isinstance(suit, Suit):
            raise InvalidCardError(f"Invalid suit: {suit!r}")
        object.__setattr__(self, "_rank", rank)
        object.__setattr__(self, "_suit", suit)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def points(self) -> int:
        """
        The fixed point value of the card.

        An ace always reports 11 here; whether it counts as 1 is decided by the hand.
        """
        return self._rank.points

    @property
    def is_ace(self) -> bool:
        return self._rank is Rank.ACE

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def _sort_key(self):
        return (self._rank.value, _SUIT_ORDER[self._suit])

    def __lt__(self, other):
        if isinstance(other, Card):
            return self._sort_key() < other._sort_key()
        return NotImplemented

    def __hash__(self):
        return hash((self._rank, self._suit))

    def __reduce__(self):
        return (Card, (self._rank, self._suit))

    def __repr__(self) -> str:
        return f"Card(Rank.{self._rank.name}, Suit.{self._suit.name})"

    def __str__(self) -> str:
        return f"{self._rank} of {self._suit}"
