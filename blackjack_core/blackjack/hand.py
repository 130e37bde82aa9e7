"""
Immutable BlackjackHand with best-score search over ace values.
"""

from blackjack_core.blackjack.constants import (
    HARD_ACE_VALUE,
    MAX_LEGAL_SCORE,
    OPENING_HAND_SIZE,
    SOFT_ACE_VALUE,
)
from blackjack_core.common.card import Card
from blackjack_core.common.deck import Deck
from blackjack_core.common.hand import AbstractHand, InvalidHandError

__all__ = ["BlackjackHand", "InvalidHandError", "deal_hand", "hit"]


def _best_score(base_score: int, free_aces: int) -> int:
    """
    Resolve the remaining aces one at a time, trying the hard value first.

    Returns the highest total not over MAX_LEGAL_SCORE, or the lowest total
    when every assignment is over it.
    """
    if free_aces <= 0:
        return base_score
    with_hard_ace = _best_score(base_score + HARD_ACE_VALUE, free_aces - 1)
    if with_hard_ace > MAX_LEGAL_SCORE:
        return _best_score(base_score + SOFT_ACE_VALUE, free_aces - 1)
    return with_hard_ace


class BlackjackHand(AbstractHand):
    """
    A hand in the game of Blackjack.

    A hand always starts with two cards. Hitting returns a new hand and
    leaves this one untouched.

    >>> from blackjack_core.common.card import Rank, Suit
    >>> hand = BlackjackHand(Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.HEARTS))
    >>> hand.best_score()
    21
    >>> hand.is_blackjack
    True
    """

    __slots__ = ()

    def __init__(self, first_card: Card, second_card: Card, *more_cards: Card):
        if first_card is None:
            raise InvalidHandError("first_card must not be None")
        if second_card is None:
            raise InvalidHandError("second_card must not be None")
        super().__init__(first_card, second_card, *more_cards)

    def with_additional_card(self, card: Card) -> "BlackjackHand":
        """Return a new hand holding this hand's cards plus `card`."""
        if card is None:
            raise InvalidHandError("card must not be None")
        return type(self)(*self._cards, card)

    @property
    def _num_aces(self) -> int:
        return sum(1 for card in self._cards if card.is_ace)

    @property
    def _non_ace_value(self) -> int:
        return sum(card.points for card in self._cards if not card.is_ace)

    def best_score(self) -> int:
        """
        Calculate the best score of the hand.

        Each ace counts as 1 or 11. The result is the highest total that does
        not exceed 21. A bust hand reports its lowest total instead, with
        every ace counted as 1.
        """
        return _best_score(self._non_ace_value, self._num_aces)

    def minimum_score(self) -> int:
        """The total with every ace counted as 1."""
        return self._non_ace_value + self._num_aces * SOFT_ACE_VALUE

    @property
    def is_bust(self) -> bool:
        return self.best_score() > MAX_LEGAL_SCORE

    @property
    def is_blackjack(self) -> bool:
        """Determine if the hand is a natural blackjack."""
        return len(self._cards) == OPENING_HAND_SIZE and self.best_score() == MAX_LEGAL_SCORE

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        best = self.best_score()
        return best <= MAX_LEGAL_SCORE and best > self.minimum_score()


def deal_hand(deck: Deck) -> BlackjackHand:
    """Deal the two opening cards from `deck` as a new hand."""
    first_card, second_card = deck.deal(2)
    return BlackjackHand(first_card, second_card)


def hit(deck: Deck, hand: BlackjackHand) -> BlackjackHand:
    """Deal one card from `deck` onto `hand`, returning the extended hand."""
    return hand.with_additional_card(deck.deal())
