"""
This module builds the standard 52-card deck and shuffled copies of it.

>>> len(standard_deck())
52
>>> import random
>>> shuffled_deck(random.Random(7)) == shuffled_deck(random.Random(7))
True
>>> deck = Deck(random.Random(7))
>>> deck.size
52
>>> card = deck.deal()
>>> deck.size
51
"""

import logging
import random
from typing import FrozenSet, List, Optional, Tuple, Union

from blackjack_core.common.card import Card, Rank, Suit

logger = logging.getLogger("blackjack_core.deck")

ALL_RANKS: FrozenSet[Rank] = frozenset(Rank)
ALL_SUITS: FrozenSet[Suit] = frozenset(Suit)

# Shuffles start from this order so a seeded source reproduces its permutation.
_ORDERED_DECK: Tuple[Card, ...] = tuple(Card(rank, suit) for rank in Rank for suit in Suit)

_STANDARD_DECK: FrozenSet[Card] = frozenset(_ORDERED_DECK)


def canonical_order() -> Tuple[Card, ...]:
    """
    Return the 52 cards in their unshuffled order: by rank, then by suit.
    """
    return _ORDERED_DECK


def standard_deck() -> FrozenSet[Card]:
    """
    Return the read-only set of all 52 distinct cards.

    :return: One card for every combination of a rank and a suit.
    """
    return _STANDARD_DECK


def shuffled_deck(random_source: Optional[random.Random] = None) -> List[Card]:
    """
    Return a new list of the 52 standard cards in shuffled order.

    :param random_source: Anything with a ``shuffle`` method, typically a
                          ``random.Random``. Defaults to ``random.SystemRandom``.
    :return: A list the caller owns and may drain.
    """
    if random_source is None:
        random_source = random.SystemRandom()
    cards = list(_ORDERED_DECK)
    random_source.shuffle(cards)
    logger.debug("Shuffled a %d card deck with %s", len(cards), type(random_source).__name__)
    return cards


class Deck:
    """
    A shuffled deck owned by one game session.

    Dealt cards are removed, so the same card is never dealt twice.
    """

    def __init__(self, random_source: Optional[random.Random] = None):
        """
        Initialize a Deck instance.

        :param random_source: Source used for this deck's shuffles (optional).
        """
        self.random_source = random_source if random_source is not None else random.SystemRandom()
        self._cards: List[Card] = shuffled_deck(self.random_source)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """The cards left in the deck, next card to be dealt last."""
        return tuple(self._cards)

    def deal(self, num_cards=1) -> Union[Card, List[Card]]:
        """
        Pop n cards from the deck.

        :return: A card instance or a list of card instances.
        :raises IndexError: If the deck holds fewer than `num_cards` cards.
                            The deck is left unchanged.
        """
        if num_cards > len(self._cards):
            raise IndexError(
                f"Cannot deal {num_cards} cards from a deck of {len(self._cards)}"
            )
        if num_cards == 1:
            card = self._cards.pop()
            logger.debug("Dealt %s, %d cards left", card, len(self._cards))
            return card
        return [self.deal() for _ in range(num_cards)]

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self._cards)

    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def reset(self):
        """
        Reset the deck with a fresh shuffle of all 52 cards.
        """
        self._cards = shuffled_deck(self.random_source)
        logger.debug("Deck reset")

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self._cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self._cards)} cards"
