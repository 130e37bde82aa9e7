"""Blackjack-specific constants and value mappings."""

from blackjack_core.common.card import Rank

# Highest score a hand may reach without going bust
MAX_LEGAL_SCORE = 21

# An ace counts as either of these
HARD_ACE_VALUE = Rank.ACE.points
SOFT_ACE_VALUE = 1

# Cards in an opening hand
OPENING_HAND_SIZE = 2
