"""Counts of game pieces and the rules that scale them with the player count."""

from __future__ import annotations

TOKEN_COUNT = 40
GEM_TOKEN_COUNT = 7
GOLD_TOKEN_COUNT = 5
HELD_TOKENS_LIMIT = 10

NOBLE_CARD_COUNT = 10

EXPANSION_CARD_COUNT = 90
L1_EXPANSION_CARD_COUNT = 40
L2_EXPANSION_CARD_COUNT = 30
L3_EXPANSION_CARD_COUNT = 20

WINNING_PRESTIGE_POINTS = 15


def gem_tokens_per_pile(player_count: int) -> int:
    """Tokens in each gem pile: three fewer for two players, two fewer for three."""
    if player_count == 2:
        return GEM_TOKEN_COUNT - 3
    if player_count == 3:
        return GEM_TOKEN_COUNT - 2
    return GEM_TOKEN_COUNT


def noble_card_count(player_count: int) -> int:
    """Nobles laid out on the board: one more than the number of players."""
    return player_count + 1