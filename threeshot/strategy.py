from __future__ import annotations

from typing import Sequence

from .cards import Card, Rank
from .models import Decision


def baseline_decision(hole_cards: Sequence[Card]) -> Decision:
    """Rough raise/fold rule based only on the two hole cards.

    Raises with anything that can make a paying Shot more often than not:
    pairs, suited cards, near-connectors, and two big cards.
    """
    first, second = hole_cards
    if first.rank == second.rank:
        return Decision.RAISE
    if first.suit == second.suit:
        return Decision.RAISE
    if _rank_gap(first.rank, second.rank) <= 2:
        return Decision.RAISE
    if min(first.rank, second.rank) >= Rank.TEN:
        return Decision.RAISE
    return Decision.FOLD


def _rank_gap(a: Rank, b: Rank) -> int:
    gap = abs(a - b)
    if Rank.ACE in (a, b):
        # Ace also plays low (A-2-3).
        low = min(a, b)
        gap = min(gap, low - 1)
    return gap
