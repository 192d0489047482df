from __future__ import annotations

from typing import Optional, Sequence

from threeshot.cards import Card, parse_cards
from threeshot.game import ThreeShotTable
from threeshot.models import DealtRoundCards, TableConfig


def hand(*labels: str) -> list[Card]:
    return parse_cards(labels)


def dealt(hole: Sequence[str], community: Sequence[str]) -> DealtRoundCards:
    """Build a fixed card set, e.g. dealt(["Ah", "Kh"], ["Qh", "Jh", "Th"])."""
    return DealtRoundCards(hole_cards=tuple(parse_cards(hole)), community_cards=tuple(parse_cards(community)))


def royal_hearts() -> DealtRoundCards:
    # 1st Shot Mini Royal, 2nd/3rd Shot plain flushes, 5 Shot royal flush.
    return dealt(["Ah", "Kh"], ["Qh", "Jh", "Th"])


def create_table(
    *,
    paytable: str = "grand_sierra",
    min_bet: int = 1,
    max_bet: Optional[int] = None,
    seed: Optional[int] = None,
) -> ThreeShotTable:
    return ThreeShotTable(TableConfig(paytable=paytable, min_bet=min_bet, max_bet=max_bet, seed=seed))
