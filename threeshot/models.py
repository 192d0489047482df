from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .cards import Card


class Phase(str, Enum):
    BETTING = "BETTING"
    DECISION = "DECISION"
    RESOLVED = "RESOLVED"


class Decision(str, Enum):
    RAISE = "raise"
    FOLD = "fold"


class ThreeCardHandRank(str, Enum):
    """Categories for the 1st/2nd/3rd Shot hands, strongest first."""

    MINI_ROYAL = "MINI_ROYAL"
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"
    THREE_OF_A_KIND = "THREE_OF_A_KIND"
    STRAIGHT = "STRAIGHT"
    FLUSH = "FLUSH"
    PAIR = "PAIR"
    HIGH_CARD = "HIGH_CARD"  # all other: a loss on the shot tables

    @property
    def label(self) -> str:
        return _LABELS[self.value]


class FiveCardHandPayoutRank(str, Enum):
    """Payout categories for the 5 Shot hand, strongest first."""

    ROYAL_FLUSH = "ROYAL_FLUSH"
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"
    FOUR_OF_A_KIND = "FOUR_OF_A_KIND"
    FULL_HOUSE = "FULL_HOUSE"
    FLUSH = "FLUSH"
    STRAIGHT = "STRAIGHT"
    THREE_OF_A_KIND = "THREE_OF_A_KIND"
    TWO_PAIR = "TWO_PAIR"
    PAIR_TENS_OR_BETTER = "PAIR_TENS_OR_BETTER"
    ALL_OTHER = "ALL_OTHER"

    @property
    def label(self) -> str:
        return _LABELS[self.value]


_LABELS = {
    "MINI_ROYAL": "Mini Royal",
    "ROYAL_FLUSH": "Royal Flush",
    "STRAIGHT_FLUSH": "Straight Flush",
    "FOUR_OF_A_KIND": "Four of a Kind",
    "FULL_HOUSE": "Full House",
    "THREE_OF_A_KIND": "Three of a Kind",
    "STRAIGHT": "Straight",
    "FLUSH": "Flush",
    "TWO_PAIR": "Two Pair",
    "PAIR_TENS_OR_BETTER": "Pair Tens or Better",
    "PAIR": "Pair",
    "HIGH_CARD": "High Card",
    "ALL_OTHER": "All Other",
}


@dataclass
class TableConfig:
    paytable: str = "grand_sierra"
    min_bet: int = 1
    max_bet: Optional[int] = None
    seed: Optional[int] = None


@dataclass(frozen=True)
class DealtRoundCards:
    hole_cards: Tuple[Card, Card]
    community_cards: Tuple[Card, Card, Card]

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "hole_cards", tuple(self.hole_cards))
        object.__setattr__(self, "community_cards", tuple(self.community_cards))
        if len(self.hole_cards) != 2:
            raise ValueError("Exactly 2 hole cards required")
        if len(self.community_cards) != 3:
            raise ValueError("Exactly 3 community cards required")
        if len(set(self.all_cards)) != 5:
            raise ValueError("Dealt cards must be distinct")

    @property
    def all_cards(self) -> Tuple[Card, ...]:
        return self.hole_cards + self.community_cards


@dataclass(frozen=True)
class ShotResult:
    hand: Tuple[Card, Card, Card]
    rank: ThreeCardHandRank
    wager: int
    payout_multiplier: int
    winnings: int  # to-one profit, 0 on a loss


@dataclass(frozen=True)
class FiveShotResult:
    hand: Tuple[Card, Card, Card, Card, Card]
    rank: FiveCardHandPayoutRank
    wager: int
    payout_multiplier: int
    winnings: int


@dataclass(frozen=True)
class RoundResult:
    decision: Decision
    hole_cards: Tuple[Card, Card]
    community_cards: Tuple[Card, Card, Card]
    first_shot: ShotResult
    second_shot: ShotResult
    third_shot: ShotResult
    five_shot: FiveShotResult
    total_bet: int
    total_winnings: int
    total_net: int

    @property
    def shots(self) -> Tuple[ShotResult, ShotResult, ShotResult]:
        return (self.first_shot, self.second_shot, self.third_shot)
