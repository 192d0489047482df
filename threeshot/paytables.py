from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .models import FiveCardHandPayoutRank, ThreeCardHandRank

HandCategory = Union[ThreeCardHandRank, FiveCardHandPayoutRank]


@dataclass(frozen=True)
class PaytableEntry:
    hand: HandCategory
    payout: int  # to-one multiplier


@dataclass(frozen=True)
class Paytable:
    name: str
    entries: Tuple[PaytableEntry, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        seen = set()
        for entry in self.entries:
            if entry.payout < 0:
                raise ValueError(f"Negative payout for {entry.hand.value}")
            if entry.hand in seen:
                raise ValueError(f"Duplicate paytable entry: {entry.hand.value}")
            seen.add(entry.hand)

    def multiplier(self, hand: HandCategory) -> int:
        """Return the to-one payout for ``hand``; categories not listed lose (0)."""
        for entry in self.entries:
            if entry.hand == hand:
                return entry.payout
        return 0

    def as_payload(self) -> List[Dict[str, object]]:
        return [{"hand": entry.hand.value, "payout": entry.payout} for entry in self.entries]


@dataclass(frozen=True)
class GameConfig:
    name: str
    shot_paytable: Paytable
    five_shot_paytable: Paytable


# Grand Sierra: Pay Table 2 for the three shots, Pay Table 1 for the 5 Shot.
GRAND_SIERRA_SHOT_PAYTABLE = Paytable(
    "Pay Table 2",
    (
        PaytableEntry(ThreeCardHandRank.MINI_ROYAL, 50),
        PaytableEntry(ThreeCardHandRank.STRAIGHT_FLUSH, 30),
        PaytableEntry(ThreeCardHandRank.THREE_OF_A_KIND, 20),
        PaytableEntry(ThreeCardHandRank.STRAIGHT, 4),
        PaytableEntry(ThreeCardHandRank.FLUSH, 2),
        PaytableEntry(ThreeCardHandRank.PAIR, 1),
    ),
)

GRAND_SIERRA_FIVE_SHOT_PAYTABLE = Paytable(
    "Pay Table 1",
    (
        PaytableEntry(FiveCardHandPayoutRank.ROYAL_FLUSH, 500),
        PaytableEntry(FiveCardHandPayoutRank.STRAIGHT_FLUSH, 200),
        PaytableEntry(FiveCardHandPayoutRank.FOUR_OF_A_KIND, 50),
        PaytableEntry(FiveCardHandPayoutRank.FULL_HOUSE, 40),
        PaytableEntry(FiveCardHandPayoutRank.FLUSH, 30),
        PaytableEntry(FiveCardHandPayoutRank.STRAIGHT, 20),
        PaytableEntry(FiveCardHandPayoutRank.THREE_OF_A_KIND, 10),
        PaytableEntry(FiveCardHandPayoutRank.TWO_PAIR, 2),
        PaytableEntry(FiveCardHandPayoutRank.PAIR_TENS_OR_BETTER, 1),
    ),
)

GRAND_SIERRA_CONFIG = GameConfig(
    name="grand_sierra",
    shot_paytable=GRAND_SIERRA_SHOT_PAYTABLE,
    five_shot_paytable=GRAND_SIERRA_FIVE_SHOT_PAYTABLE,
)

PAYTABLE_PRESETS: Dict[str, GameConfig] = {
    GRAND_SIERRA_CONFIG.name: GRAND_SIERRA_CONFIG,
}


def get_game_config(name: str) -> GameConfig:
    try:
        return PAYTABLE_PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown paytable: {name}") from None


def config_payload(config: GameConfig) -> Dict[str, object]:
    return {
        "name": config.name,
        "shot_paytable": config.shot_paytable.as_payload(),
        "five_shot_paytable": config.five_shot_paytable.as_payload(),
    }
