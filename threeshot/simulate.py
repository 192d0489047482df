from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from .cards import Card
from .game import deal_round, resolve_round
from .models import Decision, FiveCardHandPayoutRank, ThreeCardHandRank
from .paytables import GRAND_SIERRA_CONFIG, GameConfig
from .strategy import baseline_decision


@dataclass
class SimulationSummary:
    rounds: int = 0
    raises: int = 0
    folds: int = 0
    total_bet: int = 0
    total_winnings: int = 0
    total_net: int = 0
    shot_hits: Counter = field(default_factory=Counter)
    five_shot_hits: Counter = field(default_factory=Counter)

    @property
    def average_net(self) -> float:
        return self.total_net / self.rounds if self.rounds else 0.0

    def as_dict(self) -> dict:
        return {
            "rounds": self.rounds,
            "raises": self.raises,
            "folds": self.folds,
            "total_bet": self.total_bet,
            "total_winnings": self.total_winnings,
            "total_net": self.total_net,
            "average_net": round(self.average_net, 4),
            "shot_hits": {rank.value: self.shot_hits[rank] for rank in ThreeCardHandRank},
            "five_shot_hits": {rank.value: self.five_shot_hits[rank] for rank in FiveCardHandPayoutRank},
        }


def simulate(
    rounds: int,
    first_shot_bet: int,
    five_shot_bet: int = 0,
    seed: Optional[int] = None,
    config: GameConfig = GRAND_SIERRA_CONFIG,
    strategy: Callable[[Sequence[Card]], Decision] = baseline_decision,
) -> SimulationSummary:
    """Play ``rounds`` independent rounds from one seeded generator."""
    if rounds <= 0:
        raise ValueError("rounds must be positive")

    rng = random.Random(seed)
    summary = SimulationSummary()
    for _ in range(rounds):
        cards = deal_round(rng.random)
        decision = strategy(cards.hole_cards)
        result = resolve_round(
            cards, first_shot_bet, five_shot_bet, decision=decision, config=config
        )

        summary.rounds += 1
        if result.decision == Decision.RAISE:
            summary.raises += 1
        else:
            summary.folds += 1
        summary.total_bet += result.total_bet
        summary.total_winnings += result.total_winnings
        summary.total_net += result.total_net
        # Only count hands that actually had money on them.
        for shot in result.shots:
            if shot.wager:
                summary.shot_hits[shot.rank] += 1
        summary.five_shot_hits[result.five_shot.rank] += 1
    return summary
