from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from .cards import cards_to_labels, create_deck, shuffle
from .evaluator import evaluate_five_card_hand, evaluate_three_card_hand
from .models import (
    DealtRoundCards,
    Decision,
    FiveShotResult,
    Phase,
    RoundResult,
    ShotResult,
    TableConfig,
)
from .paytables import GRAND_SIERRA_CONFIG, GameConfig, config_payload, get_game_config

# Round settlement is pure: cards + wagers + decision in, RoundResult out.
# ThreeShotTable layers the betting -> decision -> resolved flow on top.


class InvalidWagerError(ValueError):
    def __init__(self, field: str, msg: str) -> None:
        super().__init__(msg)
        self.field = field
        self.msg = msg


class PhaseError(RuntimeError):
    pass


def deal_round(rng: Callable[[], float] = random.random) -> DealtRoundCards:
    deck = shuffle(create_deck(), rng)
    h1, h2, c1, c2, c3 = deck[:5]
    return DealtRoundCards(hole_cards=(h1, h2), community_cards=(c1, c2, c3))


def validate_wagers(first_shot_bet: int, five_shot_bet: int) -> None:
    for field, amount in (("first_shot_bet", first_shot_bet), ("five_shot_bet", five_shot_bet)):
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidWagerError(field, f"{field} must be an integer")
    if first_shot_bet <= 0:
        raise InvalidWagerError("first_shot_bet", "first_shot_bet must be > 0")
    if five_shot_bet < 0:
        raise InvalidWagerError("five_shot_bet", "five_shot_bet cannot be negative")


def resolve_round(
    cards: DealtRoundCards,
    first_shot_bet: int,
    five_shot_bet: int = 0,
    *,
    decision: Union[Decision, str],
    config: GameConfig = GRAND_SIERRA_CONFIG,
) -> RoundResult:
    validate_wagers(first_shot_bet, five_shot_bet)
    return _settle(cards, first_shot_bet, five_shot_bet, Decision(decision), config)


def play_round(
    first_shot_bet: int,
    five_shot_bet: int = 0,
    *,
    decision: Union[Decision, str],
    config: GameConfig = GRAND_SIERRA_CONFIG,
    rng: Optional[Callable[[], float]] = None,
    pre_dealt: Optional[DealtRoundCards] = None,
) -> RoundResult:
    """Deal (unless ``pre_dealt`` is given) and settle one round."""
    validate_wagers(first_shot_bet, five_shot_bet)
    decision = Decision(decision)
    cards = pre_dealt if pre_dealt is not None else deal_round(rng or random.random)
    return _settle(cards, first_shot_bet, five_shot_bet, decision, config)


def _settle(
    cards: DealtRoundCards,
    first_shot_bet: int,
    five_shot_bet: int,
    decision: Decision,
    config: GameConfig,
) -> RoundResult:
    h1, h2 = cards.hole_cards
    c1, c2, c3 = cards.community_cards
    raised = decision == Decision.RAISE
    table = config.shot_paytable

    # A fold forfeits the 1st Shot outright; the 2nd and 3rd are never placed.
    shots: List[ShotResult] = []
    for idx, community in enumerate((c1, c2, c3)):
        hand = (h1, h2, community)
        rank = evaluate_three_card_hand(hand)
        wager = first_shot_bet if idx == 0 or raised else 0
        multiplier = 0 if idx == 0 and not raised else table.multiplier(rank)
        shots.append(ShotResult(hand, rank, wager, multiplier, wager * multiplier))

    # The 5 Shot is a side bet and settles whatever the decision.
    five_hand = (h1, h2, c1, c2, c3)
    five_rank = evaluate_five_card_hand(five_hand)
    five_multiplier = config.five_shot_paytable.multiplier(five_rank)
    five_shot = FiveShotResult(five_hand, five_rank, five_shot_bet, five_multiplier, five_shot_bet * five_multiplier)

    total_bet = sum(shot.wager for shot in shots) + five_shot.wager
    total_winnings = sum(shot.winnings for shot in shots) + five_shot.winnings
    return RoundResult(
        decision=decision,
        hole_cards=cards.hole_cards,
        community_cards=cards.community_cards,
        first_shot=shots[0],
        second_shot=shots[1],
        third_shot=shots[2],
        five_shot=five_shot,
        total_bet=total_bet,
        total_winnings=total_winnings,
        total_net=total_winnings - total_bet,
    )


@dataclass
class RoundContext:
    round_id: str
    seed: Optional[int]
    cards: DealtRoundCards
    first_shot_bet: int
    five_shot_bet: int


class ThreeShotTable:
    """Single-player 3 Shot table that walks one round at a time."""

    def __init__(self, config: TableConfig) -> None:
        if config.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if config.max_bet is not None and config.max_bet < config.min_bet:
            raise ValueError("max_bet cannot be below min_bet")
        self.config = config
        self.game_config = get_game_config(config.paytable)
        self.phase = Phase.BETTING
        self.round_counter = 0
        self.round: Optional[RoundContext] = None
        self.last_result: Optional[RoundResult] = None

    def start_round(
        self,
        first_shot_bet: int,
        five_shot_bet: int = 0,
        seed: Optional[int] = None,
        pre_dealt: Optional[DealtRoundCards] = None,
    ) -> RoundContext:
        if self.phase == Phase.DECISION:
            raise PhaseError("Round awaiting decision")
        self._check_limits(first_shot_bet, five_shot_bet)

        if pre_dealt is not None:
            cards = pre_dealt
            seed = None
        else:
            if seed is None:
                seed = self.config.seed
            if seed is None:
                seed = int(time.time() * 1000) & 0xFFFFFFFF
            cards = deal_round(random.Random(seed).random)

        round_id = f"R-{time.strftime('%Y%m%d')}-{self.round_counter:05d}"
        self.round_counter += 1
        self.round = RoundContext(
            round_id=round_id,
            seed=seed,
            cards=cards,
            first_shot_bet=first_shot_bet,
            five_shot_bet=five_shot_bet,
        )
        self.last_result = None
        self.phase = Phase.DECISION
        return self.round

    def apply_decision(self, decision: Union[Decision, str]) -> RoundResult:
        if self.phase != Phase.DECISION or self.round is None:
            raise PhaseError("No round awaiting a decision")
        decision = Decision(decision)
        ctx = self.round
        result = _settle(ctx.cards, ctx.first_shot_bet, ctx.five_shot_bet, decision, self.game_config)
        self.last_result = result
        self.phase = Phase.RESOLVED
        return result

    def _check_limits(self, first_shot_bet: int, five_shot_bet: int) -> None:
        validate_wagers(first_shot_bet, five_shot_bet)
        if first_shot_bet < self.config.min_bet:
            raise InvalidWagerError(
                "first_shot_bet", f"first_shot_bet must be at least {self.config.min_bet}"
            )
        if self.config.max_bet is not None and first_shot_bet > self.config.max_bet:
            raise InvalidWagerError(
                "first_shot_bet", f"first_shot_bet cannot exceed {self.config.max_bet}"
            )

    # Payloads --------------------------------------------------------

    def deal_payload(self) -> Dict[str, object]:
        if self.round is None:
            raise PhaseError("No round dealt")
        ctx = self.round
        return {
            "round_id": ctx.round_id,
            "seed": ctx.seed,
            "phase": self.phase.value,
            "first_shot_bet": ctx.first_shot_bet,
            "five_shot_bet": ctx.five_shot_bet,
            "hole": cards_to_labels(ctx.cards.hole_cards),
        }

    def result_payload(self) -> Dict[str, object]:
        if self.round is None or self.last_result is None:
            raise PhaseError("Round not resolved")
        result = self.last_result
        return {
            "round_id": self.round.round_id,
            "phase": self.phase.value,
            "decision": result.decision.value,
            "hole": cards_to_labels(result.hole_cards),
            "community": cards_to_labels(result.community_cards),
            "shots": [_wager_payload(shot) for shot in result.shots],
            "five_shot": _wager_payload(result.five_shot),
            "total_bet": result.total_bet,
            "total_winnings": result.total_winnings,
            "total_net": result.total_net,
        }

    def state_payload(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "phase": self.phase.value,
            "config": {
                "min_bet": self.config.min_bet,
                "max_bet": self.config.max_bet,
                "paytables": config_payload(self.game_config),
            },
        }
        if self.phase == Phase.DECISION:
            payload["round"] = self.deal_payload()
        elif self.phase == Phase.RESOLVED:
            payload["round"] = self.result_payload()
        return payload


def _wager_payload(result: Union[ShotResult, FiveShotResult]) -> Dict[str, object]:
    return {
        "hand": cards_to_labels(result.hand),
        "rank": result.rank.value,
        "label": result.rank.label,
        "wager": result.wager,
        "payout_multiplier": result.payout_multiplier,
        "winnings": result.winnings,
    }
