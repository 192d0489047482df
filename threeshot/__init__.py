"""3 Shot Poker engine: cards, hand evaluation, paytables and round settlement."""

from .cards import Card, Rank, Suit, create_deck, parse_cards, parse_label, shuffle
from .evaluator import HandSizeError, evaluate_five_card_hand, evaluate_three_card_hand
from .game import (
    InvalidWagerError,
    PhaseError,
    ThreeShotTable,
    deal_round,
    play_round,
    resolve_round,
)
from .models import (
    DealtRoundCards,
    Decision,
    FiveCardHandPayoutRank,
    FiveShotResult,
    Phase,
    RoundResult,
    ShotResult,
    TableConfig,
    ThreeCardHandRank,
)
from .paytables import GRAND_SIERRA_CONFIG, GameConfig, Paytable, PaytableEntry, get_game_config

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "parse_cards",
    "parse_label",
    "shuffle",
    "HandSizeError",
    "evaluate_five_card_hand",
    "evaluate_three_card_hand",
    "InvalidWagerError",
    "PhaseError",
    "ThreeShotTable",
    "deal_round",
    "play_round",
    "resolve_round",
    "DealtRoundCards",
    "Decision",
    "FiveCardHandPayoutRank",
    "FiveShotResult",
    "Phase",
    "RoundResult",
    "ShotResult",
    "TableConfig",
    "ThreeCardHandRank",
    "GRAND_SIERRA_CONFIG",
    "GameConfig",
    "Paytable",
    "PaytableEntry",
    "get_game_config",
]
