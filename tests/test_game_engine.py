import random

import pytest

from threeshot.cards import parse_cards
from threeshot.game import InvalidWagerError, deal_round, play_round, resolve_round
from threeshot.models import (
    DealtRoundCards,
    Decision,
    FiveCardHandPayoutRank,
    ThreeCardHandRank,
)
from threeshot.paytables import GRAND_SIERRA_FIVE_SHOT_PAYTABLE, GameConfig, Paytable, PaytableEntry

from .helpers import dealt, royal_hearts


def test_deal_round_takes_hole_then_community_from_the_shuffle():
    # rng just under 1 leaves the fresh deck in order.
    cards = deal_round(lambda: 0.9999)
    assert [c.label for c in cards.hole_cards] == ["2c", "3c"]
    assert [c.label for c in cards.community_cards] == ["4c", "5c", "6c"]


def test_deal_round_is_reproducible_and_distinct():
    first = deal_round(random.Random(7).random)
    second = deal_round(random.Random(7).random)
    assert first == second
    assert len(set(first.all_cards)) == 5


def test_raise_settles_all_four_wagers():
    result = play_round(10, 5, decision="raise", pre_dealt=royal_hearts())

    assert result.decision is Decision.RAISE
    assert result.first_shot.rank is ThreeCardHandRank.MINI_ROYAL
    assert (result.first_shot.wager, result.first_shot.payout_multiplier, result.first_shot.winnings) == (10, 50, 500)
    for shot in (result.second_shot, result.third_shot):
        assert shot.rank is ThreeCardHandRank.FLUSH
        assert (shot.wager, shot.payout_multiplier, shot.winnings) == (10, 2, 20)
    assert result.five_shot.rank is FiveCardHandPayoutRank.ROYAL_FLUSH
    assert (result.five_shot.wager, result.five_shot.payout_multiplier, result.five_shot.winnings) == (5, 500, 2500)

    assert result.total_bet == 35
    assert result.total_winnings == 3040
    assert result.total_net == 3005


def test_fold_forfeits_first_shot_but_five_shot_still_pays():
    result = play_round(10, 5, decision=Decision.FOLD, pre_dealt=royal_hearts())

    # Still reported as a Mini Royal, never paid.
    assert result.first_shot.rank is ThreeCardHandRank.MINI_ROYAL
    assert result.first_shot.wager == 10
    assert result.first_shot.payout_multiplier == 0
    assert result.first_shot.winnings == 0

    assert result.second_shot.wager == 0
    assert result.third_shot.wager == 0
    assert result.second_shot.winnings == 0
    assert result.third_shot.winnings == 0
    assert result.second_shot.rank is ThreeCardHandRank.FLUSH

    assert result.five_shot.payout_multiplier == 500
    assert result.five_shot.winnings == 2500

    assert result.total_bet == 15
    assert result.total_winnings == 2500
    assert result.total_net == 2485


def test_round_without_five_shot_bet():
    cards = dealt(["5c", "5d"], ["5h", "2s", "3c"])
    result = resolve_round(cards, 5, decision="raise")

    assert result.first_shot.rank is ThreeCardHandRank.THREE_OF_A_KIND
    assert result.first_shot.winnings == 100
    assert result.second_shot.rank is ThreeCardHandRank.PAIR
    assert result.third_shot.rank is ThreeCardHandRank.PAIR
    assert result.five_shot.rank is FiveCardHandPayoutRank.THREE_OF_A_KIND
    assert result.five_shot.wager == 0
    assert result.five_shot.winnings == 0
    assert result.total_bet == 15
    assert result.total_winnings == 110
    assert result.total_net == 95


def test_shot_hands_share_the_hole_cards():
    cards = dealt(["2d", "9s"], ["Kc", "4h", "Jd"])
    result = resolve_round(cards, 1, decision="raise")
    assert [c.label for c in result.first_shot.hand] == ["2d", "9s", "Kc"]
    assert [c.label for c in result.second_shot.hand] == ["2d", "9s", "4h"]
    assert [c.label for c in result.third_shot.hand] == ["2d", "9s", "Jd"]
    assert [c.label for c in result.five_shot.hand] == ["2d", "9s", "Kc", "4h", "Jd"]
    assert result.total_winnings == 0
    assert result.total_net == -3


def test_losing_fold_costs_only_the_first_shot():
    cards = dealt(["2d", "9s"], ["Kc", "4h", "Jd"])
    result = resolve_round(cards, 10, 0, decision="fold")
    assert result.total_bet == 10
    assert result.total_net == -10


def test_invalid_wagers_fail_before_dealing():
    calls = []

    def rng():
        calls.append(1)
        return 0.5

    with pytest.raises(InvalidWagerError, match="first_shot_bet must be > 0") as first:
        play_round(0, 0, decision="raise", rng=rng)
    assert first.value.field == "first_shot_bet"

    with pytest.raises(InvalidWagerError, match="five_shot_bet cannot be negative") as five:
        play_round(5, -1, decision="raise", rng=rng)
    assert five.value.field == "five_shot_bet"

    assert calls == []


def test_resolve_round_validates_wagers_too():
    with pytest.raises(InvalidWagerError):
        resolve_round(royal_hearts(), -5, decision="raise")
    with pytest.raises(InvalidWagerError, match="integer"):
        resolve_round(royal_hearts(), 2.5, decision="raise")  # type: ignore[arg-type]
    with pytest.raises(InvalidWagerError, match="integer"):
        resolve_round(royal_hearts(), True, decision="raise")  # type: ignore[arg-type]


def test_unknown_decision_is_rejected():
    with pytest.raises(ValueError):
        resolve_round(royal_hearts(), 10, decision="call")


def test_play_round_with_seed_is_reproducible():
    a = play_round(10, 5, decision="raise", rng=random.Random(555).random)
    b = play_round(10, 5, decision="raise", rng=random.Random(555).random)
    assert a == b
    assert a.total_net == a.total_winnings - a.total_bet


def test_pre_dealt_cards_ignore_rng():
    def rng():
        raise AssertionError("rng should not be used")

    result = play_round(10, decision="raise", rng=rng, pre_dealt=royal_hearts())
    assert result.hole_cards == royal_hearts().hole_cards


def test_custom_paytable_config_is_used():
    shots = Paytable("flat", [PaytableEntry(ThreeCardHandRank.FLUSH, 7)])
    config = GameConfig("flat", shots, GRAND_SIERRA_FIVE_SHOT_PAYTABLE)
    result = resolve_round(royal_hearts(), 10, decision="raise", config=config)
    assert result.first_shot.payout_multiplier == 0
    assert result.second_shot.winnings == 70
    assert result.total_winnings == 140


def test_dealt_round_cards_validation():
    with pytest.raises(ValueError, match="distinct"):
        dealt(["Ah", "Kh"], ["Ah", "Jh", "Th"])
    with pytest.raises(ValueError, match="2 hole cards"):
        DealtRoundCards(hole_cards=tuple(parse_cards(["Ah"])), community_cards=tuple(parse_cards(["Qh", "Jh", "Th"])))
    with pytest.raises(ValueError, match="3 community cards"):
        DealtRoundCards(hole_cards=tuple(parse_cards(["Ah", "Kh"])), community_cards=tuple(parse_cards(["Qh", "Jh"])))
