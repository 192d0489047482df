import dataclasses

import pytest

from threeshot.models import FiveCardHandPayoutRank, ThreeCardHandRank
from threeshot.paytables import (
    GRAND_SIERRA_CONFIG,
    GRAND_SIERRA_FIVE_SHOT_PAYTABLE,
    GRAND_SIERRA_SHOT_PAYTABLE,
    Paytable,
    PaytableEntry,
    config_payload,
    get_game_config,
)


def test_shot_paytable_matches_pay_table_2():
    expected = {
        ThreeCardHandRank.MINI_ROYAL: 50,
        ThreeCardHandRank.STRAIGHT_FLUSH: 30,
        ThreeCardHandRank.THREE_OF_A_KIND: 20,
        ThreeCardHandRank.STRAIGHT: 4,
        ThreeCardHandRank.FLUSH: 2,
        ThreeCardHandRank.PAIR: 1,
        ThreeCardHandRank.HIGH_CARD: 0,
    }
    for rank, payout in expected.items():
        assert GRAND_SIERRA_SHOT_PAYTABLE.multiplier(rank) == payout
    assert [entry.hand for entry in GRAND_SIERRA_SHOT_PAYTABLE.entries] == list(ThreeCardHandRank)[:-1]


def test_five_shot_paytable_matches_pay_table_1():
    expected = {
        FiveCardHandPayoutRank.ROYAL_FLUSH: 500,
        FiveCardHandPayoutRank.STRAIGHT_FLUSH: 200,
        FiveCardHandPayoutRank.FOUR_OF_A_KIND: 50,
        FiveCardHandPayoutRank.FULL_HOUSE: 40,
        FiveCardHandPayoutRank.FLUSH: 30,
        FiveCardHandPayoutRank.STRAIGHT: 20,
        FiveCardHandPayoutRank.THREE_OF_A_KIND: 10,
        FiveCardHandPayoutRank.TWO_PAIR: 2,
        FiveCardHandPayoutRank.PAIR_TENS_OR_BETTER: 1,
        FiveCardHandPayoutRank.ALL_OTHER: 0,
    }
    for rank, payout in expected.items():
        assert GRAND_SIERRA_FIVE_SHOT_PAYTABLE.multiplier(rank) == payout


def test_missing_category_is_a_loss():
    table = Paytable("tiny", [PaytableEntry(ThreeCardHandRank.PAIR, 3)])
    assert table.multiplier(ThreeCardHandRank.PAIR) == 3
    assert table.multiplier(ThreeCardHandRank.MINI_ROYAL) == 0
    assert isinstance(table.entries, tuple)


def test_paytables_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        GRAND_SIERRA_SHOT_PAYTABLE.entries = ()  # type: ignore[misc]


def test_paytable_rejects_negative_and_duplicate_entries():
    with pytest.raises(ValueError, match="Negative payout"):
        Paytable("bad", [PaytableEntry(ThreeCardHandRank.PAIR, -1)])
    with pytest.raises(ValueError, match="Duplicate"):
        Paytable("bad", [PaytableEntry(ThreeCardHandRank.PAIR, 1), PaytableEntry(ThreeCardHandRank.PAIR, 2)])


def test_preset_lookup():
    assert get_game_config("grand_sierra") is GRAND_SIERRA_CONFIG
    with pytest.raises(ValueError, match="Unknown paytable"):
        get_game_config("atlantic_city")


def test_config_payload_lists_entries_in_order():
    payload = config_payload(GRAND_SIERRA_CONFIG)
    assert payload["name"] == "grand_sierra"
    assert payload["shot_paytable"][0] == {"hand": "MINI_ROYAL", "payout": 50}
    assert payload["five_shot_paytable"][-1] == {"hand": "PAIR_TENS_OR_BETTER", "payout": 1}
