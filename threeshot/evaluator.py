from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from .cards import Card, Rank
from .models import FiveCardHandPayoutRank, ThreeCardHandRank

MINI_ROYAL_RANKS = [Rank.QUEEN, Rank.KING, Rank.ACE]
ROYAL_RANKS = [Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]
WHEEL_RANKS = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


class HandSizeError(ValueError):
    """Raised when an evaluator receives the wrong number of cards."""


def evaluate_three_card_hand(cards: Sequence[Card]) -> ThreeCardHandRank:
    """Classify a Shot hand. Suited Q-K-A ranks above any other straight flush."""
    if len(cards) != 3:
        raise HandSizeError("Three-card hand must contain exactly 3 cards")

    ranks = _sorted_ranks(cards)
    flush = _is_flush(cards)
    straight = _is_three_card_straight(ranks)

    if flush and ranks == MINI_ROYAL_RANKS:
        return ThreeCardHandRank.MINI_ROYAL
    if flush and straight:
        return ThreeCardHandRank.STRAIGHT_FLUSH
    if ranks[0] == ranks[2]:
        return ThreeCardHandRank.THREE_OF_A_KIND
    if straight:
        return ThreeCardHandRank.STRAIGHT
    if flush:
        return ThreeCardHandRank.FLUSH
    if ranks[0] == ranks[1] or ranks[1] == ranks[2]:
        return ThreeCardHandRank.PAIR
    return ThreeCardHandRank.HIGH_CARD


def evaluate_five_card_hand(cards: Sequence[Card]) -> FiveCardHandPayoutRank:
    """Classify the 5 Shot hand into its payout category."""
    if len(cards) != 5:
        raise HandSizeError("Five-card hand must contain exactly 5 cards")

    ranks = _sorted_ranks(cards)
    flush = _is_flush(cards)
    straight = _is_five_card_straight(ranks)

    counts = Counter(card.rank for card in cards)
    count_values = sorted(counts.values(), reverse=True)
    pairs = [rank for rank, count in counts.items() if count == 2]

    if flush and ranks == ROYAL_RANKS:
        return FiveCardHandPayoutRank.ROYAL_FLUSH
    if flush and straight:
        return FiveCardHandPayoutRank.STRAIGHT_FLUSH
    if count_values[0] == 4:
        return FiveCardHandPayoutRank.FOUR_OF_A_KIND
    if count_values[:2] == [3, 2]:
        return FiveCardHandPayoutRank.FULL_HOUSE
    if flush:
        return FiveCardHandPayoutRank.FLUSH
    if straight:
        return FiveCardHandPayoutRank.STRAIGHT
    if count_values[0] == 3:
        return FiveCardHandPayoutRank.THREE_OF_A_KIND
    if len(pairs) == 2:
        return FiveCardHandPayoutRank.TWO_PAIR
    if len(pairs) == 1 and pairs[0] >= Rank.TEN:
        return FiveCardHandPayoutRank.PAIR_TENS_OR_BETTER
    return FiveCardHandPayoutRank.ALL_OTHER


def _sorted_ranks(cards: Sequence[Card]) -> List[Rank]:
    return sorted(card.rank for card in cards)


def _is_flush(cards: Sequence[Card]) -> bool:
    return len({card.suit for card in cards}) == 1


def _is_three_card_straight(ranks: List[Rank]) -> bool:
    r0, r1, r2 = ranks
    if r0 == r1 or r1 == r2:
        return False
    if r0 + 1 == r1 and r1 + 1 == r2:
        return True
    # A-2-3 plays the Ace low.
    return ranks == [Rank.TWO, Rank.THREE, Rank.ACE] or ranks == MINI_ROYAL_RANKS


def _is_five_card_straight(ranks: List[Rank]) -> bool:
    if ranks == WHEEL_RANKS:
        return True
    return all(rank == ranks[0] + idx for idx, rank in enumerate(ranks))
