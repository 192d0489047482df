from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, List, Sequence, TypeVar

RANK_LABELS = "23456789TJQKA"

T = TypeVar("T")


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        return RANK_LABELS[self.value - 2]


class Suit(str, Enum):
    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    @property
    def symbol(self) -> str:
        return {"c": "♣", "d": "♦", "h": "♥", "s": "♠"}[self.value]


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank.label}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"


def create_deck() -> List[Card]:
    """Return a fresh 52-card deck ordered by suit, then rank ascending."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle(cards: Sequence[T], rng: Callable[[], float] = random.random) -> List[T]:
    """Return a shuffled copy of ``cards``; the input is left untouched.

    ``rng`` must return floats in [0, 1). Passing ``random.Random(seed).random``
    makes the permutation reproducible.
    """
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = math.floor(rng() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank_char, suit_char = label[0].upper(), label[1].lower()
    if rank_char not in RANK_LABELS:
        raise ValueError(f"Invalid rank: {label[0]}")
    try:
        suit = Suit(suit_char)
    except ValueError:
        raise ValueError(f"Invalid suit: {label[1]}") from None
    return Card(Rank(RANK_LABELS.index(rank_char) + 2), suit)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
