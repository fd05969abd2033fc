"""
Rang deck: 52 cards (4 suits × 13 ranks), Ace high.
Suit order Spades, Hearts, Clubs, Diamonds is also the hand-sorting order.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


class Suit(IntEnum):
    """Enumeration order is used for hand sorting and trump tie-breaks."""
    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3

    @property
    def letter(self) -> str:
        return "SHCD"[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return "♠♥♣♦"[self]

    @classmethod
    def from_letter(cls, letter: str) -> "Suit":
        idx = "SHCD".find(letter.upper())
        if idx < 0 or len(letter) != 1:
            raise ValueError(f"Unknown suit letter: {letter!r}")
        return cls(idx)


RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
RANK_POWER = {rank: power for power, rank in enumerate(RANKS, start=2)}

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """A single playing card. Identity is rank + suit letter, e.g. "10H"."""

    suit: Suit
    rank: str

    def __post_init__(self) -> None:
        if self.rank not in RANK_POWER:
            raise ValueError(f"Unknown rank: {self.rank!r}")

    @property
    def power(self) -> int:
        """2..14, Ace high."""
        return RANK_POWER[self.rank]

    @property
    def id(self) -> str:
        return f"{self.rank}{self.suit.letter}"

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.symbol}"

    def __repr__(self) -> str:
        return str(self)


def make_deck_52() -> list[Card]:
    """Build the full 52-card deck, suit-major."""
    return [Card(suit=s, rank=r) for s in Suit for r in RANKS]


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a uniformly shuffled copy of ``deck``; the input is not modified."""
    if rng is None:
        rng = random.Random()
    shuffled = list(deck)
    rng.shuffle(shuffled)
    return shuffled


def sort_hand(hand: Iterable[Card]) -> list[Card]:
    """Group by suit (enumeration order), highest power first inside a suit."""
    return sorted(hand, key=lambda c: (int(c.suit), -c.power))


def card_from_id(card_id: str) -> Card:
    """Parse an identifier such as "AS", "10D" or "qh"."""
    card_id = card_id.strip()
    if len(card_id) < 2:
        raise ValueError(f"Invalid card id: {card_id!r}")
    return Card(suit=Suit.from_letter(card_id[-1]), rank=card_id[:-1].upper())


def suit_counts(hand: Iterable[Card]) -> dict[Suit, int]:
    counts = {s: 0 for s in Suit}
    for c in hand:
        counts[c.suit] += 1
    return counts
