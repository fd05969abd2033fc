"""
Per-seat decision strategies and the generic strategy interface.

The engine asks whichever strategy sits at a seat for that seat's next
decision. A strategy returning ``None`` means "waiting for outside input":
that is how human seats are represented, so the engine never needs to know
who is human.

- HumanStrategy: always pending; actions arrive through ``GameSession``.
- HeuristicStrategy: the rule-based computer player from ``rang.heuristics``.
- RandomStrategy: plays uniformly random legal actions (baseline / testing).
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol

from . import heuristics
from .bidding import MAX_BID, MIN_BID, PASS
from .deck import Card, Suit
from .play import legal_plays

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .game import GameState


class Strategy(Protocol):
    """Decision capability for one seat."""

    def propose_bid(self, state: "GameState", seat: int) -> Optional[int]:
        """Amount 7..13, 0 to pass, or None while waiting for input."""

    def choose_trump(self, state: "GameState", seat: int) -> Optional[Suit]:
        """Trump suit for the bid winner, or None while waiting for input."""

    def choose_card(self, state: "GameState", seat: int) -> Optional[Card | str]:
        """Card (or card id such as "QH") to play, or None while waiting for input."""


class HumanStrategy:
    """Placeholder for a seat whose actions come from the presentation layer."""

    def propose_bid(self, state: "GameState", seat: int) -> Optional[int]:
        return None

    def choose_trump(self, state: "GameState", seat: int) -> Optional[Suit]:
        return None

    def choose_card(self, state: "GameState", seat: int) -> Optional[Card]:
        return None


class HeuristicStrategy:
    def propose_bid(self, state: "GameState", seat: int) -> Optional[int]:
        return heuristics.propose_bid(state.hands[seat], seat, state.high_bid)

    def choose_trump(self, state: "GameState", seat: int) -> Optional[Suit]:
        return heuristics.choose_trump(state.hands[seat])

    def choose_card(self, state: "GameState", seat: int) -> Optional[Card]:
        return heuristics.choose_card(
            state.hands[seat], seat, state.trick, state.trump, state.bid_winner
        )


@dataclass
class RandomStrategy:
    """
    Samples uniformly among legal actions.

    ``bid_probability`` is the chance of trying a raise instead of passing.
    """

    seed: int | None = None
    bid_probability: float = 0.3

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def propose_bid(self, state: "GameState", seat: int) -> Optional[int]:
        low = max(MIN_BID, state.high_bid.amount + 1)
        if low > MAX_BID or self._rng.random() >= self.bid_probability:
            return PASS
        return self._rng.randint(low, MAX_BID)

    def choose_trump(self, state: "GameState", seat: int) -> Optional[Suit]:
        return self._rng.choice(list(Suit))

    def choose_card(self, state: "GameState", seat: int) -> Optional[Card]:
        legal = legal_plays(state.hands[seat], state.trick)
        if not legal:
            raise ValueError("No legal card available for RandomStrategy")
        return self._rng.choice(legal)


__all__ = ["Strategy", "HumanStrategy", "HeuristicStrategy", "RandomStrategy"]
