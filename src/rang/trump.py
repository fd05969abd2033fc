"""
Trump concealment.

The bid winner picks trump once per hand. Until a trump card hits the table
only the bid winner can see the suit; the first trump played reveals it to
everybody for the rest of the hand. Visibility is projected per observer on
demand and never stored.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from .bidding import Bid
from .deck import Card, Suit
from .errors import IllegalActionError


@dataclass
class TrumpState:
    suit: Optional[Suit] = None
    revealed: bool = False

    def assign(self, suit: Suit) -> None:
        if self.suit is not None:
            raise IllegalActionError("Trump has already been chosen for this hand")
        self.suit = Suit(suit)
        self.revealed = False

    def is_trump(self, card: Card) -> bool:
        return self.suit is not None and card.suit == self.suit

    def observe_play(self, card: Card) -> bool:
        """Flip ``revealed`` when a trump is played. True only on the revealing play."""
        if self.revealed or not self.is_trump(card):
            return False
        self.revealed = True
        return True


class TrumpView(NamedTuple):
    """What one observer knows: suit is None when hidden (or not chosen yet)."""

    suit: Optional[Suit]
    revealed: bool

    @property
    def hidden(self) -> bool:
        return self.suit is None


def visible_trump(trump: TrumpState, bid_winner: Optional[Bid], observer: int) -> TrumpView:
    if trump.revealed:
        return TrumpView(trump.suit, True)
    if bid_winner is not None and bid_winner.player == observer:
        return TrumpView(trump.suit, False)
    return TrumpView(None, False)


def knows_trump(trump: TrumpState, bid_winner: Optional[Bid], seat: int) -> bool:
    return trump.suit is not None and not visible_trump(trump, bid_winner, seat).hidden
