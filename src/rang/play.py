"""
Trick-taking: legal moves and trick winner.
Follow the lead suit when you can; otherwise anything goes (no obligation to
trump). Trump beats every non-trump card; otherwise the highest card of the
suit currently winning takes the trick.
"""
from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from .deal import NUM_SEATS
from .deck import Card, Suit
from .errors import InvariantError


class Play(NamedTuple):
    player: int
    card: Card


def lead_suit(trick: Sequence[Play]) -> Optional[Suit]:
    return trick[0].card.suit if trick else None


def legal_plays(hand: Sequence[Card], trick: Sequence[Play]) -> list[Card]:
    """Cards from ``hand`` that may be played on ``trick`` (list of plays so far)."""
    led = lead_suit(trick)
    if led is None:
        return list(hand)
    following = [c for c in hand if c.suit == led]
    return following if following else list(hand)


def is_legal_play(card: Card, hand: Sequence[Card], trick: Sequence[Play]) -> bool:
    return card in hand and card in legal_plays(hand, trick)


def _beats(card: Card, best: Card, trump: Optional[Suit]) -> bool:
    """True if ``card`` takes over from the incumbent ``best``."""
    if card.suit == best.suit:
        return card.power > best.power
    return trump is not None and card.suit == trump


def winning_play(trick: Sequence[Play], trump: Optional[Suit]) -> Play:
    """Play currently winning a (possibly incomplete) trick."""
    if not trick:
        raise InvariantError("Cannot determine the winner of an empty trick")
    best = trick[0]
    for p in trick[1:]:
        if _beats(p.card, best.card, trump):
            best = p
    return best


def trick_winner(trick: Sequence[Play], trump: Optional[Suit]) -> int:
    """Seat that wins the trick so far."""
    return winning_play(trick, trump).player


def resolve_trick(trick: Sequence[Play], trump: Optional[Suit]) -> int:
    """Winner of a completed trick; exactly one play per seat is required."""
    if len(trick) != NUM_SEATS or len({p.player for p in trick}) != NUM_SEATS:
        raise InvariantError(f"A trick needs {NUM_SEATS} plays from distinct seats, got {len(trick)}")
    return trick_winner(trick, trump)
