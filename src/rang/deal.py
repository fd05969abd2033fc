"""
Two-phase distribution for 4 players and seat/team helpers.

Seats: 0 = South (human, "You"), 1 = East, 2 = North, 3 = West.
Teams: 0 = South/North (seats 0, 2), 1 = East/West (seats 1, 3).
Phase 1 gives deck[0:20] in batches of 5 (seat 0 first); phase 2 gives
deck[20:52] in batches of 8, in the same seat order.
"""
from __future__ import annotations

from .deck import DECK_SIZE, Card, sort_hand
from .errors import InvariantError

NUM_SEATS = 4
FIRST_DEAL_SIZE = 5
SECOND_DEAL_SIZE = 8
FIRST_DEAL_TOTAL = NUM_SEATS * FIRST_DEAL_SIZE  # 20
HAND_SIZE = FIRST_DEAL_SIZE + SECOND_DEAL_SIZE  # 13
HUMAN_SEAT = 0

SEAT_NAMES = ("You", "East", "North", "West")


def partner(seat: int) -> int:
    return (seat + 2) % NUM_SEATS


def team_of(seat: int) -> int:
    """0 for South/North, 1 for East/West."""
    return seat % 2


def next_seat(seat: int) -> int:
    return (seat + 1) % NUM_SEATS


def seat_name(seat: int) -> str:
    return SEAT_NAMES[seat]


def _check_deck(deck: list[Card]) -> None:
    if len(deck) != DECK_SIZE or len(set(deck)) != DECK_SIZE:
        raise InvariantError(f"Deck must hold {DECK_SIZE} distinct cards, got {len(deck)}")


def deal_first(deck: list[Card]) -> list[list[Card]]:
    """First deal: 5 cards to each seat, each hand sorted."""
    _check_deck(deck)
    return [
        sort_hand(deck[seat * FIRST_DEAL_SIZE:(seat + 1) * FIRST_DEAL_SIZE])
        for seat in range(NUM_SEATS)
    ]


def deal_second(deck: list[Card], hands: list[list[Card]]) -> list[list[Card]]:
    """Second deal: append the remaining 32 cards, 8 per seat, and re-sort."""
    _check_deck(deck)
    if len(hands) != NUM_SEATS or any(len(h) != FIRST_DEAL_SIZE for h in hands):
        raise InvariantError("Second deal requires four 5-card hands")
    out: list[list[Card]] = []
    for seat in range(NUM_SEATS):
        start = FIRST_DEAL_TOTAL + seat * SECOND_DEAL_SIZE
        out.append(sort_hand(list(hands[seat]) + deck[start:start + SECOND_DEAL_SIZE]))
    return out
