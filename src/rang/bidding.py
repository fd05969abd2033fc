"""
Auction bidding for Rang.

Seat 0 speaks first, then turn rotates every action. A bid must beat the
current high bid (floor 6, so the first real bid is at least 7). Amount 0 is
a pass; any bid that does not beat the high bid counts as a pass too.

- 3 consecutive passes after a raise: the high bidder wins the auction.
- 4 consecutive passes with no raise at all: the hand is re-dealt.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .deal import next_seat
from .errors import IllegalActionError

PASS = 0
FLOOR_BID = 6
MIN_BID = 7
MAX_BID = 13
PASSES_TO_CLOSE = 3
PASSES_TO_REDEAL = 4


@dataclass(frozen=True)
class Bid:
    """player is None only for the floor bid."""

    player: Optional[int]
    amount: int


FLOOR = Bid(player=None, amount=FLOOR_BID)


class AuctionStatus(str, Enum):
    OPEN = "open"
    WON = "won"
    ALL_PASSED = "all_passed"


@dataclass
class AuctionState:
    high_bid: Bid = FLOOR
    consecutive_passes: int = 0
    turn: int = 0
    history: list[tuple[int, int]] = field(default_factory=list)  # (seat, amount), 0 = pass

    @property
    def has_winner(self) -> bool:
        return self.high_bid.player is not None


def validate_bid_amount(amount: int) -> None:
    """Raise IllegalActionError unless amount is 0 (pass) or 7..13."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise IllegalActionError(f"Bid must be an integer, got {amount!r}")
    if amount != PASS and not MIN_BID <= amount <= MAX_BID:
        raise IllegalActionError(f"Bid must be {PASS} (pass) or {MIN_BID}..{MAX_BID}, got {amount}")


def is_raise(auction: AuctionState, amount: int) -> bool:
    return amount > auction.high_bid.amount


def apply_bid(auction: AuctionState, seat: int, amount: int) -> AuctionStatus:
    """
    Record one bid/pass for ``seat`` and return the auction status afterwards.
    The auction is mutated only after all checks pass.
    """
    if seat != auction.turn:
        raise IllegalActionError(f"Seat {seat} bid out of turn (turn: seat {auction.turn})")
    validate_bid_amount(amount)

    auction.history.append((seat, amount))
    if is_raise(auction, amount):
        auction.high_bid = Bid(player=seat, amount=amount)
        auction.consecutive_passes = 0
    else:
        auction.consecutive_passes += 1

    if auction.consecutive_passes >= PASSES_TO_CLOSE and auction.has_winner:
        return AuctionStatus.WON
    if auction.consecutive_passes >= PASSES_TO_REDEAL and not auction.has_winner:
        return AuctionStatus.ALL_PASSED
    auction.turn = next_seat(seat)
    return AuctionStatus.OPEN
