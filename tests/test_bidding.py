"""Tests for the auction protocol."""
import random

import pytest

from rang.bidding import (
    FLOOR,
    MAX_BID,
    MIN_BID,
    AuctionState,
    AuctionStatus,
    Bid,
    apply_bid,
)
from rang.errors import IllegalActionError


def _run(amounts):
    auction = AuctionState()
    status = AuctionStatus.OPEN
    for amount in amounts:
        status = apply_bid(auction, auction.turn, amount)
    return auction, status


def test_raise_then_three_passes_closes():
    auction, status = _run([7, 0, 0, 0])
    assert status is AuctionStatus.WON
    assert auction.high_bid == Bid(player=0, amount=7)


def test_auction_can_close_before_everyone_speaks_again():
    # seat 3 raises last; seats 0, 1, 2 pass -> closed on seat 2
    auction, status = _run([7, 0, 0, 8, 0, 0, 0])
    assert status is AuctionStatus.WON
    assert auction.high_bid == Bid(player=3, amount=8)
    assert auction.history[-1] == (2, 0)


def test_all_pass_asks_for_redeal():
    auction, status = _run([0, 0, 0, 0])
    assert status is AuctionStatus.ALL_PASSED
    assert auction.high_bid == FLOOR


def test_three_passes_without_raise_stays_open():
    auction, status = _run([0, 0, 0])
    assert status is AuctionStatus.OPEN
    assert auction.turn == 3


def test_low_bid_is_implicit_pass():
    auction, status = _run([9, 8])
    assert status is AuctionStatus.OPEN
    assert auction.high_bid == Bid(player=0, amount=9)
    assert auction.consecutive_passes == 1


def test_raise_resets_pass_count():
    auction, _ = _run([7, 0, 0, 10])
    assert auction.consecutive_passes == 0
    assert auction.turn == 0


@pytest.mark.parametrize("amount", [-1, 1, 6, 14, True])
def test_invalid_amount_rejected_without_mutation(amount):
    auction = AuctionState()
    with pytest.raises(IllegalActionError):
        apply_bid(auction, 0, amount)
    assert auction.history == []
    assert auction.high_bid == FLOOR
    assert auction.turn == 0


def test_out_of_turn_rejected():
    auction = AuctionState()
    with pytest.raises(IllegalActionError):
        apply_bid(auction, 2, 7)
    assert auction.history == []


def test_random_auctions_winner_beats_every_raise():
    rng = random.Random(11)
    for _ in range(200):
        auction = AuctionState()
        raises = []
        status = AuctionStatus.OPEN
        while status is AuctionStatus.OPEN:
            low = max(MIN_BID, auction.high_bid.amount + 1)
            if low <= MAX_BID and rng.random() < 0.35:
                amount = rng.randint(low, MAX_BID)
                raises.append((auction.turn, amount))
            else:
                amount = 0
            status = apply_bid(auction, auction.turn, amount)
        if status is AuctionStatus.ALL_PASSED:
            assert not raises
            continue
        winner = auction.high_bid
        assert winner.amount >= MIN_BID
        assert raises[-1] == (winner.player, winner.amount)
        assert all(a < winner.amount for _, a in raises[:-1])
