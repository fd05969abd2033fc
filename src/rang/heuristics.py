"""
Rule-of-thumb decisions for computer seats: bidding, trump choice, card play.

Hands are expected in ``sort_hand`` order, so within a suit the first card is
the highest and the last card the lowest.

Bidding (on the 5-card first deal):
1) High-card points: J=1, Q=2, K=3, A=4.
2) Potential = 6, + (longest suit - 2) if it has 3+ cards, +1 at 6+ HCP, +1 at 9+ HCP.
3) Partner holds the high bid: raise by one only if potential beats it by more than 1.
4) Otherwise bid the potential if it beats the high bid, but never above 9 on less than 10 HCP.

Card play:
- Lead: knowing trump with 4+ trumps, lead the lowest trump; else the first card in hand.
- Follow suit: partner winning -> lowest of the suit; else the weakest card that beats
  the best lead-suit card on the table, or the lowest of the suit.
- Void: lowest trump if any, else the last card in hand.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from .bidding import MAX_BID, PASS, Bid
from .deal import partner
from .deck import Card, Suit, suit_counts
from .play import Play, is_legal_play, lead_suit, legal_plays, winning_play
from .trump import TrumpState, knows_trump

BASE_POTENTIAL = 6
HCP_STEPS = (6, 9)
HIGH_BID_GUARD = 9
HIGH_BID_MIN_HCP = 10
TRUMP_LEAD_MIN = 4


def high_card_points(hand: Sequence[Card]) -> int:
    return sum(c.power - 10 for c in hand if c.power >= 11)


def longest_suit_count(hand: Sequence[Card]) -> int:
    return max(suit_counts(hand).values(), default=0)


@dataclass(frozen=True)
class HandEvaluation:
    high_card_points: int
    longest_suit: int
    potential: int


def evaluate_hand(hand: Sequence[Card]) -> HandEvaluation:
    hcp = high_card_points(hand)
    longest = longest_suit_count(hand)
    potential = BASE_POTENTIAL
    if longest >= 3:
        potential += longest - 2
    for step in HCP_STEPS:
        if hcp >= step:
            potential += 1
    return HandEvaluation(high_card_points=hcp, longest_suit=longest, potential=potential)


def propose_bid(hand: Sequence[Card], seat: int, high_bid: Bid) -> int:
    """Amount to bid (7..13), or 0 to pass."""
    ev = evaluate_hand(hand)
    amount = PASS
    if high_bid.player == partner(seat):
        if ev.potential > high_bid.amount + 1:
            amount = high_bid.amount + 1
    else:
        if ev.potential > high_bid.amount:
            amount = ev.potential
        if amount > HIGH_BID_GUARD and ev.high_card_points < HIGH_BID_MIN_HCP:
            amount = PASS
    amount = min(amount, MAX_BID)
    if amount <= high_bid.amount:
        return PASS
    return amount


def choose_trump(hand: Sequence[Card]) -> Suit:
    """Longest suit; ties go to the earlier suit (Spades, Hearts, Clubs, Diamonds)."""
    counts = suit_counts(hand)
    best = Suit.SPADES
    for s in Suit:
        if counts[s] > counts[best]:
            best = s
    return best


def _choose_lead(hand: Sequence[Card], seat: int, trump: TrumpState, bid_winner: Optional[Bid]) -> Card:
    trumps = [c for c in hand if trump.is_trump(c)]
    if knows_trump(trump, bid_winner, seat) and len(trumps) >= TRUMP_LEAD_MIN:
        return trumps[-1]
    return hand[0]


def _choose_follow(hand: Sequence[Card], seat: int, trick: Sequence[Play], trump: TrumpState) -> Card:
    led = lead_suit(trick)
    suit_cards = [c for c in hand if c.suit == led]
    trumps = [c for c in hand if trump.is_trump(c)]

    if suit_cards:
        if winning_play(trick, trump.suit).player == partner(seat):
            return suit_cards[-1]
        table_max = max(p.card.power for p in trick if p.card.suit == led)
        winners = [c for c in suit_cards if c.power > table_max]
        return winners[-1] if winners else suit_cards[-1]
    if trumps:
        return trumps[-1]
    return hand[-1]


def choose_card(
    hand: Sequence[Card],
    seat: int,
    trick: Sequence[Play],
    trump: TrumpState,
    bid_winner: Optional[Bid],
) -> Card:
    if not hand:
        raise ValueError("Cannot choose a card from an empty hand")
    if trick:
        card = _choose_follow(hand, seat, trick, trump)
    else:
        card = _choose_lead(hand, seat, trump, bid_winner)

    if not is_legal_play(card, hand, trick):
        fallback = legal_plays(hand, trick)[0]
        logger.warning("Seat {} heuristic picked illegal {}; playing {} instead", seat, card, fallback)
        card = fallback
    return card
