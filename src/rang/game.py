"""
Hand orchestration: deal 5 → auction → trump → deal 8 → 13 tricks → score.

All mutable data for a game lives in one ``GameState``; every action is a
plain function taking that state, validating first and mutating only when the
action is legal. Dealing phases advance on their own, so callers only ever see
the game waiting in Lobby, Bidding, TrumpSelect, Playing or RoundEnd.
"""
from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional

from loguru import logger

from .bidding import AuctionState, AuctionStatus, Bid, apply_bid, is_raise
from .config import GameConfig
from .deal import (
    HUMAN_SEAT,
    NUM_SEATS,
    deal_first,
    deal_second,
    next_seat,
    seat_name,
    team_of,
)
from .deck import Card, Suit, card_from_id, make_deck_52, shuffle_deck
from .errors import IllegalActionError
from .play import Play, legal_plays, resolve_trick
from .scoring import RoundResult, apply_round_result, score_round
from .trump import TrumpState, TrumpView, visible_trump


class GamePhase(str, Enum):
    LOBBY = "lobby"
    DEALING_1 = "dealing_1"
    BIDDING = "bidding"
    TRUMP_SELECT = "trump_select"
    DEALING_2 = "dealing_2"
    PLAYING = "playing"
    ROUND_END = "round_end"


class EventKind(str, Enum):
    DEAL = "deal"
    BID = "bid"
    PASS = "pass"
    REDEAL = "redeal"
    AUCTION_WON = "auction_won"
    TRUMP_SELECTED = "trump_selected"
    TRUMP_REVEALED = "trump_revealed"
    TRICK_WON = "trick_won"
    ROUND_RESULT = "round_result"


@dataclass(frozen=True)
class GameEvent:
    """Human-readable notice for the table."""

    kind: EventKind
    text: str
    seat: Optional[int] = None


@dataclass
class GameState:
    """Everything about the game in progress: hands, auction, trump, trick and scores."""

    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)
    phase: GamePhase = GamePhase.LOBBY
    hand_number: int = 0
    redeals: int = 0  # all-pass re-deals of the current hand
    turn: int = 0
    deck: list[Card] = field(default_factory=list)
    hands: list[list[Card]] = field(default_factory=lambda: [[] for _ in range(NUM_SEATS)])
    auction: AuctionState = field(default_factory=AuctionState)
    bid_winner: Optional[Bid] = None
    trump: TrumpState = field(default_factory=TrumpState)
    trick: list[Play] = field(default_factory=list)
    completed_tricks: list[tuple[Play, ...]] = field(default_factory=list)
    team_tricks: list[int] = field(default_factory=lambda: [0, 0])
    team_scores: list[int] = field(default_factory=lambda: [0, 0])
    last_result: Optional[RoundResult] = None
    messages: Deque[GameEvent] = field(init=False)

    def __post_init__(self) -> None:
        self.messages = deque(maxlen=self.config.message_limit)

    @property
    def high_bid(self) -> Bid:
        return self.auction.high_bid

    @property
    def cards_played(self) -> int:
        """Cards in completed tricks (the current trick is not included)."""
        return sum(len(t) for t in self.completed_tricks)

    @property
    def last_trick(self) -> Optional[tuple[Play, ...]]:
        return self.completed_tricks[-1] if self.completed_tricks else None

    def trump_view(self, observer: int) -> TrumpView:
        return visible_trump(self.trump, self.bid_winner, observer)

    def hand_of(self, seat: int) -> list[Card]:
        return list(self.hands[seat])


def new_game(config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> GameState:
    config = config or GameConfig()
    if rng is None:
        rng = random.Random(config.seed)
    return GameState(config=config, rng=rng)


def _emit(state: GameState, kind: EventKind, text: str, seat: Optional[int] = None) -> None:
    state.messages.append(GameEvent(kind=kind, text=text, seat=seat))
    logger.debug("[hand {}] {}", state.hand_number, text)


def _require_phase(state: GameState, phase: GamePhase) -> None:
    if state.phase is not phase:
        raise IllegalActionError(f"Action not allowed in phase {state.phase.value} (expected {phase.value})")


def _require_turn(state: GameState, seat: int) -> None:
    if seat != state.turn:
        raise IllegalActionError(f"Not seat {seat}'s turn (turn: seat {state.turn})")


def actor(state: GameState) -> Optional[int]:
    """Seat the game is waiting on, or None in Lobby/RoundEnd."""
    if state.phase in (GamePhase.BIDDING, GamePhase.PLAYING):
        return state.turn
    if state.phase is GamePhase.TRUMP_SELECT and state.bid_winner is not None:
        return state.bid_winner.player
    return None


def legal_cards(state: GameState, seat: int) -> list[Card]:
    if state.phase is not GamePhase.PLAYING or seat != state.turn:
        return []
    return legal_plays(state.hands[seat], state.trick)


# ---- Dealing ----


def start_hand(state: GameState) -> GameState:
    """
    Shuffle a fresh deck and deal the first 5 cards to each seat.
    Also used to reset a hand in progress; team scores are never touched.
    """
    if state.hand_number == 0:
        state.hand_number = 1
    state.phase = GamePhase.DEALING_1
    state.deck = shuffle_deck(make_deck_52(), state.rng)
    state.hands = deal_first(state.deck)
    state.auction = AuctionState()
    state.bid_winner = None
    state.trump = TrumpState()
    state.trick = []
    state.completed_tricks = []
    state.team_tricks = [0, 0]
    state.last_result = None
    _emit(state, EventKind.DEAL, "First 5 cards dealt. Bidding starts.")

    state.phase = GamePhase.BIDDING
    state.turn = state.auction.turn
    return state


def _deal_second_phase(state: GameState) -> None:
    assert state.bid_winner is not None and state.bid_winner.player is not None
    state.phase = GamePhase.DEALING_2
    state.hands = deal_second(state.deck, state.hands)
    logger.debug("[hand {}] second deal done, seat {} leads", state.hand_number, state.bid_winner.player)
    state.phase = GamePhase.PLAYING
    state.turn = state.bid_winner.player


def next_hand(state: GameState) -> GameState:
    _require_phase(state, GamePhase.ROUND_END)
    state.hand_number += 1
    state.redeals = 0
    return start_hand(state)


# ---- Auction ----


def _bid_text(seat: int, amount: int, raised: bool) -> str:
    if seat == HUMAN_SEAT:
        return f"You bid {amount}." if raised else "You passed."
    return f"{seat_name(seat)} bids {amount}." if raised else f"{seat_name(seat)} passes."


def submit_bid(state: GameState, seat: int, amount: int) -> GameState:
    """Bid 7..13 or pass with 0. A bid that does not beat the high bid counts as a pass."""
    _require_phase(state, GamePhase.BIDDING)
    _require_turn(state, seat)
    raised = is_raise(state.auction, amount) if isinstance(amount, int) else False
    status = apply_bid(state.auction, seat, amount)
    _emit(state, EventKind.BID if raised else EventKind.PASS, _bid_text(seat, amount, raised), seat)

    if status is AuctionStatus.WON:
        winner = state.auction.high_bid
        state.bid_winner = winner
        _emit(state, EventKind.AUCTION_WON, f"{seat_name(winner.player)} wins with {winner.amount}!", winner.player)
        state.phase = GamePhase.TRUMP_SELECT
        state.turn = winner.player
    elif status is AuctionStatus.ALL_PASSED:
        state.redeals += 1
        _emit(state, EventKind.REDEAL, "All passed. Re-dealing.")
        start_hand(state)
    else:
        state.turn = state.auction.turn
    return state


# ---- Trump ----


def _coerce_suit(suit: Suit | str | int) -> Suit:
    """Accept a Suit, a letter or name ("H", "hearts"), or an index 0..3."""
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, bool) or not isinstance(suit, (str, int)):
        raise IllegalActionError(f"Unknown suit: {suit!r}")
    try:
        if isinstance(suit, str):
            if len(suit) == 1:
                return Suit.from_letter(suit)
            return Suit[suit.upper()]
        return Suit(suit)
    except (KeyError, ValueError) as e:
        raise IllegalActionError(f"Unknown suit: {suit!r}") from e


def submit_trump(state: GameState, seat: int, suit: Suit | str | int) -> GameState:
    """The bid winner picks trump (hidden), then the second deal completes the hands."""
    _require_phase(state, GamePhase.TRUMP_SELECT)
    assert state.bid_winner is not None
    if seat != state.bid_winner.player:
        raise IllegalActionError(f"Only the bid winner (seat {state.bid_winner.player}) chooses trump")
    chosen = _coerce_suit(suit)
    state.trump.assign(chosen)
    if seat == HUMAN_SEAT:
        text = f"You set Trump: {chosen.label} (Hidden)."
    else:
        text = f"{seat_name(seat)} selected Trump."
    _emit(state, EventKind.TRUMP_SELECTED, text, seat)
    logger.debug("[hand {}] trump is {}", state.hand_number, chosen.label)
    _deal_second_phase(state)
    return state


# ---- Tricks ----


def _resolve_card(state: GameState, seat: int, card: Card | str) -> Card:
    if isinstance(card, str):
        try:
            card = card_from_id(card)
        except ValueError as e:
            raise IllegalActionError(str(e)) from e
    if not isinstance(card, Card):
        raise IllegalActionError(f"Not a card: {card!r}")
    if card not in state.hands[seat]:
        raise IllegalActionError(f"Seat {seat} does not hold {card.id}")
    return card


def submit_play(state: GameState, seat: int, card: Card | str) -> GameState:
    """Play a card (object or id such as "QH") for the seat on turn."""
    _require_phase(state, GamePhase.PLAYING)
    _require_turn(state, seat)
    chosen = _resolve_card(state, seat, card)
    if chosen not in legal_plays(state.hands[seat], state.trick):
        raise IllegalActionError(f"{chosen.id} does not follow the lead suit {state.trick[0].card.suit.label}")

    state.hands[seat].remove(chosen)
    state.trick.append(Play(seat, chosen))
    if state.trump.observe_play(chosen):
        assert state.trump.suit is not None
        _emit(state, EventKind.TRUMP_REVEALED, f"TRUMP REVEALED: {state.trump.suit.label}!", seat)

    if len(state.trick) == NUM_SEATS:
        _finish_trick(state)
    else:
        state.turn = next_seat(seat)
    return state


def _finish_trick(state: GameState) -> None:
    winner = resolve_trick(state.trick, state.trump.suit)
    state.team_tricks[team_of(winner)] += 1
    state.completed_tricks.append(tuple(state.trick))
    state.trick = []
    _emit(state, EventKind.TRICK_WON, f"{seat_name(winner)} takes trick.", winner)

    if all(not h for h in state.hands):
        _end_round(state)
    else:
        state.turn = winner


def _end_round(state: GameState) -> None:
    assert state.bid_winner is not None
    state.phase = GamePhase.ROUND_END
    result = score_round(state.bid_winner, state.team_tricks)
    apply_round_result(state.team_scores, result)
    state.last_result = result
    if result.made:
        text = f"Bidder Team ({seat_name(result.bid_winner)}) WON! (+{result.deltas[result.bid_team]} pts)"
    else:
        text = f"Bidder Team FAILED! (-{result.contract} pts)"
    _emit(state, EventKind.ROUND_RESULT, text, result.bid_winner)
    logger.debug("[hand {}] tricks {} scores {}", state.hand_number, state.team_tricks, state.team_scores)
