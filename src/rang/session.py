"""
Table driver for a presentation layer.

One ``GameSession`` owns the ``GameState`` and one strategy per seat.
Computer seats are played synchronously by ``advance()`` until the game waits
on a human seat or the hand is over, so a UI only has to:

  - call an action (``start``, ``bid``, ``select_trump``, ``play``, ``next_hand``)
  - read the query surface (phase, turn, hands, trick, scores, messages...)

Pacing delays between computer turns are a UI concern and are not modelled.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence

from loguru import logger

from . import game
from .agents import HeuristicStrategy, HumanStrategy, Strategy
from .bidding import Bid
from .config import GameConfig
from .deal import HUMAN_SEAT, NUM_SEATS
from .deck import Card, Suit, card_from_id
from .errors import IllegalActionError, InvariantError
from .game import GameEvent, GamePhase, GameState
from .play import Play, is_legal_play
from .scoring import RoundResult
from .trump import TrumpView


class GameSession:
    """
    Public API:
      - start() / reset_hand()    # deal a new hand (same hand number on reset)
      - bid(amount, seat=0)
      - select_trump(suit, seat=0)
      - play(card, seat=0)        # Card or id such as "10H"
      - next_hand()
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        strategies: Optional[Sequence[Strategy]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.state: GameState = game.new_game(self.config, rng)
        if strategies is None:
            strategies = [
                HumanStrategy() if seat in self.config.human_seats else HeuristicStrategy()
                for seat in range(NUM_SEATS)
            ]
        if len(strategies) != NUM_SEATS:
            raise ValueError(f"Expected {NUM_SEATS} strategies, got {len(strategies)}")
        self.strategies: List[Strategy] = list(strategies)

    # ---- Actions ----

    def start(self) -> GameState:
        game.start_hand(self.state)
        self.advance()
        return self.state

    reset_hand = start

    def next_hand(self) -> GameState:
        game.next_hand(self.state)
        self.advance()
        return self.state

    def bid(self, amount: int, seat: int = HUMAN_SEAT) -> GameState:
        self._require_input_seat(seat)
        game.submit_bid(self.state, seat, amount)
        self.advance()
        return self.state

    def select_trump(self, suit: Suit | str, seat: int = HUMAN_SEAT) -> GameState:
        self._require_input_seat(seat)
        game.submit_trump(self.state, seat, suit)
        self.advance()
        return self.state

    def play(self, card: Card | str, seat: int = HUMAN_SEAT) -> GameState:
        self._require_input_seat(seat)
        game.submit_play(self.state, seat, card)
        self.advance()
        return self.state

    def play_hand(self) -> RoundResult:
        """Deal and play one full hand; every seat must be computer-driven."""
        if self.state.phase is GamePhase.ROUND_END:
            self.next_hand()
        else:
            self.start()
        if self.state.phase is not GamePhase.ROUND_END or self.state.last_result is None:
            raise InvariantError(f"Hand stopped in phase {self.state.phase.value}, waiting on seat {self.waiting_for}")
        return self.state.last_result

    # ---- Driving computer seats ----

    def is_input_seat(self, seat: int) -> bool:
        return isinstance(self.strategies[seat], HumanStrategy)

    def _require_input_seat(self, seat: int) -> None:
        if not 0 <= seat < NUM_SEATS or not self.is_input_seat(seat):
            raise IllegalActionError(f"Seat {seat} is not controlled by outside input")

    def advance(self, max_steps: int = 10_000) -> None:
        """Let computer seats act until a human seat must act or nobody can."""
        state = self.state
        for _ in range(max_steps):
            seat = game.actor(state)
            if seat is None:
                return
            strategy = self.strategies[seat]
            if state.phase is GamePhase.BIDDING:
                amount = strategy.propose_bid(state, seat)
                if self._pending(seat, amount):
                    return
                game.submit_bid(state, seat, amount)
            elif state.phase is GamePhase.TRUMP_SELECT:
                suit = strategy.choose_trump(state, seat)
                if self._pending(seat, suit):
                    return
                game.submit_trump(state, seat, suit)
            elif state.phase is GamePhase.PLAYING:
                card = strategy.choose_card(state, seat)
                if self._pending(seat, card):
                    return
                if isinstance(card, str):
                    try:
                        card = card_from_id(card)
                    except ValueError:
                        logger.warning("Seat {} proposed unknown card id {!r}", seat, card)
                hand = state.hands[seat]
                if not is_legal_play(card, hand, state.trick):
                    fallback = game.legal_cards(state, seat)[0]
                    logger.warning("Seat {} proposed illegal card {}; playing {} instead", seat, card, fallback)
                    card = fallback
                game.submit_play(state, seat, card)
            else:
                return
        raise InvariantError(f"Computer seats did not settle after {max_steps} actions")

    def _pending(self, seat: int, decision: object) -> bool:
        if decision is not None:
            return False
        if not self.is_input_seat(seat):
            raise InvariantError(f"Strategy for seat {seat} produced no decision")
        return True

    # ---- Query surface ----

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def turn(self) -> int:
        return self.state.turn

    @property
    def waiting_for(self) -> Optional[int]:
        """Seat the game is waiting on (None in Lobby/RoundEnd)."""
        return game.actor(self.state)

    def hand(self, seat: int) -> List[Card]:
        return self.state.hand_of(seat)

    def legal_cards(self, seat: int = HUMAN_SEAT) -> List[Card]:
        return game.legal_cards(self.state, seat)

    def trump_view(self, observer: int = HUMAN_SEAT) -> TrumpView:
        return self.state.trump_view(observer)

    @property
    def trick(self) -> List[Play]:
        return list(self.state.trick)

    @property
    def team_tricks(self) -> tuple[int, int]:
        return (self.state.team_tricks[0], self.state.team_tricks[1])

    @property
    def team_scores(self) -> tuple[int, int]:
        return (self.state.team_scores[0], self.state.team_scores[1])

    @property
    def high_bid(self) -> Bid:
        return self.state.high_bid

    @property
    def bid_winner(self) -> Optional[Bid]:
        return self.state.bid_winner

    @property
    def messages(self) -> List[GameEvent]:
        return list(self.state.messages)


__all__ = ["GameSession"]
