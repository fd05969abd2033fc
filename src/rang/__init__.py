"""Rang (Bangladeshi Bridge) rules engine: 4 players, hidden trump, auction from 7."""

__version__ = "0.1.0"

from loguru import logger

# Library logging stays silent until an application (e.g. rang.cli) enables it.
logger.disable("rang")

from .deck import Card, Suit, make_deck_52, shuffle_deck, sort_hand, card_from_id
from .deal import deal_first, deal_second, partner, team_of, seat_name
from .bidding import Bid, AuctionState, AuctionStatus, apply_bid, validate_bid_amount
from .trump import TrumpState, TrumpView, visible_trump, knows_trump
from .play import Play, legal_plays, is_legal_play, trick_winner, resolve_trick
from .scoring import RoundResult, score_round, apply_round_result
from .heuristics import evaluate_hand, propose_bid, choose_trump, choose_card
from .agents import Strategy, HumanStrategy, HeuristicStrategy, RandomStrategy
from .config import GameConfig, SimulationConfig, load_config
from .errors import RangError, IllegalActionError, InvariantError, ConfigError
from .game import (
    GamePhase,
    GameEvent,
    EventKind,
    GameState,
    new_game,
    start_hand,
    submit_bid,
    submit_trump,
    submit_play,
    next_hand,
    legal_cards,
)
from .session import GameSession
