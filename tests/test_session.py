"""Tests for GameSession: driving computer seats around a human seat."""
import pytest

from rang.agents import HeuristicStrategy, HumanStrategy
from rang.config import GameConfig
from rang.errors import IllegalActionError, InvariantError
from rang import game
from rang.game import GamePhase
from rang.session import GameSession


class FixedBidder(HeuristicStrategy):
    """Bids ``amount`` whenever it is a raise, otherwise passes; plays heuristically."""

    def __init__(self, amount: int) -> None:
        self.amount = amount

    def propose_bid(self, state, seat):
        return self.amount if self.amount > state.high_bid.amount else 0


class CountingPasser(HeuristicStrategy):
    """Passes the first ``passes`` times asked, then bids 7."""

    def __init__(self, passes: int) -> None:
        self.left = passes

    def propose_bid(self, state, seat):
        if self.left > 0:
            self.left -= 1
            return 0
        return 7 if state.high_bid.amount < 7 else 0


class DiscreetPlayer(FixedBidder):
    """Never plays a trump unless every legal card is one."""

    def choose_card(self, state, seat):
        legal = game.legal_cards(state, seat)
        plain = [c for c in legal if not state.trump.is_trump(c)]
        return (plain or legal)[0]


class IdPlayer(HeuristicStrategy):
    """Answers with card ids instead of Card objects."""

    def choose_card(self, state, seat):
        return super().choose_card(state, seat).id


class SilentBidder(HeuristicStrategy):
    def propose_bid(self, state, seat):
        return None


class SloppyPlayer(HeuristicStrategy):
    """Always tries the last card in hand, legal or not."""

    def choose_card(self, state, seat):
        return state.hands[seat][-1]


def test_computer_only_hand_runs_to_round_end():
    session = GameSession(GameConfig(human_seats=(), seed=5))
    result = session.play_hand()
    assert session.phase is GamePhase.ROUND_END
    assert session.waiting_for is None
    assert sum(session.team_tricks) == 13
    assert session.team_scores == result.deltas
    assert result.contract >= 7


def test_scores_accumulate_over_hands():
    session = GameSession(GameConfig(human_seats=(), seed=6))
    totals = [0, 0]
    for _ in range(4):
        result = session.play_hand()
        totals[0] += result.deltas[0]
        totals[1] += result.deltas[1]
    assert session.state.hand_number == 4
    assert session.team_scores == tuple(totals)


def test_human_seat_plays_full_hand():
    session = GameSession(GameConfig(seed=12))
    session.start()
    for _ in range(2000):
        if session.phase is GamePhase.ROUND_END:
            break
        assert session.waiting_for == 0
        if session.phase is GamePhase.BIDDING:
            session.bid(0)
        elif session.phase is GamePhase.TRUMP_SELECT:
            session.select_trump("S")
        else:
            legal = session.legal_cards()
            assert legal
            session.play(legal[0].id)
    assert session.phase is GamePhase.ROUND_END
    assert all(not session.hand(seat) for seat in range(4))


def test_hidden_trump_for_human_until_played():
    strategies = [HumanStrategy(), DiscreetPlayer(8), DiscreetPlayer(0), DiscreetPlayer(0)]
    session = GameSession(GameConfig(seed=21), strategies=strategies)
    session.start()
    assert session.waiting_for == 0
    session.bid(0)
    # seat 1 raised to 8, seats 2 and 3 passed; the human closes the auction
    assert session.high_bid.player == 1
    session.bid(0)
    assert session.bid_winner.player == 1
    assert session.phase is GamePhase.PLAYING
    assert session.waiting_for == 0
    assert len(session.trick) == 3

    trump = session.state.trump
    assert not any(trump.is_trump(p.card) for p in session.trick)
    assert not trump.revealed
    assert session.trump_view(1).suit is trump.suit
    assert session.trump_view(0).hidden
    assert session.trump_view(2).hidden


def test_actions_for_computer_seats_are_rejected():
    session = GameSession(GameConfig(seed=1))
    session.start()
    with pytest.raises(IllegalActionError):
        session.bid(7, seat=1)
    with pytest.raises(IllegalActionError):
        session.play("AS", seat=5)


def test_redeal_after_four_passes():
    strategies = [CountingPasser(1), CountingPasser(1), CountingPasser(1), CountingPasser(1)]
    session = GameSession(GameConfig(human_seats=(), seed=3), strategies=strategies)
    session.start()
    assert session.state.redeals == 1
    assert session.phase is GamePhase.ROUND_END
    assert session.bid_winner.player == 0
    assert session.bid_winner.amount == 7


def test_illegal_strategy_card_is_replaced():
    strategies = [SloppyPlayer() for _ in range(4)]
    session = GameSession(GameConfig(human_seats=(), seed=9), strategies=strategies)
    result = session.play_hand()
    assert session.state.cards_played == 52
    assert sum(session.team_tricks) == 13
    assert result.tricks_won == session.team_tricks[result.bid_team]


def test_silent_computer_seat_is_an_error():
    strategies = [SilentBidder(), HeuristicStrategy(), HeuristicStrategy(), HeuristicStrategy()]
    session = GameSession(GameConfig(human_seats=(), seed=2), strategies=strategies)
    with pytest.raises(InvariantError):
        session.start()


def test_messages_are_latest_four():
    session = GameSession(GameConfig(human_seats=(), seed=4))
    session.play_hand()
    messages = session.messages
    assert len(messages) == 4
    assert messages[-1].text.startswith("Bidder Team")


def test_card_ids_from_strategies_are_played_as_is():
    by_card = GameSession(GameConfig(human_seats=(), seed=14))
    by_id = GameSession(GameConfig(human_seats=(), seed=14), strategies=[IdPlayer() for _ in range(4)])
    assert by_id.play_hand() == by_card.play_hand()
    assert by_id.state.completed_tricks == by_card.state.completed_tricks
