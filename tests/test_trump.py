"""Tests for trump assignment, visibility and reveal."""
import pytest

from rang.bidding import Bid
from rang.deck import Suit, card_from_id
from rang.errors import IllegalActionError
from rang.trump import TrumpState, TrumpView, knows_trump, visible_trump


def test_hidden_trump_visible_to_bidder_only():
    trump = TrumpState()
    trump.assign(Suit.CLUBS)
    winner = Bid(player=3, amount=8)
    assert visible_trump(trump, winner, 3) == TrumpView(Suit.CLUBS, False)
    for observer in (0, 1, 2):
        view = visible_trump(trump, winner, observer)
        assert view.hidden
        assert not view.revealed
    assert knows_trump(trump, winner, 3)
    assert not knows_trump(trump, winner, 1)


def test_reveal_is_one_way():
    trump = TrumpState()
    trump.assign(Suit.HEARTS)
    assert not trump.observe_play(card_from_id("AS"))
    assert not trump.revealed
    assert trump.observe_play(card_from_id("2H"))
    assert trump.revealed
    # later trumps and non-trumps never flip it back nor re-announce
    assert not trump.observe_play(card_from_id("KH"))
    assert not trump.observe_play(card_from_id("3C"))
    assert trump.revealed
    for observer in range(4):
        assert visible_trump(trump, Bid(0, 7), observer) == TrumpView(Suit.HEARTS, True)


def test_trump_cannot_be_chosen_twice():
    trump = TrumpState()
    trump.assign(Suit.SPADES)
    with pytest.raises(IllegalActionError):
        trump.assign(Suit.DIAMONDS)
    assert trump.suit is Suit.SPADES


def test_no_trump_yet_is_hidden_for_everyone():
    trump = TrumpState()
    assert visible_trump(trump, None, 0).hidden
    assert not knows_trump(trump, Bid(0, 7), 0)
