"""Tests for self-play simulation and its numpy summary."""
import json

import pytest

from rang.bidding import Bid
from rang.config import SimulationConfig
from rang.scoring import score_round
from rang.simulate import run_simulation, summarize


def test_summarize_known_results():
    results = [
        score_round(Bid(0, 8), [10, 3]),  # made, +12 team 0
        score_round(Bid(1, 9), [7, 6]),   # failed, team 0 +9, team 1 -9
    ]
    summary = summarize(results, redeals=3)
    assert summary.hands == 2
    assert summary.final_scores == (21, -9)
    assert summary.contracts_made == 1
    assert summary.success_rate == pytest.approx(0.5)
    assert summary.mean_contract == pytest.approx(8.5)
    assert summary.mean_overtricks == pytest.approx(2.0)
    assert summary.mean_score_delta == (pytest.approx(10.5), pytest.approx(-4.5))
    assert summary.bids_won_by_team == (1, 1)
    assert summary.redeals == 3


def test_summarize_requires_results():
    with pytest.raises(ValueError):
        summarize([])


def test_run_simulation_is_reproducible():
    a = run_simulation(SimulationConfig(hands=6, seed=10))
    b = run_simulation(SimulationConfig(hands=6, seed=10))
    assert a == b
    assert a.hands == 6
    assert 0.0 <= a.success_rate <= 1.0
    assert 7 <= a.mean_contract <= 13
    assert sum(a.bids_won_by_team) == 6
    json.dumps(a.to_dict())
