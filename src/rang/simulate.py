"""
Self-play simulation: four heuristic seats play many hands on a seeded RNG.

Per-hand results are collected into numpy arrays so summaries (contract
success rate, mean contract, overtricks, score drift per team) stay cheap
even for long runs.
"""
from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from loguru import logger

from .agents import HeuristicStrategy, Strategy
from .config import GameConfig, SimulationConfig
from .deal import NUM_SEATS
from .scoring import RoundResult
from .session import GameSession


@dataclass
class SimulationSummary:
    hands: int
    final_scores: tuple[int, int]
    contracts_made: int
    success_rate: float
    mean_contract: float
    mean_overtricks: float  # over made contracts only
    mean_score_delta: tuple[float, float]
    bids_won_by_team: tuple[int, int]
    redeals: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["final_scores"] = list(self.final_scores)
        data["mean_score_delta"] = list(self.mean_score_delta)
        data["bids_won_by_team"] = list(self.bids_won_by_team)
        return data


def summarize(results: Sequence[RoundResult], redeals: int = 0) -> SimulationSummary:
    """Aggregate a list of round results."""
    if not results:
        raise ValueError("Cannot summarize an empty simulation")
    deltas = np.array([r.deltas for r in results], dtype=np.int64)
    contracts = np.array([r.contract for r in results], dtype=np.int64)
    tricks = np.array([r.tricks_won for r in results], dtype=np.int64)
    made = np.array([r.made for r in results], dtype=bool)
    bid_teams = np.array([r.bid_team for r in results], dtype=np.int64)

    totals = deltas.sum(axis=0)
    means = deltas.mean(axis=0)
    overtricks = (tricks - contracts)[made]
    team_counts = np.bincount(bid_teams, minlength=2)
    return SimulationSummary(
        hands=len(results),
        final_scores=(int(totals[0]), int(totals[1])),
        contracts_made=int(made.sum()),
        success_rate=float(made.mean()),
        mean_contract=float(contracts.mean()),
        mean_overtricks=float(overtricks.mean()) if overtricks.size else 0.0,
        mean_score_delta=(float(means[0]), float(means[1])),
        bids_won_by_team=(int(team_counts[0]), int(team_counts[1])),
        redeals=redeals,
    )


def run_simulation(
    config: Optional[SimulationConfig] = None,
    strategies: Optional[Sequence[Strategy]] = None,
) -> SimulationSummary:
    config = config or SimulationConfig()
    if strategies is None:
        strategies = [HeuristicStrategy() for _ in range(NUM_SEATS)]
    session = GameSession(
        config=GameConfig(human_seats=(), seed=config.seed),
        strategies=strategies,
        rng=random.Random(config.seed),
    )
    results: List[RoundResult] = []
    redeals = 0
    for i in range(config.hands):
        results.append(session.play_hand())
        redeals += session.state.redeals
        if (i + 1) % 100 == 0:
            logger.info("Simulated {}/{} hands, scores {}", i + 1, config.hands, session.team_scores)
    return summarize(results, redeals=redeals)


__all__ = ["SimulationSummary", "summarize", "run_simulation"]
