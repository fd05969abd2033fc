"""
Round scoring.

Contract made (tricks >= bid): bidding team scores 10 + 1 per overtrick.
Contract failed: bidding team loses the bid amount, defenders gain it.
Scores accumulate across hands with no floor or ceiling.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Sequence

from .bidding import Bid
from .deal import team_of
from .errors import InvariantError

MADE_BASE = 10


@dataclass(frozen=True)
class RoundResult:
    bid_winner: int
    bid_team: int
    contract: int
    tricks_won: int
    made: bool
    deltas: tuple[int, int]  # per-team score change

    @property
    def def_team(self) -> int:
        return 1 - self.bid_team

    @property
    def overtricks(self) -> int:
        return max(0, self.tricks_won - self.contract)


def score_round(bid_winner: Bid, team_tricks: Sequence[int]) -> RoundResult:
    if bid_winner.player is None:
        raise InvariantError("Cannot score a hand without a bid winner")
    bid_team = team_of(bid_winner.player)
    contract = bid_winner.amount
    won = team_tricks[bid_team]
    deltas = [0, 0]
    made = won >= contract
    if made:
        deltas[bid_team] = MADE_BASE + (won - contract)
    else:
        deltas[bid_team] = -contract
        deltas[1 - bid_team] = contract
    return RoundResult(
        bid_winner=bid_winner.player,
        bid_team=bid_team,
        contract=contract,
        tricks_won=won,
        made=made,
        deltas=(deltas[0], deltas[1]),
    )


def apply_round_result(scores: MutableSequence[int], result: RoundResult) -> None:
    for team in (0, 1):
        scores[team] += result.deltas[team]
