"""
Engine and simulation configuration.

Rule constants (4 seats, 52 cards, 5+8 deal, bids 7..13) are fixed and live in
their modules; only table setup lives here. Configs can be read from a JSON
file such as::

    {"human_seats": [0], "message_limit": 4, "seed": 7}
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .deal import HUMAN_SEAT, NUM_SEATS
from .errors import ConfigError


@dataclass(frozen=True)
class GameConfig:
    """Which seats wait for human input, event-log size and shuffle seed."""

    human_seats: Tuple[int, ...] = (HUMAN_SEAT,)
    message_limit: int = 4
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        seats = tuple(int(s) for s in self.human_seats)
        object.__setattr__(self, "human_seats", seats)
        if any(not 0 <= s < NUM_SEATS for s in seats):
            raise ConfigError(f"human_seats must be within 0..{NUM_SEATS - 1}, got {seats}")
        if len(set(seats)) != len(seats):
            raise ConfigError(f"human_seats contains duplicates: {seats}")
        if self.message_limit < 1:
            raise ConfigError(f"message_limit must be positive, got {self.message_limit}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameConfig":
        seed = d.get("seed")
        try:
            return cls(
                human_seats=tuple(int(s) for s in d.get("human_seats", (HUMAN_SEAT,))),
                message_limit=int(d.get("message_limit", 4)),
                seed=int(seed) if seed is not None else None,
            )
        except ConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid game config {d!r}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["human_seats"] = list(self.human_seats)
        return data


@dataclass(frozen=True)
class SimulationConfig:
    """Self-play run: number of completed hands and RNG seed."""

    hands: int = 100
    seed: int = 0

    def __post_init__(self) -> None:
        if self.hands < 1:
            raise ConfigError(f"hands must be positive, got {self.hands}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SimulationConfig":
        try:
            return cls(hands=int(d.get("hands", 100)), seed=int(d.get("seed", 0)))
        except ConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid simulation config {d!r}: {e}") from e


def _read_json(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {p} must contain a JSON object")
    return data


def load_config(path: str | Path) -> GameConfig:
    return GameConfig.from_dict(_read_json(path))


def load_simulation_config(path: str | Path) -> SimulationConfig:
    return SimulationConfig.from_dict(_read_json(path))
