"""
Command-line interface for the Rang engine.

Usage examples (after installing in editable mode):

    python -m rang.cli simulate --hands 500 --seed 3 --output runs/sim.json
    rang simulate --config sim.json --log-level DEBUG
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import SimulationConfig, load_simulation_config
from .errors import ConfigError
from .simulate import run_simulation


def configure_logging(level: str = "WARNING") -> None:
    logger.remove()
    logger.enable("rang")
    logger.add(sys.stderr, level=level.upper(), format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play hands with four computer seats and report statistics.",
    )
    parser.add_argument(
        "--hands",
        type=int,
        default=None,
        help="Number of completed hands to play (default 100).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for shuffling (default 0).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with a simulation config; --hands/--seed override it.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional path for a JSON summary.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="loguru level: DEBUG, INFO, WARNING...",
    )
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    configure_logging(args.log_level)
    cfg = load_simulation_config(args.config) if args.config else SimulationConfig()
    cfg = SimulationConfig(
        hands=args.hands if args.hands is not None else cfg.hands,
        seed=args.seed if args.seed is not None else cfg.seed,
    )

    summary = run_simulation(cfg)
    print(
        f"hands={summary.hands} scores={summary.final_scores} "
        f"made={summary.contracts_made} ({summary.success_rate:.1%}) "
        f"mean_contract={summary.mean_contract:.2f} redeals={summary.redeals}",
        flush=True,
    )

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        data = {"config": {"hands": cfg.hands, "seed": cfg.seed}, "summary": summary.to_dict()}
        with out.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.info("Wrote summary to {}", out.resolve())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rang", description="Rang (Bangladeshi Bridge) engine CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_simulate_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ConfigError as e:
        parser.exit(2, f"rang: {e}\n")


if __name__ == "__main__":
    main()
