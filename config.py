"""
YAML configuration for batch puzzle generation.

See puzzles/puzzles.yml for the layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence, Tuple

import yaml

from puzzle import DEFAULT_MAX_AMOUNT, DEFAULT_MIN_AMOUNT, Difficulty
from stochastic.gaussian import DEFAULT_BOUND


@dataclass(frozen=True)
class GameConfig:
    min_amount: int = DEFAULT_MIN_AMOUNT
    max_amount: int = DEFAULT_MAX_AMOUNT
    gaussian_bound: float = DEFAULT_BOUND


@dataclass(frozen=True)
class PuzzleConfig:
    name: str
    nodes: int
    edges: Sequence[Tuple[int, int]]
    difficulty: Difficulty = Difficulty.CHALLENGING
    directed: bool = False


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    game: GameConfig = field(default_factory=GameConfig)
    puzzles: Sequence[PuzzleConfig] = ()


def _as_int(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{where} must be an integer, got {value!r}.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where} must be an integer, got {value!r}.") from None


def _parse_game(data: Any) -> GameConfig:
    if not data:
        return GameConfig()
    if not isinstance(data, dict):
        raise ValueError(f"'game' must be a mapping, got {data!r}.")
    try:
        gaussian_bound = float(data.get("gaussian_bound", DEFAULT_BOUND))
    except (TypeError, ValueError):
        raise ValueError("game.gaussian_bound must be a number") from None
    game = GameConfig(
        min_amount=_as_int(data.get("min_amount", DEFAULT_MIN_AMOUNT), "game.min_amount"),
        max_amount=_as_int(data.get("max_amount", DEFAULT_MAX_AMOUNT), "game.max_amount"),
        gaussian_bound=gaussian_bound,
    )
    if game.min_amount > game.max_amount:
        raise ValueError("game.min_amount must not exceed game.max_amount")
    if game.gaussian_bound <= 0:
        raise ValueError("game.gaussian_bound must be positive")
    return game


def _parse_puzzle(data: Any) -> PuzzleConfig:
    if not isinstance(data, dict):
        raise ValueError(f"Every puzzle must be a mapping, got {data!r}.")

    name = data.get("name")
    if not name:
        raise ValueError("Every puzzle needs a 'name'.")
    if "nodes" not in data:
        raise ValueError(f"Puzzle '{name}' needs 'nodes'.")

    nodes = _as_int(data["nodes"], f"Puzzle '{name}': 'nodes'")
    if nodes < 0:
        raise ValueError(f"Puzzle '{name}': 'nodes' must be non-negative.")

    raw_edges = data.get("edges") or []
    if not isinstance(raw_edges, (list, tuple)):
        raise ValueError(f"Puzzle '{name}': 'edges' must be a list of pairs.")

    edges = []
    for pair in raw_edges:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"Puzzle '{name}': edges must be [start, end] pairs, got {pair!r}.")
        start = _as_int(pair[0], f"Puzzle '{name}': edge start")
        end = _as_int(pair[1], f"Puzzle '{name}': edge end")
        if not (0 <= start < nodes and 0 <= end < nodes):
            raise ValueError(f"Puzzle '{name}': edge {pair!r} refers to a missing node.")
        edges.append((start, end))

    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise ValueError(f"Puzzle '{name}': 'directed' must be true or false, got {directed!r}.")

    return PuzzleConfig(
        name=str(name),
        nodes=nodes,
        edges=edges,
        difficulty=Difficulty.from_name(str(data.get("difficulty", "CHALLENGING"))),
        directed=directed,
    )


def load_config(path: Path) -> Config:
    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping.")

    puzzles = data.get("puzzles") or []
    if not isinstance(puzzles, list):
        raise ValueError(f"{path}: 'puzzles' must be a list.")

    return Config(
        seed=_as_int(data.get("seed", 0), "seed"),
        seed_count=_as_int(data.get("seed_count", 1), "seed_count"),
        game=_parse_game(data.get("game")),
        puzzles=[_parse_puzzle(p) for p in puzzles],
    )
