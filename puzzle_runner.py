"""
CLI to generate dollar-game puzzles across multiple seeds.

Reads puzzles/puzzles.yml, builds each board, fills it with random amounts
at the configured difficulty, and reports what came out.
"""

from __future__ import annotations

import argparse
import csv
import logging
import random
from pathlib import Path
from typing import Dict, Iterable, List

from config import Config, GameConfig, PuzzleConfig, load_config
from edge_list_graph import EdgeListGraph
from graph import DuplicateEdge
from nodes import DollarNode
from puzzle import DollarGame
from stochastic.partition import RandomPartitioner

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "puzzles" / "puzzles.yml"


def build_game(puzzle: PuzzleConfig, game: GameConfig, seed: int) -> DollarGame:
    graph: EdgeListGraph[DollarNode] = EdgeListGraph(directed=puzzle.directed)
    for _ in range(puzzle.nodes):
        graph.add_node(DollarNode())
    for start, end in puzzle.edges:
        if isinstance(graph.add_edge(start, end), DuplicateEdge):
            logger.warning("Puzzle '%s': skipped duplicate edge (%d, %d)", puzzle.name, start, end)

    partitioner = RandomPartitioner(random.Random(seed), bound=game.gaussian_bound)
    return DollarGame(graph, game.min_amount, game.max_amount, partitioner)


def run_puzzle(puzzle: PuzzleConfig, game: GameConfig, seed: int) -> Dict[str, object]:
    board = build_game(puzzle, game, seed)
    target = board.target_sum(puzzle.difficulty)
    values = board.randomize(puzzle.difficulty)
    return {
        "puzzle": puzzle.name,
        "difficulty": puzzle.difficulty.name,
        "seed": seed,
        "nodes": board.graph.num_nodes(),
        "edges": board.graph.num_edges(),
        "connected": board.graph.is_connected(),
        "genus": board.genus_label(),
        "target_sum": target,
        "feasible": values is not None,
        "values": values if values is not None else [],
        "count": board.count(),
        "solved": board.is_solved() if values is not None else False,
    }


def run_puzzles(config: Config, runs_csv: Path | None = None) -> List[Dict[str, object]]:
    results: List[Dict[str, object]] = []
    for puzzle in config.puzzles:
        for offset in range(config.seed_count):
            seed = config.seed + offset
            results.append(run_puzzle(puzzle, config.game, seed))

    if runs_csv is not None:
        write_results_csv(results, runs_csv)
    return results


def _values_text(values: object) -> str:
    if not isinstance(values, (list, tuple)):
        return ""
    return " ".join(str(v) for v in values)


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV; values are space-separated.
    """
    fieldnames = [
        "puzzle",
        "difficulty",
        "seed",
        "nodes",
        "edges",
        "connected",
        "genus",
        "target_sum",
        "feasible",
        "values",
        "count",
        "solved",
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for res in results:
            row = dict(res)
            row["values"] = _values_text(res.get("values"))
            writer.writerow(row)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", dest="config", default=DEFAULT_CONFIG, type=Path,
                        help="YAML file describing the puzzles")
    parser.add_argument("--runs-csv", dest="runs_csv", default=None, type=Path,
                        help="where to write per-run results")
    parser.add_argument("--log-level", dest="log_level", default="WARNING",
                        help="logging level (DEBUG traces every partition split)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    results = run_puzzles(load_config(args.config), runs_csv=args.runs_csv)
    for res in results:
        print(res)
    if args.runs_csv is not None:
        print(f"Wrote runs to {args.runs_csv}")


if __name__ == "__main__":
    main()
