#!/usr/bin/env python3
"""Autoplay Benchmark Script.

Plays many games with the automatic player and reports, per level, how often
the generated boards were cleared, how many shuffles were needed and how
long the engine took.

Usage:
    python benchmark_autoplay.py [--games N] [--max-level L] [--strategy first|random] [--output FILE]
"""

import argparse
import json
import logging
import random
import sys
import time
from collections import defaultdict
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fruitmatch.core.autoplay import AutoPlayer, STRATEGIES
from fruitmatch.core.generator import LevelGenerator
from fruitmatch.core.session import MatchSession

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%H:%M:%S'
)
logger = logging.getLogger(__name__)


@dataclass
class LevelStats:
    """Aggregated results for one level."""
    level: int
    attempts: int
    clear_rate: float
    avg_matches: float
    avg_shuffles: float
    avg_time_left: float


@dataclass
class BenchmarkSuite:
    """Complete benchmark results."""
    timestamp: str
    games: int
    strategy: str
    seed: int
    total_time_seconds: float
    avg_final_score: float
    avg_levels_cleared: float
    levels: List[Dict[str, Any]]

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2, ensure_ascii=False)


def run_benchmark(games: int, max_level: int, strategy: str, seed: int) -> BenchmarkSuite:
    """Play `games` runs and aggregate per-level statistics."""
    rng = random.Random(seed)
    per_level = defaultdict(list)
    final_scores = []
    cleared_counts = []

    start = time.time()
    for game in range(games):
        session = MatchSession(
            generator=LevelGenerator(rng=random.Random(rng.random())),
            rng=random.Random(rng.random()),
        )
        player = AutoPlayer(strategy=strategy, rng=random.Random(rng.random()))
        run = player.play_run(session, max_level=max_level)

        for result in run.levels:
            per_level[result.level].append(result)
        final_scores.append(run.final_score)
        cleared_counts.append(run.levels_cleared)

        if (game + 1) % 10 == 0:
            logger.info(f"  {game + 1}/{games} games played")

    elapsed = time.time() - start

    levels = []
    for level in sorted(per_level):
        results = per_level[level]
        n = len(results)
        stats = LevelStats(
            level=level,
            attempts=n,
            clear_rate=sum(r.cleared for r in results) / n,
            avg_matches=sum(r.matches for r in results) / n,
            avg_shuffles=sum(r.shuffles_used for r in results) / n,
            avg_time_left=sum(r.time_left for r in results) / n,
        )
        levels.append(asdict(stats))

    return BenchmarkSuite(
        timestamp=datetime.now().isoformat(),
        games=games,
        strategy=strategy,
        seed=seed,
        total_time_seconds=round(elapsed, 3),
        avg_final_score=sum(final_scores) / games if games else 0.0,
        avg_levels_cleared=sum(cleared_counts) / games if games else 0.0,
        levels=levels,
    )


def print_summary(suite: BenchmarkSuite) -> None:
    """Print a table of per-level results."""
    print("\n" + "=" * 70)
    print(f"AUTOPLAY BENCHMARK ({suite.games} games, strategy={suite.strategy}, seed={suite.seed})")
    print("=" * 70)
    print(f"{'Level':>5} {'Attempts':>9} {'Clear%':>8} {'Matches':>8} {'Shuffles':>9} {'TimeLeft':>9}")
    print("-" * 70)
    for stats in suite.levels:
        print(
            f"{stats['level']:>5} {stats['attempts']:>9} {stats['clear_rate'] * 100:>7.1f}% "
            f"{stats['avg_matches']:>8.1f} {stats['avg_shuffles']:>9.2f} {stats['avg_time_left']:>9.1f}"
        )
    print("-" * 70)
    print(f"Average final score:    {suite.avg_final_score:.1f}")
    print(f"Average levels cleared: {suite.avg_levels_cleared:.2f}")
    print(f"Total time:             {suite.total_time_seconds:.2f}s")


def main():
    parser = argparse.ArgumentParser(description="Autoplay benchmark for generated levels")
    parser.add_argument("--games", "-g", type=int, default=50,
                       help="Number of games to play")
    parser.add_argument("--max-level", "-l", type=int, default=10,
                       help="Stop a run after clearing this level")
    parser.add_argument("--strategy", "-s", type=str, choices=list(STRATEGIES),
                       default="first", help="Pair selection strategy")
    parser.add_argument("--seed", type=int, default=42,
                       help="Random seed for reproducible runs")
    parser.add_argument("--output", "-o", type=str, default=None,
                       help="Output file for results (JSON)")

    args = parser.parse_args()

    suite = run_benchmark(args.games, args.max_level, args.strategy, args.seed)
    print_summary(suite)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(suite.to_json(), encoding="utf-8")
        print(f"\nResults saved to: {output_path}")


if __name__ == "__main__":
    main()
