from __future__ import annotations

import argparse
import json
import random
import sys
import time

from game.board import Board
from game.ruleset import DEFAULT_RULES
from plot.plot import compute_run_stats, plot_benchmark
from solver.candidate_filter import report
from solver.session import AnalysisSession
from solver.solver_manager import MinimaxConfig, MinimaxSolver, log_print
from ui.cli import assistant_loop, gameloop


class FirstCandidateSolver:
    """Plays the smallest number still possible."""

    def choose_guess(self, candidates, guessed=()):
        guessed = set(guessed)
        ordered = report(candidates)
        for c in ordered:
            if c not in guessed:
                return c
        return ordered[0]


def run_benchmark(games=10, seed=None, strategy="minimax", rules=None,
                  verbose=True):
    """
    Auto-play games, narrowing the candidates after each guess.

    Returns:
        dict: per-game lists "won", "attempts", "total_time_s",
        "candidate_counts" (remaining candidates, starting with the
        universe) and "games" (GameState dicts with the secret revealed).
    """
    rules = rules or DEFAULT_RULES
    rng = random.Random(seed)
    if strategy == "minimax":
        solver = MinimaxSolver(MinimaxConfig(), rules=rules)
    else:
        solver = FirstCandidateSolver()

    results = {
        "strategy": strategy,
        "won": [],
        "attempts": [],
        "total_time_s": [],
        "candidate_counts": [],
        "games": [],
    }

    # one universe for all games
    universe = AnalysisSession(rules=rules).universe

    for counter in range(1, games + 1):
        start_time = time.perf_counter()

        board = Board(rules=rules, rng=rng)
        session = AnalysisSession(rules=rules, universe=universe)
        counts = [len(session.candidates)]

        # Game loop, cannot take more turns than there are numbers
        while not board.is_over and len(counts) <= len(universe):
            guess = session.suggest(solver)
            observation = board.make_guess(guess.as_string())
            session.add(observation)
            counts.append(len(session.candidates))

        end_time = time.perf_counter()

        results["won"].append(board.is_won)
        results["attempts"].append(board.current_attempt)
        results["total_time_s"].append(end_time - start_time)
        results["candidate_counts"].append(counts)
        results["games"].append(board.get_current_state().to_dict(reveal_code=True))

        if verbose:
            log_print(
                f"Game {counter}: {board.reveal_code()} in "
                f"{board.current_attempt} tries "
                f"({end_time - start_time:.2f} seconds)"
            )

    return results


def print_benchmark(results):
    (
        (avg_attempts, min_attempts, max_attempts),
        (avg_time, min_time, max_time),
        _,
        _,
        _,
        n_won,
    ) = compute_run_stats(results)
    n = len(results["won"])

    # Print overall statistics
    print(f"\nGames won: {n_won}/{n} ({results['strategy']}).")
    print(f"Average time over {n} games: {avg_time:.2f} seconds.")
    print(f"Max time over {n} games: {max_time:.2f} seconds.")
    print(f"Min time over {n} games: {min_time:.2f} seconds.")
    print(f"Average attempts over {n} games: {avg_attempts:.2f} attempts.")
    print(f"Max attempts over {n} games: {max_attempts:.0f} attempts.")
    print(f"Min attempts over {n} games: {min_attempts:.0f} attempts.")


def build_parser():
    ap = argparse.ArgumentParser(
        prog="cows-and-bulls",
        description="Play Cows and Bulls, or get help narrowing down a secret.",
    )
    sub = ap.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Guess the computer's number (default)")
    play.add_argument("--seed", type=int, default=None,
                      help="Seed for the secret number")

    sub.add_parser("assist", help="Narrow down candidates from your guesses")

    bench = sub.add_parser("bench", help="Let the solver play many games")
    bench.add_argument("--games", type=int, default=10,
                       help="Number of games to play (default: 10)")
    bench.add_argument("--seed", type=int, default=None,
                       help="Seed for the secret numbers")
    bench.add_argument("--strategy", choices=["minimax", "first"],
                       default="minimax", help="Guess selection strategy")
    bench.add_argument("--plot-dir", default=None,
                       help="Write charts as PNGs into this directory")
    bench.add_argument("--json", action="store_true",
                       help="Print collected results as JSON")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.command in (None, "play"):
        seed = getattr(args, "seed", None)
        gameloop(Board(rng=random.Random(seed)))
        return 0

    if args.command == "assist":
        assistant_loop()
        return 0

    if args.games < 1:
        ap.error("--games must be at least 1")

    results = run_benchmark(
        games=args.games,
        seed=args.seed,
        strategy=args.strategy,
        verbose=not args.json,
    )
    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print_benchmark(results)

    if args.plot_dir:
        for path in plot_benchmark(results, args.plot_dir, label=args.strategy):
            print(f"Saved {path}", file=sys.stderr if args.json else sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
