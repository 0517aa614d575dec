import math

from plot.plot import compute_run_stats, plot_benchmark


RESULTS = {
    "won": [True, True, False],
    "attempts": [4, 6, 9],
    "total_time_s": [0.5, 1.5, 3.0],
    "candidate_counts": [
        [5040, 300, 20, 2, 1],
        [5040, 1000, 100, 10, 3, 2, 1],
        [5040, 5040],
    ],
}


def test_compute_run_stats_uses_won_games_only():
    (attempts, times, avg_c, min_c, max_c, n_won) = compute_run_stats(RESULTS)
    assert n_won == 2
    assert attempts == (5.0, 4.0, 6.0)
    assert times == (1.0, 0.5, 1.5)
    assert len(avg_c) == 7
    assert avg_c[0] == 5040
    assert avg_c[1] == 650
    assert min_c[1] == 300 and max_c[1] == 1000
    # only the longer game reaches turn 6
    assert avg_c[6] == 1


def test_compute_run_stats_without_wins():
    attempts, times, avg_c, _, _, n_won = compute_run_stats(
        {"won": [False], "attempts": [3], "total_time_s": [1.0],
         "candidate_counts": [[5040, 10]]}
    )
    assert n_won == 0
    assert all(math.isnan(v) for v in attempts)
    assert avg_c == []


def test_plot_benchmark_writes_pngs(tmp_path):
    written = plot_benchmark(RESULTS, tmp_path / "out", label="test")
    assert [p.name for p in written] == [
        "attempts_test.png",
        "candidates_per_turn_test.png",
    ]
    assert all(p.exists() for p in written)
