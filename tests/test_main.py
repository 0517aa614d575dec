import json

import pytest

import main


def test_benchmark_first_candidate_strategy():
    results = main.run_benchmark(games=3, seed=1, strategy="first", verbose=False)

    assert results["won"] == [True, True, True]
    for attempts, counts, game in zip(
        results["attempts"], results["candidate_counts"], results["games"]
    ):
        assert counts[0] == 5040
        assert counts[-1] == 1
        assert counts == sorted(counts, reverse=True)
        assert len(counts) == attempts + 1
        assert game["status"] == "won"
        assert game["guesses"][-1]["guess"] == game["secret_code"]


def test_benchmark_is_reproducible():
    a = main.run_benchmark(games=2, seed=4, strategy="first", verbose=False)
    b = main.run_benchmark(games=2, seed=4, strategy="first", verbose=False)
    assert a["games"] == b["games"]


def test_benchmark_minimax_single_game(capsys):
    results = main.run_benchmark(games=1, seed=2, strategy="minimax")
    assert results["won"] == [True]
    assert results["games"][0]["guesses"][0]["guess"] == "0123"
    assert "Game 1:" in capsys.readouterr().out


def test_bench_command_prints_json(capsys):
    assert main.main(["bench", "--games", "2", "--seed", "3",
                      "--strategy", "first", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["strategy"] == "first"
    assert len(data["games"]) == 2


def test_bench_command_prints_stats_and_plots(tmp_path, capsys):
    main.main(["bench", "--games", "2", "--seed", "3", "--strategy", "first",
               "--plot-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "Games won: 2/2 (first)." in out
    assert "Average attempts over 2 games:" in out
    assert (tmp_path / "attempts_first.png").exists()
    assert (tmp_path / "candidates_per_turn_first.png").exists()


def test_bench_rejects_zero_games():
    with pytest.raises(SystemExit):
        main.main(["bench", "--games", "0"])


def test_play_command_exits_cleanly_on_end_of_input(monkeypatch, capsys):
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main.main(["play", "--seed", "1"]) == 0
    assert "Exiting game." in capsys.readouterr().out


def test_assist_command(monkeypatch, capsys):
    lines = iter(["1234 4 0", "p", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(lines))
    assert main.main(["assist"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "1234" in out
    assert "1 candidates." in out
