# tests/test_plot.py
import math

from plot.plot import compute_run_stats, main, render_all
from state.serializer import write_json

GAMES = {
    "won": [True, True, False],
    "attempts": [4, 6, 10],
    "total_time_s": [1.0, 3.0, 9.0],
    "turn_headers": ["turn_2", "turn_1", "turn_10"],
    "turn_time_s_columns": {
        "turn_1": [0.5, 0.1, 0.2],
        "turn_2": [0.3, 0.7, 0.2],
        "turn_10": [None, None, 0.4],
    },
    "candidates_table": {
        "turn_1": [200, 100, 50],
        "turn_2": [10, 30, 5],
        "turn_10": [None, None, 2],
    },
}


def test_stats_use_won_games_only():
    stats = compute_run_stats(GAMES)
    assert stats["n_games"] == 3
    assert stats["n_won"] == 2
    assert stats["avg_total_time"] == 2.0
    assert stats["max_attempts"] == 6
    assert stats["attempt_histogram"] == {4: 1, 6: 1}


def test_turn_columns_are_sorted_naturally():
    stats = compute_run_stats(GAMES)
    assert math.isclose(stats["avg_turn_times"][0], 0.3)
    assert math.isclose(stats["avg_turn_times"][1], 0.5)
    assert math.isnan(stats["avg_turn_times"][2])
    assert stats["min_candidates"][:2] == [100.0, 10.0]


def test_no_won_games():
    stats = compute_run_stats({"won": [False], "attempts": [10], "total_time_s": [5.0]})
    assert stats["n_won"] == 0
    assert math.isnan(stats["avg_attempts"])


def test_charts_are_written(tmp_path):
    data = {"rules": {"code_length": 4, "num_colors": 6, "max_attempts": 10}, "games": GAMES}
    paths = render_all(data, tmp_path / "out")
    assert [p.name for p in paths] == [
        "4x6_attempts.png",
        "4x6_turn_time.png",
        "4x6_candidates.png",
    ]
    assert all(p.exists() for p in paths)


def test_main_reads_benchmark_file(tmp_path):
    src = tmp_path / "bench.json"
    write_json({"games": GAMES}, src)
    main(["--file", str(src), "--outdir", str(tmp_path / "charts")])
    assert (tmp_path / "charts" / "4x6_attempts.png").exists()
