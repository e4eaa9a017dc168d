"""Tests for the engine benchmarking utilities."""

import pytest

from arcade_snake.benchmark import BenchmarkResult, benchmark_throughput
from arcade_snake.config import GameConfig


class TestBenchmarkResult:
    def test_summary_format(self):
        result = BenchmarkResult(
            total_games=10,
            total_frames=500,
            wall_time_seconds=1.5,
            games_per_second=6.67,
            frames_per_second=333.3,
        )
        summary = result.summary()
        assert "10 games" in summary
        assert "games/s" in summary
        assert "frames/s" in summary


class TestBenchmarkThroughput:
    def test_basic_benchmark(self):
        result = benchmark_throughput(num_games=3, max_frames=200)
        assert result.total_games == 3
        assert 0 < result.total_frames <= 600
        assert result.wall_time_seconds > 0
        assert result.frames_per_second > 0

    def test_max_frames_applies_per_game(self):
        cfg = GameConfig(obstacle_count=0, initial_speed=50)
        result = benchmark_throughput(
            num_games=2, max_frames=10, turn_probability=0.0, config=cfg,
        )
        assert result.total_frames == 20

    def test_num_games_must_be_positive(self):
        with pytest.raises(ValueError, match="num_games must be at least 1"):
            benchmark_throughput(num_games=0)
