"""Configuration helpers for benchmark tables and runtime defaults."""

from .benchmarks import DEFAULT_BENCHMARKS, BenchmarkMeta, BenchmarkStat, BenchmarkTable, iter_benchmarks
from .settings import DEFAULT_WINDOW_SIZE, benchmarks_profile_path, default_window_size

__all__ = [
    "BenchmarkMeta",
    "BenchmarkStat",
    "BenchmarkTable",
    "DEFAULT_BENCHMARKS",
    "DEFAULT_WINDOW_SIZE",
    "benchmarks_profile_path",
    "default_window_size",
    "iter_benchmarks",
]
