"""Corpus matching benchmarking: index build time, scoring latency, pre-filter pruning."""

from .benchmark import run_benchmark, BENCHMARK_COUNTS

__all__ = ["run_benchmark", "BENCHMARK_COUNTS"]
