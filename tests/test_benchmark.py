"""Benchmark runs on small synthetic corpora and reports pruning metrics."""

import csv
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from benchmark import run_benchmark


def test_run_benchmark_small(tmp_path):
    out_csv = tmp_path / "bench.csv"
    result = run_benchmark(counts=(200, 2000), csv_path=out_csv)
    rows = result["benchmark_results"]
    assert [r["corpus_size"] for r in rows] == [200, 2000]
    for row in rows:
        assert "error" not in row
        assert row["build_time_ms"] >= 0
        assert row["score_time_ms"] >= 0
        assert 0 <= row["candidate_ratio"] <= 1
    assert result["scaling_analysis"]["max_n_tested"] == 2000
    with open(out_csv, newline="", encoding="utf-8") as f:
        assert len(list(csv.DictReader(f))) == 2


def test_run_benchmark_is_reproducible():
    a = run_benchmark(counts=(300,))
    b = run_benchmark(counts=(300,))
    assert a["benchmark_results"][0]["candidates_per_call"] == b["benchmark_results"][0]["candidates_per_call"]
