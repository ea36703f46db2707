"""
Corpus matching benchmarking module.

Measures: index build time, per-call penalty scoring latency, and how much of
the corpus survives the length and boundary pre-filters.
Uses synthetic corpora; never reads real passwords.
"""

import csv
import random
import string
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passcore import CorpusIndex, normalize, score_penalty
from passcore.matcher import boundary_candidates

BENCHMARK_COUNTS = (1000, 10000, 100000)
PROBES = 50
SEED = 1337

_ALPHABET = string.ascii_lowercase + string.digits


def _synthetic_corpus(count: int, rng: random.Random) -> List[str]:
    """Random lowercase/digit words, 4-16 chars, shaped like a leaked wordlist."""
    return [
        "".join(rng.choice(_ALPHABET) for _ in range(rng.randint(4, 16)))
        for _ in range(count)
    ]


def _probes(corpus: List[str], rng: random.Random) -> List[str]:
    """Half one-edit variants of corpus words, half fresh random strings."""
    out = []
    for i in range(PROBES):
        if i % 2 == 0:
            word = list(rng.choice(corpus))
            word[rng.randrange(len(word))] = rng.choice(string.punctuation)
            out.append("".join(word))
        else:
            out.append("".join(rng.choice(_ALPHABET) for _ in range(rng.randint(8, 14))))
    return out


def _compute_scaling_analysis(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Per-call latency and pruning summary from benchmark results."""
    valid = [r for r in results if r.get("error") is None]
    if not valid:
        return {
            "summary": "Insufficient data for scaling analysis.",
            "score_time_ms_at_max_n": None,
            "candidate_ratio_at_max_n": None,
        }
    largest = max(valid, key=lambda r: r["corpus_size"])
    n = largest["corpus_size"]
    parts = [
        f"Index build at N={n}: {largest['build_time_ms']:.1f} ms.",
        f"Penalty scoring at N={n}: {largest['score_time_ms']:.3f} ms per call.",
        f"Pre-filters keep {largest['candidate_ratio'] * 100:.2f}% of the corpus.",
    ]
    if len(valid) >= 2:
        r0, r1 = valid[0], valid[-1]
        n0, n1 = r0["corpus_size"], r1["corpus_size"]
        t0, t1 = r0["score_time_ms"], r1["score_time_ms"]
        if t0 and t1 and n0 < n1:
            ratio = (t1 / t0) / (n1 / n0)
            if ratio <= 2.0:
                parts.append("Scaling: per-call latency grows at most linearly with corpus size.")
    return {
        "summary": " ".join(parts),
        "score_time_ms_at_max_n": largest["score_time_ms"],
        "candidate_ratio_at_max_n": largest["candidate_ratio"],
        "max_n_tested": n,
    }


def run_benchmark(
    counts: tuple[int, ...] = BENCHMARK_COUNTS,
    csv_path: Optional[Path] = None,
    seed: int = SEED,
) -> Dict[str, Any]:
    """
    Run benchmark over synthetic corpora of the given sizes.
    Returns: build time, scoring latency, pre-filter candidate counts, and scaling_analysis.
    """
    rng = random.Random(seed)
    results: List[Dict[str, Any]] = []
    for count in counts:
        row: Dict[str, Any] = {"corpus_size": count, "probes": PROBES}
        try:
            words = _synthetic_corpus(count, rng)
            probes = _probes(words, rng)

            # 1) Index build
            t0 = time.perf_counter()
            index = CorpusIndex.from_lines(words, source=f"synthetic-{count}")
            row["build_time_ms"] = round((time.perf_counter() - t0) * 1000, 2)

            # 2) Penalty scoring latency (average per call)
            t0 = time.perf_counter()
            for p in probes:
                score_penalty(p, index)
            row["score_time_ms"] = round((time.perf_counter() - t0) * 1000 / PROBES, 4)

            # 3) Entries reaching the edit distance step
            survivors = sum(
                sum(1 for _ in boundary_candidates(normalize(p), index)) for p in probes
            )
            row["candidates_per_call"] = round(survivors / PROBES, 1)
            row["candidate_ratio"] = round(survivors / PROBES / count, 6)
        except Exception as e:
            row["error"] = str(e)
            row.setdefault("build_time_ms", -1)
            row.setdefault("score_time_ms", -1)
            row.setdefault("candidates_per_call", -1)
            row.setdefault("candidate_ratio", -1)
        results.append(row)

    out: Dict[str, Any] = {
        "benchmark_results": results,
        "dataset_sizes": list(counts),
        "scaling_analysis": _compute_scaling_analysis(results),
        "metrics_summary": {
            "build_time": "ms to normalize and index the corpus",
            "score_time": f"ms per penalty call, averaged over {PROBES} probes",
            "candidates": "entries per call that pass length and boundary filters",
        },
    }
    if csv_path:
        fieldnames = [
            "corpus_size", "probes", "build_time_ms", "score_time_ms",
            "candidates_per_call", "candidate_ratio",
        ]
        if any("error" in r for r in results):
            fieldnames.append("error")
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            w.writeheader()
            w.writerows(results)
    return out
