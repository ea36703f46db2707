#!/usr/bin/env python3
"""
CLI for password strength scoring.

Commands:
  score [password]  Score one password (prompts if omitted, so it stays out of shell history)
  batch <file>      Score every line of a file; prints line numbers, never passwords
  bench             Run the corpus matching benchmark
"""

import argparse
import getpass
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from passcore import CorpusError, CorpusIndex, advice_for, default_index, grade_for_score, score_components
from passcore.config import LOG_LEVEL

logger = logging.getLogger("passcore.cli")


def load_index(args: argparse.Namespace) -> CorpusIndex:
    if args.corpus:
        return CorpusIndex.from_path(Path(args.corpus))
    return default_index()


def cmd_score(args: argparse.Namespace) -> None:
    index = load_index(args)
    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")
    components = score_components(password, index)
    total = components.total
    print("Score:", total)
    print("Grade:", grade_for_score(total))
    print(
        f"  length: {components.length}, variety: {components.variety}, "
        f"uniqueness: {components.uniqueness}, penalty: {components.penalty}"
    )
    print("Advice:", advice_for(components))


def cmd_batch(args: argparse.Namespace) -> None:
    index = load_index(args)
    path = Path(args.file)
    if not path.is_file():
        print("Not a file:", path, file=sys.stderr)
        sys.exit(1)
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                password = line.rstrip("\r\n")
                if not password:
                    continue
                components = score_components(password, index)
                total = components.total
                print(f"line {lineno}: {total} {grade_for_score(total)}  {advice_for(components)}")
    except UnicodeDecodeError:
        print("Not a UTF-8 text file:", path, file=sys.stderr)
        sys.exit(1)


def cmd_bench(args: argparse.Namespace) -> None:
    from benchmark import run_benchmark

    csv_path = Path(args.csv) if args.csv else None
    result = run_benchmark(csv_path=csv_path)
    for row in result["benchmark_results"]:
        if "error" in row:
            print(f"n={row['corpus_size']}: error {row['error']}")
            continue
        print(
            f"n={row['corpus_size']}: build {row['build_time_ms']} ms, "
            f"score {row['score_time_ms']} ms/call, "
            f"{row['candidates_per_call']} candidates/call"
        )
    print(result["scaling_analysis"]["summary"])
    if csv_path:
        print("Wrote", csv_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="Password strength scoring")
    parser.add_argument("--corpus", help="Wordlist to match against (one password per line)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    p_score = sub.add_parser("score", help="Score one password")
    p_score.add_argument("password", nargs="?", help="Password (prompted for if omitted)")
    p_batch = sub.add_parser("batch", help="Score each line of a file")
    p_batch.add_argument("file", help="File with one password per line")
    p_bench = sub.add_parser("bench", help="Run the matching benchmark")
    p_bench.add_argument("--csv", help="Write per-run results to this CSV file")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "score":
            cmd_score(args)
        elif args.command == "batch":
            cmd_batch(args)
        elif args.command == "bench":
            cmd_bench(args)
    except CorpusError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
