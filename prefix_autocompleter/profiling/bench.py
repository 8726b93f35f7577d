# profiling/bench.py
"""
Small profiling harness for Trie.search.
Usage:
    python -m prefix_autocompleter.profiling.bench --words 20000 --runs 500 --warmup 50

Builds a synthetic vocabulary and prints mean/median/p99 latency.
"""

import argparse
import random
import statistics
import string
import time

from prefix_autocompleter.core.trie import Trie


def synthetic_vocab(n: int, seed: int = 7) -> list:
    rng = random.Random(seed)
    letters = string.ascii_lowercase[:12]
    return ["".join(rng.choice(letters) for _ in range(rng.randint(2, 9))) for _ in range(n)]


def profile(trie: Trie, prefixes: list, runs: int = 200, warmup: int = 20) -> list:
    for i in range(warmup):
        trie.search(prefixes[i % len(prefixes)], limit=10)

    times = []
    for i in range(runs):
        p = prefixes[i % len(prefixes)]
        t0 = time.perf_counter()
        trie.search(p, limit=10)
        times.append((time.perf_counter() - t0) * 1000.0)
    return times


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=20000)
    parser.add_argument("--runs", type=int, default=200)
    parser.add_argument("--warmup", type=int, default=20)
    args = parser.parse_args(argv)

    vocab = synthetic_vocab(args.words)
    trie = Trie()
    t0 = time.perf_counter()
    for w in vocab:
        trie.insert(w)
    print(f"inserted {len(vocab)} words ({len(trie)} distinct) in {time.perf_counter() - t0:.3f}s")

    prefixes = sorted({w[:2] for w in vocab})
    times = profile(trie, prefixes, runs=args.runs, warmup=args.warmup)
    print("calls:", len(times))
    print("mean ms:", round(statistics.mean(times), 4))
    print("median ms:", round(statistics.median(times), 4))
    print("p99 ms:", round(sorted(times)[max(int(len(times) * 0.99) - 1, 0)], 4))
    return times


if __name__ == "__main__":
    main()
