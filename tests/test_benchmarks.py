"""Benchmark suite for the offline/online cost split.

The MinHash signature index is built once per classifier (offline); each
MinHash classification is one hash pass plus a dict lookup (online). The
exhaustive Jaccard scan is measured alongside for comparison.

Run:  pytest tests/test_benchmarks.py
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import random

import pytest

from textmine import KNN, JaccardMode, TfidfEngine, build_signature_index, minhash

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Synthetic corpus (fixed seed so every run measures the same data)
# ---------------------------------------------------------------------------

_rng = random.Random(1987)
VOCAB = [f"term{i}" for i in range(2000)]
TOPICS = ["earn", "acq", "grain", "crude", "trade", "money-fx"]

CORPUS = [_rng.sample(VOCAB, 60) for _ in range(500)]
TRAINING = [doc[:30] + [TOPICS[i % len(TOPICS)]] for i, doc in enumerate(CORPUS)]
QUERY = CORPUS[250][:30]


@pytest.fixture(scope="module")
def minhash_knn():
    return KNN(TRAINING, use_minhash=True, mode=JaccardMode.SET)


# ---------------------------------------------------------------------------
# 1. Offline cost
# ---------------------------------------------------------------------------


def test_bench_signature_index_build(benchmark):
    """Offline: one minhash per training row."""
    rows = [row[:-1] for row in TRAINING]
    labels = [row[-1] for row in TRAINING]
    benchmark.extra_info["n_rows"] = len(rows)
    index = benchmark(build_signature_index, rows, labels)
    assert len(index) <= len(rows)


def test_bench_tfidf_score(benchmark):
    """Document-frequency index plus per-document weights for the corpus."""
    benchmark.extra_info["n_docs"] = len(CORPUS)
    benchmark(lambda: TfidfEngine(CORPUS).score())


# ---------------------------------------------------------------------------
# 2. Online cost
# ---------------------------------------------------------------------------


def test_bench_classify_by_minhash(benchmark, minhash_knn):
    """Online: hash the query and look up its bucket."""
    label = benchmark(minhash_knn.classify_by_minhash, QUERY)
    # an earlier row may own the same bucket
    assert label in TOPICS


def test_bench_classify_by_jaccard(benchmark, minhash_knn):
    """Exhaustive scan over every training row."""
    benchmark.extra_info["n_rows"] = len(minhash_knn)
    label = benchmark(minhash_knn.classify_by_jaccard, QUERY)
    assert label == TRAINING[250][-1]


# ---------------------------------------------------------------------------
# 3. Micro-benchmarks
# ---------------------------------------------------------------------------


def test_bench_minhash_row(benchmark):
    benchmark.pedantic(minhash, args=(QUERY,), rounds=1000, iterations=10)
