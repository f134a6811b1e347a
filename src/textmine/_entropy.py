"""Entropy-based purity of externally produced clusterings."""

from __future__ import annotations

import math
from collections import Counter
from typing import Hashable, Mapping, Sequence

from ._errors import check_sizes
from ._types import ClusterEntropy, ClusterReport


def entropy(label_counts: Mapping[Hashable, int], total: int) -> float:
    """Shannon entropy in bits of a label distribution.

    A single-label distribution has entropy 0. Zero counts contribute
    nothing, and a non-positive ``total`` yields 0.0.
    """
    if total <= 0:
        return 0.0
    h = 0.0
    for count in label_counts.values():
        if count <= 0:
            continue
        p = count / total
        h -= p * math.log2(p)
    return h


def evaluate(
    ground_truth: Sequence[Hashable], cluster_ids: Sequence[Hashable]
) -> ClusterReport:
    """Per-cluster and overall entropy of a clustering against true labels.

    Clusters are reported in order of first appearance. Each cluster's
    entropy is weighted by its share of all rows; the overall entropy is
    the sum of the weighted values (lower means purer clusters).

    Raises:
        SizeMismatchError: If the two sequences differ in length.
    """
    check_sizes("ground truth labels", ground_truth, "cluster ids", cluster_ids)

    members: dict[Hashable, Counter] = {}
    for label, cluster in zip(ground_truth, cluster_ids):
        members.setdefault(cluster, Counter())[label] += 1

    n_rows = len(cluster_ids)
    clusters: list[ClusterEntropy] = []
    total_entropy = 0.0
    for cluster, counts in members.items():
        size = sum(counts.values())
        h = entropy(counts, size)
        weighted = h * size / n_rows
        total_entropy += weighted
        clusters.append(ClusterEntropy(
            cluster_id=cluster,
            size=size,
            entropy=h,
            weighted_entropy=weighted,
        ))

    return ClusterReport(
        clusters=clusters, total_entropy=total_entropy, n_rows=n_rows,
    )
