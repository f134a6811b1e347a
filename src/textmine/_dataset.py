"""Training/testing row extraction from scored documents and topic labels."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, Mapping, Sequence, Union

from ._errors import check_sizes
from ._types import UNKNOWN, DataSplit, Layout, Row, TopicRecord

logger = logging.getLogger(__name__)

TopicLabel = Union[TopicRecord, Mapping[str, str], str]


def topics_of(label: TopicLabel) -> str:
    """Raw comma-joined topic string of a label record.

    Raises:
        TypeError: If the record is not a supported shape or its topics are
            not a string.
    """
    match label:
        case str():
            return label
        case TopicRecord(topics=str() as topics) | {"topics": str() as topics}:
            return topics
        case _:
            raise TypeError(f"Unsupported topic label: {label!r}")


def primary_topic(topics: str) -> str:
    """First comma-separated topic; the rest of a multi-label entry is dropped."""
    return topics.split(",", 1)[0].strip()


def retain_top_k(features: Mapping[str, float], top_k: int) -> dict[str, float]:
    """Keep the first ``top_k`` ranked features, or all of them if negative.

    Relies on the mapping's insertion order being its ranking.
    """
    if top_k < 0:
        return dict(features)
    return dict(islice(features.items(), top_k))


def canonical_feature_keys(rows: Iterable[Mapping[str, float]]) -> list[str]:
    """Union of feature keys over all rows, in order of first appearance."""
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def _emit(
    features: Mapping[str, float], keys: Sequence[str], layout: Layout
) -> Row:
    if layout is Layout.DENSE:
        return list(features.values())
    if layout is Layout.KEYED:
        return [features.get(key) for key in keys]
    return [1 if key in features else 0 for key in keys]


def extract(
    rows: Sequence[Mapping[str, float]],
    labels: Sequence[TopicLabel],
    top_k: int = -1,
    layout: Layout = Layout.DENSE,
    feature_keys: Sequence[str] | None = None,
) -> DataSplit:
    """Partition scored documents into training rows and testing rows.

    Documents labelled UNKNOWN become testing rows, every other document a
    training row with its first topic appended as the trailing label.

    Args:
        rows: Per-document feature mappings, ranked by descending weight.
        labels: Topic record per document, index-aligned with ``rows``.
        top_k: Features retained per row; negative retains all.
        layout: DENSE (values only), KEYED (None when absent) or
            PRESENCE (1/0) columns.
        feature_keys: Canonical key set for the keyed layouts. Defaults to
            the union of retained keys over all rows.

    Raises:
        SizeMismatchError: If ``rows`` and ``labels`` differ in length.
    """
    check_sizes("rows", rows, "labels", labels)

    ranked = [retain_top_k(row, top_k) for row in rows]
    if layout is Layout.DENSE:
        keys: list[str] = []
    elif feature_keys is not None:
        keys = list(feature_keys)
    else:
        keys = canonical_feature_keys(ranked)

    training: list[Row] = []
    testing: list[Row] = []
    training_ids: list[int] = []
    testing_ids: list[int] = []
    for docid, (features, label) in enumerate(zip(ranked, labels)):
        topics = topics_of(label)
        values = _emit(features, keys, layout)
        if topics == UNKNOWN:
            testing.append(values)
            testing_ids.append(docid)
        else:
            values.append(primary_topic(topics))
            training.append(values)
            training_ids.append(docid)

    logger.debug(
        "Extracted %d training and %d testing rows (%s layout, top_k=%d)",
        len(training), len(testing), layout.value, top_k,
    )
    return DataSplit(
        training=training,
        testing=testing,
        feature_keys=keys,
        layout=layout,
        training_ids=training_ids,
        testing_ids=testing_ids,
    )


def training_set(
    rows: Sequence[Mapping[str, float]],
    labels: Sequence[TopicLabel],
    top_k: int = -1,
    layout: Layout = Layout.DENSE,
    feature_keys: Sequence[str] | None = None,
) -> list[Row]:
    """Rows of labelled documents, each with a trailing label."""
    return extract(rows, labels, top_k, layout, feature_keys).training


def testing_set(
    rows: Sequence[Mapping[str, float]],
    labels: Sequence[TopicLabel],
    top_k: int = -1,
    layout: Layout = Layout.DENSE,
    feature_keys: Sequence[str] | None = None,
) -> list[Row]:
    """Rows of UNKNOWN documents, without a label."""
    return extract(rows, labels, top_k, layout, feature_keys).testing
