"""Tests for training/testing row extraction."""

import pytest

from textmine import (
    UNKNOWN,
    Layout,
    SizeMismatchError,
    TopicRecord,
    extract,
    testing_set,
    training_set,
)
from textmine._dataset import primary_topic, retain_top_k, topics_of

ROWS = [
    {"wheat": 0.9, "grain": 0.5, "export": 0.1},
    {"profit": 0.8, "share": 0.4},
    {"grain": 0.7, "harvest": 0.6},
    {"crude": 0.3},
]
LABELS = ["grain,wheat", "earn", UNKNOWN, "crude"]


def test_size_mismatch():
    with pytest.raises(SizeMismatchError) as exc_info:
        extract(ROWS, LABELS[:3])
    err = exc_info.value
    assert (err.left_size, err.right_size) == (4, 3)
    assert "4" in str(err) and "3" in str(err)


def test_size_mismatch_is_value_error():
    with pytest.raises(ValueError):
        training_set(ROWS[:1], LABELS)
    with pytest.raises(ValueError):
        testing_set(ROWS, LABELS[:1])


def test_partition():
    split = extract(ROWS, LABELS)
    assert split.training_ids == [0, 1, 3]
    assert split.testing_ids == [2]
    assert len(split.training) == 3
    assert len(split.testing) == 1


def test_dense_rows():
    split = extract(ROWS, LABELS)
    assert split.training[0] == [0.9, 0.5, 0.1, "grain"]
    assert split.training[1] == [0.8, 0.4, "earn"]
    assert split.testing[0] == [0.7, 0.6]
    assert split.feature_keys == []
    assert split.layout is Layout.DENSE


def test_first_topic_is_label():
    rows = training_set(ROWS, LABELS)
    assert [row[-1] for row in rows] == ["grain", "earn", "crude"]


def test_keyed_rows():
    split = extract(ROWS, LABELS, layout=Layout.KEYED)
    assert split.feature_keys == [
        "wheat", "grain", "export", "profit", "share", "harvest", "crude",
    ]
    assert split.training[1] == [None, None, None, 0.8, 0.4, None, None, "earn"]
    assert split.testing[0] == [None, 0.7, None, None, None, 0.6, None]


def test_presence_rows():
    split = extract(ROWS, LABELS, layout=Layout.PRESENCE)
    assert split.training[0] == [1, 1, 1, 0, 0, 0, 0, "grain"]
    assert split.testing[0] == [0, 1, 0, 0, 0, 1, 0]


def test_explicit_feature_keys():
    split = extract(ROWS, LABELS, layout=Layout.KEYED, feature_keys=["grain", "crude"])
    assert split.feature_keys == ["grain", "crude"]
    assert split.training[0] == [0.5, None, "grain"]
    assert split.training[2] == [None, 0.3, "crude"]


def test_top_k_negative_keeps_all():
    rows = training_set(ROWS, LABELS, top_k=-1)
    assert rows[0] == [0.9, 0.5, 0.1, "grain"]


def test_top_k_zero_keeps_none():
    split = extract(ROWS, LABELS, top_k=0)
    assert split.training == [["grain"], ["earn"], ["crude"]]
    assert split.testing == [[]]


def test_top_k_limits_features():
    rows = training_set(ROWS, LABELS, top_k=1)
    assert rows == [[0.9, "grain"], [0.8, "earn"], [0.3, "crude"]]


def test_top_k_at_least_feature_count():
    assert training_set(ROWS, LABELS, top_k=3) == training_set(ROWS, LABELS)
    assert training_set(ROWS, LABELS, top_k=50) == training_set(ROWS, LABELS)


def test_top_k_restricts_keyed_columns():
    split = extract(ROWS, LABELS, top_k=1, layout=Layout.KEYED)
    assert split.feature_keys == ["wheat", "profit", "grain", "crude"]


def test_retain_top_k_preserves_rank_order():
    ranked = {"c": 3.0, "a": 2.0, "b": 1.0}
    assert list(retain_top_k(ranked, 2)) == ["c", "a"]
    assert list(retain_top_k(ranked, -5)) == ["c", "a", "b"]


def test_label_records():
    labels = [
        TopicRecord(0, "grain"),
        {"docid": 1, "topics": "earn,acq"},
        "unknown",
        TopicRecord(3, "crude"),
    ]
    split = extract(ROWS, labels)
    assert [row[-1] for row in split.training] == ["grain", "earn", "crude"]
    assert split.testing_ids == [2]


def test_unsupported_label():
    with pytest.raises(TypeError):
        topics_of(42)  # type: ignore[arg-type]


def test_non_string_topics_rejected():
    with pytest.raises(TypeError):
        topics_of({"docid": 4, "topics": None})  # type: ignore[dict-item]
    with pytest.raises(TypeError):
        topics_of(TopicRecord(5, None))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        extract([{"oil": 1.0}], [{"docid": 0, "topics": None}])  # type: ignore[list-item]


def test_primary_topic():
    assert primary_topic("earn,acq") == "earn"
    assert primary_topic(" grain , wheat") == "grain"
    assert primary_topic("crude") == "crude"


def test_from_tfidf_scores(corpus, topics):
    from textmine import TfidfEngine

    scores = TfidfEngine(corpus).score()
    split = extract(scores, topics, top_k=2)
    assert split.training_ids == [0, 1, 3]
    assert split.testing_ids == [2, 4]
    assert [row[-1] for row in split.training] == ["grain", "earn", "earn"]
    for row in split.training:
        assert len(row) == 3
