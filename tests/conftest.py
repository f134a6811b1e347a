"""Shared fixtures for textmine tests."""

import pytest

from textmine import KNN, JaccardMode, TopicRecord


@pytest.fixture
def corpus():
    """Small tokenized newswire corpus; document order defines ids."""
    return [
        ["wheat", "export", "grain", "wheat"],
        ["share", "profit", "quarter", "profit"],
        ["grain", "harvest", "wheat"],
        ["profit", "dividend", "share"],
        ["crude", "barrel", "export"],
    ]


@pytest.fixture
def topics():
    return [
        TopicRecord(0, "grain,wheat"),
        TopicRecord(1, "earn"),
        TopicRecord(2, "unknown"),
        TopicRecord(3, "earn,acq"),
        TopicRecord(4, "unknown"),
    ]


@pytest.fixture
def set_knn():
    """Set-mode classifier with a MinHash index over word rows."""
    return KNN(
        [
            ["wheat", "grain", "harvest", "grain"],
            ["profit", "share", "dividend", "earn"],
            ["crude", "barrel", "opec", "crude"],
        ],
        use_minhash=True,
        mode=JaccardMode.SET,
    )
