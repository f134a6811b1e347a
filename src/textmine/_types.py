"""Data structures for textmine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Hashable, Union

# Topic label of a document that has not been classified yet.
UNKNOWN: str = "unknown"

Token = Union[str, int, float, None]
Row = list[Token]


class JaccardMode(enum.Enum):
    POSITIONAL = "positional"  # aligned feature vectors, absent/absent skipped
    SET = "set"                # plain set ratio over the full sequences


class Layout(enum.Enum):
    DENSE = "dense"        # weights only, position implies the feature
    KEYED = "keyed"        # one slot per canonical key, None when absent
    PRESENCE = "presence"  # one slot per canonical key, 1/0


@dataclass(slots=True, frozen=True)
class Scalar:
    """A single piece of raw text (a sentence, a comma-delimited line)."""

    text: str


@dataclass(slots=True, frozen=True)
class Tokens:
    """An already split sequence of tokens or fields."""

    tokens: tuple[Token, ...]

    @classmethod
    def of(cls, tokens) -> Tokens:
        return cls(tuple(tokens))


@dataclass(slots=True, frozen=True)
class TopicRecord:
    docid: int
    topics: str  # comma-joined topics, or UNKNOWN


@dataclass(slots=True, frozen=True)
class DataSplit:
    training: list[Row]
    testing: list[Row]
    feature_keys: list[str]      # empty for the dense layout
    layout: Layout
    training_ids: list[int] = field(default_factory=list)
    testing_ids: list[int] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class Neighbor:
    label: str
    score: float
    index: int  # training row position, -1 when there is none


@dataclass(slots=True, frozen=True)
class ClusterEntropy:
    cluster_id: Hashable  # as given to evaluate(), not stringified
    size: int
    entropy: float
    weighted_entropy: float


@dataclass(slots=True, frozen=True)
class ClusterReport:
    clusters: list[ClusterEntropy]
    total_entropy: float
    n_rows: int

    def as_rows(self) -> list[tuple[Hashable, int, float, float]]:
        return [
            (c.cluster_id, c.size, c.entropy, c.weighted_entropy)
            for c in self.clusters
        ]


@dataclass(slots=True, frozen=True)
class Prepared:
    scores: list[dict[str, float]]
    split: DataSplit
