"""KNN: nearest-neighbour topic classifier over Jaccard or MinHash similarity."""

from __future__ import annotations

import logging
import re
from functools import partial
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Literal, Mapping, Sequence, Union

from ._errors import IndexNotBuiltError
from ._similarity import jaccard_coefficient, minhash
from ._types import UNKNOWN, JaccardMode, Neighbor, Row, Scalar, Token, Tokens

if TYPE_CHECKING:
    from concurrent.futures import Executor
    from pathlib import Path

logger = logging.getLogger(__name__)

RowInput = Union[Scalar, Tokens, str, Sequence[Token]]

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_field(field: str) -> Token:
    """Numeric text becomes an int or float; anything else stays a string."""
    if _INT_RE.fullmatch(field):
        return int(field)
    if _FLOAT_RE.fullmatch(field):
        return float(field)
    return field


def split_line(line: str) -> Row:
    """Split a comma-delimited line into typed fields, dropping empty ones."""
    return [parse_field(f) for f in (field.strip() for field in line.split(",")) if f]


def _as_variant(row: RowInput) -> Scalar | Tokens:
    match row:
        case Scalar() | Tokens():
            return row
        case str():
            return Scalar(row)
        case _:
            return Tokens.of(row)


def split_row(row: RowInput) -> Row:
    """Turn a comma-delimited line or a token sequence into a token list.

    Lines are split on commas with empty fields dropped. Numeric fields are
    parsed so a line scores exactly like the equivalent list.
    """
    match _as_variant(row):
        case Scalar(text=text):
            return split_line(text)
        case Tokens(tokens=tokens):
            return list(tokens)


def _split_label(tokens: Row) -> tuple[Row, str]:
    if not tokens:
        return [], UNKNOWN
    return tokens[:-1], str(tokens[-1])


def build_signature_index(
    rows: Iterable[Sequence[Token]], labels: Iterable[str]
) -> dict[int, str]:
    """MinHash signature -> label for every row that has a signature.

    On a collision the earliest row keeps the bucket.
    """
    signatures: dict[int, str] = {}
    collisions = 0
    for features, label in zip(rows, labels):
        sig = minhash(features)
        if sig is None:
            continue
        if sig in signatures:
            collisions += 1
            continue
        signatures[sig] = label
    logger.debug(
        "Built signature index: %d buckets, %d collisions",
        len(signatures), collisions,
    )
    return signatures


class KNN:
    """1-nearest-neighbour classifier over a fixed training set.

    Training rows are token sequences whose last element is the label.
    With ``use_minhash=True`` the signature index is built once here (the
    offline cost); each MinHash classification is then one hash pass over
    the query plus a dict lookup (the online cost). Jaccard classification
    scans every training row per query.
    """

    __slots__ = ("_rows", "_labels", "_mode", "_signatures")

    def __init__(
        self,
        training_set: Iterable[RowInput],
        *,
        use_minhash: bool = False,
        mode: JaccardMode = JaccardMode.POSITIONAL,
    ) -> None:
        self._rows: list[Row] = []
        self._labels: list[str] = []
        for row in training_set:
            features, label = _split_label(split_row(row))
            self._rows.append(features)
            self._labels.append(label)
        self._mode = mode
        self._signatures: dict[int, str] | None = None
        if use_minhash:
            self._signatures = build_signature_index(self._rows, self._labels)

    @classmethod
    def from_file(cls, path: Path | str, **kwargs) -> KNN:
        """Load training rows from a line-oriented comma-delimited file."""
        from ._loader import read_rows

        return cls(read_rows(path), **kwargs)

    @classmethod
    def _restore(
        cls,
        rows: list[Row],
        labels: list[str],
        signatures: dict[int, str] | None,
        mode: JaccardMode,
    ) -> KNN:
        """Rebuild a classifier from snapshot data without rehashing."""
        knn = cls.__new__(cls)
        knn._rows = rows
        knn._labels = labels
        knn._mode = mode
        knn._signatures = signatures
        return knn

    # -- Introspection --

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def mode(self) -> JaccardMode:
        return self._mode

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    @property
    def feature_rows(self) -> list[Row]:
        """Training rows without their labels."""
        return [list(row) for row in self._rows]

    @property
    def training_set(self) -> list[Row]:
        """Training rows with their trailing labels."""
        return [row + [label] for row, label in zip(self._rows, self._labels)]

    @property
    def signature_index(self) -> Mapping[int, str] | None:
        if self._signatures is None:
            return None
        return MappingProxyType(self._signatures)

    # -- Jaccard classification --

    def jaccard_scores(
        self,
        query: RowInput,
        *,
        has_label: bool = False,
        executor: Executor | None = None,
    ) -> list[float]:
        """Similarity of ``query`` to every training row, in training order.

        Args:
            query: Row to compare.
            has_label: Drop the query's trailing label before comparing.
            executor: Optional executor to score training rows in parallel.
                ``Executor.map`` keeps input order, so results are identical.
        """
        tokens = self._query_tokens(query, has_label)
        score = partial(jaccard_coefficient, b=tokens, mode=self._mode)
        if executor is None:
            return [score(row) for row in self._rows]
        return list(executor.map(score, self._rows))

    def nearest_by_jaccard(
        self,
        query: RowInput,
        *,
        has_label: bool = False,
        executor: Executor | None = None,
    ) -> Neighbor:
        """Best-scoring training row for ``query``.

        The first row seeds the candidate even at score 0.0; later rows
        replace it only with a strictly greater score, so ties keep the
        earliest row. An empty training set yields UNKNOWN.
        """
        scores = self.jaccard_scores(query, has_label=has_label, executor=executor)
        best_score = 0.0
        best_index = -1
        for i, s in enumerate(scores):
            if best_index < 0 or s > best_score:
                best_score = s
                best_index = i
        if best_index < 0:
            return Neighbor(label=UNKNOWN, score=0.0, index=-1)
        return Neighbor(
            label=self._labels[best_index], score=best_score, index=best_index,
        )

    def classify_by_jaccard(
        self,
        query: RowInput,
        *,
        has_label: bool = False,
        executor: Executor | None = None,
    ) -> str:
        return self.nearest_by_jaccard(
            query, has_label=has_label, executor=executor,
        ).label

    # -- MinHash classification --

    def query_signature(
        self, query: RowInput, *, has_label: bool = False
    ) -> int | None:
        return minhash(self._query_tokens(query, has_label))

    def classify_by_minhash(
        self, query: RowInput, *, has_label: bool = False
    ) -> str:
        """Exact signature-bucket lookup; a miss yields UNKNOWN.

        Raises:
            IndexNotBuiltError: If the classifier was built without
                ``use_minhash=True``.
        """
        if self._signatures is None:
            raise IndexNotBuiltError(
                "classifier was built without a signature index; "
                "construct it with use_minhash=True"
            )
        sig = self.query_signature(query, has_label=has_label)
        if sig is None:
            return UNKNOWN
        return self._signatures.get(sig, UNKNOWN)

    # -- Batch API --

    def classify_batch(
        self,
        queries: Iterable[RowInput],
        method: Literal["jaccard", "minhash"] = "jaccard",
        *,
        has_label: bool = False,
        executor: Executor | None = None,
    ) -> list[str]:
        """One label per query, in input order."""
        if method == "minhash":
            return [self.classify_by_minhash(q, has_label=has_label) for q in queries]
        if method == "jaccard":
            return [
                self.classify_by_jaccard(q, has_label=has_label, executor=executor)
                for q in queries
            ]
        raise ValueError(f"method must be 'jaccard' or 'minhash', got {method!r}")

    def nearest_batch(
        self,
        queries: Iterable[RowInput],
        *,
        has_label: bool = False,
        executor: Executor | None = None,
    ) -> list[Neighbor]:
        """Best Jaccard neighbour (label and score) per query, in input order."""
        return [
            self.nearest_by_jaccard(q, has_label=has_label, executor=executor)
            for q in queries
        ]

    # -- Internal methods --

    @staticmethod
    def _query_tokens(query: RowInput, has_label: bool) -> Row:
        tokens = split_row(query)
        if has_label and tokens:
            return tokens[:-1]
        return tokens
