"""TfidfEngine: corpus-wide document frequencies and per-document TF-IDF."""

from __future__ import annotations

import logging
import math
from collections import Counter
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)


class TfidfEngine:
    """TF-IDF weighting over a fixed corpus of token lists.

    The corpus order defines document ids. The document-frequency index is
    built on first use and never changes afterwards.
    """

    __slots__ = ("_corpus", "_doc_freq")

    def __init__(self, corpus: Iterable[Sequence[str]]) -> None:
        self._corpus: list[Sequence[str]] = list(corpus)
        self._doc_freq: Mapping[str, int] | None = None

    @property
    def corpus_size(self) -> int:
        return len(self._corpus)

    @property
    def document_frequencies(self) -> Mapping[str, int]:
        """Read-only term -> number of documents containing the term."""
        if self._doc_freq is None:
            self._doc_freq = self._build_index()
        return self._doc_freq

    def document_frequency(self, term: str) -> int:
        return self.document_frequencies.get(term, 0)

    # -- Scoring --

    @staticmethod
    def term_frequency(document: Sequence[str]) -> dict[str, float]:
        """Occurrences of each term divided by the document length."""
        if not document:
            return {}
        length = float(len(document))
        return {term: count / length for term, count in Counter(document).items()}

    def inverse_document_frequency(self, term: str) -> float:
        """log10(N / (1 + df)); the +1 keeps unseen terms finite.

        A term found in every document gets a negative weight. An empty
        corpus weighs every term 0.0.
        """
        if not self._corpus:
            return 0.0
        return math.log10(self.corpus_size / (1.0 + self.document_frequency(term)))

    def score_document(self, document: Sequence[str]) -> dict[str, float]:
        """TF-IDF weights of one document, ordered by descending weight."""
        weights = [
            (term, tf * self.inverse_document_frequency(term))
            for term, tf in self.term_frequency(document).items()
        ]
        # sorted() is stable, so equal weights keep first-occurrence order
        weights.sort(key=lambda kv: kv[1], reverse=True)
        return dict(weights)

    def score(
        self, corpus: Iterable[Sequence[str]] | None = None
    ) -> list[dict[str, float]]:
        """Score every document of ``corpus`` (default: the engine's own).

        Weights always come from this engine's document-frequency index.
        """
        docs = self._corpus if corpus is None else corpus
        return [self.score_document(doc) for doc in docs]

    # -- Internal methods --

    def _build_index(self) -> Mapping[str, int]:
        doc_freq: Counter[str] = Counter()
        for doc in self._corpus:
            doc_freq.update(set(doc))
        logger.debug(
            "Built document-frequency index: %d documents, %d terms",
            len(self._corpus), len(doc_freq),
        )
        return MappingProxyType(dict(doc_freq))
