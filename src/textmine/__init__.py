"""textmine: TF-IDF scoring and similarity-based topic classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._config import MinerConfig
from ._dataset import extract, testing_set, training_set
from ._entropy import entropy, evaluate
from ._errors import (
    ConfigError,
    IndexNotBuiltError,
    SizeMismatchError,
    TextmineChecksumError,
    TextmineError,
    TextmineVersionError,
    check_sizes,
)
from ._knn import KNN, build_signature_index
from ._loader import load_snapshot, read_rows, save_snapshot
from ._similarity import jaccard_coefficient, minhash
from ._stop_words import STOP_WORDS
from ._tfidf import TfidfEngine
from ._types import (
    UNKNOWN,
    ClusterEntropy,
    ClusterReport,
    DataSplit,
    JaccardMode,
    Layout,
    Neighbor,
    Prepared,
    Scalar,
    Tokens,
    TopicRecord,
)

if TYPE_CHECKING:
    from typing import Sequence

    from ._dataset import TopicLabel

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "prepare",
    "ClusterEntropy",
    "ClusterReport",
    "ConfigError",
    "DataSplit",
    "IndexNotBuiltError",
    "JaccardMode",
    "KNN",
    "Layout",
    "MinerConfig",
    "Neighbor",
    "Normalizer",
    "Prepared",
    "Scalar",
    "SizeMismatchError",
    "STOP_WORDS",
    "TextmineChecksumError",
    "TextmineError",
    "TextmineVersionError",
    "TfidfEngine",
    "Tokens",
    "TopicRecord",
    "UNKNOWN",
    "build_signature_index",
    "entropy",
    "evaluate",
    "extract",
    "jaccard_coefficient",
    "load_snapshot",
    "minhash",
    "read_rows",
    "save_snapshot",
    "testing_set",
    "training_set",
]


def prepare(
    documents: Sequence[Sequence[str]],
    topics: Sequence[TopicLabel],
    config: MinerConfig | None = None,
    layout: Layout = Layout.DENSE,
) -> Prepared:
    """Score a tokenized corpus and split it into training/testing rows.

    Args:
        documents: Token list per document.
        topics: Topic record per document, index-aligned with ``documents``.
        config: Supplies ``retain_top_k_words``. Defaults to MinerConfig().
        layout: Column layout of the extracted rows.

    Raises:
        SizeMismatchError: If ``documents`` and ``topics`` differ in length.
    """
    if config is None:
        config = MinerConfig()
    check_sizes("documents", documents, "topics", topics)

    scores = TfidfEngine(documents).score()
    split = extract(scores, topics, config.retain_top_k_words, layout)
    return Prepared(scores=scores, split=split)


# Deferred import so Normalizer is available as textmine.Normalizer
# without loading the Snowball stemmer for pure scoring use.
def __getattr__(name: str):
    if name == "Normalizer":
        from ._normalize import Normalizer
        return Normalizer
    raise AttributeError(f"module 'textmine' has no attribute {name!r}")
