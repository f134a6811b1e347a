"""Jaccard coefficient and single-hash MinHash over token sequences."""

from __future__ import annotations

from typing import Sequence

from ._hash import int_hash32, str_hash32
from ._types import JaccardMode, Token


def _is_absent(value: Token) -> bool:
    # 0, 0.0, "" and None all mark a feature missing from a row
    return value is None or value == 0 or value == ""


def _positional_jaccard(a: Sequence[Token], b: Sequence[Token]) -> float:
    """Jaccard over aligned feature vectors.

    The longer sequence is cropped to the shorter one, and positions where
    both sides are absent do not count towards the union.
    """
    n = min(len(a), len(b))
    union = 0
    intersection = 0
    for i in range(n):
        left_absent = _is_absent(a[i])
        right_absent = _is_absent(b[i])
        if left_absent and right_absent:
            continue
        union += 1
        if not left_absent and not right_absent:
            intersection += 1
    if union == 0:
        return 0.0
    return intersection / union


def _set_jaccard(a: Sequence[Token], b: Sequence[Token]) -> float:
    """|A n B| / |A u B| with duplicates collapsed; 0.0 when both are empty."""
    sa = set(a)
    sb = set(b)
    union = len(sa | sb)
    if union == 0:
        return 0.0
    return len(sa & sb) / union


def jaccard_coefficient(
    a: Sequence[Token],
    b: Sequence[Token],
    mode: JaccardMode = JaccardMode.POSITIONAL,
) -> float:
    """Similarity of two token sequences in [0.0, 1.0].

    Args:
        a: First token sequence.
        b: Second token sequence.
        mode: POSITIONAL compares aligned feature vectors (truncated to the
            shorter length). SET compares the distinct tokens of both.
    """
    if mode is JaccardMode.SET:
        return _set_jaccard(a, b)
    return _positional_jaccard(a, b)


def token_hash32(token: Token) -> int:
    """Hash a single non-None token with the family matching its type."""
    if isinstance(token, int) and not isinstance(token, bool):
        return int_hash32(token)
    return str_hash32(str(token))


def minhash(sequence: Sequence[Token]) -> int | None:
    """Minimum 32-bit hash over the non-None tokens of a sequence.

    Returns None when the sequence has no tokens to hash.
    """
    signature: int | None = None
    for token in sequence:
        if token is None:
            continue
        h = token_hash32(token)
        if signature is None or h < signature:
            signature = h
    return signature
