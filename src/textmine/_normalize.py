"""Text normalization: tokenize, filter and stem raw document text."""

from __future__ import annotations

import re

import Stemmer

from ._config import MinerConfig
from ._stop_words import STOP_WORDS
from ._types import Scalar, Tokens

_SINGLE_NEWLINE_RE = re.compile(r"(?<!\n)\n(?!\n)")
_NON_WORD_RE = re.compile(r"\W+")
_LEADING_DIGITS_RE = re.compile(r"\d+")


def _is_number(word: str) -> bool:
    """True when the word starts with a non-zero digit run ("1987", "3rd", "10k").

    "0" and "0th" do not count; their leading value is zero.
    """
    m = _LEADING_DIGITS_RE.match(word)
    return m is not None and int(m.group()) != 0


class Normalizer:
    """Turns raw text into the token lists the scoring engine consumes.

    All switches come from the MinerConfig passed in; nothing is read from
    module or process state.
    """

    __slots__ = ("_config", "_stemmer")

    def __init__(self, config: MinerConfig | None = None) -> None:
        self._config = config if config is not None else MinerConfig()
        self._stemmer = (
            Stemmer.Stemmer("english") if self._config.enable_stemming else None
        )

    @property
    def config(self) -> MinerConfig:
        return self._config

    def normalize(self, value: Scalar | Tokens) -> list[str]:
        """Normalize a text into tokens, or each field of a token list.

        ``Scalar(text)`` yields one token per surviving word. ``Tokens(fields)``
        yields one comma-joined string of normalized words per non-None field.
        """
        match value:
            case Scalar(text=text):
                return self.tokenize(text)
            case Tokens(tokens=fields):
                return [
                    ",".join(self.tokenize(str(f))) for f in fields if f is not None
                ]
            case _:
                raise TypeError(f"Expected Scalar or Tokens, got {value!r}")

    def tokenize(self, text: str) -> list[str]:
        """Split, filter and (optionally) stem one piece of text."""
        flat = _SINGLE_NEWLINE_RE.sub(" ", text).lower().strip()
        words = [w for w in _NON_WORD_RE.split(flat) if w]
        words = self._filter(words)
        if self._stemmer is not None:
            words = self._stemmer.stemWords(words)
        return words

    def normalize_corpus(self, texts: list[str]) -> list[list[str]]:
        return [self.tokenize(t) for t in texts]

    # -- Internal methods --

    def _filter(self, words: list[str]) -> list[str]:
        cfg = self._config
        if cfg.filter_numbers:
            words = [w for w in words if not _is_number(w)]
        if cfg.filter_words_less_than > 1:
            words = [w for w in words if len(w) >= cfg.filter_words_less_than]
        if cfg.remove_stop_words:
            words = [w for w in words if w not in STOP_WORDS]
        return words
