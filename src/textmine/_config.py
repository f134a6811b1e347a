"""Explicit pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from ._errors import ConfigError

# Output switches of the original config.yml; exporting is not done here.
_IGNORED_KEYS = frozenset({"save_output", "output_file"})


@dataclass(slots=True, frozen=True)
class MinerConfig:
    enable_stemming: bool = True
    filter_numbers: bool = True
    filter_words_less_than: int = 4  # <= 1 keeps every word
    retain_top_k_words: int = 10     # negative keeps every feature
    remove_stop_words: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> MinerConfig:
        """Build a config from an already parsed mapping (e.g. a YAML document).

        ``save_output`` and ``output_file`` are accepted and ignored.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(mapping) - set(known) - _IGNORED_KEYS)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, value in mapping.items():
            if name in _IGNORED_KEYS:
                continue
            expected = type(getattr(cls(), name))
            # bool is an int subclass; keep the two apart
            if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if expected is bool and not isinstance(value, bool):
                raise ConfigError(f"{name} must be a boolean, got {value!r}")
            kwargs[name] = value
        return cls(**kwargs)
