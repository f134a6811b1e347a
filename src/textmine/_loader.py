"""File-backed helpers kept outside the in-memory core.

The scoring, extraction and classification modules never touch the
filesystem. This module adds two optional conveniences on top of them:
reading comma-delimited training rows from disk, and saving or restoring
a built classifier as a msgpack snapshot with SHA-256 checksum verification.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import TextmineChecksumError, TextmineError, TextmineVersionError
from ._knn import KNN, split_line
from ._types import JaccardMode, Row

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = "1.0"

_ROWS_FILE = "rows.bin"
_SIGNATURES_FILE = "signatures.bin"
_DATA_FILES = (_ROWS_FILE, _SIGNATURES_FILE)


def read_rows(path: Path | str) -> list[Row]:
    """Read comma-delimited rows, one per non-blank line."""
    rows: list[Row] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            row = split_line(line)
            if row:
                rows.append(row)
    logger.debug("Read %d rows from %s", len(rows), path)
    return rows


# -- Snapshots --

def _file_digest(path: Path) -> str:
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        while block := f.read(1 << 16):
            digest.update(block)
    return digest.hexdigest()


def _verify_snapshot(directory: Path) -> None:
    """Check the manifest version and every data file's checksum."""
    try:
        manifest = json.loads((directory / "manifest.json").read_text())
    except FileNotFoundError:
        raise TextmineError(f"manifest.json not found in {directory}") from None

    if manifest.get("version") != _SNAPSHOT_VERSION:
        raise TextmineVersionError(
            f"Expected snapshot version {_SNAPSHOT_VERSION!r}, "
            f"got {manifest.get('version')!r}"
        )

    recorded = manifest.get("files", {})
    for name in _DATA_FILES:
        path = directory / name
        if not path.is_file():
            raise TextmineError(f"Missing snapshot file: {path}")
        if name not in recorded:
            raise TextmineError(f"No checksum in manifest for {name}")
        if _file_digest(path) != recorded[name]:
            raise TextmineChecksumError(f"Checksum mismatch for {name}")


def _write_packed(path: Path, obj: Any) -> None:
    with open(path, "wb") as f:
        msgpack.pack(obj, f, use_bin_type=True)


def _read_packed(path: Path, **kwargs: Any) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpack(f, raw=False, **kwargs)


def save_snapshot(knn: KNN, directory: Path | str) -> Path:
    """Persist a classifier's training rows and signature index.

    Writes msgpack data files plus a manifest.json carrying the snapshot
    version and the SHA-256 of each data file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    signatures = knn.signature_index
    _write_packed(directory / _ROWS_FILE, {
        "mode": knn.mode.value,
        "rows": knn.feature_rows,
        "labels": knn.labels,
    })
    _write_packed(
        directory / _SIGNATURES_FILE,
        None if signatures is None else dict(signatures),
    )

    manifest = {
        "version": _SNAPSHOT_VERSION,
        "files": {name: _file_digest(directory / name) for name in _DATA_FILES},
    }
    (directory / "manifest.json").write_text(json.dumps(manifest, indent=2))

    logger.debug("Saved snapshot of %d rows to %s", len(knn), directory)
    return directory


def load_snapshot(directory: Path | str) -> KNN:
    """Restore a classifier saved by save_snapshot without rehashing rows.

    Raises:
        TextmineError: If the manifest or a data file is missing.
        TextmineVersionError: If the snapshot version is not supported.
        TextmineChecksumError: If a data file fails verification.
    """
    directory = Path(directory)
    _verify_snapshot(directory)

    payload = _read_packed(directory / _ROWS_FILE)
    # signature keys are integers
    signatures = _read_packed(directory / _SIGNATURES_FILE, strict_map_key=False)

    knn = KNN._restore(
        rows=payload["rows"],
        labels=payload["labels"],
        signatures=signatures,
        mode=JaccardMode(payload["mode"]),
    )
    logger.debug("Loaded snapshot of %d rows from %s", len(knn), directory)
    return knn
