"""textmine error types."""


class TextmineError(Exception):
    """Base error for all textmine failures."""


class SizeMismatchError(TextmineError, ValueError):
    """Two inputs that must be index-aligned have different lengths."""

    def __init__(
        self, left_name: str, left_size: int, right_name: str, right_size: int
    ) -> None:
        self.left_name = left_name
        self.left_size = left_size
        self.right_name = right_name
        self.right_size = right_size
        super().__init__(
            f"Size of {left_name} ({left_size}) and "
            f"{right_name} ({right_size}) are not equal"
        )


class IndexNotBuiltError(TextmineError):
    """MinHash lookup requested on a classifier without a signature index."""


class ConfigError(TextmineError, ValueError):
    """Invalid configuration mapping."""


class TextmineVersionError(TextmineError):
    """Snapshot manifest version mismatch."""


class TextmineChecksumError(TextmineError):
    """Snapshot file checksum verification failed."""


def check_sizes(
    left_name: str, left: object, right_name: str, right: object
) -> None:
    """Raise SizeMismatchError unless both sized inputs have equal length."""
    n, m = len(left), len(right)  # type: ignore[arg-type]
    if n != m:
        raise SizeMismatchError(left_name, n, right_name, m)
