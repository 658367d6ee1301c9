"""Helpers for colon-delimited account paths.

Accounts are identified by their full path string. Parent/child relations are
derived from the path segments, never stored.
"""

SEPARATOR = ":"


def split_path(path: str) -> tuple[str, ...]:
    """Split an account path into its segments."""
    return tuple(path.split(SEPARATOR))


def is_valid_path(path: str) -> bool:
    """Check that a path has no empty segments and no whitespace."""
    if not path or any(ch.isspace() for ch in path):
        return False
    return all(split_path(path))


def normalize_path(path: str) -> str:
    """Strip surrounding whitespace and trailing separators.

    Raises:
        ValueError: If the remaining path is empty or has empty segments
    """
    normalized = path.strip().rstrip(SEPARATOR)
    if not is_valid_path(normalized):
        raise ValueError(f"Invalid account path '{path}'")
    return normalized


def ancestors(path: str) -> list[str]:
    """Return the strict prefixes of a path, outermost first.

    ancestors("Assets:Banking:HDFC") == ["Assets", "Assets:Banking"]
    """
    segments = split_path(path)
    return [SEPARATOR.join(segments[:i]) for i in range(1, len(segments))]


def parent(path: str) -> str | None:
    head, sep, _ = path.rpartition(SEPARATOR)
    return head if sep else None


def is_within(path: str, root: str) -> bool:
    """True when ``path`` is ``root`` itself or one of its descendants."""
    return path == root or path.startswith(root + SEPARATOR)


def sort_key(path: str) -> tuple[str, ...]:
    """Order ancestors before descendants, then siblings lexicographically."""
    return split_path(path)
