"""Domain normalization helpers."""


def normalize_key(value: str | None, default: str = "") -> str:
    """Normalize a grouping key.

    Keys are trimmed and upper-cased once at the aggregator boundary so that
    ``" libano"`` and ``"LIBANO"`` accumulate together.

    Args:
        value: Raw key value from a record.
        default: Value returned for a missing or blank key.

    Returns:
        str: Normalized key, or ``default``.
    """
    if not value:
        return default
    cleaned = value.strip()
    return cleaned.upper() if cleaned else default


__all__ = ["normalize_key"]
