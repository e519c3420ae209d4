"""Metric name helpers for turning arbitrary payload keys into Prometheus names."""

import re

# ASCII-only; re.ASCII keeps the class from matching non-ASCII letters or digits
_INVALID_KEY_CHARS = re.compile(r"[^a-zA-Z0-9:_]", re.ASCII)


def sanitize_key(key: str) -> str:
    """
    Convert any key string into a Prometheus-acceptable name fragment.

    Every disallowed character becomes its own underscore, so
    ``"a..b"`` maps to ``"a__b"``.

    Args:
        key: Raw key as received from the endpoint

    Returns:
        str: Key containing only ``[a-zA-Z0-9:_]``
    """
    return _INVALID_KEY_CHARS.sub("_", key)


def build_fq_name(namespace: str, name: str) -> str:
    """Join non-empty name parts with underscores."""
    return "_".join(part for part in (namespace, name) if part)
