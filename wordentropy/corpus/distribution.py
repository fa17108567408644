"""Helpers for turning raw text and count listings into frequency distributions."""

from __future__ import annotations

import re
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Mapping

_WORD_PATTERN = re.compile(r"\w+")


def tokenize(text: str, lowercase: bool = True) -> List[str]:
    """Split ``text`` into word tokens."""
    if lowercase:
        text = text.lower()
    return _WORD_PATTERN.findall(text)


def count_tokens(tokens: Iterable[str]) -> Dict[str, int]:
    """Count occurrences of each token."""
    return dict(Counter(tokens))


def count_characters(word: str) -> Dict[str, int]:
    """Per-character counts of ``word``; each code point is its own symbol."""
    return dict(Counter(word))


def distribution_from_text(text: str, lowercase: bool = True) -> Dict[str, int]:
    """Word frequency distribution of ``text``."""
    return count_tokens(tokenize(text, lowercase=lowercase))


def load_text_distribution(path: Path, encoding: str = "utf-8", lowercase: bool = True) -> Dict[str, int]:
    """Read a text file and return its word frequency distribution."""
    if not path.is_file():
        raise ValueError(f"Text file not found: {path}")
    return distribution_from_text(path.read_text(encoding=encoding), lowercase=lowercase)


def to_count(value: object) -> int:
    """Convert ``value`` to a non-negative integer count."""
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer count, received {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Expected an integer count, received {value!r}")
        value = int(value)
    try:
        count = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to a count") from exc
    if count < 0:
        raise ValueError(f"Counts cannot be negative, received {count}")
    return count


def ensure_counts(distribution: Mapping[str, object]) -> Dict[str, int]:
    """Return a copy of ``distribution`` with every count checked and coerced to int."""
    return {symbol: to_count(value) for symbol, value in distribution.items()}


def parse_counts(pairs: Iterable[str]) -> Dict[str, int]:
    """Parse ``symbol=count`` strings into a distribution.

    Repeated symbols accumulate.
    """
    counts: Dict[str, int] = {}
    for pair in pairs:
        symbol, sep, raw_count = pair.rpartition("=")
        if not sep or not symbol:
            raise ValueError(f"Expected 'symbol=count', received {pair!r}")
        counts[symbol] = counts.get(symbol, 0) + to_count(raw_count.strip())
    return counts


def total_count(distribution: Mapping[str, int]) -> int:
    """Number of observations in ``distribution``."""
    return sum(distribution.values())


__all__ = [
    "count_characters",
    "count_tokens",
    "distribution_from_text",
    "ensure_counts",
    "load_text_distribution",
    "parse_counts",
    "to_count",
    "tokenize",
    "total_count",
]
