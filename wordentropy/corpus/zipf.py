"""Synthetic word distributions following Zipf's law."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

# The fifty most frequent English words, in rank order.
COMMON_ENGLISH_WORDS: Tuple[str, ...] = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "I",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
    "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
)  # fmt: skip


@dataclass(frozen=True)
class ZipfConfig:
    """Parameters of the rank/frequency power law."""

    base_frequency: float = 1000.0
    exponent: float = 1.1
    min_frequency: int = 1

    def __post_init__(self) -> None:
        if not np.isfinite(self.base_frequency) or self.base_frequency <= 0:
            raise ValueError("base_frequency must be a positive finite number.")
        if not np.isfinite(self.exponent) or self.exponent < 0:
            raise ValueError("exponent must be a non-negative finite number.")
        if self.min_frequency < 0:
            raise ValueError("min_frequency cannot be negative.")


def zipf_distribution(
    words: Sequence[str] = COMMON_ENGLISH_WORDS,
    config: Optional[ZipfConfig] = None,
) -> Dict[str, int]:
    """Assign each word a count inversely proportional to a power of its rank.

    Ranks start at 1, so ``words[0]`` receives ``base_frequency``. Counts are
    truncated to integers and floored at ``min_frequency``.
    """
    if len(set(words)) != len(words):
        raise ValueError("words must not contain duplicates.")

    cfg = config or ZipfConfig()
    ranks = np.arange(1, len(words) + 1, dtype=float)
    frequencies = np.floor(cfg.base_frequency / np.power(ranks, cfg.exponent)).astype(int)
    frequencies = np.maximum(frequencies, cfg.min_frequency)
    return {word: int(frequency) for word, frequency in zip(words, frequencies)}


__all__ = ["COMMON_ENGLISH_WORDS", "ZipfConfig", "zipf_distribution"]
