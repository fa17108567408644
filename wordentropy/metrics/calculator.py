"""Shannon entropy over word and character frequency distributions."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping, Optional

import numpy as np

FrequencyDistribution = Mapping[str, int]

EPSILON = 1e-10
_LN2 = float(np.log(2.0))


def _shannon_bits(counts: Iterable[int], total: int) -> float:
    values = np.fromiter(counts, dtype=float)
    observed = values[values > 0]
    if observed.size == 0:
        return 0.0
    probabilities = observed / float(total)
    # 0.0 - x keeps a lone p == 1 from surfacing as -0.0
    return 0.0 - float(np.sum(probabilities * (np.log(probabilities) / _LN2)))


class WordEntropyCalculator:
    """Entropy scores for word frequency distributions, H = -sum p(x) * log2(p(x)).

    The calculator is stateless; one instance can be shared freely.
    """

    def calculate_entropy(self, distribution: Optional[FrequencyDistribution]) -> float:
        """Entropy in bits of ``distribution``.

        Empty distributions and distributions whose counts sum to zero carry no
        information and score ``0.0``. Zero-count symbols are skipped.
        """
        if not distribution:
            return 0.0

        total = sum(distribution.values())
        if total == 0:
            return 0.0
        return _shannon_bits(distribution.values(), total)

    def calculate_word_entropy(self, word: Optional[str]) -> float:
        """Character-level entropy of a single word."""
        if not word:
            return 0.0
        return _shannon_bits(Counter(word).values(), len(word))

    def get_maximum_entropy(self, vocabulary_size: int) -> float:
        """Entropy of a uniform distribution over ``vocabulary_size`` symbols."""
        if vocabulary_size <= 0:
            return 0.0
        return float(np.log(vocabulary_size) / _LN2)

    def calculate_normalized_entropy(self, distribution: Optional[FrequencyDistribution]) -> float:
        """Entropy scaled into [0, 1] by the maximum for the same vocabulary size."""
        if distribution is None or len(distribution) <= 1:
            return 0.0

        entropy = self.calculate_entropy(distribution)
        max_entropy = self.get_maximum_entropy(len(distribution))
        return entropy / max_entropy if max_entropy > 0 else 0.0


__all__ = ["EPSILON", "FrequencyDistribution", "WordEntropyCalculator"]
