"""Cross-checks for entropy scores against theory, recomputation and linguistic norms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .calculator import EPSILON, FrequencyDistribution, WordEntropyCalculator
from .records import (
    BoundsMetrics,
    CalculationMetrics,
    LinguisticMetrics,
    UniformityMetrics,
    ValidationResult,
    ValidationSummary,
)

# Empirical per-word entropy of natural-language text, in bits.
NATURAL_LANGUAGE_MIN_ENTROPY = 6.0
NATURAL_LANGUAGE_MAX_ENTROPY = 12.0


@dataclass
class ValidatorConfig:
    """Configuration for `EntropyValidator`."""

    epsilon: float = EPSILON
    natural_language_min: float = NATURAL_LANGUAGE_MIN_ENTROPY
    natural_language_max: float = NATURAL_LANGUAGE_MAX_ENTROPY

    def validate(self) -> None:
        if not np.isfinite(self.epsilon) or self.epsilon <= 0:
            raise ValueError("epsilon must be a positive finite number.")
        if not (np.isfinite(self.natural_language_min) and np.isfinite(self.natural_language_max)):
            raise ValueError("Natural-language entropy bounds must be finite.")
        if self.natural_language_max < self.natural_language_min:
            raise ValueError("natural_language_max cannot be smaller than natural_language_min.")


class EntropyValidator:
    """Validate entropy scores, treating `WordEntropyCalculator` as ground truth.

    Every check returns a `ValidationResult`; failures are reported, never raised.
    """

    def __init__(
        self,
        calculator: Optional[WordEntropyCalculator] = None,
        config: Optional[ValidatorConfig] = None,
    ) -> None:
        self.calculator = calculator or WordEntropyCalculator()
        self.config = config or ValidatorConfig()
        self.config.validate()

    def validate_entropy_bounds(self, entropy: float, vocabulary_size: int) -> ValidationResult:
        """Check that ``entropy`` lies within [0, log2(vocabulary_size)].

        Only values provably outside the range fail; NaN compares false against
        both bounds and is reported as valid.
        """
        eps = self.config.epsilon
        max_entropy = self.calculator.get_maximum_entropy(vocabulary_size)
        metrics = BoundsMetrics(
            calculated_entropy=entropy,
            vocabulary_size=vocabulary_size,
            theoretical_minimum=0.0,
            theoretical_maximum=max_entropy,
        )

        if entropy < -eps:
            return ValidationResult(False, f"Entropy cannot be negative. Got: {entropy}", metrics)

        if entropy > max_entropy + eps:
            return ValidationResult(
                False,
                f"Entropy {entropy:.4f} exceeds maximum possible entropy {max_entropy:.4f} "
                f"for vocabulary size {vocabulary_size}",
                metrics,
            )

        return ValidationResult(True, "Entropy is within valid theoretical bounds", metrics)

    def validate_entropy_calculation(
        self, distribution: FrequencyDistribution, claimed_entropy: float
    ) -> ValidationResult:
        """Recompute the entropy of ``distribution`` and compare it with ``claimed_entropy``."""
        recalculated = self.calculator.calculate_entropy(distribution)
        difference = abs(recalculated - claimed_entropy)
        metrics = CalculationMetrics(
            claimed_entropy=claimed_entropy,
            recalculated_entropy=recalculated,
            absolute_difference=difference,
            vocabulary_size=len(distribution),
        )

        if difference < self.config.epsilon:
            return ValidationResult(True, "Entropy calculation is correct", metrics)

        return ValidationResult(
            False,
            f"Entropy mismatch: claimed={claimed_entropy:.6f}, calculated={recalculated:.6f}, "
            f"difference={difference:.6f}",
            metrics,
        )

    def validate_uniform_distribution(
        self, distribution: FrequencyDistribution, entropy: float
    ) -> ValidationResult:
        """For a uniform distribution, entropy must equal log2(N).

        Non-uniform distributions are reported as valid without evaluating
        ``entropy``: the check does not apply to them, and there is no separate
        "skipped" outcome. Inspect ``metrics.is_uniform`` to tell the two apart.
        """
        vocabulary_size = len(distribution)
        is_uniform = len(set(distribution.values())) == 1

        if not is_uniform:
            return ValidationResult(
                True,
                "Distribution is not uniform (no validation needed)",
                UniformityMetrics(is_uniform=False, entropy=entropy, vocabulary_size=vocabulary_size),
            )

        expected = self.calculator.get_maximum_entropy(vocabulary_size)
        difference = abs(entropy - expected)
        metrics = UniformityMetrics(
            is_uniform=True,
            entropy=entropy,
            vocabulary_size=vocabulary_size,
            expected_entropy=expected,
            difference=difference,
        )

        if difference < self.config.epsilon:
            return ValidationResult(True, "Uniform distribution entropy is correct (equals log2(N))", metrics)

        return ValidationResult(
            False,
            f"Uniform distribution entropy mismatch: expected={expected:.6f}, got={entropy:.6f}",
            metrics,
        )

    def validate_linguistic_range(self, entropy: float, is_natural_language: bool) -> ValidationResult:
        """Compare ``entropy`` with the empirical per-word range of natural language."""
        if not is_natural_language:
            return ValidationResult(
                True,
                "Non-natural language text (linguistic validation skipped)",
                LinguisticMetrics(entropy=entropy, is_natural_language=False),
            )

        low = self.config.natural_language_min
        high = self.config.natural_language_max
        metrics = LinguisticMetrics(
            entropy=entropy,
            is_natural_language=True,
            expected_minimum=low,
            expected_maximum=high,
        )

        if entropy < low:
            return ValidationResult(
                False,
                f"Entropy {entropy:.4f} is unusually low for natural language "
                f"(expected {low:.1f}-{high:.1f} bits)",
                metrics,
            )

        if entropy > high:
            return ValidationResult(
                False,
                f"Entropy {entropy:.4f} is unusually high for natural language "
                f"(expected {low:.1f}-{high:.1f} bits)",
                metrics,
            )

        return ValidationResult(True, "Entropy is within expected range for natural language", metrics)

    def comprehensive_validation(
        self,
        distribution: FrequencyDistribution,
        calculated_entropy: float,
        is_natural_language: bool,
    ) -> List[ValidationResult]:
        """Run every applicable check in order: bounds, calculation, uniform, linguistic.

        The linguistic check is only appended for natural-language input, so the
        result holds three or four entries. All checks run regardless of earlier
        failures.
        """
        results = [
            self.validate_entropy_bounds(calculated_entropy, len(distribution)),
            self.validate_entropy_calculation(distribution, calculated_entropy),
            self.validate_uniform_distribution(distribution, calculated_entropy),
        ]
        if is_natural_language:
            results.append(self.validate_linguistic_range(calculated_entropy, True))
        return results


def summarize_results(results: Iterable[ValidationResult]) -> ValidationSummary:
    """Tally passed and failed checks."""
    passed = failed = 0
    for result in results:
        if result.valid:
            passed += 1
        else:
            failed += 1
    return ValidationSummary(passed=passed, failed=failed)


__all__ = [
    "NATURAL_LANGUAGE_MAX_ENTROPY",
    "NATURAL_LANGUAGE_MIN_ENTROPY",
    "EntropyValidator",
    "ValidatorConfig",
    "summarize_results",
]
