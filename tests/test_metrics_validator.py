"""Unit tests for entropy validation checks and their result records."""

from __future__ import annotations

import math
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wordentropy.metrics.calculator import WordEntropyCalculator
from wordentropy.metrics.records import (
    BoundsMetrics,
    CalculationMetrics,
    LinguisticMetrics,
    UniformityMetrics,
    ValidationResult,
)
from wordentropy.metrics.validator import EntropyValidator, ValidatorConfig, summarize_results


@pytest.fixture()
def validator() -> EntropyValidator:
    return EntropyValidator()


# ---------------------------------------------------------------------------
# Configuration


def test_validator_config_defaults() -> None:
    config = ValidatorConfig()
    assert config.epsilon == 1e-10
    assert (config.natural_language_min, config.natural_language_max) == (6.0, 12.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"epsilon": 0.0},
        {"epsilon": float("nan")},
        {"natural_language_min": 10.0, "natural_language_max": 5.0},
        {"natural_language_max": float("inf")},
    ],
)
def test_validator_rejects_bad_config(kwargs) -> None:
    with pytest.raises(ValueError):
        EntropyValidator(config=ValidatorConfig(**kwargs))


# ---------------------------------------------------------------------------
# Bounds


def test_bounds_rejects_negative_entropy(validator: EntropyValidator) -> None:
    result = validator.validate_entropy_bounds(-1.0, 4)
    assert result.valid is False
    assert "negative" in result.message
    assert "-1.0" in result.message


def test_bounds_rejects_entropy_above_maximum(validator: EntropyValidator) -> None:
    result = validator.validate_entropy_bounds(3.0, 4)
    assert result.valid is False
    assert "exceeds maximum" in result.message
    assert isinstance(result.metrics, BoundsMetrics)
    assert result.metrics.calculated_entropy == 3.0
    assert result.metrics.vocabulary_size == 4
    assert result.metrics.theoretical_minimum == 0.0
    assert result.metrics.theoretical_maximum == pytest.approx(2.0)


def test_bounds_accepts_values_within_range(validator: EntropyValidator) -> None:
    result = validator.validate_entropy_bounds(1.5, 4)
    assert result.valid is True
    assert result.check == "bounds"


def test_bounds_tolerates_rounding_noise(validator: EntropyValidator) -> None:
    assert validator.validate_entropy_bounds(-1e-12, 4).valid is True
    assert validator.validate_entropy_bounds(2.0 + 1e-12, 4).valid is True
    assert validator.validate_entropy_bounds(2.0 + 1e-9, 4).valid is False


def test_bounds_reports_nan_as_within_range(validator: EntropyValidator) -> None:
    result = validator.validate_entropy_bounds(float("nan"), 4)
    assert result.valid is True
    assert result.message == "Entropy is within valid theoretical bounds"


def test_bounds_for_empty_vocabulary(validator: EntropyValidator) -> None:
    assert validator.validate_entropy_bounds(0.0, 0).valid is True
    assert validator.validate_entropy_bounds(0.5, 0).valid is False


# ---------------------------------------------------------------------------
# Calculation


def test_calculation_accepts_recomputed_entropy(validator: EntropyValidator) -> None:
    distribution = {"x": 10, "y": 20, "z": 30}
    entropy = WordEntropyCalculator().calculate_entropy(distribution)
    result = validator.validate_entropy_calculation(distribution, entropy)
    assert result.valid is True
    assert isinstance(result.metrics, CalculationMetrics)
    assert result.metrics.vocabulary_size == 3


def test_calculation_reports_true_gap(validator: EntropyValidator) -> None:
    distribution = {"x": 10, "y": 20, "z": 30}
    actual = WordEntropyCalculator().calculate_entropy(distribution)
    result = validator.validate_entropy_calculation(distribution, 5.0)
    assert result.valid is False
    assert result.message.startswith("Entropy mismatch")
    assert result.metrics_dict()["absolute_difference"] == pytest.approx(abs(5.0 - actual))
    assert result.metrics_dict()["recalculated_entropy"] == pytest.approx(actual)


# ---------------------------------------------------------------------------
# Uniform distribution


def test_uniform_check_passes_for_log2_n(validator: EntropyValidator) -> None:
    result = validator.validate_uniform_distribution({"a": 10, "b": 10, "c": 10, "d": 10}, 2.0)
    assert result.valid is True
    assert isinstance(result.metrics, UniformityMetrics)
    assert result.metrics.is_uniform is True
    assert result.metrics.expected_entropy == pytest.approx(2.0)


def test_uniform_check_fails_for_wrong_value(validator: EntropyValidator) -> None:
    result = validator.validate_uniform_distribution({"a": 10, "b": 10}, 0.5)
    assert result.valid is False
    assert result.metrics.difference == pytest.approx(0.5)


def test_uniform_check_is_skipped_but_valid_for_non_uniform(validator: EntropyValidator) -> None:
    # A skip is folded into "valid"; only is_uniform tells it apart from a pass.
    result = validator.validate_uniform_distribution({"a": 1, "b": 2}, 123.0)
    assert result.valid is True
    assert result.metrics.is_uniform is False
    assert "not uniform" in result.message
    assert "expected_entropy" not in result.metrics_dict()
    assert "difference" not in result.metrics_dict()


def test_uniform_check_single_symbol_is_trivially_uniform(validator: EntropyValidator) -> None:
    result = validator.validate_uniform_distribution({"solo": 9}, 0.0)
    assert result.valid is True
    assert result.metrics.is_uniform is True


def test_uniform_check_all_zero_counts(validator: EntropyValidator) -> None:
    # Uniform by count, but recomputed entropy (0.0) differs from log2(2).
    result = validator.validate_uniform_distribution({"a": 0, "b": 0}, 0.0)
    assert result.metrics.is_uniform is True
    assert result.valid is False


def test_uniform_check_empty_distribution_is_not_uniform(validator: EntropyValidator) -> None:
    result = validator.validate_uniform_distribution({}, 0.0)
    assert result.valid is True
    assert result.metrics.is_uniform is False


# ---------------------------------------------------------------------------
# Linguistic range


@pytest.mark.parametrize(
    "entropy, natural, expected",
    [(8.5, True, True), (3.0, True, False), (15.0, True, False), (3.0, False, True), (6.0, True, True), (12.0, True, True)],
)
def test_linguistic_range(validator: EntropyValidator, entropy: float, natural: bool, expected: bool) -> None:
    assert validator.validate_linguistic_range(entropy, natural).valid is expected


def test_linguistic_range_messages_differ(validator: EntropyValidator) -> None:
    low = validator.validate_linguistic_range(3.0, True)
    high = validator.validate_linguistic_range(15.0, True)
    assert "unusually low" in low.message
    assert "unusually high" in high.message
    assert isinstance(low.metrics, LinguisticMetrics)
    assert (low.metrics.expected_minimum, low.metrics.expected_maximum) == (6.0, 12.0)


def test_linguistic_range_skipped_omits_expected_bounds(validator: EntropyValidator) -> None:
    result = validator.validate_linguistic_range(3.0, False)
    assert "skipped" in result.message
    assert result.metrics_dict() == {"entropy": 3.0, "is_natural_language": False}


def test_linguistic_range_honours_config() -> None:
    validator = EntropyValidator(config=ValidatorConfig(natural_language_min=2.0, natural_language_max=4.0))
    assert validator.validate_linguistic_range(3.0, True).valid is True


# ---------------------------------------------------------------------------
# Comprehensive validation


def test_comprehensive_validation_order_without_linguistic(validator: EntropyValidator) -> None:
    distribution = {"the": 50, "cat": 10, "sat": 5, "mat": 2}
    entropy = WordEntropyCalculator().calculate_entropy(distribution)
    results = validator.comprehensive_validation(distribution, entropy, False)
    assert [result.check for result in results] == ["bounds", "calculation", "uniform"]
    assert all(result.valid for result in results)


def test_comprehensive_validation_appends_linguistic(validator: EntropyValidator) -> None:
    distribution = {f"w{i}": 1 for i in range(512)}
    results = validator.comprehensive_validation(distribution, math.log2(512), True)
    assert [result.check for result in results] == ["bounds", "calculation", "uniform", "linguistic"]
    assert all(result.valid for result in results)


def test_comprehensive_validation_does_not_short_circuit(validator: EntropyValidator) -> None:
    results = validator.comprehensive_validation({"a": 1, "b": 1}, -5.0, True)
    assert len(results) == 4
    assert [result.valid for result in results] == [False, False, False, False]


# ---------------------------------------------------------------------------
# Records and summaries


def test_validation_result_is_immutable(validator: EntropyValidator) -> None:
    result = validator.validate_entropy_bounds(1.0, 4)
    with pytest.raises(AttributeError):
        result.valid = False  # type: ignore[misc]


def test_summarize_results_counts_pass_and_fail() -> None:
    metrics = LinguisticMetrics(entropy=1.0, is_natural_language=False)
    results = [
        ValidationResult(True, "ok", metrics),
        ValidationResult(False, "bad", metrics),
        ValidationResult(True, "ok", metrics),
    ]
    summary = summarize_results(results)
    assert (summary.passed, summary.failed, summary.total) == (2, 1, 3)
    assert summary.all_passed is False
    assert summarize_results([]).all_passed is True
