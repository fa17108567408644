"""Entropy calculation and validation."""

from .calculator import EPSILON, FrequencyDistribution, WordEntropyCalculator
from .records import (
    BoundsMetrics,
    CalculationMetrics,
    CheckKind,
    LinguisticMetrics,
    UniformityMetrics,
    ValidationResult,
    ValidationSummary,
)
from .validator import EntropyValidator, ValidatorConfig, summarize_results

__all__ = [
    "EPSILON",
    "BoundsMetrics",
    "CalculationMetrics",
    "CheckKind",
    "EntropyValidator",
    "FrequencyDistribution",
    "LinguisticMetrics",
    "UniformityMetrics",
    "ValidationResult",
    "ValidationSummary",
    "ValidatorConfig",
    "WordEntropyCalculator",
    "summarize_results",
]
