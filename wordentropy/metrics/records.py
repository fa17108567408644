"""Result records produced by the entropy validator."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Literal, Optional, Union

CheckKind = Literal["bounds", "calculation", "uniform", "linguistic"]


@dataclass(frozen=True)
class BoundsMetrics:
    """Diagnostics for the theoretical-bounds check."""

    kind: ClassVar[CheckKind] = "bounds"

    calculated_entropy: float
    vocabulary_size: int
    theoretical_minimum: float
    theoretical_maximum: float


@dataclass(frozen=True)
class CalculationMetrics:
    """Diagnostics for the recomputation check."""

    kind: ClassVar[CheckKind] = "calculation"

    claimed_entropy: float
    recalculated_entropy: float
    absolute_difference: float
    vocabulary_size: int


@dataclass(frozen=True)
class UniformityMetrics:
    """Diagnostics for the uniform-distribution check.

    ``expected_entropy`` and ``difference`` are only populated when the
    distribution is uniform and the check actually ran.
    """

    kind: ClassVar[CheckKind] = "uniform"

    is_uniform: bool
    entropy: float
    vocabulary_size: int
    expected_entropy: Optional[float] = None
    difference: Optional[float] = None


@dataclass(frozen=True)
class LinguisticMetrics:
    """Diagnostics for the natural-language range check."""

    kind: ClassVar[CheckKind] = "linguistic"

    entropy: float
    is_natural_language: bool
    expected_minimum: Optional[float] = None
    expected_maximum: Optional[float] = None


CheckMetrics = Union[BoundsMetrics, CalculationMetrics, UniformityMetrics, LinguisticMetrics]


@dataclass(frozen=True)
class ValidationResult:
    """Verdict of a single validation check."""

    valid: bool
    message: str
    metrics: CheckMetrics

    @property
    def check(self) -> CheckKind:
        return self.metrics.kind

    def metrics_dict(self) -> Dict[str, object]:
        """Flatten the metrics record, dropping fields that did not apply."""
        payload: Dict[str, object] = {}
        for item in fields(self.metrics):
            value = getattr(self.metrics, item.name)
            if value is not None:
                payload[item.name] = value
        return payload


@dataclass(frozen=True)
class ValidationSummary:
    """Pass/fail tally over a sequence of validation results."""

    passed: int
    failed: int

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


__all__ = [
    "BoundsMetrics",
    "CalculationMetrics",
    "CheckKind",
    "CheckMetrics",
    "LinguisticMetrics",
    "UniformityMetrics",
    "ValidationResult",
    "ValidationSummary",
]
