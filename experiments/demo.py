"""Walk-through of entropy calculation and validation on a handful of distributions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from wordentropy.corpus import count_characters, total_count, zipf_distribution
from wordentropy.metrics import EntropyValidator, ValidationResult, WordEntropyCalculator

from .report import format_validation_report


@dataclass(frozen=True)
class DemoCase:
    """One example shown by `run_demo`."""

    title: str
    distribution: Dict[str, int]
    entropy: float
    results: List[ValidationResult] = field(default_factory=list)


def _show_distribution_case(
    title: str,
    distribution: Dict[str, int],
    is_natural_language: bool,
    calculator: WordEntropyCalculator,
    validator: EntropyValidator,
) -> DemoCase:
    entropy = calculator.calculate_entropy(distribution)
    print(f"\n{title}")
    print("-" * 33)
    if is_natural_language:
        print(f"Simulated vocabulary size: {len(distribution)} words")
        print(f"Total word count: {total_count(distribution)}")
    else:
        print(f"Word frequencies: {distribution}")
    print(f"Calculated entropy: {entropy:.4f} bits")
    print(f"Maximum possible entropy: {calculator.get_maximum_entropy(len(distribution)):.4f} bits")
    print(f"Normalized entropy: {calculator.calculate_normalized_entropy(distribution):.4f}")

    results = validator.comprehensive_validation(distribution, entropy, is_natural_language)
    print(format_validation_report(results))
    return DemoCase(title=title, distribution=distribution, entropy=entropy, results=results)


def run_demo(word: str = "entropy") -> List[DemoCase]:
    """Print the demonstration and return the cases it covered."""
    calculator = WordEntropyCalculator()
    validator = EntropyValidator(calculator)
    cases: List[DemoCase] = []

    print("[entropy] Word entropy calculation and validation demo")

    uniform = {"the": 10, "cat": 10, "sat": 10, "mat": 10}
    cases.append(_show_distribution_case("Example 1: Uniform Distribution", uniform, False, calculator, validator))

    skewed = {"the": 50, "cat": 10, "sat": 5, "mat": 2}
    cases.append(_show_distribution_case("Example 2: Skewed Distribution", skewed, False, calculator, validator))

    print("\nExample 3: Character-level Entropy")
    print("-" * 33)
    char_counts = count_characters(word)
    char_entropy = calculator.calculate_word_entropy(word)
    print(f'Word: "{word}"')
    print(f"Character-level entropy: {char_entropy:.4f} bits")
    print(f"Character frequencies: {char_counts}")
    cases.append(DemoCase(title="Example 3: Character-level Entropy", distribution=char_counts, entropy=char_entropy))

    natural = zipf_distribution()
    cases.append(
        _show_distribution_case("Example 4: Natural Language Simulation", natural, True, calculator, validator)
    )

    print("\nExample 5: Error Detection")
    print("-" * 33)
    test_distribution = {"word1": 20, "word2": 30, "word3": 50}
    correct = calculator.calculate_entropy(test_distribution)
    incorrect = 5.0
    print(f"Correct entropy: {correct:.4f}")
    print(f"Claimed entropy: {incorrect:.4f}")
    check = validator.validate_entropy_calculation(test_distribution, incorrect)
    print(f"Validation result: {'PASS' if check.valid else 'FAIL'}")
    print(f"Message: {check.message}")
    print(f"Metrics: {check.metrics_dict()}")
    cases.append(
        DemoCase(title="Example 5: Error Detection", distribution=test_distribution, entropy=incorrect, results=[check])
    )

    print(f"\n[entropy] Demo complete ({len(cases)} examples).")
    return cases


__all__ = ["DemoCase", "run_demo"]
