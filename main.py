from pathlib import Path
from typing import List, Optional

import typer

from experiments import format_validation_report, results_frame, run_demo
from wordentropy.corpus import count_characters, load_text_distribution, parse_counts
from wordentropy.metrics import EntropyValidator, WordEntropyCalculator, summarize_results

app = typer.Typer()


@app.command()
def demo(
    word: str = typer.Option("entropy", "--word", help="Word used for the character-level example."),
) -> None:
    """
    Run the worked examples: uniform, skewed, character-level, Zipfian and error detection.
    """
    run_demo(word=word)


@app.command()
def word(word: str = typer.Argument(..., help="Word whose character entropy is computed.")) -> None:
    """Character-level entropy of a single word."""
    calculator = WordEntropyCalculator()
    counts = count_characters(word)
    print(f'Word: "{word}"')
    print(f"Character frequencies: {counts}")
    print(f"Character-level entropy: {calculator.calculate_word_entropy(word):.4f} bits")
    print(f"Maximum for {len(counts)} symbols: {calculator.get_maximum_entropy(len(counts)):.4f} bits")


@app.command()
def validate(
    text_file: Optional[Path] = typer.Option(
        None,
        "--text-file",
        exists=False,
        file_okay=True,
        dir_okay=False,
        help="Plain-text file whose word distribution is validated.",
    ),
    count: List[str] = typer.Option(
        [],
        "--count",
        help="Explicit 'symbol=count' pair; repeat for each symbol.",
    ),
    claimed: Optional[float] = typer.Option(
        None,
        "--claimed",
        help="Entropy value to validate (defaults to the recomputed entropy).",
    ),
    natural_language: bool = typer.Option(
        False,
        "--natural-language/--no-natural-language",
        help="Also check the empirical 6-12 bit range for natural language.",
    ),
    keep_case: bool = typer.Option(False, "--keep-case", help="Do not lowercase words read from --text-file."),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write the per-check table to this CSV file."),
) -> None:
    """
    Validate an entropy value for a word distribution and print the report.
    """
    if (text_file is None) == (not count):
        raise typer.BadParameter("Provide either --text-file or one or more --count pairs.")

    try:
        if text_file is not None:
            distribution = load_text_distribution(text_file, lowercase=not keep_case)
        else:
            distribution = parse_counts(count)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    calculator = WordEntropyCalculator()
    validator = EntropyValidator(calculator)
    entropy = calculator.calculate_entropy(distribution) if claimed is None else claimed

    print(f"[entropy] Vocabulary size {len(distribution)}; validating entropy {entropy:.4f} bits.")
    results = validator.comprehensive_validation(distribution, entropy, natural_language)
    print(format_validation_report(results))

    if csv_path:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        results_frame(results).to_csv(csv_path, index=False)
        print(f"[entropy] Saved report table → {csv_path}")

    if not summarize_results(results).all_passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
