"""Builders for word and character frequency distributions."""

from .distribution import (
    count_characters,
    count_tokens,
    distribution_from_text,
    ensure_counts,
    load_text_distribution,
    parse_counts,
    tokenize,
    total_count,
)
from .zipf import COMMON_ENGLISH_WORDS, ZipfConfig, zipf_distribution

__all__ = [
    "COMMON_ENGLISH_WORDS",
    "ZipfConfig",
    "count_characters",
    "count_tokens",
    "distribution_from_text",
    "ensure_counts",
    "load_text_distribution",
    "parse_counts",
    "tokenize",
    "total_count",
    "zipf_distribution",
]
