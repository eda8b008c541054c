"""Benchmark whole-source tokenization vs line-by-line tokenization.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

import pytest

from lexlua import (
    LexConfig,
    State,
    lex_config_context,
    tokenize,
    tokenize_chunk,
    tokenize_lines,
)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_whole(benchmark, large_source):
    """Tokenize a large source as one chunk."""
    benchmark(lambda: list(tokenize(large_source)))


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_lines(benchmark, large_source):
    """Tokenize a large source line by line with carried state."""
    benchmark(lambda: list(tokenize_lines(large_source)))


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_unchecked(benchmark, large_source):
    """Tokenize a large source with schema checking disabled."""

    def run():
        with lex_config_context(LexConfig(check_schema=False)):
            list(tokenize(large_source))

    benchmark(run)


@pytest.mark.benchmark(group="retokenize-line")
def test_benchmark_retokenize_line(benchmark, real_world_lines):
    """Re-tokenize single lines from a fresh bookmark, as after an edit."""
    bookmark = State.new()

    def run():
        for line in real_world_lines:
            tokenize_chunk(line, bookmark)

    benchmark(run)
