"""lexlua TokenizeAccumulator — opt-in profiling for tokenization.

This module provides accumulated metrics while tokenizing:
- Total elapsed time
- Chunks tokenized
- Characters consumed
- Tokens produced

Zero overhead when disabled (get_tokenize_accumulator() returns None).
A chunk is recorded once its token sequence is exhausted.

Example:
    from lexlua import tokenize_lines
    from lexlua.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        for tokens in tokenize_lines(source):
            ...

    print(metrics.summary())
    # {"total_ms": 0.8, "chunk_count": 12, "char_count": 340, "token_count": 151}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        chunk_count: Number of chunks fully tokenized.
        char_count: Characters consumed across those chunks.
        token_count: Tokens produced across those chunks.

    """

    start_time: float = field(default_factory=perf_counter)
    chunk_count: int = 0
    char_count: int = 0
    token_count: int = 0

    def record_chunk(self, char_count: int, token_count: int) -> None:
        """Record one exhausted chunk.

        Args:
            char_count: Length of the chunk.
            token_count: Number of tokens produced for it.

        """
        self.chunk_count += 1
        self.char_count += char_count
        self.token_count += token_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, chunk_count, char_count, token_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "chunk_count": self.chunk_count,
            "char_count": self.char_count,
            "token_count": self.token_count,
        }


# Module-level ContextVar
_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Creates a TokenizeAccumulator and makes it available via
    get_tokenize_accumulator() for the duration of the with block.

    Yields:
        TokenizeAccumulator populated as chunks are tokenized.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
