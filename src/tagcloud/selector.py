"""Top-N word selection and font size bucketing."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import SelectionError

logger = logging.getLogger(__name__)

NUM_FONT_SIZES = 37
MIN_FONT_SIZE = 11
MAX_FONT_SIZE = MIN_FONT_SIZE + NUM_FONT_SIZES - 1


@dataclass(frozen=True)
class WordCount:
    """A word and the number of times it occurred."""

    word: str
    count: int


@dataclass(frozen=True)
class CloudEntry:
    """A word selected for the cloud, with its font size bucket."""

    word: str
    count: int
    font_size: int


def decreasing_key(item: WordCount) -> tuple[int, str, str]:
    """Sort key: count descending, then case-folded word, then raw word."""
    return (-item.count, item.word.lower(), item.word)


def alphabetical_key(item: WordCount) -> tuple[str, int, str]:
    """Sort key: case-folded word, then count ascending, then raw word."""
    return (item.word.lower(), item.count, item.word)


def font_size(count: int, low: int, high: int) -> int:
    """Map a count linearly onto the font size buckets.

    Counts equal to ``low`` get ``MIN_FONT_SIZE``; the top count is capped at
    ``MAX_FONT_SIZE``. When every count is the same (``low == high``) all
    words get ``MIN_FONT_SIZE``.
    """
    if high == low:
        return MIN_FONT_SIZE
    size = MIN_FONT_SIZE + NUM_FONT_SIZES * (count - low) // (high - low)
    return min(size, MAX_FONT_SIZE)


def top_words(table: Mapping[str, int], n: int, clamp: bool = False) -> list[WordCount]:
    """Return the ``n`` most frequent words in decreasing order.

    Args:
        table: Word frequency table.
        n: Number of words to take.
        clamp: If True, return every word when ``n`` exceeds the number of
            distinct words instead of raising.

    Raises:
        SelectionError: If ``n`` is not positive, or exceeds the number of
            distinct words and ``clamp`` is False.
    """
    if n < 1:
        raise SelectionError(f"Number of words must be positive, got {n}")
    if n > len(table) and not clamp:
        raise SelectionError(
            f"Requested {n} words but the input only has {len(table)} distinct words"
        )

    ranked = sorted((WordCount(w, c) for w, c in table.items()), key=decreasing_key)
    return ranked[:n]


def select(table: Mapping[str, int], n: int, clamp: bool = False) -> list[CloudEntry]:
    """Select the ``n`` most frequent words and order them alphabetically.

    Each entry carries a font size bucket derived from its count relative to
    the smallest and largest counts among the selected words.
    """
    chosen = sorted(top_words(table, n, clamp=clamp), key=alphabetical_key)
    if not chosen:
        return []

    counts = [item.count for item in chosen]
    low, high = min(counts), max(counts)
    logger.debug("Selected %d words, counts %d..%d", len(chosen), low, high)

    return [
        CloudEntry(word=item.word, count=item.count, font_size=font_size(item.count, low, high))
        for item in chosen
    ]
