"""Tokenization and word frequency counting."""

import logging
import re
from collections import Counter
from collections.abc import Iterable
from pathlib import Path

from .errors import InputReadError

logger = logging.getLogger(__name__)

# Everything that is not an ASCII letter or digit
NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

# Token separators: ASCII whitespace, the information separators and Unicode
# space characters other than the no-break spaces (U+00A0, U+2007, U+202F)
WHITESPACE = re.compile(
    r"[ \t\n\x0b\f\r\x1c-\x1f\u1680\u2000-\u2006\u2008-\u200a\u2028\u2029\u205f\u3000]+"
)

FrequencyTable = Counter


def normalize(token: str) -> str:
    """Strip every character that is not an ASCII letter or digit."""
    return NON_ALNUM.sub("", token)


def tokenize(text: str) -> list[str]:
    """Split text on whitespace and normalize each token.

    No-break spaces do not separate tokens, so ``"a\\u00a0b"`` is the single
    token ``"ab"``. Tokens that are left empty after normalization (e.g.
    ``"--"``) are kept in the result so callers can decide whether to count
    them.
    """
    return [normalize(raw) for raw in WHITESPACE.split(text) if raw]


def count_words(tokens: Iterable[str], keep_empty: bool = False) -> FrequencyTable:
    """Count occurrences of each normalized token.

    Args:
        tokens: Normalized tokens, as returned by :func:`tokenize`.
        keep_empty: Count empty tokens under the ``""`` key instead of
            dropping them.

    Returns:
        Mapping of word to occurrence count. Keys are case-sensitive.
    """
    table: FrequencyTable = Counter()
    for token in tokens:
        if not token and not keep_empty:
            continue
        table[token] += 1
    return table


def read_text(path: Path, encoding: str = "utf-8") -> str:
    """Read the whole input file.

    Raises:
        InputReadError: If the file is missing, unreadable or not decodable.
    """
    try:
        with open(path, encoding=encoding) as f:
            text = f.read()
    except FileNotFoundError as e:
        raise InputReadError(f"Input file not found: {path}") from e
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise InputReadError(f"Failed to read input file {path}: {e}") from e

    logger.debug("Read %d characters from %s", len(text), path)
    return text
