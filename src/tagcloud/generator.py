"""Word cloud generation: read, count, select, render."""

import logging
import os
import random
import shutil
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .config import CloudConfig
from .counter import count_words, read_text, tokenize
from .errors import OutputWriteError
from .render import STYLESHEET_NAME, render
from .selector import CloudEntry, select
from .source import resolve_source, source_label

logger = logging.getLogger(__name__)

# Bundled default stylesheet
ASSETS_DIR = Path(__file__).parent / "assets"
DEFAULT_STYLESHEET = ASSETS_DIR / STYLESHEET_NAME


@dataclass
class CloudResult:
    """Outcome of a successful generation run."""

    output_path: Path
    source_label: str
    entries: list[CloudEntry]
    total_tokens: int
    stylesheet_path: Path | None = None


def _page_mode(output_path: Path) -> int:
    """Return the mode for a new page: the existing page's mode, else 0666 minus umask."""
    try:
        return stat.S_IMODE(output_path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_page(
    entries: list[CloudEntry],
    label: str,
    output_path: Path,
    rng: random.Random | None = None,
) -> None:
    """Write the page atomically.

    The page is rendered into a temporary file in the destination directory
    and moved onto ``output_path`` only once it is complete, so a failed run
    never leaves a partial page behind. The page keeps the mode of the page
    it replaces, or gets the umask default.

    Raises:
        OutputWriteError: If the page cannot be written.
    """
    output_path = Path(output_path)
    tmp_name = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            render(entries, label, f, rng=rng)
        os.chmod(tmp_name, _page_mode(output_path))
        os.replace(tmp_name, output_path)
        tmp_name = None
    except (OSError, UnicodeError) as e:
        raise OutputWriteError(f"Failed to write {output_path}: {e}") from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.info("Wrote %d words to %s", len(entries), output_path)


def install_stylesheet(output_dir: Path) -> Path:
    """Copy the bundled stylesheet into ``output_dir`` unless one exists.

    Returns:
        Path of the stylesheet next to the page.
    """
    target = output_dir / STYLESHEET_NAME
    if target.exists():
        logger.debug("Keeping existing stylesheet %s", target)
        return target
    try:
        shutil.copyfile(DEFAULT_STYLESHEET, target)
    except OSError as e:
        raise OutputWriteError(f"Failed to copy stylesheet to {target}: {e}") from e
    logger.info("Copied default stylesheet to %s", target)
    return target


def generate_cloud(
    source: str | Path,
    output_path: Path,
    count: int,
    config: CloudConfig | None = None,
) -> CloudResult:
    """Generate a word cloud page from a text file or URL.

    Args:
        source: Input file path, or an http(s) URL to download.
        output_path: Destination HTML file.
        count: Number of words to include.
        config: Generation settings; defaults are used if not given.

    Returns:
        CloudResult describing the written page.

    Raises:
        InputReadError: If the input cannot be read.
        SelectionError: If ``count`` words cannot be selected.
        OutputWriteError: If the page cannot be written.
    """
    config = config or CloudConfig()
    output_path = Path(output_path)
    source = str(source)

    local_path = resolve_source(
        source, config.resolve_cache_dir(output_path), timeout=config.timeout
    )
    tokens = tokenize(read_text(local_path, encoding=config.encoding))
    table = count_words(tokens, keep_empty=config.keep_empty)
    logger.info("Counted %d distinct words from %d tokens", len(table), len(tokens))

    entries = select(table, count, clamp=config.clamp)
    label = source_label(source)
    write_page(entries, label, output_path, rng=random.Random(config.seed))

    stylesheet_path = None
    if config.stylesheet:
        stylesheet_path = install_stylesheet(output_path.parent)

    return CloudResult(
        output_path=output_path,
        source_label=label,
        entries=entries,
        total_tokens=len(tokens),
        stylesheet_path=stylesheet_path,
    )
