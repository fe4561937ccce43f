"""HTML rendering of word clouds."""

import html
import random
from collections.abc import Sequence
from typing import TextIO

from .selector import CloudEntry

STYLESHEET_NAME = "tagcloud.css"

COLOR_CLASSES = ("col1", "col2", "col3", "col4", "col5")

# Clouds with at least this many words use the wide layout
BIG_CLOUD_THRESHOLD = 75


def cloud_class(size: int) -> str:
    """Return the container class for a cloud of ``size`` words."""
    return "bigCloud" if size >= BIG_CLOUD_THRESHOLD else "smallCloud"


def page_title(size: int, source_label: str) -> str:
    """Return the page title for a cloud."""
    return f"Top {size} words in {source_label}"


def render_word(entry: CloudEntry, color: str) -> str:
    """Render a single word as nested color and font size spans."""
    return (
        f'<span class="{color}"><span class="f{entry.font_size}" '
        f'title="{entry.count} occurrences">{html.escape(entry.word)}</span></span>'
    )


def render_lines(
    entries: Sequence[CloudEntry],
    source_label: str,
    rng: random.Random | None = None,
) -> list[str]:
    """Render a complete HTML page as a list of lines.

    Args:
        entries: Words in display order.
        source_label: Name of the input, shown in the title.
        rng: Random generator used to pick a color per word. A fresh,
            unseeded generator is used if not given.

    Returns:
        Lines of the document, without trailing newlines.
    """
    rng = rng or random.Random()

    lines = [
        "<html>",
        "<head>",
        f'<link href="{STYLESHEET_NAME}" rel="stylesheet" type="text/css">',
        f"<title>{html.escape(page_title(len(entries), source_label))}</title>",
        "</head>",
        "<body>",
        f"<div class = {cloud_class(len(entries))}>",
        "<p class = cbox>",
    ]
    lines.extend(render_word(entry, rng.choice(COLOR_CLASSES)) for entry in entries)
    lines.extend(["</p>", "</div>", "</body>", "</html>"])
    return lines


def render(
    entries: Sequence[CloudEntry],
    source_label: str,
    destination: TextIO,
    rng: random.Random | None = None,
) -> None:
    """Write a complete HTML page to an open text stream."""
    destination.write("\n".join(render_lines(entries, source_label, rng)))


def render_html(
    entries: Sequence[CloudEntry],
    source_label: str,
    rng: random.Random | None = None,
) -> str:
    """Render a complete HTML page to a string."""
    return "\n".join(render_lines(entries, source_label, rng))
