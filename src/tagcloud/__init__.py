"""Generate HTML word clouds from text files."""

from .cli import main
from .config import CloudConfig
from .counter import FrequencyTable, count_words, read_text, tokenize
from .errors import (
    InputReadError,
    OutputWriteError,
    SelectionError,
    TagCloudError,
    UsageError,
)
from .generator import CloudResult, generate_cloud, install_stylesheet, write_page
from .render import COLOR_CLASSES, STYLESHEET_NAME, render, render_html, render_lines
from .selector import MAX_FONT_SIZE, MIN_FONT_SIZE, NUM_FONT_SIZES, CloudEntry, WordCount, select

__all__ = [
    "main",
    "CloudConfig",
    "FrequencyTable",
    "count_words",
    "read_text",
    "tokenize",
    "TagCloudError",
    "UsageError",
    "InputReadError",
    "SelectionError",
    "OutputWriteError",
    "CloudResult",
    "generate_cloud",
    "install_stylesheet",
    "write_page",
    "COLOR_CLASSES",
    "STYLESHEET_NAME",
    "render",
    "render_html",
    "render_lines",
    "NUM_FONT_SIZES",
    "MIN_FONT_SIZE",
    "MAX_FONT_SIZE",
    "WordCount",
    "CloudEntry",
    "select",
]
