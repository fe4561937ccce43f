"""Error types raised by the word cloud pipeline."""


class TagCloudError(Exception):
    """Base class for all word cloud errors."""


class UsageError(TagCloudError):
    """Invalid arguments or configuration values."""


class InputReadError(TagCloudError):
    """The input source is missing, unreadable or could not be decoded."""


class SelectionError(TagCloudError):
    """The requested number of words cannot be selected."""


class OutputWriteError(TagCloudError):
    """The output page could not be created or written."""
