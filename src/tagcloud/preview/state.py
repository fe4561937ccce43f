"""Server state for the preview server."""

from pathlib import Path

# Page served at "/"
page_path: Path | None = None


def configure(page: Path | None = None) -> None:
    """Configure the server with the page to preview."""
    global page_path
    page_path = page
