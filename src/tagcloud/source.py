"""Input source handling, including text fetched over HTTP."""

import hashlib
import logging
import os
from pathlib import Path
from urllib.parse import urlparse

import requests

from .errors import InputReadError

logger = logging.getLogger(__name__)

# Cache directory name for downloaded sources
CACHE_DIR_NAME = ".tagcloud-cache"

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

DEFAULT_HEADERS = {
    "User-Agent": "tagcloud/1.0 (word cloud generator)",
}


def is_url(path: str) -> bool:
    """Check if a path is an HTTP/HTTPS URL."""
    return path.startswith("http://") or path.startswith("https://")


def get_url_filename(url: str) -> str:
    """Extract filename from URL, or 'download' if the URL has no path."""
    path = urlparse(url).path.rstrip("/")
    if path:
        return Path(path).name
    return "download"


def get_cache_path(url: str, cache_dir: Path) -> Path:
    """Get deterministic cache path for a URL.

    Args:
        url: The URL to cache.
        cache_dir: Directory to store cached files.

    Returns:
        Path named after a hash of the URL and its original filename.
    """
    url_hash = hashlib.sha256(url.encode()).hexdigest()[:16]
    return cache_dir / f"{url_hash}_{get_url_filename(url)}"


def download_url(
    url: str,
    cache_dir: Path,
    timeout: int = DEFAULT_TIMEOUT,
    force: bool = False,
) -> Path:
    """Download a URL into the cache and return the local path.

    Args:
        url: The URL to download.
        cache_dir: Directory to store cached files.
        timeout: Request timeout in seconds.
        force: If True, re-download even if cached.

    Raises:
        InputReadError: If the download fails.
    """
    cache_path = get_cache_path(url, cache_dir)
    if not force and cache_path.exists():
        logger.debug("Using cached copy of %s at %s", url, cache_path)
        return cache_path

    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
        response = requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS)
        response.raise_for_status()

        with open(cache_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
    except requests.RequestException as e:
        cache_path.unlink(missing_ok=True)
        raise InputReadError(f"Failed to download {url}: {e}") from e
    except OSError as e:
        cache_path.unlink(missing_ok=True)
        raise InputReadError(f"Failed to cache {url} in {cache_dir}: {e}") from e

    logger.info("Downloaded %s -> %s", url, cache_path)
    return cache_path


def source_label(source: str) -> str:
    """Return the name shown in the page title for an input source.

    Bytes of a file name that are not valid UTF-8 are shown as U+FFFD.
    """
    if is_url(source):
        return get_url_filename(source)
    name = Path(source).name
    return os.fsencode(name).decode("utf-8", errors="replace")


def resolve_source(
    source: str,
    cache_dir: Path,
    timeout: int = DEFAULT_TIMEOUT,
) -> Path:
    """Resolve an input argument to a local file, downloading URLs if needed."""
    if is_url(source):
        return download_url(source, cache_dir, timeout=timeout)
    return Path(source)
