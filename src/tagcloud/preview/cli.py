"""CLI entry point for the preview server."""

import argparse
import webbrowser
from pathlib import Path

import uvicorn


def main() -> int:
    """Launch the preview server."""
    parser = argparse.ArgumentParser(
        description="Preview a generated word cloud in the browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s cloud.html               # Preview a generated page
  %(prog)s cloud.html --port 8080   # Custom port
        """,
    )

    parser.add_argument("page", type=Path, help="Generated HTML page")
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run server on (default: 8000)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't open browser automatically",
    )

    args = parser.parse_args()

    if not args.page.exists():
        print(f"Page not found: {args.page}")
        return 1

    from . import configure

    configure(page_path=args.page.resolve())

    url = f"http://{args.host}:{args.port}"
    if not args.no_browser:
        print(f"Opening {url} in browser...")
        webbrowser.open(url)

    print(f"Previewing {args.page} at {url}")
    uvicorn.run(
        "tagcloud.preview:app",
        host=args.host,
        port=args.port,
        log_level="warning",
    )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
