#!/usr/bin/env python3
"""Word cloud generator CLI."""

import argparse
import logging
import sys
from pathlib import Path

from .config import CloudConfig
from .errors import TagCloudError, UsageError
from .generator import generate_cloud

SUCCESS_MESSAGE = "Word Cloud Generated"


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate an HTML word cloud of the most frequent words in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt cloud.html 100             # Top 100 words
  %(prog)s book.txt cloud.html 100 --seed 7    # Reproducible colors
  %(prog)s notes.txt cloud.html 500 --clamp    # Use all words if fewer than 500
  %(prog)s https://example.com/a.txt out.html 50
  %(prog)s book.txt cloud.html 100 --stylesheet  # Copy tagcloud.css next to output
        """,
    )

    parser.add_argument("input", help="Input text file or http(s) URL")
    parser.add_argument("output", type=Path, help="Output HTML file")
    parser.add_argument("count", type=positive_int, help="Number of words to include")

    parser.add_argument(
        "--config", type=Path, metavar="FILE", help="YAML file with generation settings"
    )
    parser.add_argument("--seed", type=int, help="Seed for color assignment")
    parser.add_argument(
        "--clamp",
        action="store_true",
        default=None,
        help="Use every word when the input has fewer distinct words than requested",
    )
    parser.add_argument(
        "--keep-empty",
        action="store_true",
        default=None,
        help='Count tokens without letters or digits as the empty word ""',
    )
    parser.add_argument("--encoding", help="Input text encoding (default: utf-8)")
    parser.add_argument(
        "--stylesheet",
        action="store_true",
        default=None,
        help="Copy the bundled tagcloud.css next to the output if none exists",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def load_config(args: argparse.Namespace) -> CloudConfig:
    """Build the effective configuration from the config file and flags."""
    if args.config is not None:
        if not args.config.exists():
            raise UsageError(f"Config file not found: {args.config}")
        config = CloudConfig.from_yaml(args.config)
    else:
        config = CloudConfig()

    config.override(
        {
            "seed": args.seed,
            "clamp": args.clamp,
            "keep_empty": args.keep_empty,
            "encoding": args.encoding,
            "stylesheet": args.stylesheet,
        }
    )
    return config


def main() -> int:
    """Generate the word cloud."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        generate_cloud(args.input, args.output, args.count, config)
    except TagCloudError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
