"""CLI entry point - analyze one profile and print the JSON result."""

import argparse
import asyncio
import json
import logging
import sys
import traceback
from pathlib import Path

from profile_analyzer.config import load_config, validate_config
from profile_analyzer.errors import classify_error
from profile_analyzer.pipeline import analyze_profile_html, analyze_profile_url
from profile_analyzer.utils.logging_config import setup_logging

logger = logging.getLogger("profile_analyzer")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Upwork Profile Analyzer - fetch a profile and get AI recommendations",
    )
    parser.add_argument(
        "profile_url", nargs="?",
        help="Public Upwork profile URL",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to config file (default: built-in defaults + environment)",
    )
    parser.add_argument(
        "--html-file",
        help="Analyze a saved profile HTML file instead of fetching the URL",
    )
    parser.add_argument(
        "--output",
        help="Write the JSON result to this file instead of stdout",
    )
    args = parser.parse_args(argv)
    if not args.profile_url and not args.html_file:
        parser.error("a profile URL or --html-file is required")
    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_dir, config.log_level)

    for w in validate_config(config):
        logger.warning("Config: %s", w)

    try:
        if args.html_file:
            html = Path(args.html_file).read_text(encoding="utf-8")
            result = asyncio.run(analyze_profile_html(html, config))
        else:
            result = asyncio.run(analyze_profile_url(args.profile_url, config))
    except Exception as e:
        _, message = classify_error(e)
        logger.error("Analysis failed: %s: %s\n%s", type(e).__name__, e, traceback.format_exc())
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)

    output = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logger.info("Analysis written to %s", args.output)
    else:
        print(output)


if __name__ == "__main__":
    main()
