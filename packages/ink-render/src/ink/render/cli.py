"""Entry point for the ink-render CLI."""

from __future__ import annotations

import argparse
import logging
import sys

from ink.render.renderer import render

MIN_WIDTH = 1
MAX_WIDTH = 200


def clamp_width(width: int) -> int:
    return max(MIN_WIDTH, min(width, MAX_WIDTH))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ink-render",
        description="Render a markdown file as styled terminal text",
    )
    parser.add_argument("path", nargs="?", default="-", help="Markdown file to render (default: stdin)")
    parser.add_argument("-w", "--width", type=int, default=80, help="Max content width (default: 80)")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.path == "-":
        source = sys.stdin.buffer.read()
    else:
        try:
            with open(args.path, "rb") as f:
                source = f.read()
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(render(source, clamp_width(args.width)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
