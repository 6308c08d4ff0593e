"""Command-line interface for rendering ASCII-art memes."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from .models import MemeTemplate
from .templates import load_templates

PROGRAM_NAME = "MemeCLI"
PROGRAM_VERSION = "1.0"

DEFAULT_TOP_TEXT = "Default Top Text"
DEFAULT_BOTTOM_TEXT = "Default Bottom Text"
RANDOM_TEXTS = ("When you", "But you", "Instead", "Now you")

_RESET = "\x1b[0m"
_GREEN_BOLD = "\x1b[1;32m"
_BLUE = "\x1b[34m"


def _paint(text: str, style: str) -> str:
    return f"{style}{text}{_RESET}"


def generate_meme(template: MemeTemplate, top_text: str, bottom_text: str) -> str:
    """Fill the template's ``{{TOP}}`` and ``{{BOTTOM}}`` slots with text."""
    return template.ascii_art.replace("{{TOP}}", top_text).replace(
        "{{BOTTOM}}", bottom_text
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME, description="Create ASCII art memes"
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{PROGRAM_NAME} {PROGRAM_VERSION}",
    )
    parser.add_argument(
        "-t",
        "--template",
        metavar="TEMPLATE",
        help="Template name (e.g., 'drake', 'distracted_boyfriend')",
    )
    parser.add_argument(
        "-T", "--top-text", dest="top_text", metavar="TEXT", help="Top text for the meme"
    )
    parser.add_argument(
        "-B",
        "--bottom-text",
        dest="bottom_text",
        metavar="TEXT",
        help="Bottom text for the meme",
    )
    parser.add_argument(
        "-e", "--export", metavar="FILENAME", help="Export meme to file"
    )
    parser.add_argument(
        "-r", "--random", action="store_true", help="Generate a random meme"
    )
    parser.add_argument(
        "-l",
        "--list-templates",
        dest="list_templates",
        action="store_true",
        help="List all available templates",
    )
    return parser


def _select_template(
    templates: Sequence[MemeTemplate], name: str | None
) -> MemeTemplate:
    """Find the template called ``name``, falling back to the first one."""
    if name is not None:
        for template in templates:
            if template.name == name:
                return template
    return templates[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    templates = load_templates()

    if args.list_templates:
        print("Available templates:")
        for template in templates:
            print(f"- {template.name}")
        return 0

    if args.random:
        template = random.choice(templates)
        top_text = random.choice(RANDOM_TEXTS)
        bottom_text = random.choice(RANDOM_TEXTS)
    else:
        template = _select_template(templates, args.template)
        top_text = args.top_text if args.top_text is not None else DEFAULT_TOP_TEXT
        bottom_text = (
            args.bottom_text if args.bottom_text is not None else DEFAULT_BOTTOM_TEXT
        )

    meme = generate_meme(template, top_text, bottom_text)
    print(_paint(meme, _GREEN_BOLD))

    if args.export is not None:
        try:
            Path(args.export).write_text(meme, encoding="utf-8")
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Meme saved to {_paint(args.export, _BLUE)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())