"""
Command-line and answers-file configuration for document generation.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import yaml

from intent.config import FORMATS


USAGE_EXAMPLES = """\
Examples:
  aidottxt
  aidottxt --out ./public
  aidottxt --dry-run
  aidottxt --ai-only --out ./dist
  aidottxt --robots-only --humans-only
  aidottxt --config answers.yaml --out ./public
"""

# --<flag> -> format key
ONLY_FLAGS = {
    'llms_only': 'llms',
    'ai_only': 'ai',
    'robots_only': 'robots',
    'humans_only': 'humans',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aidottxt',
        description="Generate ai.txt, llms.txt, robots.txt and humans.txt for a site",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--out", default=None, metavar="DIR",
                        help="Output directory (default: current directory)")
    parser.add_argument("--ai-only", action="store_true", help="Generate only ai.txt")
    parser.add_argument("--llms-only", action="store_true",
                        help="Generate only llms.txt (in .well-known/)")
    parser.add_argument("--robots-only", action="store_true", help="Generate only robots.txt")
    parser.add_argument("--humans-only", action="store_true", help="Generate only humans.txt")
    parser.add_argument("--dry-run", action="store_true",
                        help="Preview output without writing files")
    parser.add_argument("--config", metavar="PATH",
                        help="JSON/YAML answers file (skips interactive prompts)")
    parser.add_argument("--defaults", action="store_true",
                        help="Skip prompts and use default answers")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI flags; --out is resolved to an absolute path."""
    args = build_parser().parse_args(argv)
    args.out = Path(args.out).resolve() if args.out else Path.cwd()
    return args


def select_formats(args: argparse.Namespace) -> tuple[str, ...] | None:
    """Formats named by --*-only flags, in canonical order; None when none given."""
    chosen = {fmt for flag, fmt in ONLY_FLAGS.items() if getattr(args, flag, False)}
    if not chosen:
        return None
    return tuple(fmt for fmt in FORMATS if fmt in chosen)


def parse_format_list(value) -> tuple[str, ...]:
    """Parse a format list from an answers file ('ai, robots' or a list)."""
    if isinstance(value, str):
        items = value.split(',')
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        items = [] if value is None else [value]
    wanted = {str(item).strip().lower() for item in items if str(item).strip()}
    unknown = wanted.difference(FORMATS)
    if unknown:
        raise ValueError(
            f"Unknown format(s) in answers file: {', '.join(sorted(unknown))} "
            f"(choose from {', '.join(FORMATS)})"
        )
    return tuple(fmt for fmt in FORMATS if fmt in wanted)


def load_answers_file(path: str | Path) -> dict:
    """Load raw answers from JSON or YAML."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Answers file not found: {path}")

    # Handle empty files (e.g., /dev/null) gracefully
    content = p.read_text(encoding="utf-8").strip()
    if not content:
        return {}

    if p.suffix.lower() in (".yaml", ".yml"):
        result = yaml.safe_load(content)
    else:
        result = json.loads(content)

    if not result:
        return {}
    if not isinstance(result, dict):
        raise ValueError(f"Answers file must contain a mapping: {path}")
    return result
