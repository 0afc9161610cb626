"""
aidottxt command-line entry point.

Pipeline:
- Pick formats (--*-only flags, answers file, or interactive checklist)
- Gather raw answers (answers file, defaults, or prompts)
- Normalize and render
- Preview (--dry-run) or write files under --out
"""

from __future__ import annotations

import logging
import sys

import yaml

from intent import normalize, render_documents
from intent.config import FORMATS
from orchestrate.config import (
    load_answers_file,
    parse_args,
    parse_format_list,
    select_formats,
)
from orchestrate.logging_config import configure_logging
from orchestrate.presenter import format_preview, print_created, write_documents
from orchestrate.prompts import Ask, PromptAborted, prompt_answers, prompt_formats


logger = logging.getLogger(__name__)


def gather_answers(args, ask: Ask = input) -> tuple[tuple[str, ...], dict]:
    """Resolve (formats, raw answers) with precedence: CLI flags > answers file > prompts."""
    formats = select_formats(args)

    if args.config:
        raw = load_answers_file(args.config)
        if formats is None:
            formats = parse_format_list(raw['formats']) if 'formats' in raw else FORMATS
        logger.info("Loaded answers from %s", args.config)
        return formats, raw

    if args.defaults:
        return formats or FORMATS, {}

    if formats is None:
        formats = prompt_formats(ask)
    return formats, prompt_answers(formats, ask)


def run(args, ask: Ask = input) -> int:
    formats, raw = gather_answers(args, ask)
    if not formats:
        print("Nothing to generate.")
        return 0

    cfg = normalize(raw, formats)
    documents = render_documents(cfg)

    if args.dry_run:
        print(format_preview(documents))
        return 0

    created = write_documents(documents, args.out)
    print_created(created)
    return 0


def main(argv: list[str] | None = None, ask: Ask = input) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args, ask)
    except PromptAborted:
        print("\nAborted.", file=sys.stderr)
        return 130
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
