"""
Command-line orchestration for document generation.

Flags, answers files and prompts in; files or a dry-run preview out.
"""

from .config import (
    build_parser,
    parse_args,
    select_formats,
    parse_format_list,
    load_answers_file,
)
from .prompts import (
    PromptAborted,
    prompt_answers,
    prompt_formats,
)
from .presenter import (
    format_preview,
    write_documents,
)
from .cli import main, run

__all__ = [
    "build_parser",
    "parse_args",
    "select_formats",
    "parse_format_list",
    "load_answers_file",
    "PromptAborted",
    "prompt_answers",
    "prompt_formats",
    "format_preview",
    "write_documents",
    "main",
    "run",
]
