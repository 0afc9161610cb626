"""
Presentation helpers for generated documents.

Keeps cli.py focused on orchestration while this module previews and saves
the rendered files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from intent.config import FORMATS, OUTPUT_PATHS


logger = logging.getLogger(__name__)


def resolve_output_path(out_dir: Path, key: str) -> Path:
    return Path(out_dir) / OUTPUT_PATHS[key]


def format_preview(documents: dict[str, str]) -> str:
    """Dry-run text: each document under a '# /<path>' header."""
    chunks = []
    for key in FORMATS:
        if key not in documents:
            continue
        chunks.append(f"\n# /{OUTPUT_PATHS[key]}\n\n{documents[key]}")
    return '\n'.join(chunks)


def ensure_dirs(out_dir: Path) -> None:
    """Create the output directory and its .well-known/ subdirectory."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / '.well-known').mkdir(parents=True, exist_ok=True)


def write_documents(documents: dict[str, str], out_dir: Path) -> list[Path]:
    """
    Write rendered documents under out_dir.

    Args:
        documents: format key -> text, as returned by intent.render_documents
        out_dir: Site root directory

    Returns:
        Paths written, in canonical format order
    """
    ensure_dirs(out_dir)

    created = []
    for key in FORMATS:
        if key not in documents:
            continue
        path = resolve_output_path(out_dir, key)
        path.write_text(documents[key], encoding='utf-8')
        logger.info("Wrote %s (%d bytes)", path, len(documents[key].encode('utf-8')))
        created.append(path)
    return created


def print_created(created: list[Path]) -> None:
    print("\nCreated:")
    for path in created:
        print(f"  - {path}")
    print("\nDone ✅")
