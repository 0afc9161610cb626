#!/usr/bin/env python3
"""
Generate intent declaration files for a site.

Usage:
    # Interactive: choose files, answer questions, write to current dir
    python scripts/generate.py

    # Preview only
    python scripts/generate.py --dry-run

    # Non-interactive from an answers file
    python scripts/generate.py --config answers.yaml --out ./public

    # Single file with default answers
    python scripts/generate.py --robots-only --defaults --out ./dist
"""

import sys
from pathlib import Path

# Add parent dir to path for intent/orchestrate packages
sys.path.insert(0, str(Path(__file__).parent.parent))

from orchestrate.cli import main


if __name__ == "__main__":
    sys.exit(main())
