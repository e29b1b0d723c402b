#!/usr/bin/env python3
"""
Extract animation file(s) to numbered frame images.

Usage:
    python scripts/extract_animations.py <file.json>               # Single file
    python scripts/extract_animations.py <a.json> <b.sheet>        # Multiple files
    python scripts/extract_animations.py <folder>                  # All animations in folder
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from spritesheet import process_single, process_multiple


def main():
    parser = argparse.ArgumentParser(
        description="Extract animation file(s) to numbered frame images"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Animation file(s) or folder containing animation files",
    )

    args = parser.parse_args()
    failed = False

    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            failed = True
            continue

        if input_path.is_file():
            failed |= not process_single(input_path)
        else:
            failed |= bool(process_multiple(input_path, pack=False))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
