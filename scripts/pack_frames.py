#!/usr/bin/env python3
"""
Pack frame folder(s) into animation file(s).

Usage:
    python scripts/pack_frames.py <frames_folder>            # Single folder
    python scripts/pack_frames.py <folder1> <folder2>        # Multiple folders
    python scripts/pack_frames.py <parent_folder>            # All subfolders
    python scripts/pack_frames.py <path> --binary            # Write .sheet files
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from spritesheet import list_frame_images, process_single, process_multiple


def is_frames_folder(folder: Path) -> bool:
    """Check if folder looks like a frames folder (contains 0.png, 1.png, ...)."""
    return bool(list_frame_images(folder))


def main():
    parser = argparse.ArgumentParser(
        description="Pack frame folder(s) into animation file(s)"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Frames folder(s) or parent folder containing frame folders",
    )
    parser.add_argument(
        "--binary",
        action="store_true",
        help="Write the binary .sheet container instead of JSON",
    )

    args = parser.parse_args()
    failed = False

    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            failed = True
            continue

        if not input_path.is_dir():
            print(f"[ERROR] Path is not a directory: {input_path}")
            failed = True
            continue

        if is_frames_folder(input_path):
            failed |= not process_single(input_path, binary=args.binary)
        else:
            failed |= bool(process_multiple(input_path, pack=True, binary=args.binary))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
