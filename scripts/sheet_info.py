#!/usr/bin/env python3
"""
Print the descriptor summary of animation file(s).

Usage:
    python scripts/sheet_info.py <file.json> [<file.sheet> ...]
    python scripts/sheet_info.py <file.json> --frames      # Include per-frame data
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from data import CURRENT_VERSION, SEPARATOR_LINE_LENGTH, read_file_to_bytes
from spritesheet import BINARY_MAGIC, deserialize_animation


def print_sheet_info(path: Path, show_frames: bool) -> None:
    raw = read_file_to_bytes(path)
    sheet, info = deserialize_animation(raw)

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] File: {path}")
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Mode: {'binary' if raw.startswith(BINARY_MAGIC) else 'text'}")
    print(f"[INFO] Sheet: {sheet.shape[1]}x{sheet.shape[0]}")
    print(f"[INFO] Cell: {info.cell_width}x{info.cell_height}")
    print(f"[INFO] Grid: {info.columns} column(s) x {info.rows} row(s)")
    print(f"[INFO] Frames: {info.frame_count}")
    print(f"[INFO] Total delay: {sum(fd.delay for fd in info.frame_data)} tick(s)")

    if info.hitboxes:
        print("[INFO] Hitboxes:")
        for hitbox in info.hitboxes.values():
            kind = "hurtbox" if hitbox.is_hurtbox else "hitbox"
            print(f"   • {hitbox.id}: {hitbox.desc or '(no description)'} [{kind}]")

    if show_frames:
        for idx, fd in enumerate(info.frame_data):
            enabled = [i for i, inst in fd.hitboxes.items() if inst.enabled]
            print(
                f"   Frame {idx}: delay={fd.delay} "
                f"origin=({fd.origin.x}, {fd.origin.y}) "
                f"root_motion=({fd.root_motion.x}, {fd.root_motion.y}) "
                f"enabled_hitboxes={enabled}"
            )
    print()


def main():
    parser = argparse.ArgumentParser(
        description="Print the descriptor summary of animation file(s)"
    )
    parser.add_argument("paths", nargs="+", help="Animation file(s)")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {CURRENT_VERSION}"
    )
    parser.add_argument(
        "--frames",
        action="store_true",
        help="Also print delay, origin, root motion and hitboxes of every frame",
    )

    args = parser.parse_args()
    failed = False

    for path_str in args.paths:
        path = Path(path_str).resolve()
        try:
            print_sheet_info(path, args.frames)
        except (ValueError, OSError) as e:
            print(f"[ERROR] Could not read {path}: {e}")
            failed = True

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
