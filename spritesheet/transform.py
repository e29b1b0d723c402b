from pathlib import Path
from typing import List

from data import SEPARATOR_LINE_LENGTH, validate_path_exists_and_is_dir
from .codec import decode_spritesheet, encode_spritesheet
from .constants import BINARY_EXTENSION, FRAMES_INFO_FILE, TEXT_EXTENSION
from .frames_io import (
    export_frames_folder,
    import_extracted_folder,
    import_frames_folder,
)
from .sheet_io import read_animation_file, write_animation_file

ANIMATION_EXTENSIONS = (TEXT_EXTENSION, BINARY_EXTENSION)


def pack_folder(folder: Path, binary: bool = False) -> Path:
    """Pack a frame folder into <folder>/<folder name>.json (or .sheet).

    Folders written by extract_animation keep their metadata and hitboxes.

    Returns:
        Path of the written animation file
    """
    hitboxes = {}
    if (folder / FRAMES_INFO_FILE).exists():
        frames, info = import_extracted_folder(folder)
        hitboxes = info.hitboxes
    else:
        frames = import_frames_folder(folder)

    encoded = encode_spritesheet(frames, hitboxes)
    info = encoded.info

    extension = BINARY_EXTENSION if binary else TEXT_EXTENSION
    output_path = folder / f"{folder.name}{extension}"
    write_animation_file(output_path, encoded.image, info, binary=binary)

    print(
        f"[INFO] Cell size: {info.cell_width}x{info.cell_height}, "
        f"grid: {info.columns}x{info.rows}"
    )
    print(f"[OK] Animation written to: {output_path}")
    return output_path


def extract_animation(path: Path) -> Path:
    """Unpack an animation file into <stem>_extracted/ next to it.

    Returns:
        Path of the output folder
    """
    sheet, info = read_animation_file(path)
    frames = decode_spritesheet(sheet, info)

    output_dir = path.parent / f"{path.stem}_extracted"
    export_frames_folder(frames, info, output_dir)
    return output_dir


def process_single(path: Path, binary: bool = False) -> bool:
    """Pack a folder or extract an animation file, chosen by path type.

    Returns:
        True if successful, False otherwise
    """
    if not path.exists():
        print(f"[ERROR] Path does not exist: {path}")
        return False

    is_folder = path.is_dir()
    is_animation = path.is_file() and path.suffix.lower() in ANIMATION_EXTENSIONS

    if not is_folder and not is_animation:
        print(f"[ERROR] Path must be a folder or an animation file: {path}")
        return False

    print("=" * SEPARATOR_LINE_LENGTH)
    if is_folder:
        print(f"[INFO] Processing folder: {path}")
        print("[INFO] Operation: Pack frames")
    else:
        print(f"[INFO] Processing animation file: {path}")
        print("[INFO] Operation: Extract frames")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    try:
        if is_folder:
            pack_folder(path, binary=binary)
        else:
            extract_animation(path)
        return True

    except (ValueError, OSError) as e:
        print(f"[ERROR] Error during processing: {str(e)}")
        return False


def process_multiple(parent_folder: Path, pack: bool = True, binary: bool = False) -> List[str]:
    """Pack every subfolder, or extract every animation file, of parent_folder.

    Returns:
        Names of the items that failed
    """
    if not validate_path_exists_and_is_dir(parent_folder, "Parent folder"):
        return [parent_folder.name]

    if pack:
        items = sorted(f for f in parent_folder.iterdir() if f.is_dir())
        operation = "Pack frames"
    else:
        items = sorted(
            f
            for f in parent_folder.iterdir()
            if f.is_file() and f.suffix.lower() in ANIMATION_EXTENSIONS
        )
        operation = "Extract frames"

    if not items:
        item_type = "subfolders" if pack else "animation files"
        print(f"[ERROR] No {item_type} found in: {parent_folder}")
        return []

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Found {len(items)} item(s) to process")
    print(f"[INFO] Operation: {operation}")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    success_count = 0
    failed_items = []

    for idx, item_path in enumerate(items):
        if idx > 0:
            print()

        if process_single(item_path, binary=binary):
            success_count += 1
        else:
            failed_items.append(item_path.name)

    print()
    print("=" * SEPARATOR_LINE_LENGTH)
    print("[SUMMARY] PROCESSING SUMMARY")
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Total: {len(items)}")
    print(f"[INFO] Successful: {success_count}")
    print(f"[INFO] Failed: {len(failed_items)}")

    if failed_items:
        print("\n[ERROR] Failed items:")
        for item in failed_items:
            print(f"   • {item}")

    print("=" * SEPARATOR_LINE_LENGTH)
    return failed_items
