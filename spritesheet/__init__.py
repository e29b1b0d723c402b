"""
Spritesheet codec: packs animation frames into one tiled sheet plus a
descriptor, and unpacks them again.
"""

from .codec import (
    SourceFrame,
    DecodedFrame,
    EncodedSheet,
    encode_spritesheet,
    decode_spritesheet,
)
from .descriptor import FrameData, SheetInfo
from .packer import (
    opaque_bounds,
    crop_image,
    cell_size,
    pad_to_cell,
    choose_columns,
    build_sheet,
    slice_sheet,
)
from .sheet_io import (
    encode_png,
    decode_png,
    serialize_animation,
    deserialize_animation,
    write_animation_file,
    read_animation_file,
    is_binary_path,
)
from .frames_io import (
    list_frame_images,
    import_frames_folder,
    import_extracted_folder,
    export_frames_folder,
)
from .transform import pack_folder, extract_animation, process_single, process_multiple
from .constants import (
    FORMAT_VERSION,
    BINARY_MAGIC,
    TEXT_EXTENSION,
    BINARY_EXTENSION,
    FRAMES_INFO_FILE,
    FRAMES_CONFIG_FILE,
)

__all__ = [
    # Codec
    "SourceFrame",
    "DecodedFrame",
    "EncodedSheet",
    "encode_spritesheet",
    "decode_spritesheet",
    # Descriptor
    "FrameData",
    "SheetInfo",
    # Packer
    "opaque_bounds",
    "crop_image",
    "cell_size",
    "pad_to_cell",
    "choose_columns",
    "build_sheet",
    "slice_sheet",
    # Artifact IO
    "encode_png",
    "decode_png",
    "serialize_animation",
    "deserialize_animation",
    "write_animation_file",
    "read_animation_file",
    "is_binary_path",
    # Frame folders
    "list_frame_images",
    "import_frames_folder",
    "import_extracted_folder",
    "export_frames_folder",
    # Batch processing
    "pack_folder",
    "extract_animation",
    "process_single",
    "process_multiple",
    # Constants
    "FORMAT_VERSION",
    "BINARY_MAGIC",
    "TEXT_EXTENSION",
    "BINARY_EXTENSION",
    "FRAMES_INFO_FILE",
    "FRAMES_CONFIG_FILE",
]
