"""
Centralized helpers for backup filenames and image formats.

Both backup and restore import these rather than re-implement the
extension rules.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from badgware_flash.config import TIMESTAMP_FORMAT


class ImageFormat(Enum):
    """Backup image format."""
    CONTAINER = "uf2"  # self-describing, carries its own addresses
    RAW = "bin"        # bare bytes, base address supplied by the caller


BACKUP_EXTENSIONS = (".uf2", ".bin")


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Return a YYYYMMDD-HHMMSS timestamp."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def default_backup_filename(
    board_id: str,
    raw_mode: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the generated backup filename.

    Returns:
        "<board>-backup-<timestamp>.uf2", or ".bin" in raw mode.
    """
    fmt = ImageFormat.RAW if raw_mode else ImageFormat.CONTAINER
    return f"{board_id}-backup-{format_timestamp(now)}.{fmt.value}"


def resolve_output_path(
    directory: Union[str, Path],
    board_id: str,
    raw_mode: bool = False,
    explicit_filename: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Path:
    """
    Resolve where a backup is written.

    An explicit filename is used verbatim; only the generated default name
    depends on raw_mode.
    """
    filename = explicit_filename or default_backup_filename(board_id, raw_mode, now)
    return Path(directory) / filename


def detect_image_format(path: Union[str, Path]) -> Tuple[ImageFormat, Optional[str]]:
    """
    Infer the image format from the file extension (case-insensitive).

    Unrecognized extensions fall back to raw binary.

    Returns:
        Tuple of (format, warning). warning is None for .uf2 and .bin.
    """
    suffix = Path(path).suffix
    ext = suffix.lower()
    if ext == ".uf2":
        return ImageFormat.CONTAINER, None
    if ext == ".bin":
        return ImageFormat.RAW, None
    shown = suffix or "(none)"
    return ImageFormat.RAW, f"Unrecognized extension '{shown}'. Treating as raw binary."


def is_backup_file(path: Union[str, Path]) -> bool:
    """Return True for .uf2/.bin names (case-insensitive)."""
    return Path(path).suffix.lower() in BACKUP_EXTENSIONS
