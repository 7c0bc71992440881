"""
Backup catalog: list existing backup files in a directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .naming import is_backup_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackupEntry:
    """A backup file found on disk."""
    path: Path
    size_bytes: int

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def human_size(self) -> str:
        return format_size(self.size_bytes)


def format_size(size: int) -> str:
    """Format a byte count like `ls -lh` (1.5K, 16M)."""
    if size < 1024:
        return f"{size}B"
    value = float(size)
    unit = "B"
    for unit in ("K", "M", "G"):
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f}{unit}" if value < 10 else f"{value:.0f}{unit}"


def list_backups(directory: Union[str, Path]) -> List[BackupEntry]:
    """
    List .uf2 and .bin files in `directory`, largest first.

    A missing directory yields an empty list. Ties keep directory
    enumeration order.
    """
    root = Path(directory)
    if not root.is_dir():
        logger.debug(f"Backup directory {root} does not exist")
        return []

    entries = [
        BackupEntry(path=child, size_bytes=child.stat().st_size)
        for child in root.iterdir()
        if child.is_file() and is_backup_file(child)
    ]
    entries.sort(key=lambda entry: entry.size_bytes, reverse=True)
    logger.debug(f"Found {len(entries)} backups in {root}")
    return entries
