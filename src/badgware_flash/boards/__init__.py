"""
Board registry for Badgware boards.

Provides the static board table used by backup and restore.
"""

from .registry import (
    FLASH_START,
    FLASH_END,
    BoardId,
    BoardProfile,
    list_boards,
    supported_board_ids,
    get_board,
    resolve_board,
)

__all__ = [
    "FLASH_START",
    "FLASH_END",
    "BoardId",
    "BoardProfile",
    "list_boards",
    "supported_board_ids",
    "get_board",
    "resolve_board",
]
