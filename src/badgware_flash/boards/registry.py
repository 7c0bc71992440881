"""
Board registry for Badgware RP2350 boards.

Provides a single source of truth for:
- Supported board identifiers
- Display names and descriptions
- Flash geometry (start/end address)

All three boards use an RP2350 with 16 MB of flash mapped at 0x10000000,
so they share one geometry and differ only in their labels.

Usage:
    from badgware_flash.boards import list_boards, get_board, resolve_board

    # List all known boards
    boards = list_boards()

    # Look up a board, None if unknown
    profile = get_board("Badger")

    # Look up a board, raising UnknownBoardError if unknown
    profile = resolve_board("tufty")
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from badgware_flash.errors import UnknownBoardError


FLASH_START = 0x10000000
FLASH_END = 0x11000000  # 16 MB


class BoardId(Enum):
    """Supported board identifiers."""
    TUFTY = "tufty"
    BLINKY = "blinky"
    BADGER = "badger"


@dataclass(frozen=True)
class BoardProfile:
    """Static description of a supported board."""
    id: BoardId
    name: str
    display: str
    flash_start: int = FLASH_START
    flash_end: int = FLASH_END

    def __post_init__(self):
        if self.flash_start >= self.flash_end:
            raise ValueError(
                f"{self.name}: flash_start 0x{self.flash_start:08X} must be below "
                f"flash_end 0x{self.flash_end:08X}"
            )

    @property
    def key(self) -> str:
        """Return the lowercase identifier used on the command line."""
        return self.id.value

    @property
    def flash_size(self) -> int:
        """Return flash size in bytes."""
        return self.flash_end - self.flash_start

    @property
    def flash_region(self) -> str:
        """Return the flash range as a hex string."""
        return f"0x{self.flash_start:08X}-0x{self.flash_end:08X}"


# ============================================================================
# BOARD REGISTRY - All supported boards
# ============================================================================

_BOARD_REGISTRY: Dict[str, BoardProfile] = {}


def _register_board(profile: BoardProfile) -> None:
    """Register a board profile."""
    _BOARD_REGISTRY[profile.key] = profile


def _init_registry() -> None:
    """Initialize the registry with the Badgware boards."""
    _register_board(BoardProfile(
        id=BoardId.TUFTY,
        name="Tufty 2350",
        display='2.8" colour TFT display',
    ))
    _register_board(BoardProfile(
        id=BoardId.BLINKY,
        name="Blinky 2350",
        display="LED matrix display",
    ))
    _register_board(BoardProfile(
        id=BoardId.BADGER,
        name="Badger 2350",
        display='2.7" e-paper display',
    ))


_init_registry()


# ============================================================================
# PUBLIC API
# ============================================================================

def list_boards() -> List[BoardProfile]:
    """Return all registered boards in registration order."""
    return list(_BOARD_REGISTRY.values())


def supported_board_ids() -> List[str]:
    """Return the identifiers accepted by --board."""
    return list(_BOARD_REGISTRY.keys())


def get_board(board_id: Optional[str]) -> Optional[BoardProfile]:
    """
    Look up a board by identifier (case-insensitive).

    Returns:
        BoardProfile, or None if the identifier is unknown.
    """
    if not board_id:
        return None
    return _BOARD_REGISTRY.get(board_id.strip().lower())


def resolve_board(board_id: Optional[str]) -> BoardProfile:
    """
    Look up a board by identifier (case-insensitive).

    Raises:
        UnknownBoardError: If the identifier is not supported. The message
            lists every supported identifier.
    """
    profile = get_board(board_id)
    if profile is None:
        raise UnknownBoardError(board_id or "", supported_board_ids())
    return profile
