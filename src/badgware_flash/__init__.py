"""
Badgware Flash - Flash backup and restore for RP2350 Badgware boards

Dumps and restores the full 16 MB flash of Tufty, Blinky and Badger 2350
boards in BOOTSEL mode, delegating the USB work to picotool.
"""

__version__ = "0.1.0"

from badgware_flash.boards import BoardProfile, resolve_board
from badgware_flash.picotool import Picotool

__all__ = [
    "BoardProfile",
    "resolve_board",
    "Picotool",
    "__version__",
]
