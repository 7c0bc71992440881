"""Tests for the board registry."""

import pytest

from badgware_flash.boards import (
    FLASH_END,
    FLASH_START,
    BoardId,
    BoardProfile,
    get_board,
    list_boards,
    resolve_board,
    supported_board_ids,
)
from badgware_flash.errors import UnknownBoardError


class TestResolveBoard:
    """Test board lookup by identifier."""

    @pytest.mark.parametrize("board_id", ["tufty", "blinky", "badger"])
    def test_resolve_known_boards(self, board_id):
        """Every supported identifier resolves to its own profile."""
        profile = resolve_board(board_id)
        assert profile.key == board_id
        assert profile.id == BoardId(board_id)

    def test_resolve_is_case_insensitive(self):
        """Identifiers are lowercased before lookup."""
        assert resolve_board("BADGER").id == BoardId.BADGER
        assert resolve_board("Tufty").id == BoardId.TUFTY
        assert resolve_board("  blinky ").id == BoardId.BLINKY

    def test_unknown_board_lists_supported_set(self):
        """Unknown boards raise with the full supported list in the message."""
        with pytest.raises(UnknownBoardError) as ei:
            resolve_board("pico")
        message = str(ei.value)
        assert "'pico'" in message
        assert "Supported boards: tufty, blinky, badger" in message
        assert ei.value.supported == ("tufty", "blinky", "badger")

    def test_empty_board_raises(self):
        """Empty and None identifiers are unknown boards."""
        with pytest.raises(UnknownBoardError):
            resolve_board("")
        with pytest.raises(UnknownBoardError):
            resolve_board(None)

    def test_unknown_board_is_value_error(self):
        """UnknownBoardError can be caught as ValueError."""
        with pytest.raises(ValueError):
            resolve_board("unicorn")

    def test_get_board_returns_none_for_unknown(self):
        assert get_board("unicorn") is None
        assert get_board("badger") is resolve_board("badger")


class TestBoardGeometry:
    """All boards share one RP2350 16 MB flash layout."""

    def test_registry_order(self):
        assert supported_board_ids() == ["tufty", "blinky", "badger"]
        assert [b.name for b in list_boards()] == ["Tufty 2350", "Blinky 2350", "Badger 2350"]

    def test_shared_geometry(self):
        for profile in list_boards():
            assert profile.flash_start == FLASH_START == 0x10000000
            assert profile.flash_end == FLASH_END == 0x11000000
            assert profile.flash_size == 16 * 1024 * 1024

    def test_flash_region_string(self):
        assert resolve_board("tufty").flash_region == "0x10000000-0x11000000"

    def test_profiles_are_immutable(self):
        profile = resolve_board("tufty")
        with pytest.raises(Exception):
            profile.flash_start = 0

    def test_inverted_geometry_rejected(self):
        with pytest.raises(ValueError):
            BoardProfile(
                id=BoardId.TUFTY,
                name="Broken",
                display="none",
                flash_start=0x11000000,
                flash_end=0x10000000,
            )
