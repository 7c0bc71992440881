"""Tests for structured warnings and error remediation."""

from badgware_flash.core.messages import (
    MessageLevel,
    WarningCode,
    WarningItem,
    error_to_warning,
    code_for_warning,
    warning_from_message,
)
from badgware_flash.core.results import OperationResult
from badgware_flash.errors import (
    BackupFileNotFoundError,
    DeviceNotFoundError,
    ExternalToolError,
    ToolNotFoundError,
    UnknownBoardError,
)


class TestErrorToWarning:
    """Each error type maps to a stable code with a remediation hint."""

    def test_device_not_found_gives_bootsel_gesture(self):
        item = error_to_warning(DeviceNotFoundError("tufty"))
        assert item.level == MessageLevel.ERROR
        assert item.code == WarningCode.W_DEVICE_NOT_FOUND
        assert "Hold BOOT" in item.remediation

    def test_tool_not_found(self):
        item = error_to_warning(ToolNotFoundError("picotool"))
        assert item.code == WarningCode.W_TOOL_NOT_FOUND
        assert "picotool not found" in item.title

    def test_unknown_board(self):
        item = error_to_warning(UnknownBoardError("x", ["tufty"]))
        assert item.code == WarningCode.W_BOARD_UNKNOWN

    def test_missing_file(self):
        item = error_to_warning(BackupFileNotFoundError("a.uf2"))
        assert item.code == WarningCode.W_FILE_NOT_FOUND
        assert item.title == "Backup file not found: a.uf2"

    def test_tool_failure_keeps_output(self):
        item = error_to_warning(ExternalToolError(["picotool", "reboot"], 2, "no device"))
        assert item.code == WarningCode.W_TOOL_FAILED
        assert "no device" in item.title


class TestWarningFromMessage:
    """Pipeline warnings are classified by content."""

    def test_extension_and_reboot_warnings(self):
        items = [
            warning_from_message("Unrecognized extension '.xyz'. Treating as raw binary."),
            warning_from_message("Reboot failed: picotool reboot exited with status 1"),
        ]

        assert [i.code for i in items] == [
            WarningCode.W_EXTENSION_UNKNOWN,
            WarningCode.W_REBOOT_FAILED,
        ]
        assert all(i.level == MessageLevel.WARN for i in items)
        assert "Rename the file" in items[0].remediation

    def test_unclassified_message(self):
        assert code_for_warning("something odd") == WarningCode.W_UNKNOWN


def test_default_remediation_not_overridden():
    item = WarningItem(MessageLevel.INFO, WarningCode.W_NO_BACKUPS, "none", remediation="custom")
    assert item.remediation == "custom"


def test_result_summary():
    result = OperationResult.success("backup_flash", board="badger", bytes_len=2048)
    result.add_warning("Device identification unavailable")
    summary = result.to_summary()
    assert summary.startswith("[SUCCESS] backup_flash")
    assert "Board: badger" in summary
    assert "Bytes: 2,048" in summary
    assert "Device identification unavailable" in summary
