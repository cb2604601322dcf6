"""Unit tests for EmulatorLauncher."""
import subprocess

import pytest

from apprunner.android.bridge import DeviceBridge
from apprunner.android.emulator import EmulatorLauncher
from apprunner.android.exceptions import EmulatorStartError, NoEmulatorConfiguredError

from helpers import EMULATOR, PROJECT_DIR, SDK_ROOT, create_mock_process


def make_launcher(avd_response, logger, dns_server="223.5.5.5"):
    process = create_mock_process({'emulator -list-avds': avd_response})
    bridge = DeviceBridge(process, SDK_ROOT, PROJECT_DIR)
    return EmulatorLauncher(bridge, logger, dns_server=dns_server), process


class TestListAndSelect:

    def test_blank_lines_are_dropped(self, logger):
        launcher, _ = make_launcher((0, "\nPixel_6_API_34\n\n  Nexus_5X  \n", ""), logger)

        assert launcher.list_available() == ["Pixel_6_API_34", "Nexus_5X"]

    def test_last_listed_avd_is_selected(self):
        assert EmulatorLauncher.select(["Pixel_6_API_34", "Nexus_5X", "Tablet"]) == "Tablet"

    def test_empty_listing_raises_before_start(self, logger):
        launcher, process = make_launcher((0, "\n\n", ""), logger)

        with pytest.raises(NoEmulatorConfiguredError):
            launcher.boot()

        process.popen.assert_not_called()

    def test_missing_emulator_binary(self, logger):
        launcher, _ = make_launcher(FileNotFoundError(2, "No such file"), logger)

        with pytest.raises(EmulatorStartError):
            launcher.list_available()


class TestStart:

    def test_boot_starts_last_avd_detached_with_dns(self, logger):
        launcher, process = make_launcher((0, "Pixel_6_API_34\nNexus_5X\n", ""), logger)

        assert launcher.boot() == "Nexus_5X"

        process.popen.assert_called_once()
        cmd = process.popen.call_args.args[0]
        kwargs = process.popen.call_args.kwargs
        assert cmd == [EMULATOR, "-avd", "Nexus_5X", "-dns-server", "223.5.5.5"]
        assert kwargs["start_new_session"] is True
        assert kwargs["stdout"] is subprocess.DEVNULL
        process.popen.return_value.wait.assert_not_called()

    def test_dns_override_can_be_disabled(self, logger):
        launcher, process = make_launcher((0, "Pixel\n", ""), logger, dns_server=None)

        launcher.start("Pixel")

        assert process.popen.call_args.args[0] == [EMULATOR, "-avd", "Pixel"]

    def test_spawn_failure_is_start_failed(self, logger):
        launcher, process = make_launcher((0, "Pixel\n", ""), logger)
        process.popen.side_effect = PermissionError(13, "Permission denied")

        with pytest.raises(EmulatorStartError, match="Pixel"):
            launcher.start("Pixel")
