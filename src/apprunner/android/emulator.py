"""
EmulatorLauncher - boot a virtual device when nothing is attached.
"""

from typing import List, Optional

from apprunner.core.protocols import Logger

from .bridge import DeviceBridge
from .exceptions import EmulatorStartError, NoEmulatorConfiguredError


class EmulatorLauncher:
    """Lists AVDs, picks one and starts it without waiting for it to exit."""

    def __init__(self, bridge: DeviceBridge, logger: Logger, dns_server: Optional[str] = None):
        self.bridge = bridge
        self.log = logger
        self.dns_server = dns_server

    def list_available(self) -> List[str]:
        """
        Names printed by `emulator -list-avds`, blank lines dropped.

        Raises:
            EmulatorStartError: The emulator binary could not be run
        """
        try:
            result = self.bridge.list_avds()
        except OSError as e:
            raise EmulatorStartError(
                f"Could not run emulator at {self.bridge.emulator_path}: {e}\n"
                f"Install the SDK emulator package."
            ) from e

        if result.returncode != 0:
            self.log.warning(f"`emulator -list-avds` exited {result.returncode}: {(result.stderr or '').strip()}")

        return [line.strip() for line in (result.stdout or "").splitlines() if line.strip()]

    @staticmethod
    def select(names: List[str]) -> str:
        """
        Pick the last listed AVD.

        Raises:
            NoEmulatorConfiguredError: No AVDs exist
        """
        if not names:
            raise NoEmulatorConfiguredError(
                "Emulator not found, create at least one virtual device via Android Studio "
                "(Tools > Device Manager) or avdmanager."
            )
        return names[-1]

    def start(self, name: str) -> None:
        """
        Raises:
            EmulatorStartError: The emulator process could not be spawned
        """
        try:
            handle = self.bridge.start_avd(name, dns_server=self.dns_server)
        except OSError as e:
            raise EmulatorStartError(f"Failed to start emulator '{name}': {e}") from e
        self.log.debug(f"Emulator '{name}' started (pid {handle.pid})")

    def boot(self) -> str:
        """List, select and start an AVD. Returns its name."""
        target = self.select(self.list_available())
        self.log.info(f"No device connected, starting emulator '{target}'...")
        self.start(target)
        return target
