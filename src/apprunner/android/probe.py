"""
DeviceProbe - classify the output of `adb devices`.
"""

from .bridge import DeviceBridge
from .context import DeviceState
from .exceptions import AmbiguousDeviceError, BridgeUnavailableError

DEVICES_HEADER = "List of devices attached"


def count_ready_devices(output: str) -> int:
    """
    Count listing lines whose status column is `device`.

    `adb devices` prints `<serial>\\t<status>` per line after a header.
    Entries in other states (offline, unauthorized, no permissions) are not
    usable and are not counted.
    """
    count = 0
    for line in output.splitlines():
        line = line.strip()
        if not line or line.startswith(DEVICES_HEADER) or line.startswith("*"):
            continue
        parts = line.split()
        if len(parts) >= 2 and parts[1] == "device":
            count += 1
    return count


def classify(output: str) -> DeviceState:
    count = count_ready_devices(output)
    if count == 0:
        return DeviceState.NONE
    if count == 1:
        return DeviceState.EXACTLY_ONE
    return DeviceState.MORE_THAN_ONE


class DeviceProbe:
    """Runs `adb devices` once per check; results are never cached."""

    def __init__(self, bridge: DeviceBridge):
        self.bridge = bridge

    def check(self) -> DeviceState:
        """
        Returns:
            DeviceState.NONE or DeviceState.EXACTLY_ONE

        Raises:
            AmbiguousDeviceError: More than one device attached
            BridgeUnavailableError: adb could not be run or failed
        """
        try:
            result = self.bridge.list_devices()
        except OSError as e:
            raise BridgeUnavailableError(
                f"Could not run adb at {self.bridge.adb_path}: {e}\n"
                f"Install the SDK platform-tools package."
            ) from e

        if result.returncode != 0:
            raise BridgeUnavailableError(
                f"`adb devices` failed (exit {result.returncode}): {(result.stderr or '').strip()}"
            )

        state = classify(result.stdout or "")
        if state is DeviceState.MORE_THAN_ONE:
            raise AmbiguousDeviceError(
                "There is more than one device connected, please disconnect until just one remains.\n"
                "List them with: adb devices"
            )
        return state
