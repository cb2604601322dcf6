"""
PortForwarder - apply `adb reverse` rules so the app can reach host services.
"""

from typing import Iterable

from apprunner.core.protocols import Logger

from .bridge import DeviceBridge
from .context import PortMapping
from .exceptions import ForwardError


class PortForwarder:
    """Applies mappings in order; the first failure aborts the rest."""

    def __init__(self, bridge: DeviceBridge, logger: Logger):
        self.bridge = bridge
        self.log = logger

    def forward(self, mappings: Iterable[PortMapping]) -> None:
        """
        Raises:
            ForwardError: A rule could not be applied. Rules applied before it
                are left in place.
        """
        for mapping in mappings:
            try:
                result = self.bridge.reverse(mapping.host_port, mapping.device_port)
            except OSError as e:
                raise ForwardError(f"Could not run adb reverse: {e}") from e

            if result.returncode != 0:
                raise ForwardError(
                    f"Port forwarding tcp:{mapping.device_port} -> host tcp:{mapping.host_port} failed "
                    f"(exit {result.returncode}): {(result.stderr or '').strip()}\n"
                    f"adb reverse needs Android 5.0+ and a device in 'device' state."
                )
            self.log.debug(f"Forwarded device tcp:{mapping.device_port} -> host tcp:{mapping.host_port}")
