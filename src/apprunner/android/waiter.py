"""
DeviceWaiter - poll until exactly one device accepts commands.

States:
    PROBING          -> READY | RETRY_SCHEDULED  (AmbiguousDeviceError escapes)
    RETRY_SCHEDULED  -> PROBING | EXHAUSTED
    EXHAUSTED        -> raises DeviceTimeoutError
    READY            -> returns
"""

from enum import Enum

from apprunner.core.protocols import Logger, TimeProvider

from .bridge import DeviceBridge
from .context import DeviceState, RunContext
from .exceptions import DeviceTimeoutError
from .probe import DeviceProbe

DEFAULT_POLL_INTERVAL = 2.0
DEFAULT_MAX_ATTEMPTS = 30


class WaitState(Enum):
    PROBING = "probing"
    RETRY_SCHEDULED = "retry_scheduled"
    EXHAUSTED = "exhausted"
    READY = "ready"


class DeviceWaiter:
    """
    Waits for a booting device.

    A device counts as ready only once it is listed AND accepts a liveness
    command (`am force-stop <package>`, harmless when the package is not
    installed yet). Probes at most max_attempts times.
    """

    def __init__(
        self,
        probe: DeviceProbe,
        bridge: DeviceBridge,
        time_provider: TimeProvider,
        logger: Logger,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ):
        self.probe = probe
        self.bridge = bridge
        self.time = time_provider
        self.log = logger
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts

    def _is_live(self, package_id: str) -> bool:
        try:
            result = self.bridge.force_stop(package_id)
        except OSError as e:
            self.log.debug(f"Liveness check could not run: {e}")
            return False
        if result.returncode != 0:
            self.log.debug(f"Device not accepting commands yet (exit {result.returncode})")
            return False
        return True

    def wait(self, context: RunContext) -> None:
        """
        Block until a device is ready, counting failed polls in context.retry_count.

        Raises:
            AmbiguousDeviceError: More than one device appeared (no retry)
            BridgeUnavailableError: adb itself failed
            DeviceTimeoutError: Not ready after max_attempts probes
        """
        state = WaitState.PROBING

        while True:
            if state is WaitState.PROBING:
                self.log.info("Waiting device to connect.")
                device_state = self.probe.check()
                if device_state is DeviceState.EXACTLY_ONE and self._is_live(context.package_id):
                    state = WaitState.READY
                else:
                    state = WaitState.RETRY_SCHEDULED

            elif state is WaitState.RETRY_SCHEDULED:
                context.retry_count += 1
                if context.retry_count >= self.max_attempts:
                    state = WaitState.EXHAUSTED
                else:
                    self.time.sleep(self.poll_interval)
                    state = WaitState.PROBING

            elif state is WaitState.EXHAUSTED:
                raise DeviceTimeoutError(
                    f"Emulator start failed: no device ready after {context.retry_count} attempts "
                    f"({self.poll_interval:g}s apart).\n"
                    f"Check the emulator window, or start it manually and re-run."
                )

            else:
                self.log.info("✓ Device ready")
                return
