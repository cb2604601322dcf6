"""
LaunchPipeline - verify, parse, find a device, forward, build, launch.

Strategy:
    1. EnvironmentChecker.verify     (ANDROID_HOME)
    2. ManifestReader.parse          (package + launcher activity)
    3. DeviceProbe.check             (none -> boot emulator + DeviceWaiter)
    4. PortForwarder.forward         (adb reverse)
    5. Builder.build_and_install     (gradlew installDebug)
    6. Launcher.launch               (am start -n)
"""

from typing import TYPE_CHECKING

from apprunner.core.protocols import (
    EnvironmentProvider,
    FileSystemService,
    Logger,
    ProcessExecutor,
    TimeProvider,
)

from .bridge import DeviceBridge
from .builder import Builder, Launcher
from .context import DeviceState, RunContext
from .emulator import EmulatorLauncher
from .environment import EnvironmentChecker
from .forwarder import PortForwarder
from .manifest import ManifestReader
from .probe import DeviceProbe
from .waiter import DeviceWaiter

if TYPE_CHECKING:
    from apprunner.utils.config import RunnerConfig

TOTAL_STEPS = 6


class LaunchPipeline:
    """
    Runs one launch end to end with injected dependencies.

    Only one condition is recovered from: no device attached, which boots an
    emulator and waits for it. Every other RunnerError propagates unchanged
    and nothing already done (e.g. forwarded ports) is rolled back.
    """

    def __init__(
        self,
        config: 'RunnerConfig',
        filesystem: FileSystemService,
        process_executor: ProcessExecutor,
        time_provider: TimeProvider,
        env_provider: EnvironmentProvider,
        logger: Logger
    ):
        self.config = config
        self.fs = filesystem
        self.process = process_executor
        self.time = time_provider
        self.env = env_provider
        self.log = logger

    def _step(self, number: int, message: str) -> None:
        self.log.info(f"[{number}/{TOTAL_STEPS}] {message}")

    def make_bridge(self, sdk_root: str) -> DeviceBridge:
        return DeviceBridge(self.process, sdk_root, self.config.project_dir)

    def ensure_device(self, bridge: DeviceBridge, context: RunContext) -> None:
        """Make sure exactly one ready device is attached, booting an emulator if needed."""
        probe = DeviceProbe(bridge)
        if probe.check() is DeviceState.EXACTLY_ONE:
            self.log.info("✓ Device connected")
            return

        EmulatorLauncher(bridge, self.log, dns_server=self.config.dns_server).boot()
        context.device_was_booted = True

        DeviceWaiter(
            probe,
            bridge,
            self.time,
            self.log,
            poll_interval=self.config.poll_interval_seconds,
            max_attempts=self.config.max_wait_attempts
        ).wait(context)

    def run(self) -> RunContext:
        """
        Returns:
            The finished RunContext

        Raises:
            RunnerError: Any stage failure (see apprunner.android.exceptions)
        """
        context = RunContext()

        self._step(1, "Checking Android SDK...")
        context.sdk_root = EnvironmentChecker(self.env, self.fs, self.config.sdk_env_var).verify()
        self.log.debug(f"{self.config.sdk_env_var}={context.sdk_root}")

        self._step(2, "Reading Android manifest...")
        context.package_id, context.entry_component_id = ManifestReader(self.fs).parse(
            self.config.manifest_path
        )
        self.log.info(f"  package: {context.package_id}, activity: {context.entry_component_id}")

        bridge = self.make_bridge(context.sdk_root)

        self._step(3, "Checking devices...")
        self.ensure_device(bridge, context)

        self._step(4, "Forwarding ports...")
        PortForwarder(bridge, self.log).forward(self.config.port_mappings)

        self._step(5, "Building and installing...")
        context.require_identity()
        Builder(bridge, self.log, self.config.gradle_task).build_and_install(context.package_id)

        self._step(6, "Launching...")
        context.require_identity()
        Launcher(bridge, self.log).launch(context.package_id, context.entry_component_id)

        return context
