"""
Builder and Launcher - install the debug build and start its launcher activity.
"""

from apprunner.core.protocols import Logger

from .bridge import DeviceBridge
from .exceptions import BuildError, LaunchError


class Builder:
    """Runs the Gradle install task after stopping any running instance."""

    def __init__(self, bridge: DeviceBridge, logger: Logger, gradle_task: str = "installDebug"):
        self.bridge = bridge
        self.log = logger
        self.gradle_task = gradle_task

    def _stop_previous_instance(self, package_id: str) -> None:
        # Not installed yet is the common first-run case
        try:
            result = self.bridge.force_stop(package_id)
        except OSError as e:
            self.log.debug(f"force-stop skipped: {e}")
            return
        if result.returncode != 0:
            self.log.debug(f"force-stop {package_id} exited {result.returncode}, ignoring")

    def build_and_install(self, package_id: str) -> None:
        """
        Raises:
            BuildError: Gradle could not be run or exited non-zero
        """
        self._stop_previous_instance(package_id)

        self.log.info(f"Running gradle {self.gradle_task} ...")
        try:
            result = self.bridge.gradle(self.gradle_task)
        except OSError as e:
            raise BuildError(f"Could not run the Gradle wrapper in {self.bridge.project_dir}: {e}") from e

        if result.returncode != 0:
            raise BuildError(
                f"Gradle {self.gradle_task} failed (exit {result.returncode}).\n"
                f"Debug:\n"
                f"  cd {self.bridge.project_dir} && ./gradlew {self.gradle_task} --stacktrace"
            )


class Launcher:
    """Starts `<package>/<activity>` with `am start -n`."""

    def __init__(self, bridge: DeviceBridge, logger: Logger):
        self.bridge = bridge
        self.log = logger

    def launch(self, package_id: str, entry_component_id: str) -> None:
        """
        Raises:
            LaunchError: am start exited non-zero or reported an error
        """
        component = f"{package_id}/{entry_component_id}"
        try:
            result = self.bridge.start_component(component)
        except OSError as e:
            raise LaunchError(f"Could not run adb to start {component}: {e}") from e

        output = (result.stdout or "") + (result.stderr or "")
        for line in output.splitlines():
            self.log.debug(line)

        # am start prints "Error: ..." and still exits 0 on some Android versions
        reported = [line.strip() for line in output.splitlines() if line.strip().startswith("Error")]

        if result.returncode != 0 or reported:
            detail = reported[0] if reported else f"exit {result.returncode}"
            raise LaunchError(f"Failed to start {component}: {detail}")

        self.log.info(f"✓ Started {component}")
