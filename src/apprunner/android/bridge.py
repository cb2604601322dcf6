"""
DeviceBridge - command construction for the Android SDK tools.

Wraps the three external programs a run drives:
    $ANDROID_HOME/platform-tools/adb
    $ANDROID_HOME/emulator/emulator
    <project_dir>/gradlew
All of them are executed through the injected ProcessExecutor.
"""

import os
import subprocess
from typing import List, Optional

from apprunner.core.protocols import ProcessExecutor, ProcessHandle, ProcessResult


class DeviceBridge:
    """Builds and runs adb, emulator and Gradle commands for one SDK root."""

    def __init__(
        self,
        process_executor: ProcessExecutor,
        sdk_root: str,
        project_dir: str
    ):
        """
        Args:
            process_executor: Subprocess execution abstraction
            sdk_root: Android SDK directory (verified ANDROID_HOME)
            project_dir: Android project directory, working dir for Gradle only
        """
        self.process = process_executor
        self.sdk_root = sdk_root
        self.project_dir = project_dir

    @property
    def adb_path(self) -> str:
        return os.path.join(self.sdk_root, "platform-tools", "adb")

    @property
    def emulator_path(self) -> str:
        return os.path.join(self.sdk_root, "emulator", "emulator")

    def _adb_cmd(self, *args: str) -> List[str]:
        return [self.adb_path, *args]

    def _run(self, cmd: List[str], capture_output: bool = True, cwd: Optional[str] = None) -> ProcessResult:
        return self.process.run(cmd, capture_output=capture_output, text=True, cwd=cwd)

    # adb

    def list_devices(self) -> ProcessResult:
        return self._run(self._adb_cmd("devices"))

    def force_stop(self, package_id: str) -> ProcessResult:
        return self._run(self._adb_cmd("shell", "am", "force-stop", package_id))

    def start_component(self, component_name: str) -> ProcessResult:
        return self._run(self._adb_cmd("shell", "am", "start", "-n", component_name))

    def reverse(self, host_port: int, device_port: int) -> ProcessResult:
        # `adb reverse REMOTE LOCAL`: device-side socket first
        return self._run(self._adb_cmd("reverse", f"tcp:{device_port}", f"tcp:{host_port}"))

    # emulator

    def list_avds(self) -> ProcessResult:
        return self._run([self.emulator_path, "-list-avds"])

    def start_avd(self, name: str, dns_server: Optional[str] = None) -> ProcessHandle:
        """Start an emulator detached from this process; never waited on."""
        cmd = [self.emulator_path, "-avd", name]
        if dns_server:
            cmd += ["-dns-server", dns_server]
        return self.process.popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True
        )

    # gradle

    def gradle(self, task: str) -> ProcessResult:
        """Run a Gradle wrapper task with output streamed to the terminal."""
        return self._run(["sh", "./gradlew", task], capture_output=False, cwd=self.project_dir)
