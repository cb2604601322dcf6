"""
Android launch subsystem.

Drives adb, the emulator and the Gradle wrapper to get an app running on
exactly one device:
    - EnvironmentChecker: ANDROID_HOME validation
    - ManifestReader: package id + launcher activity
    - DeviceProbe / EmulatorLauncher / DeviceWaiter: device availability
    - PortForwarder: adb reverse rules
    - Builder / Launcher: gradlew installDebug + am start
    - LaunchPipeline: the ordered run of all of the above

Public API:
    - LaunchPipeline, RunContext, DeviceState, PortMapping
    - RunnerError and its per-stage subclasses
"""

from .bridge import DeviceBridge
from .builder import Builder, Launcher
from .context import (
    ComponentEntry,
    DeviceState,
    IntentFilter,
    ManifestDescriptor,
    PortMapping,
    RunContext,
    DEFAULT_PORT_MAPPINGS,
)
from .emulator import EmulatorLauncher
from .environment import EnvironmentChecker
from .exceptions import (
    RunnerError,
    ConfigError,
    EnvError,
    SdkRootMissingError,
    SdkRootNotFoundError,
    ManifestError,
    ManifestIncompleteError,
    ManifestMalformedError,
    ProbeError,
    AmbiguousDeviceError,
    BridgeUnavailableError,
    EmulatorError,
    NoEmulatorConfiguredError,
    EmulatorStartError,
    DeviceError,
    DeviceTimeoutError,
    ForwardError,
    BuildError,
    LaunchError,
)
from .forwarder import PortForwarder
from .manifest import ManifestReader
from .pipeline import LaunchPipeline
from .probe import DeviceProbe
from .waiter import DeviceWaiter, WaitState

__all__ = [
    # Stages
    "DeviceBridge",
    "EnvironmentChecker",
    "ManifestReader",
    "DeviceProbe",
    "EmulatorLauncher",
    "DeviceWaiter",
    "WaitState",
    "PortForwarder",
    "Builder",
    "Launcher",
    "LaunchPipeline",

    # Types
    "ComponentEntry",
    "DeviceState",
    "IntentFilter",
    "ManifestDescriptor",
    "PortMapping",
    "RunContext",
    "DEFAULT_PORT_MAPPINGS",

    # Exceptions
    "RunnerError",
    "ConfigError",
    "EnvError",
    "SdkRootMissingError",
    "SdkRootNotFoundError",
    "ManifestError",
    "ManifestIncompleteError",
    "ManifestMalformedError",
    "ProbeError",
    "AmbiguousDeviceError",
    "BridgeUnavailableError",
    "EmulatorError",
    "NoEmulatorConfiguredError",
    "EmulatorStartError",
    "DeviceError",
    "DeviceTimeoutError",
    "ForwardError",
    "BuildError",
    "LaunchError",
]
