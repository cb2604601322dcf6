"""
Launch exceptions.

One exception family per pipeline stage, each with an actionable message.
Every stage error is fatal except the "no device attached" case, which is not
an exception at all (DeviceProbe reports it as DeviceState.NONE).
"""


class RunnerError(Exception):
    """Base class for every error a launch run can report."""
    pass


class ConfigError(RunnerError):
    """Raised when apprunner.yaml is unreadable or has invalid values."""
    pass


class EnvError(RunnerError):
    """Raised when the Android SDK root cannot be used."""
    pass


class SdkRootMissingError(EnvError):
    """The SDK root variable is unset or empty."""
    pass


class SdkRootNotFoundError(EnvError):
    """The SDK root variable points to a missing or empty directory."""
    pass


class ManifestError(RunnerError):
    """Raised when the application identity cannot be read from the manifest."""
    pass


class ManifestIncompleteError(ManifestError):
    """No package id, or no launcher activity, after scanning the manifest."""
    pass


class ManifestMalformedError(ManifestError):
    """The manifest file could not be read or is not valid XML."""
    pass


class ProbeError(RunnerError):
    """Raised when the attached-device list cannot be used."""
    pass


class AmbiguousDeviceError(ProbeError):
    """
    More than one device is attached.

    Never retried: waiting does not make the choice any less ambiguous.
    """
    pass


class BridgeUnavailableError(ProbeError):
    """adb could not be started or exited with an error."""
    pass


class EmulatorError(RunnerError):
    """Raised when no emulator can be booted."""
    pass


class NoEmulatorConfiguredError(EmulatorError):
    """`emulator -list-avds` returned no virtual devices."""
    pass


class EmulatorStartError(EmulatorError):
    """The emulator binary could not be run."""
    pass


class DeviceError(RunnerError):
    """Raised when a device never becomes ready."""
    pass


class DeviceTimeoutError(DeviceError):
    """The wait loop exhausted its attempts."""
    pass


class ForwardError(RunnerError):
    """An `adb reverse` rule could not be applied."""
    pass


class BuildError(RunnerError):
    """The Gradle install task failed."""
    pass


class LaunchError(RunnerError):
    """`am start` failed to start the launcher activity."""
    pass
