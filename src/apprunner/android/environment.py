"""
EnvironmentChecker - locate and validate the Android SDK root.
"""

from apprunner.core.protocols import EnvironmentProvider, FileSystemService

from .exceptions import SdkRootMissingError, SdkRootNotFoundError

SETUP_HINT = (
    "Point it at your Android SDK, for example:\n"
    "  export ANDROID_HOME=$HOME/Library/Android/sdk     # macOS\n"
    "  export ANDROID_HOME=$HOME/Android/Sdk             # Linux\n"
    "See https://developer.android.com/tools/variables"
)


class EnvironmentChecker:
    """Verifies the SDK root variable names an existing, non-empty directory."""

    def __init__(
        self,
        env_provider: EnvironmentProvider,
        filesystem: FileSystemService,
        variable: str = "ANDROID_HOME"
    ):
        self.env = env_provider
        self.fs = filesystem
        self.variable = variable

    def verify(self) -> str:
        """
        Returns:
            The SDK root path (stripped of surrounding whitespace)

        Raises:
            SdkRootMissingError: Variable unset or empty
            SdkRootNotFoundError: Path missing, not a directory, or empty
        """
        sdk_root = self.env.get_environ().get(self.variable, "").strip()

        if not sdk_root:
            raise SdkRootMissingError(f"{self.variable} is not set.\n{SETUP_HINT}")

        if not self.fs.is_dir(sdk_root):
            raise SdkRootNotFoundError(
                f"{self.variable} points to '{sdk_root}', which is not an existing directory.\n"
                f"{SETUP_HINT}"
            )

        try:
            is_empty = not any(True for _ in self.fs.iterdir(sdk_root))
        except OSError as e:
            raise SdkRootNotFoundError(
                f"{self.variable} points to '{sdk_root}', which cannot be read: {e}\n"
                f"{SETUP_HINT}"
            ) from e

        if is_empty:
            raise SdkRootNotFoundError(
                f"{self.variable} points to '{sdk_root}', which is empty.\n"
                f"Install the SDK platform-tools and emulator packages there."
            )

        return sdk_root
