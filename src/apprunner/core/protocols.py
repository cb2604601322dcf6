"""Protocol definitions for dependency injection.

Every external effect of a launch run (environment lookup, filesystem checks,
adb/emulator/gradle processes, sleeping between polls) goes through one of
these Protocols. Any class implementing the methods satisfies the Protocol
without explicit inheritance, so tests can hand in a ``Mock(spec=...)``.
"""

from typing import Protocol, Dict, Any, Optional, List, Union, Iterator
from pathlib import Path


class Logger(Protocol):
    """Abstraction for logging operations."""

    def info(self, message: str) -> None:
        """Log informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...


class FileSystemService(Protocol):
    """Abstraction for the read-only filesystem operations a run needs."""

    def exists(self, path: Union[str, Path]) -> bool:
        """Check if path exists."""
        ...

    def is_file(self, path: Union[str, Path]) -> bool:
        """Check if path is a file."""
        ...

    def is_dir(self, path: Union[str, Path]) -> bool:
        """Check if path is a directory."""
        ...

    def read_file(self, path: Union[str, Path]) -> str:
        """Read entire file as string."""
        ...

    def iterdir(self, path: Union[str, Path]) -> Iterator[Path]:
        """Iterate over directory contents."""
        ...


class ProcessResult(Protocol):
    """Outcome of a finished process (matches subprocess.CompletedProcess)."""

    returncode: int
    stdout: Optional[str]
    stderr: Optional[str]


class ProcessHandle(Protocol):
    """Handle to a detached process (wraps subprocess.Popen). Never waited on."""

    pid: int


class ProcessExecutor(Protocol):
    """Abstraction for process execution.

    ``run`` blocks until the process exits; ``popen`` starts a process and
    returns immediately. Both raise ``OSError`` when the executable cannot be
    started at all.
    """

    def run(
        self,
        cmd: List[str],
        capture_output: bool = True,
        text: bool = True,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> ProcessResult:
        """Execute command, wait for it, and return its result."""
        ...

    def popen(
        self,
        cmd: List[str],
        stdout: Optional[Any] = None,
        stderr: Optional[Any] = None,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        start_new_session: bool = False
    ) -> ProcessHandle:
        """Execute command and return process handle."""
        ...


class TimeProvider(Protocol):
    """Abstraction for time operations.

    Lets the device wait loop be tested without actually sleeping.
    """

    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds."""
        ...


class EnvironmentProvider(Protocol):
    """Abstraction for environment access."""

    def get_environ(self) -> Dict[str, str]:
        """Get copy of environment variables."""
        ...

    def get_system_type(self) -> str:
        """Get system type ('Darwin', 'Linux', 'Windows', etc.)."""
        ...


class ConfigLoader(Protocol):
    """Abstraction for configuration file loading."""

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file and return parsed dictionary."""
        ...
