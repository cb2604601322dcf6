"""Production implementations of dependency injection protocols.

This module provides real implementations that wrap actual external dependencies
(filesystem, subprocess, time, etc.). These are used in production code.

For testing, use mocks or test doubles instead of these implementations.
"""

import os
import platform
import subprocess
import sys
import time
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union, Iterator


class ConsoleLogger:
    """Production logger that prints to console (stdout/stderr)."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print info message to stdout."""
        print(message)

    def warning(self, message: str) -> None:
        """Print warning message to stdout."""
        print(f"Warning: {message}")

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(f"Error: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        """Print debug message to stdout when verbose."""
        if self.verbose:
            print(f"Debug: {message}")


class RealFileSystemService:
    """Production filesystem service using real pathlib operations."""

    def exists(self, path: Union[str, Path]) -> bool:
        return Path(path).exists()

    def is_file(self, path: Union[str, Path]) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: Union[str, Path]) -> bool:
        return Path(path).is_dir()

    def read_file(self, path: Union[str, Path]) -> str:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def iterdir(self, path: Union[str, Path]) -> Iterator[Path]:
        return Path(path).iterdir()


class SubprocessHandle:
    """Wrapper around subprocess.Popen handle."""

    def __init__(self, popen_handle):
        """Initialize with actual subprocess.Popen object."""
        self._handle = popen_handle

    @property
    def pid(self) -> int:
        return self._handle.pid


class SubprocessExecutor:
    """Production process executor using real subprocess."""

    def run(
        self,
        cmd: List[str],
        capture_output: bool = True,
        text: bool = True,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None
    ) -> subprocess.CompletedProcess:
        """Execute command and wait for it. Never raises on non-zero exit."""
        return subprocess.run(
            cmd,
            capture_output=capture_output,
            text=text,
            cwd=cwd,
            env=env,
            timeout=timeout,
            check=False
        )

    def popen(
        self,
        cmd: List[str],
        stdout: Optional[Any] = None,
        stderr: Optional[Any] = None,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        start_new_session: bool = False
    ) -> SubprocessHandle:
        """Execute command and return process handle."""
        handle = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=stdout,
            stderr=stderr,
            cwd=cwd,
            env=env,
            start_new_session=start_new_session
        )
        return SubprocessHandle(handle)


class SystemTimeProvider:
    """Production time provider using real time module."""

    def sleep(self, seconds: float) -> None:
        """Sleep for specified seconds."""
        time.sleep(seconds)


class SystemEnvironmentProvider:
    """Production environment provider using real os and platform modules."""

    def get_environ(self) -> Dict[str, str]:
        """Get copy of environment variables."""
        return dict(os.environ)

    def get_system_type(self) -> str:
        """Get system type ('Darwin', 'Linux', etc.)."""
        return platform.system()


class YamlConfigLoader:
    """Production config loader using real YAML parser."""

    def __init__(self, filesystem: 'RealFileSystemService'):
        """Initialize with filesystem service for reading files."""
        self.fs = filesystem

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file and return parsed dictionary (empty file -> {})."""
        content = self.fs.read_file(path)
        return yaml.safe_load(content) or {}
