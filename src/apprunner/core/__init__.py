"""Core dependency injection infrastructure for apprunner.

This module provides Protocol-based abstractions that enable dependency injection
and testability throughout the codebase. All external dependencies (environment,
filesystem, subprocess, time) are abstracted via Protocols with production
implementations.
"""

from apprunner.core.protocols import (
    Logger,
    FileSystemService,
    ProcessExecutor,
    ProcessHandle,
    ProcessResult,
    TimeProvider,
    EnvironmentProvider,
    ConfigLoader,
)

from apprunner.core.implementations import (
    ConsoleLogger,
    RealFileSystemService,
    SubprocessExecutor,
    SubprocessHandle,
    SystemTimeProvider,
    SystemEnvironmentProvider,
    YamlConfigLoader,
)

__all__ = [
    # Protocols
    "Logger",
    "FileSystemService",
    "ProcessExecutor",
    "ProcessHandle",
    "ProcessResult",
    "TimeProvider",
    "EnvironmentProvider",
    "ConfigLoader",
    # Implementations
    "ConsoleLogger",
    "RealFileSystemService",
    "SubprocessExecutor",
    "SubprocessHandle",
    "SystemTimeProvider",
    "SystemEnvironmentProvider",
    "YamlConfigLoader",
]
