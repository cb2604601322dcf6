"""Configuration management for launch runs"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from apprunner.android.context import DEFAULT_PORT_MAPPINGS, PortMapping
from apprunner.android.exceptions import ConfigError
from apprunner.core.protocols import ConfigLoader, FileSystemService

DEFAULT_CONFIG_PATH = "apprunner.yaml"


@dataclass(frozen=True)
class RunnerConfig:
    """Settings for one launch run. Defaults match a stock project layout."""
    sdk_env_var: str = "ANDROID_HOME"
    project_dir: str = "platform/android"
    manifest_path: str = "platform/android/app/src/main/AndroidManifest.xml"
    gradle_task: str = "installDebug"
    dns_server: Optional[str] = "223.5.5.5"
    poll_interval_seconds: float = 2.0
    max_wait_attempts: int = 30
    port_mappings: Tuple[PortMapping, ...] = DEFAULT_PORT_MAPPINGS


_STRING_KEYS = ('sdk_env_var', 'project_dir', 'manifest_path', 'gradle_task')


def _parse_port_mappings(raw: Any) -> Tuple[PortMapping, ...]:
    if not isinstance(raw, list):
        raise ConfigError("port_mappings must be a list of {host, device} entries")
    if not raw:
        raise ConfigError("port_mappings must list at least one {host, device} entry")

    mappings = []
    for entry in raw:
        if not isinstance(entry, dict) or set(entry) != {'host', 'device'}:
            raise ConfigError(f"Invalid port mapping: {entry!r} (expected {{host: N, device: N}})")
        host, device = entry['host'], entry['device']
        for port in (host, device):
            if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
                raise ConfigError(f"Invalid port in mapping {entry!r}")
        mappings.append(PortMapping(host, device))
    return tuple(mappings)


def config_from_dict(data: Dict[str, Any]) -> RunnerConfig:
    """Build a RunnerConfig from parsed YAML, validating every key.

    Raises:
        ConfigError: On unknown keys or wrongly typed values
    """
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping at the top level")

    known = set(RunnerConfig.__dataclass_fields__)
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    overrides: Dict[str, Any] = {}

    for key in _STRING_KEYS:
        if key in data:
            if not isinstance(data[key], str) or not data[key].strip():
                raise ConfigError(f"{key} must be a non-empty string")
            overrides[key] = data[key]

    if 'dns_server' in data:
        dns = data['dns_server']
        if dns is not None and not isinstance(dns, str):
            raise ConfigError("dns_server must be a string or null")
        overrides['dns_server'] = dns or None

    if 'poll_interval_seconds' in data:
        interval = data['poll_interval_seconds']
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or interval < 0:
            raise ConfigError("poll_interval_seconds must be a non-negative number")
        overrides['poll_interval_seconds'] = float(interval)

    if 'max_wait_attempts' in data:
        attempts = data['max_wait_attempts']
        if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
            raise ConfigError("max_wait_attempts must be a positive integer")
        overrides['max_wait_attempts'] = attempts

    if 'port_mappings' in data:
        overrides['port_mappings'] = _parse_port_mappings(data['port_mappings'])

    return RunnerConfig(**overrides)


def load_config(
    config_loader: ConfigLoader,
    filesystem: FileSystemService,
    config_path: Optional[str] = None
) -> RunnerConfig:
    """Load run configuration.

    Args:
        config_loader: YAML loading abstraction
        filesystem: Used to check whether the file exists
        config_path: Explicit path (must exist); None means the optional
            apprunner.yaml in the working directory

    Returns:
        RunnerConfig with file values applied over defaults
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not filesystem.exists(path):
        if config_path:
            raise ConfigError(f"Config file not found: {config_path}")
        return RunnerConfig()

    try:
        data = config_loader.load_yaml(path)
    except Exception as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e

    return config_from_dict(data or {})
