"""
Run state and value types shared by the launch stages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

from .exceptions import ManifestIncompleteError

ACTION_MAIN = "android.intent.action.MAIN"
CATEGORY_LAUNCHER = "android.intent.category.LAUNCHER"


class DeviceState(Enum):
    """Classification of one `adb devices` listing."""
    NONE = "none"
    EXACTLY_ONE = "exactly_one"
    MORE_THAN_ONE = "more_than_one"


class PortMapping(NamedTuple):
    """One `adb reverse` rule: device connections to device_port reach host_port."""
    host_port: int
    device_port: int


DEFAULT_PORT_MAPPINGS = (
    PortMapping(8090, 8090),
    PortMapping(8091, 8091),
)


@dataclass
class IntentFilter:
    actions: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)

    def is_launcher(self) -> bool:
        """True when this single filter carries both MAIN and LAUNCHER."""
        return ACTION_MAIN in self.actions and CATEGORY_LAUNCHER in self.categories


@dataclass
class ComponentEntry:
    identifier: str
    intent_filters: List[IntentFilter] = field(default_factory=list)

    def is_launcher(self) -> bool:
        return any(f.is_launcher() for f in self.intent_filters)


@dataclass
class ManifestDescriptor:
    """
    Parsed view of AndroidManifest.xml.

    Attributes:
        package_id: Root `package` attribute ("" when absent)
        components: Activities and activity aliases in document order
    """
    package_id: str
    components: List[ComponentEntry] = field(default_factory=list)

    def entry_component(self) -> Optional[str]:
        """
        Return the launcher activity identifier, or None.

        Scans every component and keeps the last match, so when several
        activities declare MAIN/LAUNCHER the one latest in the document wins.
        """
        entry = None
        for component in self.components:
            if component.is_launcher():
                entry = component.identifier
        return entry


@dataclass
class RunContext:
    """
    Mutable state of one launch run, owned by LaunchPipeline.

    Attributes:
        package_id: Application package, "" until the manifest is parsed
        entry_component_id: Launcher activity, "" until the manifest is parsed
        retry_count: Device wait polls that did not find a ready device
        sdk_root: Android SDK directory, "" until the environment is verified
        device_was_booted: Whether this run started an emulator
    """
    package_id: str = ""
    entry_component_id: str = ""
    retry_count: int = 0
    sdk_root: str = ""
    device_was_booted: bool = False

    def require_identity(self) -> None:
        """
        Raises:
            ManifestIncompleteError: If either identifier is still empty
        """
        if not self.package_id or not self.entry_component_id:
            raise ManifestIncompleteError(
                "Application identity is incomplete "
                f"(package='{self.package_id}', activity='{self.entry_component_id}').\n"
                "Parse the manifest before building or launching."
            )

    @property
    def component_name(self) -> str:
        """Fully qualified `package/activity` string for `am start -n`."""
        return f"{self.package_id}/{self.entry_component_id}"
