"""
ManifestReader - read the application identity from AndroidManifest.xml.
"""

import xml.etree.ElementTree as ET
from typing import Optional, Tuple

from apprunner.core.protocols import FileSystemService

from .context import ComponentEntry, IntentFilter, ManifestDescriptor
from .exceptions import ManifestIncompleteError, ManifestMalformedError

ANDROID_NS = "http://schemas.android.com/apk/res/android"
ANDROID_NAME = f"{{{ANDROID_NS}}}name"

COMPONENT_TAGS = ("activity", "activity-alias")


def _android_name(element: ET.Element) -> Optional[str]:
    name = element.get(ANDROID_NAME)
    return name.strip() if name and name.strip() else None


def _read_intent_filter(element: ET.Element) -> IntentFilter:
    actions = [n for n in (_android_name(a) for a in element.findall("action")) if n]
    categories = [n for n in (_android_name(c) for c in element.findall("category")) if n]
    return IntentFilter(actions=actions, categories=categories)


class ManifestReader:
    """Parses a manifest into a ManifestDescriptor and picks the launcher activity."""

    def __init__(self, filesystem: FileSystemService):
        self.fs = filesystem

    def read(self, manifest_path: str) -> ManifestDescriptor:
        """
        Parse the manifest without judging whether it is complete.

        Components without an android:name are skipped; components without
        intent filters are kept with an empty filter list.

        Raises:
            ManifestMalformedError: File missing, unreadable, or not XML
        """
        if not self.fs.is_file(manifest_path):
            raise ManifestMalformedError(
                f"Android manifest not found: {manifest_path}\n"
                f"Run from the directory containing platform/android, or set manifest_path in apprunner.yaml."
            )

        try:
            root = ET.fromstring(self.fs.read_file(manifest_path))
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestMalformedError(f"Could not read {manifest_path}: {e}") from e
        except ET.ParseError as e:
            raise ManifestMalformedError(f"Invalid XML in {manifest_path}: {e}") from e

        descriptor = ManifestDescriptor(package_id=(root.get("package") or "").strip())

        for application in root.findall("application"):
            for element in application:
                if element.tag not in COMPONENT_TAGS:
                    continue
                identifier = _android_name(element)
                if identifier is None:
                    continue
                descriptor.components.append(ComponentEntry(
                    identifier=identifier,
                    intent_filters=[_read_intent_filter(f) for f in element.findall("intent-filter")]
                ))

        return descriptor

    def parse(self, manifest_path: str) -> Tuple[str, str]:
        """
        Returns:
            (package_id, entry_component_id)

        Raises:
            ManifestMalformedError: See read()
            ManifestIncompleteError: No package attribute or no MAIN/LAUNCHER activity
        """
        descriptor = self.read(manifest_path)
        entry = descriptor.entry_component()

        if not descriptor.package_id or not entry:
            raise ManifestIncompleteError(
                f"Cannot find package name or main activity in {manifest_path}.\n"
                f"The <manifest> element needs a package attribute and one activity needs:\n"
                f"  <intent-filter>\n"
                f"    <action android:name=\"android.intent.action.MAIN\" />\n"
                f"    <category android:name=\"android.intent.category.LAUNCHER\" />\n"
                f"  </intent-filter>"
            )

        return descriptor.package_id, entry
