"""Files emitted by swiftfw new.

Every path is relative to both the bundled template directory and the
destination directory. Paths may contain the PROJECT_NAME placeholder,
which is replaced by the project name in the destination path only; the
bundled files keep the literal token.

Templates available:
- template: rendered with Jinja2 using the project configuration
- static: copied byte for byte
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

PLACEHOLDER = "PROJECT_NAME"

TEMPLATE = "template"
STATIC = "static"

TEMPLATE_DIR = Path(__file__).parent / "swift_framework"


@dataclass(frozen=True)
class ManifestEntry:
    """A single file of the generated project."""
    path: str
    kind: str = TEMPLATE
    source: Optional[str] = None  # Bundled name when it differs from path

    @property
    def source_path(self) -> str:
        return self.source or self.path

    def destination(self, project_name: str) -> str:
        if self.kind == STATIC:
            return self.path
        return substitute_placeholder(self.path, project_name)


def substitute_placeholder(path: str, project_name: str) -> str:
    """Replace every placeholder occurrence in a path."""
    return path.replace(PLACEHOLDER, project_name)


MANIFEST: List[ManifestEntry] = [
    # Xcode project, example app and unit tests
    ManifestEntry("Example/AppDelegate.swift"),
    ManifestEntry("Example/Assets.xcassets/AppIcon.appiconset/Contents.json"),
    ManifestEntry("Example/Base.lproj/LaunchScreen.storyboard"),
    ManifestEntry("Example/Base.lproj/Main.storyboard"),
    ManifestEntry("Example/Info.plist"),
    ManifestEntry("Example/ViewController.swift"),
    ManifestEntry("PROJECT_NAME/Info.plist"),
    ManifestEntry("PROJECT_NAME/PROJECT_NAME.h"),
    ManifestEntry("PROJECT_NAME/PROJECT_NAME.swift"),
    ManifestEntry("PROJECT_NAME.xcodeproj/project.pbxproj"),
    ManifestEntry("PROJECT_NAME.xcodeproj/project.xcworkspace/contents.xcworkspacedata"),
    ManifestEntry("PROJECT_NAME.xcodeproj/xcshareddata/xcschemes/PROJECT_NAME.xcscheme"),
    ManifestEntry("README.md"),
    ManifestEntry("UnitTests/Info.plist"),
    ManifestEntry("UnitTests/UnitTests.swift"),
    ManifestEntry("LICENSE"),
    # Project files
    ManifestEntry(".gitignore", STATIC, source="gitignore"),
    ManifestEntry("script/cert", STATIC),
    ManifestEntry("script/README.md", STATIC),
    ManifestEntry("Cartfile.private", STATIC),
    ManifestEntry("Cartfile.resolved", STATIC),
]

# Rendered only when distributing via CocoaPods
PODSPEC = ManifestEntry("PROJECT_NAME.podspec")


def template_entries() -> List[ManifestEntry]:
    return [e for e in MANIFEST if e.kind == TEMPLATE]


def static_entries() -> List[ManifestEntry]:
    return [e for e in MANIFEST if e.kind == STATIC]
