"""Files derived from the configuration rather than copied from the bundle."""

import logging
from pathlib import Path
from typing import Optional

import yaml

from swiftfw.core.errors import TemplateRenderError
from swiftfw.core.project import ProjectConfig
from swiftfw.templates.manifest import PODSPEC
from swiftfw.templates.render import TemplateRenderer

logger = logging.getLogger(__name__)

TRAVIS_FILE = ".travis.yml"


def build_travis_config(config: ProjectConfig) -> dict:
    """Travis CI descriptor running the framework's unit tests."""
    return {
        "language": "objective-c",
        "script": [
            f"xcodebuild test -sdk iphonesimulator -scheme {config.project_name}",
        ],
    }


def write_travis_config(destination_root: Path, config: ProjectConfig) -> Path:
    """Serialize the CI descriptor to .travis.yml (always emitted)."""
    target = Path(destination_root) / TRAVIS_FILE
    content = yaml.safe_dump(
        build_travis_config(config),
        indent=2,
        default_flow_style=False,
        sort_keys=False,
    )
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise TemplateRenderError(f"Could not write {target}: {e}", path=target) from e
    logger.debug("Wrote %s", target)
    return target


def write_podspec(
    destination_root: Path,
    config: ProjectConfig,
    renderer: Optional[TemplateRenderer] = None,
) -> Optional[Path]:
    """Render <project_name>.podspec when distributing via CocoaPods.

    Returns:
        Path of the podspec, or None when CocoaPods was declined
    """
    if not config.cocoapods:
        logger.debug("CocoaPods declined, no podspec")
        return None
    renderer = renderer or TemplateRenderer()
    return renderer.render_to(PODSPEC, destination_root, config)
