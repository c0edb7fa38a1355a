"""Jinja2 rendering and verbatim copying of bundled project files.

Provides the TemplateRenderer class which loads templates from the
bundled ``swift_framework/`` directory and renders them with the project
configuration, and copy_static() for files that are copied untouched.
Any failure raises TemplateRenderError; nothing is skipped silently.
"""

import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from swiftfw.core.errors import TemplateRenderError
from swiftfw.core.project import ProjectConfig
from swiftfw.templates.manifest import TEMPLATE_DIR, ManifestEntry

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Renders bundled templates into a destination tree."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,  # Generating source files, not HTML
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, source: str, context: Dict[str, Any]) -> str:
        """Render one bundled template to a string.

        Raises:
            TemplateRenderError: If the template is missing, unreadable
                or references an unknown variable
        """
        try:
            template = self.env.get_template(source)
            return template.render(**context)
        except (TemplateError, OSError, UnicodeError) as e:
            raise TemplateRenderError(
                f"Could not render template {source}: {e}",
                path=self.template_dir / source,
            ) from e

    def render_to(
        self,
        entry: ManifestEntry,
        destination_root: Path,
        config: ProjectConfig,
    ) -> Path:
        """Render a manifest entry to its destination.

        The placeholder in the entry path is substituted before any
        file I/O happens.

        Returns:
            Path of the written file
        """
        target = Path(destination_root) / entry.destination(config.project_name)
        content = self.render(entry.source_path, config.to_context())
        _write(target, content)
        logger.debug("Rendered %s -> %s", entry.source_path, target)
        return target

    def render_all(
        self,
        entries: Iterable[ManifestEntry],
        destination_root: Path,
        config: ProjectConfig,
    ) -> List[Path]:
        """Render entries in order, each at most once.

        Stops at the first failure.
        """
        written = []
        seen = set()
        for entry in entries:
            if entry.path in seen:
                continue
            seen.add(entry.path)
            written.append(self.render_to(entry, destination_root, config))
        return written


def copy_static(
    entries: Iterable[ManifestEntry],
    destination_root: Path,
    template_dir: Optional[Path] = None,
) -> List[Path]:
    """Copy entries byte for byte, keeping their paths and mode bits.

    Raises:
        TemplateRenderError: On the first file that cannot be copied
    """
    template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
    written = []
    for entry in entries:
        source = template_dir / entry.source_path
        target = Path(destination_root) / entry.path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(str(source), str(target))
        except OSError as e:
            raise TemplateRenderError(
                f"Could not copy {entry.source_path}: {e}",
                path=source,
            ) from e
        logger.debug("Copied %s -> %s", source, target)
        written.append(target)
    return written


def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise TemplateRenderError(f"Could not write {path}: {e}", path=path) from e
