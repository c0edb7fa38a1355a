"""Templates module for swiftfw scaffolding."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from swiftfw.core.project import ProjectConfig
from swiftfw.templates.emitters import write_podspec, write_travis_config
from swiftfw.templates.manifest import static_entries, template_entries
from swiftfw.templates.render import TemplateRenderer, copy_static

console = Console()


@dataclass
class GenerationResult:
    """Files written by generate_project()."""
    rendered: List[Path] = field(default_factory=list)
    copied: List[Path] = field(default_factory=list)
    travis: Optional[Path] = None
    podspec: Optional[Path] = None

    @property
    def all_paths(self) -> List[Path]:
        paths = self.rendered + self.copied
        if self.travis:
            paths.append(self.travis)
        if self.podspec:
            paths.append(self.podspec)
        return paths


def generate_project(
    destination_root: Path,
    config: ProjectConfig,
    renderer: Optional[TemplateRenderer] = None,
) -> GenerationResult:
    """Write the whole project tree into destination_root.

    Raises:
        TemplateRenderError: On the first file that cannot be produced
    """
    renderer = renderer or TemplateRenderer()
    result = GenerationResult()

    console.print("  [dim]Rendering Xcode project...[/]")
    result.rendered = renderer.render_all(template_entries(), destination_root, config)

    console.print("  [dim]Copying project files...[/]")
    result.copied = copy_static(static_entries(), destination_root, renderer.template_dir)

    console.print("  [dim]Writing .travis.yml...[/]")
    result.travis = write_travis_config(destination_root, config)

    if config.cocoapods:
        console.print(f"  [dim]Writing {config.podspec_name}...[/]")
        result.podspec = write_podspec(destination_root, config, renderer)

    return result
