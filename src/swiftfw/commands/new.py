"""swiftfw new - Generate a Swift framework project."""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from swiftfw.core.errors import TemplateRenderError
from swiftfw.core.postgen import run_post_generation
from swiftfw.core.preferences import PreferenceStore
from swiftfw.core.prompts import PromptCollector
from swiftfw.templates import generate_project

console = Console()


@click.command()
@click.option(
    "--skip-install",
    is_flag=True,
    help="Do not run carthage bootstrap",
)
@click.option(
    "--open-xcode/--no-open-xcode",
    default=True,
    help="Open the generated project in Xcode (default: yes)",
)
@click.option(
    "--directory",
    "-C",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    help="Directory to generate into (default: current directory)",
)
def new_cmd(skip_install: bool, open_xcode: bool, directory: Path):
    """Generate a Swift framework project in the current directory.

    Asks for the project name, organization and CocoaPods settings,
    writes the Xcode project, example app, unit tests, README, LICENSE,
    .travis.yml and (optionally) a podspec, then runs carthage bootstrap
    and opens the project in Xcode.

    Use --skip-install to skip carthage bootstrap.
    Use --no-open-xcode to leave Xcode closed.
    """
    console.print(Panel.fit(
        "Welcome to the outstanding [bold red]swift.framework[/] generator!",
        border_style="blue"
    ))

    # Prompting: cancelling here aborts before anything is written
    collector = PromptCollector(PreferenceStore())
    config = collector.collect()

    target = directory.resolve()

    try:
        target.mkdir(parents=True, exist_ok=True)
        result = generate_project(target, config)
    except TemplateRenderError as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Error:[/] Could not create {target}: {e}")
        raise SystemExit(1)

    console.print(
        f"\n[green]✓[/] Created [cyan]{config.project_name}[/] "
        f"({len(result.all_paths)} files) in [cyan]{target}[/]"
    )

    run_post_generation(
        target,
        config,
        skip_install=skip_install,
        open_xcode=open_xcode,
    )

    _print_next_steps(config)


def _print_next_steps(config):
    """Print next steps after generation."""
    console.print("\n[bold]Next steps:[/]")
    console.print(f"  • Open [cyan]{config.xcodeproj_name}[/]")
    if config.cocoapods:
        console.print(f"  • Run [cyan]pod lib lint {config.podspec_name}[/] before publishing")
