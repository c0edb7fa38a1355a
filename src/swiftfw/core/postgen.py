"""Post-generation steps for swiftfw new.

Two kinds of task run after the project tree is written:

- Awaited: ``carthage bootstrap`` runs in the project directory and the
  generator waits for it. Its exit code is reported, never enforced.
- Best effort, unobserved: ``open <project>.xcodeproj`` is launched and
  forgotten. Nothing waits for it or reads its exit code.

Spawn failures of either command are warnings; the files are already
written by the time these run.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from swiftfw.core.project import ProjectConfig

logger = logging.getLogger(__name__)
console = Console()

BOOTSTRAP_COMMAND = ["carthage", "bootstrap"]
OPEN_COMMAND = "open"


@dataclass
class BootstrapResult:
    """Outcome of the dependency bootstrap step."""
    skipped: bool = False
    returncode: Optional[int] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return not self.skipped and self.error is None and self.returncode == 0


# =============================================================================
# Awaited task
# =============================================================================

def bootstrap_dependencies(destination_root: Path, skip_install: bool = False) -> BootstrapResult:
    """Run ``carthage bootstrap`` and wait for it.

    Args:
        destination_root: Generated project directory (used as cwd)
        skip_install: Only tell the user what to run

    Returns:
        BootstrapResult describing what happened
    """
    if skip_install:
        console.print("\nPlease run [cyan]carthage bootstrap[/]")
        return BootstrapResult(skipped=True)

    console.print("\n[bold]Carthage bootstrapping[/]")
    try:
        # No timeout: the generator waits for as long as carthage runs
        result = subprocess.run(BOOTSTRAP_COMMAND, cwd=str(destination_root))
    except OSError as e:
        logger.warning("Could not run %s: %s", " ".join(BOOTSTRAP_COMMAND), e)
        console.print(f"[yellow]⚠[/] Could not run carthage: {e}")
        console.print("  Install Carthage and run [cyan]carthage bootstrap[/]")
        return BootstrapResult(error=str(e))

    if result.returncode != 0:
        logger.warning("carthage bootstrap exited with status %d", result.returncode)
        console.print(f"[yellow]⚠[/] carthage bootstrap exited with status {result.returncode}")

    return BootstrapResult(returncode=result.returncode)


# =============================================================================
# Best-effort, unobserved task
# =============================================================================

def open_in_xcode(destination_root: Path, config: ProjectConfig, open_xcode: bool = True) -> bool:
    """Launch ``open`` on the generated Xcode project without waiting.

    Returns:
        True if the process was launched
    """
    if open_xcode is False:
        return False

    project = Path(destination_root) / config.xcodeproj_name
    try:
        subprocess.Popen([OPEN_COMMAND, str(project)])
    except OSError as e:
        logger.warning("Could not open %s: %s", project, e)
        console.print(f"[yellow]⚠[/] Could not open {config.xcodeproj_name}: {e}")
        return False
    return True


def run_post_generation(
    destination_root: Path,
    config: ProjectConfig,
    skip_install: bool = False,
    open_xcode: bool = True,
) -> BootstrapResult:
    """Run the bootstrap step, then open Xcode."""
    bootstrap = bootstrap_dependencies(destination_root, skip_install=skip_install)
    open_in_xcode(destination_root, config, open_xcode=open_xcode)
    return bootstrap
