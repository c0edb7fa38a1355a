"""swiftfw prefs - Show or clear remembered answers."""

import click
from rich.console import Console
from rich.table import Table

from swiftfw.core.errors import PreferencesError
from swiftfw.core.preferences import PreferenceStore

console = Console()


@click.command()
@click.option(
    "--clear",
    is_flag=True,
    help="Forget all remembered answers",
)
def prefs_cmd(clear: bool):
    """Show the answers remembered between runs.

    Organization name, organization identifier and GitHub username are
    offered as defaults the next time you run swiftfw new.
    """
    store = PreferenceStore()

    if clear:
        try:
            store.clear()
        except PreferencesError as e:
            console.print(f"[red]Error:[/] {e}")
            raise SystemExit(1)
        console.print("[green]✓[/] Preferences cleared")
        return

    values = store.all()
    if not values:
        console.print("[dim]No preferences saved yet[/]")
        return

    table = Table(title=str(store.path))
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in sorted(values):
        table.add_row(key, str(values[key]))
    console.print(table)
