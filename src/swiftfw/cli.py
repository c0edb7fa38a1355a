"""Main CLI entry point for swiftfw."""

import click

from swiftfw import __version__
from swiftfw.commands.new import new_cmd
from swiftfw.commands.prefs import prefs_cmd
from swiftfw.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="swiftfw")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """swiftfw - Scaffold iOS Swift framework projects.

    \b
    Quick Start:
      swiftfw new                 Generate a project in the current directory
      swiftfw new --skip-install  Skip carthage bootstrap
      swiftfw new --no-open-xcode Do not open Xcode afterwards

    \b
    Preferences:
      swiftfw prefs               Show remembered answers
      swiftfw prefs --clear       Forget remembered answers
    """
    setup_logging(verbose)


main.add_command(new_cmd, name="new")
main.add_command(prefs_cmd, name="prefs")


if __name__ == "__main__":
    main()
