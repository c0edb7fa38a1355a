"""Tests for swiftfw.commands.prefs (swiftfw prefs) command."""

from swiftfw.commands.prefs import prefs_cmd
from swiftfw.core.preferences import PreferenceStore


class TestPrefsCommand:
    """Tests for `swiftfw prefs`."""

    def test_empty(self, cli_runner, swiftfw_home):
        result = cli_runner.invoke(prefs_cmd, [])
        assert result.exit_code == 0
        assert "No preferences saved yet" in result.output

    def test_shows_values(self, cli_runner, swiftfw_home):
        PreferenceStore().set("organization_name", "Acme")

        result = cli_runner.invoke(prefs_cmd, [])

        assert result.exit_code == 0
        assert "organization_name" in result.output
        assert "Acme" in result.output

    def test_clear(self, cli_runner, swiftfw_home):
        PreferenceStore().set("organization_name", "Acme")

        result = cli_runner.invoke(prefs_cmd, ["--clear"])

        assert result.exit_code == 0
        assert "Preferences cleared" in result.output
        assert PreferenceStore().all() == {}
