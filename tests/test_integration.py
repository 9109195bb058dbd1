"""Integration tests for the command-line entry point."""

import json

from click.testing import CliRunner

from composer_i18n_map.cli import main


class TestCLIIntegration:
    """Test CLI end to end against on-disk projects."""

    def test_cli_generates_php_map(self, theme_project):
        """Test the default run writes the PHP map."""
        runner = CliRunner()
        result = runner.invoke(main, [str(theme_project)])

        assert result.exit_code == 0
        assert "WRITTEN" in result.output
        content = (theme_project / "jetpack_vendor" / "i18n-map.php").read_text()
        assert content.startswith("<?php\n// i18n-map.php @generated by composer-i18n-map\n")
        assert "'my-lib' => '2.0.0'," in content

    def test_cli_second_run_unchanged(self, theme_project):
        """Test rerunning reports the map as unchanged."""
        runner = CliRunner()
        runner.invoke(main, [str(theme_project)])
        result = runner.invoke(main, [str(theme_project), "--event", "post-update-cmd"])

        assert result.exit_code == 0
        assert "UNCHANGED" in result.output

    def test_cli_json_report(self, plugin_project):
        """Test the JSON report."""
        runner = CliRunner()
        result = runner.invoke(main, [str(plugin_project), "--report", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["results"][0]["action"] == "written"
        assert data["results"][0]["manifest"]["domain"] == "my-plugin"

    def test_cli_json_format_and_output(self, plugin_project):
        """Test the JSON manifest format at a custom path."""
        runner = CliRunner()
        result = runner.invoke(
            main, [str(plugin_project), "--format", "json", "--output", "build/map.json"]
        )

        assert result.exit_code == 0
        data = json.loads((plugin_project / "build" / "map.json").read_text())
        assert data["type"] == "plugins"
        assert data["packages"]["jetpack-assets"] == "1.2.x-dev"

    def test_cli_unconfigured_project_removes_map(self, unconfigured_project):
        """Test a project without slugs ends up with no map."""
        output = unconfigured_project / "jetpack_vendor" / "i18n-map.php"
        output.parent.mkdir()
        output.write_text("stale")

        runner = CliRunner()
        result = runner.invoke(main, [str(unconfigured_project)])

        assert result.exit_code == 0
        assert not output.exists()

    def test_cli_missing_composer_json(self, tmp_path):
        """Test a clear error and exit code 1 without composer.json."""
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path)])

        assert result.exit_code == 1
        assert "composer.json" in result.output

    def test_cli_list_plugins(self):
        """Test --list-plugins."""
        runner = CliRunner()
        result = runner.invoke(main, ["--list-plugins"])

        assert result.exit_code == 0
        assert "i18n-map" in result.output

    def test_cli_plugin_filter(self, theme_project):
        """Test filtering out every plugin generates nothing."""
        runner = CliRunner()
        result = runner.invoke(main, [str(theme_project), "--plugin", "other"])

        assert result.exit_code == 0
        assert "Nothing generated" in result.output
        assert not (theme_project / "jetpack_vendor").exists()

    def test_cli_rejects_unknown_event(self, theme_project):
        """Test only lifecycle events are accepted."""
        runner = CliRunner()
        result = runner.invoke(main, [str(theme_project), "--event", "pre-install-cmd"])

        assert result.exit_code == 2
