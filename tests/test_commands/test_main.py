"""Tests for dms_tools.__main__ module."""

import json
import re

from click.testing import CliRunner

from dms_tools.__main__ import main


class TestMainCLI:
    """Tests for main CLI functionality."""

    def test_main_help(self, runner: CliRunner) -> None:
        """Test main command help output."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Value utilities for a digital media server" in result.output

    def test_version_command(self, runner: CliRunner) -> None:
        """Test version command."""
        result = runner.invoke(main, ["version"])
        assert result.exit_code == 0
        # Remove ANSI color codes for testing
        clean_output = re.sub(r'\x1b\[[0-9;]*m', '', result.output)
        assert "dms-tools 0.1.0" in clean_output

    def test_version_json(self, runner: CliRunner) -> None:
        """Test version command with JSON output."""
        result = runner.invoke(main, ["-o", "json", "version"])
        assert result.exit_code == 0
        info = json.loads(result.output)
        assert info["name"] == "dms-tools"
        assert info["version"] == "0.1.0"

    def test_version_option(self, runner: CliRunner) -> None:
        """Test --version option."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_quiet_by_default(self, runner: CliRunner) -> None:
        """Test informational events are not logged without flags."""
        result = runner.invoke(main, ["-o", "plain", "version"])
        assert result.exit_code == 0
        assert "cli_started" not in result.output
        assert "cli_config" not in result.output

    def test_verbose_logs_info(self, runner: CliRunner) -> None:
        """Test --verbose enables informational events only."""
        result = runner.invoke(main, ["--verbose", "-o", "plain", "version"])
        assert result.exit_code == 0
        assert "cli_started" in result.output
        assert "cli_config" not in result.output
        assert "Python " in result.output

    def test_debug_logs_debug(self, runner: CliRunner) -> None:
        """Test --debug enables debug events."""
        result = runner.invoke(main, ["--debug", "-o", "plain", "version"])
        assert result.exit_code == 0
        assert "cli_started" in result.output
        assert "cli_config" in result.output

    def test_configured_log_level(self, runner: CliRunner, temp_dir) -> None:
        """Test the log level from the configuration file is applied."""
        config_file = temp_dir / "config.json"
        config_file.write_text(json.dumps({"log_level": "INFO"}))
        result = runner.invoke(main, ["-c", str(config_file), "-o", "plain", "version"])
        assert result.exit_code == 0
        assert "cli_started" in result.output

    def test_configured_output_format(self, runner: CliRunner, temp_dir) -> None:
        """Test the output format from the configuration file is used."""
        config_file = temp_dir / "config.json"
        config_file.write_text(json.dumps({"output_format": "json"}))
        result = runner.invoke(main, ["-c", str(config_file), "version"])
        assert result.exit_code == 0
        assert json.loads(result.output)["name"] == "dms-tools"

    def test_invalid_config_file(self, runner: CliRunner, temp_dir) -> None:
        """Test an invalid configuration file exits with an error."""
        config_file = temp_dir / "config.json"
        config_file.write_text(json.dumps({"default_bit_rate_mode": "XBR"}))
        result = runner.invoke(main, ["--config", str(config_file), "version"])
        assert result.exit_code == 1
        assert "config_load_failed" in result.output
