"""Tests for the countrykit CLI."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from countrykit import __version__
from countrykit.cli.app import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCLI:
    """Tests for CLI commands against a temporary data directory."""

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_subdivisions(self, runner, data_dir):
        result = runner.invoke(app, ["--data-dir", str(data_dir), "subdivisions", "us"])

        assert result.exit_code == 0
        assert "California" in result.output
        assert "DC" in result.output

    def test_subdivisions_locale(self, runner, data_dir):
        result = runner.invoke(
            app, ["--data-dir", str(data_dir), "subdivisions", "US", "--locale", "fr"]
        )

        assert result.exit_code == 0
        assert "Californie" in result.output

    def test_subdivisions_type_filter(self, runner, data_dir):
        result = runner.invoke(
            app,
            ["--data-dir", str(data_dir), "subdivisions", "US", "--type", "federal_district"],
        )

        assert result.exit_code == 0
        assert "DC" in result.output
        assert "California" not in result.output

    def test_subdivisions_unknown_country(self, runner, data_dir):
        result = runner.invoke(app, ["--data-dir", str(data_dir), "subdivisions", "ZZ"])

        assert result.exit_code == 0
        assert "No subdivisions" in result.output

    def test_find(self, runner, data_dir):
        result = runner.invoke(app, ["--data-dir", str(data_dir), "find", "DE", "Bavaria"])

        assert result.exit_code == 0
        assert "Bayern" in result.output
        assert "BY" in result.output

    def test_find_not_found(self, runner, data_dir):
        result = runner.invoke(app, ["--data-dir", str(data_dir), "find", "DE", "Hessen"])

        assert result.exit_code == 1
        assert "No subdivision" in result.output

    def test_types(self, runner, data_dir):
        result = runner.invoke(app, ["--data-dir", str(data_dir), "types", "US"])

        assert result.exit_code == 0
        assert "federal_district" in result.output

    def test_types_humanized(self, runner, data_dir):
        result = runner.invoke(app, ["--data-dir", str(data_dir), "types", "US", "--humanize"])

        assert result.exit_code == 0
        assert "Federal district" in result.output

    def test_bundled_data(self, runner, monkeypatch):
        monkeypatch.delenv("COUNTRYKIT_DATA_DIR", raising=False)
        result = runner.invoke(app, ["find", "CA", "Québec"])

        assert result.exit_code == 0
        assert "QC" in result.output

    def test_malformed_file(self, runner, tmp_path):
        (tmp_path / "US.yaml").write_text("- not\n- a mapping\n")
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "types", "US"])

        assert result.exit_code == 1
        assert "Invalid subdivision data file" in result.output

    def test_malformed_entry(self, runner, tmp_path):
        (tmp_path / "US.yaml").write_text("CA: California\n")
        result = runner.invoke(app, ["--data-dir", str(tmp_path), "types", "US"])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Invalid subdivision data file" in result.output

    def test_data_dir_is_per_invocation(self, runner, data_dir, monkeypatch):
        """A --data-dir from one invocation does not carry over to the next."""
        monkeypatch.delenv("COUNTRYKIT_DATA_DIR", raising=False)

        custom = runner.invoke(app, ["--data-dir", str(data_dir), "types", "US"])
        bundled = runner.invoke(app, ["types", "US"])

        assert custom.exit_code == 0
        assert "outlying_area" not in custom.output
        assert bundled.exit_code == 0
        assert "outlying_area" in bundled.output
        assert "federal_district" not in bundled.output
