"""Tests for CLI commands."""

from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from flatsite.cli import cli


class TestRenderCommand:
    """Tests for the render command."""

    def test__renders_page_to_stdout(self, app_root: Path, write_file: Callable[[str, str], Path]) -> None:
        """Print the composed page for a request path."""
        write_file("pages/about.html", '{{ use_template("main") }}About')
        write_file("templates/main.html", "<main>{{ template_content() }}</main>")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", "/about", "--app-root", str(app_root)])

        assert result.exit_code == 0
        assert "<main>About</main>" in result.output

    def test__writes_output_file(self, app_root: Path, write_file: Callable[[str, str], Path], tmp_path: Path) -> None:
        """Write the page to --output."""
        write_file("pages/index.html", "Home")
        output = tmp_path / "out" / "index.html"

        runner = CliRunner()
        result = runner.invoke(
            cli, ["render", "/", "--app-root", str(app_root), "--output", str(output)]
        )

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "Home"

    def test__missing_page__exits_with_error(self, app_root: Path, write_file: Callable[[str, str], Path]) -> None:
        """Exit 1 and report the 404 status."""
        write_file("pages/404.html", "Not here")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", "/missing", "--app-root", str(app_root)])

        assert result.exit_code == 1
        assert "Not here" in result.output
        assert "Status: 404 Not Found" in result.output

    def test__config_file__supplies_app_root(self, tmp_path: Path, app_root: Path, write_file: Callable[[str, str], Path]) -> None:
        """Read the app root from flatsite.toml."""
        write_file("pages/index.html", "From config")
        config_file = tmp_path / "flatsite.toml"
        config_file.write_text('[site]\napp_root = "site"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["render", "/", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "From config" in result.output

    def test__invalid_config__fails(self, tmp_path: Path) -> None:
        """Fail with the configuration error message."""
        config_file = tmp_path / "flatsite.toml"
        config_file.write_text("[server]\nport = \"x\"\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", "/", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "server.port must be an integer" in result.output
