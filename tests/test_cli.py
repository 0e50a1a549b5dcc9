"""
Tests for CLI commands — build, check, and global options.
"""

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from chromegen.core.use_cases.build import run_build
from chromegen.main import cli, main

_CONFIG = textwrap.dedent("""\
    chrome:
      name: Acme
      output_path: out/chrome
    plugins:
      - id: acme/notes
        namespace: notes
        path: plugins/notes/chrome
        packages: [zustand, react]
        views:
          - id: notes
            title: Notes
        content_scripts:
          - matches: ["https://*/*"]
            entry: content/notes.js
""")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A workspace with a chromegen.yml."""
    (tmp_path / "chromegen.yml").write_text(_CONFIG)
    return tmp_path


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Chrome extension generator" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestBuildCommand:
    def test_build_with_config(self, project: Path):
        result = CliRunner().invoke(cli, ["build", str(project)])
        assert result.exit_code == 0, result.output
        assert "Extension files generated successfully" in result.output
        out = project / "out" / "chrome"
        assert json.loads((out / "vite.scripts.json").read_text()) == ["react", "zustand"]
        manifest = json.loads((out / "public" / "manifest.json").read_text())
        assert manifest["name"] == "Acme"
        assert manifest["content_scripts"][0]["run_at"] == "document_idle"

    def test_build_without_config_uses_defaults(self, tmp_path: Path):
        workspace = tmp_path / "bare"
        workspace.mkdir()
        result = CliRunner().invoke(cli, ["build", str(workspace)])
        assert result.exit_code == 0, result.output
        assert (workspace / "resources" / "chrome" / "vite.plugins.json").is_file()

    def test_overrides(self, project: Path):
        result = CliRunner().invoke(
            cli,
            ["build", str(project), "--output-path", "elsewhere", "--api-url", "https://api.test"],
        )
        assert result.exit_code == 0, result.output
        cfg_ts = (project / "elsewhere" / "src" / "generated" / "extension-config.ts").read_text()
        assert '"apiUrl": "https://api.test"' in cfg_ts
        assert '"acme/notes": "notes"' in cfg_ts

    def test_build_json(self, project: Path):
        result = CliRunner().invoke(cli, ["build", str(project), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["producers"] == ["acme/notes"]
        assert [f["path"] for f in data["report"]["files"]][3] == "public/manifest.json"

    def test_explicit_config(self, project: Path, tmp_path: Path):
        workspace = tmp_path / "ws"
        workspace.mkdir()
        result = CliRunner().invoke(
            cli, ["--config", str(project / "chromegen.yml"), "build", str(workspace)]
        )
        assert result.exit_code == 0, result.output
        assert (workspace / "out" / "chrome" / "public" / "manifest.json").is_file()

    def test_build_failure_exit_code(self, tmp_path: Path):
        (tmp_path / "chromegen.yml").write_text("- not\n- a mapping\n")
        result = CliRunner().invoke(cli, ["build", str(tmp_path)])
        assert result.exit_code == 1
        assert "Build failed" in result.output

    def test_verbose_lists_files(self, project: Path):
        result = CliRunner().invoke(cli, ["--verbose", "build", str(project)])
        assert result.exit_code == 0
        assert "public/manifest.json" in result.output


class TestCheckCommand:
    def test_valid(self, project: Path):
        result = CliRunner().invoke(cli, ["check", str(project)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "Acme" in result.output

    def test_invalid_json(self, tmp_path: Path):
        (tmp_path / "chromegen.yml").write_text(textwrap.dedent("""\
            plugins:
              - id: a
                content_scripts:
                  - entry: x.js
        """))
        result = CliRunner().invoke(cli, ["check", str(tmp_path), "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["valid"] is False
        assert data["errors"]


class TestMain:
    def test_usage_error_exits_1(self, capsys):
        assert main(["frobnicate"]) == 1

    def test_success(self, project: Path):
        assert main(["--quiet", "build", str(project)]) == 0

    def test_build_failure(self, tmp_path: Path):
        (tmp_path / "chromegen.yml").write_text("[1, 2]\n")
        with pytest.raises(SystemExit) as exc:
            main(["build", str(tmp_path)])
        assert exc.value.code == 1


class TestRunBuild:
    def test_extra_producers_after_declared(self, project: Path):
        class Extra:
            id = "acme/extra"

            def chrome_packages(self):
                return ["alpha"]

        result = run_build(project, extra_producers=[Extra()])
        assert result.ok
        assert result.producers == ["acme/notes", "acme/extra"]
        scripts = json.loads((project / "out" / "chrome" / "vite.scripts.json").read_text())
        assert scripts == ["alpha", "react", "zustand"]

    def test_config_error_reported(self, tmp_path: Path):
        (tmp_path / "chromegen.yml").write_text("plugins: nope\n")
        result = run_build(tmp_path)
        assert not result.ok
        assert "'plugins' must be a list" in result.error
        assert result.to_dict()["report"] is None
