"""
Tests for configuration loading — chromegen.yml parsing, overrides, declared plugins.
"""

import textwrap
from pathlib import Path

import pytest

from chromegen.core.config.contributions import DeclaredProducer, load_producers, parse_plugins
from chromegen.core.config.loader import (
    ConfigError,
    apply_overrides,
    find_config_file,
    load_config,
)
from chromegen.core.models import GeneratorConfig, ViewsConfig
from chromegen.core.services.producers import (
    HasChromeContentScripts,
    HasChromePackages,
    HasChromeStatusBar,
    HasChromeTabs,
    HasChromeViews,
    HasChromeViewsConfig,
    collect,
)
from chromegen.core.services.registry import ContributionRegistry


@pytest.fixture
def full_config_yml(tmp_path: Path) -> Path:
    """A chromegen.yml with settings and two plugins."""
    content = textwrap.dedent("""\
        chrome:
          name: Acme
          description: "Acme side panel"
          version: 2.3.0
          api_url: https://api.acme.dev
          output_path: build/chrome

        plugins:
          - id: acme/notes
            namespace: notes
            path: plugins/notes/chrome
            packages: [react, react-dom]
            views:
              - id: notes
                title: Notes
                priority: 10
                header_actions:
                  - id: new
                    icon: plus
                    title: New note
            tabs:
              - id: note-editor
                pattern: "note/*"
            content_scripts:
              - matches: ["https://*/*"]
                entry: content/notes.js
                run_at: document_end
          - id: acme/sync
            status_bar:
              - id: sync
                text: Synced
                plugin_id: acme/custom-owner
    """)
    path = tmp_path / "chromegen.yml"
    path.write_text(content)
    return path


class TestLoadConfig:
    def test_nested_settings(self, full_config_yml: Path):
        cfg = load_config(full_config_yml)
        assert cfg.name == "Acme"
        assert cfg.version == "2.3.0"
        assert cfg.api_url == "https://api.acme.dev"
        assert cfg.output_path == "build/chrome"
        # not set in the file → default
        assert cfg.extension_path == "plugins/chrome/resources/extension"

    def test_flat_settings(self, tmp_path: Path):
        path = tmp_path / "chromegen.yml"
        path.write_text("name: Flat\nversion: '1.0.0'\n")
        cfg = load_config(path)
        assert cfg.name == "Flat"
        assert cfg.version == "1.0.0"

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "chromegen.yml"
        path.write_text("")
        assert load_config(path) == GeneratorConfig()

    def test_no_file_is_defaults(self, tmp_path: Path):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        assert load_config(start_dir=isolated) == GeneratorConfig()

    def test_missing_explicit_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "chromegen.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "chromegen.yml"
        path.write_text("- just\n- a\n- list\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(path)

    def test_bad_field_type_raises(self, tmp_path: Path):
        path = tmp_path / "chromegen.yml"
        path.write_text("chrome:\n  name: [not, a, string]\n")
        with pytest.raises(ConfigError, match="Invalid chrome configuration"):
            load_config(path)


class TestOverrides:
    def test_explicit_override(self):
        cfg = apply_overrides(GeneratorConfig(), api_url="http://x", output_path=None)
        assert cfg.api_url == "http://x"
        assert cfg.output_path == "resources/chrome"

    def test_empty_does_not_override(self):
        cfg = apply_overrides(GeneratorConfig(), api_url="")
        assert cfg.api_url == "http://localhost:8080"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHROMEGEN_OUTPUT_PATH", "out/env")
        assert apply_overrides(GeneratorConfig()).output_path == "out/env"

    def test_explicit_beats_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHROMEGEN_API_URL", "http://env")
        assert apply_overrides(GeneratorConfig(), api_url="http://cli").api_url == "http://cli"

    def test_env_beats_file(self, full_config_yml: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("CHROMEGEN_API_URL", "http://env")
        assert load_config(full_config_yml).api_url == "http://env"

    def test_unknown_setting_raises(self):
        with pytest.raises(ConfigError, match="Unknown setting"):
            apply_overrides(GeneratorConfig(), colour="red")


class TestFindConfigFile:
    def test_find_in_current_dir(self, tmp_path: Path):
        (tmp_path / "chromegen.yml").write_text("name: test\n")
        result = find_config_file(tmp_path)
        assert result is not None
        assert result.name == "chromegen.yml"

    def test_find_in_parent_dir(self, tmp_path: Path):
        (tmp_path / "chromegen.yml").write_text("name: test\n")
        subdir = tmp_path / "plugins" / "chrome"
        subdir.mkdir(parents=True)
        result = find_config_file(subdir)
        assert result is not None
        assert result.parent == tmp_path.resolve()


class TestDeclaredPlugins:
    def test_parse(self, full_config_yml: Path):
        producers = load_producers(full_config_yml)
        assert [p.id for p in producers] == ["acme/notes", "acme/sync"]

    def test_no_path_no_producers(self):
        assert load_producers(None) == []

    def test_capabilities_match_declared_data(self, full_config_yml: Path):
        notes, sync = load_producers(full_config_yml)
        for cap in (HasChromeViews, HasChromeTabs, HasChromeContentScripts,
                    HasChromeViewsConfig, HasChromePackages):
            assert isinstance(notes, cap), cap.__name__
        assert not isinstance(notes, HasChromeStatusBar)
        assert isinstance(sync, HasChromeStatusBar)
        assert not isinstance(sync, HasChromeViews)
        assert not isinstance(sync, HasChromeViewsConfig)

    def test_plugin_id_filled_in(self, full_config_yml: Path):
        notes, sync = load_producers(full_config_yml)
        assert notes.chrome_views()[0].plugin_id == "acme/notes"
        assert notes.chrome_views()[0].header_actions[0].title == "New note"
        # explicit owner is kept
        assert sync.chrome_status_bar()[0].plugin_id == "acme/custom-owner"

    def test_collect_into_registry(self, full_config_yml: Path):
        reg = ContributionRegistry()
        collect(load_producers(full_config_yml), reg)
        snap = reg.snapshot()
        assert [v.id for v in snap.views] == ["notes"]
        assert snap.tabs[0].closable is True
        assert snap.content_scripts[0].matches == ("https://*/*",)
        assert snap.view_configs == {
            "acme/notes": ViewsConfig(namespace="notes", path="plugins/notes/chrome")
        }
        assert snap.packages == ("react", "react-dom")

    def test_plugins_not_a_list(self):
        with pytest.raises(ConfigError, match="'plugins' must be a list"):
            parse_plugins({"plugins": {"id": "x"}})

    def test_bad_entry(self):
        with pytest.raises(ConfigError, match="Invalid plugin entry #2"):
            parse_plugins({"plugins": [{"id": "ok"}, {"views": []}]})

    def test_repr(self, full_config_yml: Path):
        assert repr(load_producers(full_config_yml)[0]) == "DeclaredProducer('acme/notes')"
        assert isinstance(load_producers(full_config_yml)[0], DeclaredProducer)
