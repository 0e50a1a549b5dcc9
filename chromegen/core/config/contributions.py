"""
Declared producers — plugins described in chromegen.yml.

Lets the CLI build an extension without a host process. Each entry
under ``plugins:`` becomes a DeclaredProducer that implements every
capability it has data for:

    plugins:
      - id: orchestra/notes
        namespace: notes
        path: plugins/notes/resources/chrome
        packages: [react, react-dom]
        views:
          - id: notes
            title: Notes
            icon: note
            component: NotesList
            priority: 10
        tabs:
          - id: note-editor
            pattern: "note/*"
        content_scripts:
          - matches: ["https://*/*"]
            entry: content/notes.js
            run_at: document_end

``plugin_id`` is filled in from the plugin ``id`` on every record that
leaves it empty.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from chromegen.core.config.loader import ConfigError, read_config_data
from chromegen.core.models.contributions import (
    ContentScriptDef,
    StatusBarDef,
    TabDef,
    ViewDef,
    ViewsConfig,
)

logger = logging.getLogger(__name__)


class DeclaredPlugin(BaseModel):
    """One ``plugins:`` entry."""

    id: str
    namespace: str = ""
    path: str = ""
    packages: list[str] = Field(default_factory=list)
    views: list[ViewDef] = Field(default_factory=list)
    tabs: list[TabDef] = Field(default_factory=list)
    status_bar: list[StatusBarDef] = Field(default_factory=list)
    content_scripts: list[ContentScriptDef] = Field(default_factory=list)


def _owned(records: list[Any], plugin_id: str) -> list[Any]:
    return [r if r.plugin_id else r.model_copy(update={"plugin_id": plugin_id}) for r in records]


class DeclaredProducer:
    """Producer backed by a DeclaredPlugin.

    Capability methods are only bound when the plugin declares data for
    them, so ``collect()`` sees exactly the capabilities in the file.
    """

    def __init__(self, plugin: DeclaredPlugin):
        self.plugin = plugin
        if plugin.views:
            self.chrome_views = self._views
        if plugin.tabs:
            self.chrome_tabs = self._tabs
        if plugin.status_bar:
            self.chrome_status_bar = self._status_bar
        if plugin.content_scripts:
            self.chrome_content_scripts = self._content_scripts
        if plugin.namespace or plugin.path:
            self.chrome_views_config = self._views_config
        if plugin.packages:
            self.chrome_packages = self._packages

    @property
    def id(self) -> str:
        return self.plugin.id

    def _views(self) -> list[ViewDef]:
        return _owned(self.plugin.views, self.id)

    def _tabs(self) -> list[TabDef]:
        return _owned(self.plugin.tabs, self.id)

    def _status_bar(self) -> list[StatusBarDef]:
        return _owned(self.plugin.status_bar, self.id)

    def _content_scripts(self) -> list[ContentScriptDef]:
        return _owned(self.plugin.content_scripts, self.id)

    def _views_config(self) -> ViewsConfig:
        return ViewsConfig(namespace=self.plugin.namespace, path=self.plugin.path)

    def _packages(self) -> list[str]:
        return list(self.plugin.packages)

    def __repr__(self) -> str:
        return f"DeclaredProducer({self.id!r})"


def parse_plugins(data: dict[str, Any]) -> list[DeclaredPlugin]:
    """Validate the ``plugins:`` list of a parsed config file.

    Raises:
        ConfigError: If the list or one of its entries is malformed.
    """
    entries = data.get("plugins") or []
    if not isinstance(entries, list):
        raise ConfigError(f"'plugins' must be a list, got {type(entries).__name__}")

    plugins: list[DeclaredPlugin] = []
    for index, entry in enumerate(entries):
        try:
            plugins.append(DeclaredPlugin.model_validate(entry))
        except Exception as e:
            raise ConfigError(f"Invalid plugin entry #{index + 1}: {e}") from e
    return plugins


def load_producers(path: Path | None) -> list[DeclaredProducer]:
    """Load declared producers from a config file (none if *path* is None)."""
    if path is None:
        return []
    plugins = parse_plugins(read_config_data(path))
    logger.info("Loaded %d declared plugin(s) from %s", len(plugins), path)
    return [DeclaredProducer(p) for p in plugins]
