"""
Contribution registry — accumulates records from every producer.

The registry is an append-only accumulator owned by one generator
instance. Producers call the ``add_*`` methods before a build; the
build reads a ``RegistrySnapshot`` and never writes back.

Ordering guarantee: records appear in call order. Nothing orders
records across producers, so serializers sort for themselves.
View configs are keyed by producer id: re-registration replaces
the earlier entry (last write wins).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chromegen.core.models.contributions import (
    ContentScriptDef,
    StatusBarDef,
    TabDef,
    ViewDef,
    ViewsConfig,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrySnapshot:
    """Read-only view of the registry at one point in time."""

    views: tuple[ViewDef, ...] = ()
    tabs: tuple[TabDef, ...] = ()
    status_bar: tuple[StatusBarDef, ...] = ()
    content_scripts: tuple[ContentScriptDef, ...] = ()
    view_configs: dict[str, ViewsConfig] = field(default_factory=dict)
    packages: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (
            self.views
            or self.tabs
            or self.status_bar
            or self.content_scripts
            or self.view_configs
            or self.packages
        )

    def to_dict(self) -> dict:
        return {
            "views": len(self.views),
            "tabs": len(self.tabs),
            "status_bar": len(self.status_bar),
            "content_scripts": len(self.content_scripts),
            "plugins": sorted(self.view_configs),
            "packages": len(self.packages),
        }


class ContributionRegistry:
    """Append-only store for contribution records."""

    def __init__(self) -> None:
        self._views: list[ViewDef] = []
        self._tabs: list[TabDef] = []
        self._status_bar: list[StatusBarDef] = []
        self._content_scripts: list[ContentScriptDef] = []
        self._view_configs: dict[str, ViewsConfig] = {}
        self._packages: list[str] = []

    def add_views(self, views: Iterable[ViewDef]) -> None:
        """Register sidebar/panel views."""
        added = list(views)
        self._views.extend(added)
        logger.debug("Registered %d view(s)", len(added))

    def add_tabs(self, tabs: Iterable[TabDef]) -> None:
        """Register editor tabs."""
        added = list(tabs)
        self._tabs.extend(added)
        logger.debug("Registered %d tab(s)", len(added))

    def add_status_bar(self, items: Iterable[StatusBarDef]) -> None:
        """Register status bar items."""
        added = list(items)
        self._status_bar.extend(added)
        logger.debug("Registered %d status bar item(s)", len(added))

    def add_content_scripts(self, scripts: Iterable[ContentScriptDef]) -> None:
        """Register content scripts."""
        added = list(scripts)
        self._content_scripts.extend(added)
        logger.debug("Registered %d content script(s)", len(added))

    def add_view_config(self, plugin_id: str, config: ViewsConfig) -> None:
        """Register a plugin's namespace and component path.

        A second call for the same plugin replaces the first.
        """
        if plugin_id in self._view_configs:
            logger.warning("Overwriting view config for plugin: %s", plugin_id)
        self._view_configs[plugin_id] = config
        logger.debug("Registered view config: %s → %s", plugin_id, config.namespace)

    def add_packages(self, packages: Iterable[str]) -> None:
        """Register npm packages for Vite dedupe."""
        added = list(packages)
        self._packages.extend(added)
        logger.debug("Registered %d package(s)", len(added))

    def snapshot(self) -> RegistrySnapshot:
        """Return an immutable copy of everything registered so far."""
        return RegistrySnapshot(
            views=tuple(self._views),
            tabs=tuple(self._tabs),
            status_bar=tuple(self._status_bar),
            content_scripts=tuple(self._content_scripts),
            view_configs=dict(self._view_configs),
            packages=tuple(self._packages),
        )
