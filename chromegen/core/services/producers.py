"""
Producer capabilities — how plugins hand contributions to the registry.

There is no monolithic producer interface. Each contribution kind has
its own small protocol and a producer implements whichever subset it
needs. ``collect()`` checks every producer against every capability
and forwards what it finds to the registry.

    class NotesPlugin:
        id = "orchestra/notes"

        def chrome_views(self) -> list[ViewDef]:
            return [SidebarBuilder("notes", self.id).title("Notes").build()]

    collect([NotesPlugin()], registry)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from chromegen.core.models.contributions import (
    ContentScriptDef,
    StatusBarDef,
    TabDef,
    ViewDef,
    ViewsConfig,
)
from chromegen.core.services.registry import ContributionRegistry

logger = logging.getLogger(__name__)


@runtime_checkable
class Producer(Protocol):
    """Anything that contributes to the extension. Identified by ``id``."""

    @property
    def id(self) -> str: ...


@runtime_checkable
class HasChromeViews(Protocol):
    def chrome_views(self) -> list[ViewDef]: ...


@runtime_checkable
class HasChromeTabs(Protocol):
    def chrome_tabs(self) -> list[TabDef]: ...


@runtime_checkable
class HasChromeStatusBar(Protocol):
    def chrome_status_bar(self) -> list[StatusBarDef]: ...


@runtime_checkable
class HasChromeContentScripts(Protocol):
    def chrome_content_scripts(self) -> list[ContentScriptDef]: ...


@runtime_checkable
class HasChromeViewsConfig(Protocol):
    def chrome_views_config(self) -> ViewsConfig | None: ...


@runtime_checkable
class HasChromePackages(Protocol):
    def chrome_packages(self) -> list[str]: ...


def collect(producers: Iterable[Producer], registry: ContributionRegistry) -> int:
    """Register every capability of every producer, in the given order.

    Args:
        producers: Objects exposing ``id`` and any of the ``HasChrome*``
            capability methods.
        registry: The registry to fill.

    Returns:
        Number of producers visited.
    """
    count = 0
    for producer in producers:
        count += 1
        pid = producer.id
        if isinstance(producer, HasChromeViews):
            registry.add_views(producer.chrome_views())
        if isinstance(producer, HasChromeTabs):
            registry.add_tabs(producer.chrome_tabs())
        if isinstance(producer, HasChromeStatusBar):
            registry.add_status_bar(producer.chrome_status_bar())
        if isinstance(producer, HasChromeContentScripts):
            registry.add_content_scripts(producer.chrome_content_scripts())
        if isinstance(producer, HasChromeViewsConfig):
            views_config = producer.chrome_views_config()
            if views_config is not None:
                registry.add_view_config(pid, views_config)
        if isinstance(producer, HasChromePackages):
            registry.add_packages(producer.chrome_packages())
        logger.debug("Collected contributions from %s", pid)

    logger.info("Collected contributions from %d producer(s)", count)
    return count
