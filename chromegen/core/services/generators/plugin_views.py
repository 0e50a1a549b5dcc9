"""
Plugin views generator — src/generated/plugin-views.ts.

Renders every view, tab and status bar item as plain data. Components
are referenced by name; the side panel resolves them through the
``@plugin/<namespace>`` aliases from vite.plugins.json.

Records with duplicate ids are all emitted (nothing is dropped) and a
warning is logged for each collision.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from chromegen.core.models.contributions import StatusBarDef, TabDef, ViewDef
from chromegen.core.models.template import GeneratedFile
from chromegen.core.services.generators.common import by_priority, ts_const, ts_module

logger = logging.getLogger(__name__)

PLUGIN_VIEWS_PATH = "src/generated/plugin-views.ts"

T = TypeVar("T")

_INTERFACES = """\
export interface HeaderAction {
  id: string
  icon: string
  title: string
}

export interface PluginView {
  id: string
  pluginId: string
  panel: string
  title: string
  icon: string
  component: string
  priority: number
  when: string
  hasSearch: boolean
  searchPlaceholder: string
  headerActions: HeaderAction[]
}

export interface PluginTab {
  id: string
  pluginId: string
  title: string
  icon: string
  component: string
  pattern: string
  closable: boolean
  priority: number
}

export interface PluginStatusBarItem {
  id: string
  pluginId: string
  text: string
  icon: string
  tooltip: string
  command: string
  alignment: string
  priority: number
}
"""


def find_duplicates(records: Sequence[T], key: Callable[[T], Hashable]) -> list[Hashable]:
    """Return keys that occur more than once, in first-seen order."""
    seen: set[Hashable] = set()
    dupes: list[Hashable] = []
    for record in records:
        k = key(record)
        if k in seen and k not in dupes:
            dupes.append(k)
        seen.add(k)
    return dupes


def view_key(view: ViewDef) -> tuple[str, str]:
    """Views are unique per panel kind."""
    return (view.panel, view.id)


def _view_entry(view: ViewDef) -> dict[str, Any]:
    return {
        "id": view.id,
        "pluginId": view.plugin_id,
        "panel": view.panel,
        "title": view.title,
        "icon": view.icon,
        "component": view.component,
        "priority": view.priority,
        "when": view.when,
        "hasSearch": view.has_search,
        "searchPlaceholder": view.search_placeholder,
        "headerActions": [
            {"id": a.id, "icon": a.icon, "title": a.title} for a in view.header_actions
        ],
    }


def _tab_entry(tab: TabDef) -> dict[str, Any]:
    return {
        "id": tab.id,
        "pluginId": tab.plugin_id,
        "title": tab.title,
        "icon": tab.icon,
        "component": tab.component,
        "pattern": tab.pattern,
        "closable": tab.closable,
        "priority": tab.priority,
    }


def _status_entry(item: StatusBarDef) -> dict[str, Any]:
    return {
        "id": item.id,
        "pluginId": item.plugin_id,
        "text": item.text,
        "icon": item.icon,
        "tooltip": item.tooltip,
        "command": item.command,
        "alignment": item.alignment,
        "priority": item.priority,
    }


def _warn_duplicates(kind: str, records: Sequence[T], key: Callable[[T], Hashable]) -> None:
    for dupe in find_duplicates(records, key):
        logger.warning("Duplicate %s id %s, all entries are kept", kind, dupe)


def generate_plugin_views(
    views: Sequence[ViewDef],
    tabs: Sequence[TabDef],
    status_bar: Sequence[StatusBarDef],
) -> GeneratedFile:
    """Generate plugin-views.ts from the merged contributions.

    Raises:
        SerializationError: If a record holds unencodable data.
    """
    _warn_duplicates("view", views, view_key)
    _warn_duplicates("tab", tabs, lambda t: t.id)
    _warn_duplicates("status bar", status_bar, lambda s: s.id)

    body = [
        _INTERFACES,
        ts_const("pluginViews", "PluginView[]", [_view_entry(v) for v in by_priority(views)]),
        "",
        ts_const("pluginTabs", "PluginTab[]", [_tab_entry(t) for t in by_priority(tabs)]),
        "",
        ts_const(
            "pluginStatusBar",
            "PluginStatusBarItem[]",
            [_status_entry(s) for s in by_priority(status_bar)],
        ),
    ]
    content = ts_module(
        [
            "Plugin views, tabs and status bar items.",
            "Each entry is contributed by a plugin; arrays are ordered by priority.",
        ],
        body,
    )
    return GeneratedFile(
        path=PLUGIN_VIEWS_PATH,
        content=content,
        reason=(
            f"{len(views)} view(s), {len(tabs)} tab(s), "
            f"{len(status_bar)} status bar item(s)"
        ),
    )
