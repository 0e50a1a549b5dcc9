"""
Fluent builders for view and tab contributions.

    view = (
        SidebarBuilder("notes", "orchestra/notes")
        .title("Notes")
        .icon("note")
        .searchable("Search notes…")
        .header_action("new", "plus", "New note")
        .build()
    )
"""

from __future__ import annotations

from typing import Any

from chromegen.core.models.contributions import HeaderActionDef, TabDef, ViewDef


class SidebarBuilder:
    """Builds a ViewDef. The panel defaults to ``sidebar``."""

    def __init__(self, id: str, plugin_id: str):
        self._fields: dict[str, Any] = {"id": id, "plugin_id": plugin_id, "panel": "sidebar"}
        self._header_actions: list[HeaderActionDef] = []

    def title(self, title: str) -> SidebarBuilder:
        self._fields["title"] = title
        return self

    def icon(self, icon: str) -> SidebarBuilder:
        self._fields["icon"] = icon
        return self

    def component(self, component: str) -> SidebarBuilder:
        self._fields["component"] = component
        return self

    def panel(self, panel: str) -> SidebarBuilder:
        self._fields["panel"] = panel
        return self

    def priority(self, priority: int) -> SidebarBuilder:
        self._fields["priority"] = priority
        return self

    def when(self, condition: str) -> SidebarBuilder:
        self._fields["when"] = condition
        return self

    def searchable(self, placeholder: str) -> SidebarBuilder:
        """Enable the search bar with the given placeholder text."""
        self._fields["has_search"] = True
        self._fields["search_placeholder"] = placeholder
        return self

    def header_action(self, id: str, icon: str, title: str) -> SidebarBuilder:
        """Add a header action button to the view."""
        self._header_actions.append(HeaderActionDef(id=id, icon=icon, title=title))
        return self

    def build(self) -> ViewDef:
        return ViewDef(**self._fields, header_actions=tuple(self._header_actions))


class TabBuilder:
    """Builds a TabDef. Tabs are closable unless told otherwise."""

    def __init__(self, id: str, plugin_id: str):
        self._fields: dict[str, Any] = {"id": id, "plugin_id": plugin_id, "closable": True}

    def title(self, title: str) -> TabBuilder:
        self._fields["title"] = title
        return self

    def icon(self, icon: str) -> TabBuilder:
        self._fields["icon"] = icon
        return self

    def component(self, component: str) -> TabBuilder:
        self._fields["component"] = component
        return self

    def pattern(self, pattern: str) -> TabBuilder:
        self._fields["pattern"] = pattern
        return self

    def closable(self, closable: bool) -> TabBuilder:
        self._fields["closable"] = closable
        return self

    def priority(self, priority: int) -> TabBuilder:
        self._fields["priority"] = priority
        return self

    def build(self) -> TabDef:
        return TabDef(**self._fields)
