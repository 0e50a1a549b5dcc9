"""
Contribution records — what producers hand to the generator.

Each record is an immutable Pydantic model. Producers build them
(directly or through the fluent builders) and register them with the
ContributionRegistry before a build runs. Nothing is validated at
registration time beyond field types; serializers decide how to
render them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Base for all contribution records (frozen once created)."""

    model_config = ConfigDict(frozen=True)


class HeaderActionDef(_Record):
    """A button in the header of a view."""

    id: str
    icon: str = ""
    title: str = ""


class ViewDef(_Record):
    """A panel contributed by a plugin (sidebar by default).

    ``priority`` only orders views; ties keep registration order.
    """

    id: str
    plugin_id: str = ""
    panel: str = "sidebar"
    title: str = ""
    icon: str = ""
    component: str = ""
    priority: int = 0
    when: str = ""                     # visibility condition, emitted verbatim
    has_search: bool = False
    search_placeholder: str = ""
    header_actions: tuple[HeaderActionDef, ...] = ()


class TabDef(_Record):
    """An editor tab contributed by a plugin."""

    id: str
    plugin_id: str = ""
    title: str = ""
    icon: str = ""
    component: str = ""
    pattern: str = ""                  # URL/resource pattern the tab opens for
    closable: bool = True
    priority: int = 0


class StatusBarDef(_Record):
    """A status bar item contributed by a plugin."""

    id: str
    plugin_id: str = ""
    text: str = ""
    icon: str = ""
    tooltip: str = ""
    command: str = ""
    alignment: str = "left"
    priority: int = 0


class ContentScriptDef(_Record):
    """A script injected into matching pages.

    ``run_at`` is kept as given; the serializers normalize it.
    """

    id: str = ""
    plugin_id: str = ""
    matches: tuple[str, ...] = Field(default_factory=tuple)
    entry: str = ""
    run_at: str = ""
    all_frames: bool = False
    priority: int = 0


class ViewsConfig(_Record):
    """Namespace and component directory of one plugin."""

    namespace: str = ""
    path: str = ""
