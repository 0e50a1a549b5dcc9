"""
Vite side-files — plugin aliases and dedupe packages.

vite.config.ts reads both files if present:

    vite.plugins.json   {"<plugin id>": {"namespace": "...", "path": "..."}}
                        → ``@plugin/<namespace>`` resolve aliases
    vite.scripts.json   ["react", "react-dom", ...]
                        → ``resolve.dedupe``
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from chromegen.core.models.contributions import ViewsConfig
from chromegen.core.models.template import GeneratedFile
from chromegen.core.services.generators.common import encode_json

VITE_PLUGINS_PATH = "vite.plugins.json"
VITE_SCRIPTS_PATH = "vite.scripts.json"


def generate_vite_plugins(configs: Mapping[str, ViewsConfig]) -> GeneratedFile:
    """One entry per plugin id, keys in ascending order."""
    entries = {
        plugin_id: {"namespace": configs[plugin_id].namespace, "path": configs[plugin_id].path}
        for plugin_id in sorted(configs)
    }
    return GeneratedFile(
        path=VITE_PLUGINS_PATH,
        content=encode_json(entries),
        reason=f"Vite aliases for {len(entries)} plugin(s)",
    )


def generate_vite_scripts(packages: Iterable[str]) -> GeneratedFile:
    """Sorted package names. Duplicates are kept as registered."""
    names = sorted(packages)
    return GeneratedFile(
        path=VITE_SCRIPTS_PATH,
        content=encode_json(names),
        reason=f"Vite dedupe list ({len(names)} package(s))",
    )
