"""
Content scripts generator — src/generated/content-scripts.ts.

Mirrors the manifest's content_scripts (same priority order, same
run-at normalization) so the service worker can register them
dynamically.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from chromegen.core.models.contributions import ContentScriptDef
from chromegen.core.models.template import GeneratedFile
from chromegen.core.services.generators.common import (
    by_priority,
    normalize_run_at,
    ts_const,
    ts_module,
)

CONTENT_SCRIPTS_PATH = "src/generated/content-scripts.ts"

_INTERFACE = """\
export interface ContentScriptEntry {
  id: string
  pluginId: string
  matches: string[]
  js: string[]
  runAt: 'document_start' | 'document_idle' | 'document_end'
  allFrames: boolean
}
"""


def _entry(script: ContentScriptDef) -> dict[str, Any]:
    return {
        "id": script.id,
        "pluginId": script.plugin_id,
        "matches": list(script.matches),
        "js": [script.entry],
        "runAt": normalize_run_at(script.run_at),
        "allFrames": script.all_frames,
    }


def generate_content_scripts(scripts: Sequence[ContentScriptDef]) -> GeneratedFile:
    """Generate content-scripts.ts."""
    entries = [_entry(s) for s in by_priority(scripts)]
    content = ts_module(
        [
            "Content script registrations.",
            "Each entry describes a content script to register dynamically.",
        ],
        [_INTERFACE, ts_const("contentScripts", "ContentScriptEntry[]", entries)],
    )
    return GeneratedFile(
        path=CONTENT_SCRIPTS_PATH,
        content=content,
        reason=f"{len(entries)} content script(s)",
    )
