"""
Chrome Manifest V3 generator.

The manifest is static apart from identity fields (from config) and the
content scripts contributed by plugins. It is written to ``public/`` so
Vite copies it into ``dist/`` unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from chromegen.core.models.config import GeneratorConfig
from chromegen.core.models.contributions import ContentScriptDef
from chromegen.core.models.template import GeneratedFile
from chromegen.core.services.generators.common import by_priority, encode_json, normalize_run_at

logger = logging.getLogger(__name__)

MANIFEST_PATH = "public/manifest.json"

PERMISSIONS = ["sidePanel", "storage", "activeTab", "tabs", "scripting"]


def _content_script_entry(script: ContentScriptDef) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "matches": list(script.matches),
        "js": [script.entry],
        "run_at": normalize_run_at(script.run_at),
    }
    if script.all_frames:
        entry["all_frames"] = True
    return entry


def build_manifest(
    config: GeneratorConfig,
    scripts: Sequence[ContentScriptDef],
) -> dict[str, Any]:
    """Assemble the manifest as a dict (key order is the output order)."""
    manifest: dict[str, Any] = {
        "manifest_version": 3,
        "name": config.name,
        "description": config.description,
        "version": config.version,
        "permissions": list(PERMISSIONS),
        "side_panel": {"default_path": "sidepanel.html"},
        "action": {"default_title": config.name},
        "background": {"service_worker": "background.js", "type": "module"},
    }

    entries = [_content_script_entry(s) for s in by_priority(scripts)]
    if entries:
        manifest["content_scripts"] = entries
    return manifest


def generate_manifest(
    config: GeneratorConfig,
    scripts: Sequence[ContentScriptDef],
) -> GeneratedFile:
    """Generate public/manifest.json.

    Raises:
        SerializationError: If a content script holds unencodable data.
    """
    content = encode_json(build_manifest(config, scripts))
    logger.debug("Manifest has %d content script(s)", len(scripts))
    return GeneratedFile(
        path=MANIFEST_PATH,
        content=content,
        reason=f"Manifest V3 for {config.name} ({len(scripts)} content script(s))",
    )
