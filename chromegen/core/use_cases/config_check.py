"""
Config check use case — validate chromegen.yml and its declared plugins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from chromegen.core.config.contributions import DeclaredPlugin, parse_plugins
from chromegen.core.config.loader import (
    ConfigError,
    find_config_file,
    parse_config,
    read_config_data,
)
from chromegen.core.models.config import GeneratorConfig
from chromegen.core.services.generators.common import normalize_run_at
from chromegen.core.services.generators.plugin_views import find_duplicates, view_key


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    plugins: list[DeclaredPlugin] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "name": self.config.name if self.config else None,
            "plugin_count": len(self.plugins),
        }


def check_config(config_path: Path | None = None, start_dir: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Errors make the build unusable (unreadable file, schema errors,
    content scripts without match patterns). Warnings flag output that
    will build but is probably wrong (duplicate ids, unknown run-at
    values, namespace collisions).
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file(start_dir)

    if config_path is None:
        result.errors.append("No chromegen.yml found.")
        return result

    result.config_path = config_path

    try:
        data = read_config_data(config_path)
        result.config = parse_config(data)
        result.plugins = parse_plugins(data)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    plugins = result.plugins
    if not plugins:
        result.warnings.append("No plugins declared. The extension will have no contributions.")

    # Duplicate plugin ids (the later view config wins)
    for pid in find_duplicates(plugins, lambda p: p.id):
        result.warnings.append(f"Plugin '{pid}' is declared more than once")

    # Duplicate contribution ids across plugins
    views = [v for p in plugins for v in p.views]
    for panel, vid in find_duplicates(views, view_key):
        result.warnings.append(f"Duplicate view id '{vid}' in panel '{panel}'")
    tabs = [t for p in plugins for t in p.tabs]
    for tid in find_duplicates(tabs, lambda t: t.id):
        result.warnings.append(f"Duplicate tab id '{tid}'")
    items = [s for p in plugins for s in p.status_bar]
    for sid in find_duplicates(items, lambda s: s.id):
        result.warnings.append(f"Duplicate status bar id '{sid}'")

    # Namespace collisions break the @plugin/<namespace> aliases
    namespaced = [p for p in plugins if p.namespace]
    for ns in find_duplicates(namespaced, lambda p: p.namespace):
        result.warnings.append(f"Namespace '{ns}' is used by more than one plugin")

    for plugin in plugins:
        for script in plugin.content_scripts:
            label = script.id or script.entry or "(unnamed)"
            if not script.matches:
                result.errors.append(
                    f"Content script {label} of '{plugin.id}' has no match patterns"
                )
            if not script.entry:
                result.errors.append(f"Content script {label} of '{plugin.id}' has no entry")
            if script.run_at and normalize_run_at(script.run_at) != script.run_at:
                result.warnings.append(
                    f"Content script {label} of '{plugin.id}': unknown run_at "
                    f"'{script.run_at}', document_idle will be used"
                )

    result.valid = len(result.errors) == 0
    return result
