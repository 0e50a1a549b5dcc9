"""
Build use case — load config, collect declared producers, generate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from chromegen.core.config.contributions import load_producers
from chromegen.core.config.loader import ConfigError, find_config_file, load_config
from chromegen.core.engine.builder import BuildError, BuildReport, ExtensionGenerator
from chromegen.core.models.config import GeneratorConfig
from chromegen.core.services.producers import Producer, collect

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of the build command."""

    workspace: Path
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    producers: list[str] = field(default_factory=list)
    report: BuildReport | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.report is not None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "workspace": str(self.workspace),
            "config_path": str(self.config_path) if self.config_path else None,
            "producers": self.producers,
            "report": self.report.to_dict() if self.report else None,
            "error": self.error,
        }


def run_build(
    workspace: Path,
    config_path: Path | None = None,
    extra_producers: list[Producer] | None = None,
    **overrides: str | None,
) -> BuildResult:
    """Generate the extension for a workspace.

    Declared producers from the config file are collected first, then
    *extra_producers* in the given order.

    Args:
        workspace: Workspace root.
        config_path: Explicit chromegen.yml (default: search upward from workspace).
        extra_producers: Producers supplied in-process.
        **overrides: Setting overrides (``api_url``, ``output_path``).

    Returns:
        BuildResult. Config and build failures are reported in ``error``.
    """
    result = BuildResult(workspace=workspace)

    try:
        if config_path is None:
            config_path = find_config_file(workspace)
        result.config_path = config_path
        result.config = load_config(config_path, start_dir=workspace, **overrides)
        producers: list[Producer] = [*load_producers(config_path), *(extra_producers or [])]
    except ConfigError as e:
        result.error = str(e)
        return result

    generator = ExtensionGenerator(result.config)
    collect(producers, generator.registry)
    result.producers = [p.id for p in producers]

    try:
        result.report = generator.build(workspace)
    except BuildError as e:
        logger.error("Chrome build failed: %s", e)
        result.error = f"chrome build failed: {e}"
    return result
