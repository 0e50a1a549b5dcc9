"""
Extension builder — the end-to-end generation pass.

Flow:
    stage template → ensure src/generated → run generators in fixed order → write

The builder owns a ContributionRegistry. Producers fill it through the
``add_*`` methods (or ``collect()``), then ``build()`` reads a single
snapshot and writes every artifact. A failing step raises BuildError
naming the step; files written by earlier steps stay on disk.

One build at a time per instance. Callers that share an instance
across threads must serialize ``build()`` themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from chromegen.core.models.config import GeneratorConfig
from chromegen.core.models.contributions import (
    ContentScriptDef,
    StatusBarDef,
    TabDef,
    ViewDef,
    ViewsConfig,
)
from chromegen.core.models.template import GeneratedFile
from chromegen.core.services.generators.content_scripts import generate_content_scripts
from chromegen.core.services.generators.extension_config import generate_extension_config
from chromegen.core.services.generators.manifest import generate_manifest
from chromegen.core.services.generators.plugin_views import generate_plugin_views
from chromegen.core.services.generators.vite import generate_vite_plugins, generate_vite_scripts
from chromegen.core.services.registry import ContributionRegistry, RegistrySnapshot
from chromegen.core.services.template_copy import stage_template

logger = logging.getLogger(__name__)

GENERATED_DIR = Path("src") / "generated"


class BuildError(Exception):
    """Raised when a build step fails. ``step`` names the step."""

    def __init__(self, step: str, cause: BaseException):
        self.step = step
        self.cause = cause
        super().__init__(f"{step}: {cause}")


@dataclass
class BuildReport:
    """Result of a successful build."""

    output_dir: Path
    template_copied: bool = False
    files: list[GeneratedFile] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]

    def to_dict(self) -> dict:
        return {
            "output_dir": str(self.output_dir),
            "template_copied": self.template_copied,
            "files": [{"path": f.path, "reason": f.reason} for f in self.files],
        }


_Step = Callable[[RegistrySnapshot], GeneratedFile]


class ExtensionGenerator:
    """Produces TypeScript and JSON files for the Chrome extension.

    It does not run pnpm or Vite.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        registry: ContributionRegistry | None = None,
    ):
        self.config = config
        self.registry = registry if registry is not None else ContributionRegistry()

    # ── Registration ────────────────────────────────────────────

    def add_views(self, views: Iterable[ViewDef]) -> None:
        self.registry.add_views(views)

    def add_tabs(self, tabs: Iterable[TabDef]) -> None:
        self.registry.add_tabs(tabs)

    def add_status_bar(self, items: Iterable[StatusBarDef]) -> None:
        self.registry.add_status_bar(items)

    def add_content_scripts(self, scripts: Iterable[ContentScriptDef]) -> None:
        self.registry.add_content_scripts(scripts)

    def add_view_config(self, plugin_id: str, config: ViewsConfig) -> None:
        self.registry.add_view_config(plugin_id, config)

    def add_packages(self, packages: Iterable[str]) -> None:
        self.registry.add_packages(packages)

    # ── Build ───────────────────────────────────────────────────

    def steps(self) -> list[tuple[str, _Step]]:
        """Generation steps in the order they run."""
        cfg = self.config
        return [
            ("plugin-views.ts", lambda s: generate_plugin_views(s.views, s.tabs, s.status_bar)),
            ("extension-config.ts", lambda s: generate_extension_config(cfg, s.view_configs)),
            ("content-scripts.ts", lambda s: generate_content_scripts(s.content_scripts)),
            ("manifest.json", lambda s: generate_manifest(cfg, s.content_scripts)),
            ("vite.plugins.json", lambda s: generate_vite_plugins(s.view_configs)),
            ("vite.scripts.json", lambda s: generate_vite_scripts(s.packages)),
        ]

    def build(self, workspace: Path | str = ".") -> BuildReport:
        """Copy the extension template and generate every extension file.

        Args:
            workspace: Workspace root; config paths are relative to it.

        Returns:
            BuildReport listing the written files.

        Raises:
            BuildError: On the first failing step.
        """
        workspace = Path(workspace)
        src_dir = workspace / self.config.extension_path
        dst_dir = workspace / self.config.output_path
        report = BuildReport(output_dir=dst_dir)

        try:
            report.template_copied = stage_template(src_dir, dst_dir)
        except OSError as e:
            raise BuildError("copy template", e) from e

        try:
            (dst_dir / GENERATED_DIR).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BuildError("create output dir", e) from e

        snapshot = self.registry.snapshot()
        logger.info("Generating extension files in %s", dst_dir)

        for name, step in self.steps():
            try:
                generated = step(snapshot)
                _write(dst_dir, generated)
            except Exception as e:
                logger.error("Step %s failed: %s", name, e)
                raise BuildError(f"generate {name}", e) from e
            report.files.append(generated)

        logger.info("Generated %d file(s) in %s", len(report.files), dst_dir)
        return report


def _write(output_dir: Path, generated: GeneratedFile) -> Path:
    """Write a GeneratedFile under *output_dir*, creating parent directories."""
    target = output_dir / generated.path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(generated.content.encode("utf-8"))
    logger.debug("Wrote %s (%s)", target, generated.reason)
    return target
