"""
Extension config generator — src/generated/extension-config.ts.
"""

from __future__ import annotations

from collections.abc import Mapping

from chromegen.core.models.config import ExtensionConfig, GeneratorConfig
from chromegen.core.models.contributions import ViewsConfig
from chromegen.core.models.template import GeneratedFile
from chromegen.core.services.generators.common import ts_const, ts_module

EXTENSION_CONFIG_PATH = "src/generated/extension-config.ts"


def build_extension_config(
    config: GeneratorConfig,
    view_configs: Mapping[str, ViewsConfig],
) -> ExtensionConfig:
    """Combine static settings with the plugin → namespace map.

    Only plugins that registered a view config appear. Paths stay out
    of the frontend bundle.
    """
    return ExtensionConfig(
        name=config.name,
        description=config.description,
        version=config.version,
        api_url=config.api_url,
        plugins={pid: view_configs[pid].namespace for pid in sorted(view_configs)},
    )


def generate_extension_config(
    config: GeneratorConfig,
    view_configs: Mapping[str, ViewsConfig],
) -> GeneratedFile:
    """Generate extension-config.ts."""
    ext = build_extension_config(config, view_configs)
    body = [
        ts_const("extensionConfig", "", ext.model_dump(by_alias=True), suffix=" as const"),
        "",
        "export type ExtensionConfig = typeof extensionConfig",
    ]
    content = ts_module(["Extension configuration."], body)
    return GeneratedFile(
        path=EXTENSION_CONFIG_PATH,
        content=content,
        reason=f"Extension config with {len(ext.plugins)} plugin namespace(s)",
    )
