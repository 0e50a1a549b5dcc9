"""
Configuration models — generator settings and the emitted extension config.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeneratorConfig(BaseModel):
    """Settings for one generator run.

    Paths are relative to the workspace passed to ``build()``.
    """

    name: str = "Orchestra"
    description: str = "Orchestra IDE Chrome Extension"
    version: str = "0.1.0"
    api_url: str = "http://localhost:8080"
    extension_path: str = "plugins/chrome/resources/extension"
    output_path: str = "resources/chrome"


class ExtensionConfig(BaseModel):
    """Metadata serialized into extension-config.ts.

    ``plugins`` maps a producer id to its namespace.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    version: str = ""
    api_url: str = Field(default="", alias="apiUrl")
    plugins: dict[str, str] = Field(default_factory=dict)
