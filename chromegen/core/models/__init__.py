"""
Domain models — Pydantic types for the generator.

All models are re-exported here for convenient access:

    from chromegen.core.models import ViewDef, TabDef, GeneratorConfig, GeneratedFile
"""

from chromegen.core.models.config import ExtensionConfig, GeneratorConfig
from chromegen.core.models.contributions import (
    ContentScriptDef,
    HeaderActionDef,
    StatusBarDef,
    TabDef,
    ViewDef,
    ViewsConfig,
)
from chromegen.core.models.template import GeneratedFile

__all__ = [
    # contributions.py
    "ContentScriptDef",
    # config.py
    "ExtensionConfig",
    # template.py
    "GeneratedFile",
    "GeneratorConfig",
    "HeaderActionDef",
    "StatusBarDef",
    "TabDef",
    "ViewDef",
    "ViewsConfig",
]
