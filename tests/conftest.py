"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from chromegen.core.models import (
    ContentScriptDef,
    GeneratorConfig,
    StatusBarDef,
    TabDef,
    ViewDef,
    ViewsConfig,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CHROMEGEN_* overrides from the host shell out of tests."""
    for var in (
        "CHROMEGEN_API_URL",
        "CHROMEGEN_OUTPUT_PATH",
        "CHROMEGEN_LOG_LEVEL",
        "CHROMEGEN_LOG_FILE",
        "CHROMEGEN_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config() -> GeneratorConfig:
    """Default generator config (paths relative to the workspace)."""
    return GeneratorConfig()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty workspace directory."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


@pytest.fixture
def template_dir(workspace: Path, config: GeneratorConfig) -> Path:
    """A minimal extension template at the configured extension path."""
    src = workspace / config.extension_path
    (src / "src" / "sidepanel").mkdir(parents=True)
    (src / "package.json").write_text('{"name": "extension"}\n')
    (src / "src" / "sidepanel" / "App.tsx").write_text("export default function App() {}\n")
    return src


@pytest.fixture
def views() -> list[ViewDef]:
    return [
        ViewDef(id="notes", plugin_id="orchestra/notes", title="Notes", priority=20),
        ViewDef(id="search", plugin_id="orchestra/search", title="Search", priority=10),
    ]


@pytest.fixture
def tabs() -> list[TabDef]:
    return [TabDef(id="note-editor", plugin_id="orchestra/notes", pattern="note/*")]


@pytest.fixture
def status_items() -> list[StatusBarDef]:
    return [StatusBarDef(id="sync", plugin_id="orchestra/sync", text="Synced")]


@pytest.fixture
def scripts() -> list[ContentScriptDef]:
    return [
        ContentScriptDef(matches=("https://*/*",), entry="content/late.js", priority=5),
        ContentScriptDef(
            matches=("https://github.com/*",),
            entry="content/early.js",
            run_at="document_start",
            all_frames=True,
            priority=1,
        ),
    ]


@pytest.fixture
def view_configs() -> dict[str, ViewsConfig]:
    return {
        "orchestra/search": ViewsConfig(namespace="search", path="plugins/search/chrome"),
        "orchestra/notes": ViewsConfig(namespace="notes", path="plugins/notes/chrome"),
    }
