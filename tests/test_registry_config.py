from __future__ import annotations

from pathlib import Path

import pytest

from pdfdesk.config import Settings, get_settings
from pdfdesk.tools import load_builtin_plugins
from pdfdesk.tools.common.interfaces import BaseTool, ConversionContext
from pdfdesk.tools.common.pipeline import ToolRegistry, registry

ALIASES = {
    "merge-pdfs": "merge",
    "split-pdf": "split",
    "organize-pdf": "organize",
    "compress-pdf": "compress",
    "images-to-pdf": "images_to_pdf",
    "pdf-to-images": "pdf_to_images",
    "protect-pdf": "protect",
    "unlock-pdf": "unlock",
    "get-pdf-info": "info",
    "save-file": "save",
    "save-files": "save_files",
}


def setup_module(module):
    load_builtin_plugins()


def test_builtin_tools_are_registered() -> None:
    assert set(registry.names()) == set(ALIASES.values())


@pytest.mark.parametrize(("alias", "name"), sorted(ALIASES.items()))
def test_aliases_resolve(alias: str, name: str) -> None:
    assert registry.resolve(alias) == name
    assert registry.get(alias) is registry.get(name)


def test_registry_rejects_duplicates() -> None:
    local = ToolRegistry()
    local.register("noop", BaseTool, aliases=("no-op",))

    with pytest.raises(ValueError):
        local.register("noop", BaseTool)
    with pytest.raises(ValueError):
        local.register("other", BaseTool, aliases=("no-op",))
    with pytest.raises(KeyError):
        local.resolve("missing")


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PDFDESK_OUTPUT_DIR", "PDFDESK_LOG_LEVEL", "PDFDESK_COMPRESSION_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.output_dir == (Path.home() / "Downloads").resolve()
    assert settings.log_level == "WARNING"
    assert settings.compression_level == "medium"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PDFDESK_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("PDFDESK_LOG_LEVEL", "debug")
    monkeypatch.setenv("PDFDESK_COMPRESSION_LEVEL", "HIGH")

    assert Settings.from_env() == Settings(output_dir=tmp_path, log_level="DEBUG", compression_level="high")


def test_context_uses_configured_output_dir(output_dir: Path) -> None:
    assert ConversionContext().output_dir == output_dir
    assert ConversionContext(output_dir=output_dir / "nested").output_dir == output_dir / "nested"
