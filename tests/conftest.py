import os
from pathlib import Path

import pytest
import yaml
from textopts.core.repositories.option_store import OptionStore


@pytest.fixture
def store() -> OptionStore:
    return OptionStore()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove TEXTOPTS_* variables so configuration tests see defaults."""
    for name in list(os.environ):
        if name.startswith("TEXTOPTS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    """Create a minimal valid YAML config file and return its path."""
    cfg = {
        "logging": {"level": "DEBUG"},
        "output": {"format": "json", "expand_collections": True},
    }
    p = tmp_path / "textopts.yaml"
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(cfg, f, sort_keys=False)
    return p
