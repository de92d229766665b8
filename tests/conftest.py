import os

import pytest

from collection_util.config.manager import reset_config_manager


@pytest.fixture(autouse=True)
def clean_configuration(monkeypatch):
    """Isolate each test from COLLECTION_UTIL_* environment and cached config."""
    for name in list(os.environ):
        if name.startswith("COLLECTION_UTIL_"):
            monkeypatch.delenv(name, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture
def config_file(tmp_path):
    """Write a JSON configuration file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "collection_util.json"
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
