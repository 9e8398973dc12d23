from __future__ import annotations

import os
import tempfile

import pytest

# keep the app's ConfigManager away from the real home directory
os.environ.setdefault("SIFTVIEW_CONFIG_DIR", tempfile.mkdtemp(prefix="siftview-test-"))


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from main import app

    return TestClient(app)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point ConfigManager at an empty directory and reset the singleton"""
    from services.config_manager import ConfigManager

    monkeypatch.setenv("SIFTVIEW_CONFIG_DIR", str(tmp_path))
    ConfigManager.reset_instance()
    yield tmp_path
    ConfigManager.reset_instance()
