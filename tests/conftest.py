"""Shared fixtures: every test runs against its own config and data dirs."""

import pytest


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point config and data directories at a temp dir."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()

    monkeypatch.setenv("RESCISAO_CONFIG_PATH", str(config_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(data_dir))

    return {"config_dir": config_dir, "data_dir": data_dir}
