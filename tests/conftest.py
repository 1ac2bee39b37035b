import pytest

from launcher_settings import config
from launcher_settings.store.backends import locmem


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """
    Keep every test away from the real data dir and shared config.
    """
    config.clear()
    locmem.reset()
    monkeypatch.setenv('LAUNCHER_SETTINGS_DATA_DIR', str(tmp_path / 'data'))
    monkeypatch.delenv('LAUNCHER_SETTINGS_STORE_BACKEND', raising=False)
    monkeypatch.delenv('LAUNCHER_SETTINGS_S3_BUCKET', raising=False)
    yield
    config.clear()
    locmem.reset()
