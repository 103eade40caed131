import random

import pytest

from protodice.app.config import get_settings


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    # Keep a developer's .env or PROTODICE_* variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for var in ("SIDES", "ROLLS", "SOURCE", "SEED", "LOG_LEVEL"):
        monkeypatch.delenv(f"PROTODICE_{var}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
