import pytest

from composite_units.config import reset_settings

_ENV_VARS = (
    "COMPOSITE_UNITS_CONFIG_FILE",
    "COMPOSITE_UNITS_LOG_PATH",
    "COMPOSITE_UNITS_LOG_LEVEL",
    "COMPOSITE_UNITS_DEFAULT_KIND",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
