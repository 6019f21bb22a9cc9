import pytest

from liquidacion.config import get_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test reads configuration from a clean environment."""
    for var in ("LIQ_FECHA_MINIMA", "LIQ_SALARIO_MINIMO", "LIQ_CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
