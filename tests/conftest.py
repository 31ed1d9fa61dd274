"""Root conftest — shared app, client and asset fixtures.

Invariants:
    - Every test gets a fresh app (fresh request counter) built by create_app
    - Settings never read a developer's .env file
    - Broken template fixtures live in tmp_path, never in the package
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fttx_portal.config import Settings, get_settings
from fttx_portal.main import create_app


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, log_format="text", **overrides)


@pytest.fixture
def settings_factory():
    """Build Settings with overrides, e.g. templates_dir=tmp_path."""
    return make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """FastAPI test client over the in-process ASGI transport."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def broken_templates_dir(tmp_path):
    """index.html that parses but fails at render time."""
    d = tmp_path / "templates"
    d.mkdir()
    (d / "index.html").write_text(
        "<h1>{{ title }}</h1><p>{{ missing.name }}</p>", encoding="utf-8",
    )
    return d


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
