import pytest

from app import create_app
from Utils.catalog import populate_catalog
from Utils.config import Settings


@pytest.fixture
def settings():
    return Settings(version="1.0", animal="unknown", seed=1234,
                    file_logging=False, ratelimit_enabled=False)


@pytest.fixture
def catalog(settings):
    return populate_catalog(settings.item_count, seed=settings.seed)


@pytest.fixture
def app(settings, catalog):
    app = create_app(settings, catalog)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_client(catalog):
    """Build a client for custom settings (animal, version, ...)."""
    def _make(**overrides):
        base = dict(seed=1234, file_logging=False, ratelimit_enabled=False)
        base.update(overrides)
        return create_app(Settings(**base), catalog).test_client()
    return _make
