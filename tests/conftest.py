import pytest

from woo_category_widget.config.schema import CatalogData
from woo_category_widget.host import InMemoryCatalog, LocalHost
from woo_category_widget.types import RenderContext

CATALOG_PLACEHOLDER = "https://site/wp-content/uploads/woocommerce-placeholder.png"
HOST_PLACEHOLDER = "https://site/wp-content/plugins/elementor/assets/images/placeholder.png"


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that do not perform real I/O")
    config.addinivalue_line("markers", "integration: Integration tests with mocked I/O")


@pytest.fixture(autouse=True)
def isolated_config_home(monkeypatch, tmp_path):
    """Keep config reads and writes inside a temporary directory."""
    from woo_category_widget.config import loader

    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("WOO_CATEGORY_WIDGET_DEBUG", raising=False)
    monkeypatch.setattr(loader, "_cached_config", None)
    monkeypatch.setattr(loader, "_cached_mtime", 0.0)
    return tmp_path / "config"


@pytest.fixture
def mock_stdin(monkeypatch):
    """Factory fixture to mock stdin with custom content."""
    import io
    import sys

    def _mock_stdin(content: str):
        monkeypatch.setattr(sys, "stdin", io.StringIO(content))

    return _mock_stdin


@pytest.fixture
def sample_catalog_payload():
    """Catalog snapshot as it would appear in a YAML catalog file."""
    return {
        "categories": [
            {
                "term_id": 11,
                "slug": "shoes",
                "name": "Shoes",
                "count": 42,
                "link": "https://site/cat/shoes",
            },
            {
                "term_id": 12,
                "slug": "hats",
                "name": "Hats",
                "count": 7,
                "link": "https://site/cat/hats",
                "meta": {"thumbnail_id": 301},
            },
            {
                "term_id": 13,
                "slug": "empty",
                "name": "Empty",
                "count": 0,
                "link": "https://site/cat/empty",
            },
        ],
        "attachments": {301: "https://site/uploads/hats.jpg"},
    }


@pytest.fixture
def catalog(sample_catalog_payload):
    """In-memory catalog with three categories."""
    return InMemoryCatalog(
        CatalogData(**sample_catalog_payload), placeholder_src=CATALOG_PLACEHOLDER
    )


@pytest.fixture
def host():
    """Loaded host runtime."""
    return LocalHost(placeholder_src=HOST_PLACEHOLDER)


@pytest.fixture
def render_context(catalog, host):
    """Render context wired to the sample catalog."""
    return RenderContext(catalog=catalog, host=host, element_id="abc123")
