import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `locale_engine.core.config`) works during pytest collection
# regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import yaml

from locale_engine.i18n.loader import YAMLCatalogLoader
from locale_engine.markup import parser
from tests.factories.i18n import make_catalog


@pytest.fixture(autouse=True)
def clear_parse_cache():
    """Start and finish every test with an empty markup parse cache."""
    parser.parse_cache.clear()
    yield
    parser.parse_cache.clear()


@pytest.fixture
def catalog():
    """Multi-locale in-memory catalog (en, fr, pl, ar)."""
    return make_catalog()


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalog files.

    Returns a directory structure like:
    - en.yml
    - dashboard.en.yml
    - fr.yml
    - pl-PL.yml
    - notes.txt (ignored)
    """
    files = {
        "en.yml": {
            "greeting": "Hello, {{name}}!",
            "nav": {"home": "Home", "settings": "Settings"},
            "items": {"one": "{{count}} item", "other": "{{count}} items"},
        },
        "dashboard.en.yml": {
            "dashboard": {"title": "Dashboard"},
            "nav": {"reports": "Reports"},
        },
        "fr.yml": {
            "greeting": "Bonjour, {{name}} !",
            "nav": {"home": "Accueil"},
            "items": {"one": "{{count}} article", "other": "{{count}} articles"},
        },
        "pl-PL.yml": {
            "items": {
                "one": "{{count}} element",
                "few": "{{count}} elementy",
                "many": "{{count}} elementów",
                "other": "{{count}} elementu",
            }
        },
    }
    for filename, data in files.items():
        with open(tmp_path / filename, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    (tmp_path / "notes.txt").write_text("not a catalog", encoding="utf-8")
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLCatalogLoader for the temporary translations directory."""
    return YAMLCatalogLoader(temp_translations_dir, use_cache=False)
