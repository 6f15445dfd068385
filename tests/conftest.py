# tests/conftest.py
import json

import pytest
from unittest.mock import MagicMock, AsyncMock

from dishsearch.catalog.loader import CatalogLoader
from dishsearch.models import Record

NUTRITION = {"calories": 300.0, "fat": 10.0, "protein": 12.0, "sugar": 5.0, "carbs": 40.0}


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path

# --- Données ---

@pytest.fixture
def records():
    """Trois records du scénario « stir fry »."""
    return [
        Record(label="pizza", payload={"calories": 266.0}),
        Record(label="stir-fry noodles", payload={"calories": 390.0}),
        Record(label="stir fry", payload={"calories": 320.0}),
    ]

@pytest.fixture
def dishes_file(tmp_path):
    """Petit catalogue valide, dans un ordre connu."""
    return write_json(tmp_path / "dishes.json", {
        "pizza": dict(NUTRITION, calories=266.0),
        "stir fry": dict(NUTRITION, calories=320.0),
        "stir-fry noodles": dict(NUTRITION, calories=390.0),
        "pancakes": dict(NUTRITION, calories=350.0),
    })

@pytest.fixture
def loader(dishes_file):
    return CatalogLoader(dishes_path=dishes_file)

# --- Mocks ---

@pytest.fixture
def mock_cache_manager():
    """Fixture pour un mock du gestionnaire de cache Redis."""
    cache = MagicMock()
    cache.get = AsyncMock(return_value=None)  # Par défaut, le cache est toujours vide (miss)
    cache.set = AsyncMock()
    cache.ping = AsyncMock(return_value=True)
    return cache

@pytest.fixture
def search_service_mock(loader, mock_cache_manager):
    """
    DishSearchService réel sur le petit catalogue, avec un cache Redis mocké.
    """
    from dishsearch.search.search_service import DishSearchService

    return DishSearchService(loader=loader, cache=mock_cache_manager, cache_enabled=True)
