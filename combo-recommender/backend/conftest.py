import json
import sys
from pathlib import Path

import pytest


# Ensure backend/src is on sys.path for tests so that imports like `services.*` and `models` work.
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from services.catalog import clear_catalog_cache  # noqa: E402

ENV_VARS = ("CATALOG_PATH", "DEFAULT_COLLEGE", "WALKING_SPEED_MPH", "MAX_RESULTS", "INCLUDE_REPORT", "LOG_LEVEL")

SMALL_CATALOG = {
    "colleges": ["Alpha", "Beta", "Gamma"],
    "restaurants": [
        {
            "name": "Near Diner",
            "address": "1 Main St",
            "distances": {"Alpha": 0.2, "Beta": 0.9},
            "menu": [
                {"name": "Burger", "category": "main", "price": 5, "rating": 4},
                {"name": "Fries", "category": "side", "price": 2, "rating": 3},
                {"name": "Soda", "category": "drink", "price": 1, "rating": 5},
            ],
        },
        {
            "name": "Far Grill",
            "address": "9 Elm St",
            "distances": {"Alpha": 0.8, "Beta": 0.1},
            "menu": [
                {"name": "Steak", "category": "main", "price": 18, "rating": 4.9},
                {"name": "Hot Dog", "category": "main", "price": 3, "rating": 3.2},
                {"name": "Lemonade", "category": "drink", "price": 2, "rating": 4.1},
            ],
        },
        {
            "name": "Drinks Only",
            "address": "5 Oak St",
            "distances": {"Alpha": 0.1, "Beta": 0.1},
            "menu": [{"name": "Smoothie", "category": "drink", "price": 4, "rating": 5}],
        },
    ],
}


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_catalog_cache()
    yield
    clear_catalog_cache()


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "restaurants.json"
    path.write_text(json.dumps(SMALL_CATALOG), encoding="utf-8")
    return path
