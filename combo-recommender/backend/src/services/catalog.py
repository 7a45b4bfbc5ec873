from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from config import Configuration
from models import Catalog, MenuItem, Restaurant


DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "restaurants.json"

_cache: Dict[str, Catalog] = {}


class CatalogError(ValueError):
    pass


def _parse_item(raw: Dict[str, Any], restaurant: str) -> MenuItem:
    if not isinstance(raw, dict):
        raise CatalogError(f"bad menu item in {restaurant!r}: {raw!r}")
    try:
        rating = raw.get("rating")
        return MenuItem(
            name=str(raw["name"]),
            category=str(raw["category"]).strip().lower(),
            price=float(raw["price"]),
            rating=float(rating) if rating is not None else None,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"bad menu item in {restaurant!r}: {raw!r}") from exc


def _parse_restaurant(raw: Dict[str, Any]) -> Restaurant:
    if not isinstance(raw, dict) or "name" not in raw:
        raise CatalogError(f"restaurant entry without a name: {raw!r}")
    name = str(raw["name"])
    menu = raw.get("menu", [])
    if not isinstance(menu, list):
        raise CatalogError(f"menu of {name!r} must be a list")
    distances = raw.get("distances", {})
    if not isinstance(distances, dict):
        raise CatalogError(f"distances of {name!r} must be a mapping")
    try:
        miles = {str(k): float(v) for k, v in distances.items()}
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"distances of {name!r} must be numbers: {distances!r}") from exc
    return Restaurant(
        name=name,
        address=str(raw.get("address") or ""),
        distances=miles,
        menu=[_parse_item(item, name) for item in menu],
    )


def parse_catalog(data: Dict[str, Any]) -> Catalog:
    if not isinstance(data, dict):
        raise CatalogError("catalog root must be an object")
    colleges = data.get("colleges")
    restaurants = data.get("restaurants")
    if not isinstance(colleges, list) or not isinstance(restaurants, list):
        raise CatalogError("catalog needs 'colleges' and 'restaurants' lists")
    return Catalog(
        colleges=[str(c) for c in colleges],
        restaurants=[_parse_restaurant(r) for r in restaurants],
    )


def load_catalog(path: Path) -> Catalog:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"unable to read catalog {path}: {exc}") from exc
    catalog = parse_catalog(data)
    logger.debug("catalog loaded path={} colleges={} restaurants={}", path, len(catalog.colleges), len(catalog.restaurants))
    return catalog


def get_catalog(cfg: Optional[Configuration] = None) -> Catalog:
    """Return the catalog for ``cfg``, loading it once per path."""
    path = Path(cfg.catalog_path) if cfg and cfg.catalog_path else DEFAULT_CATALOG_PATH
    key = str(path)
    if key not in _cache:
        _cache[key] = load_catalog(path)
    return _cache[key]


def clear_catalog_cache() -> None:
    _cache.clear()
