from __future__ import annotations

from typing import List, Optional

from loguru import logger

from config import Configuration
from models import Catalog, Restaurant, SearchResult
from services.combos import generate_best_combo
from utils import is_valid_budget, walk_minutes


INVALID_BUDGET_MESSAGE = "Enter a valid budget greater than $0."

GREAT_SCORE = 8.0
GOOD_SCORE = 6.0


def score_tier(score: float) -> str:
    if score >= GREAT_SCORE:
        return "great"
    if score >= GOOD_SCORE:
        return "good"
    return "fair"


def _match_restaurant(
    restaurant: Restaurant, college: str, budget: float, speed_mph: float
) -> Optional[SearchResult]:
    distance = restaurant.distances.get(college)
    if distance is None:
        logger.debug("skip {}: no distance for {}", restaurant.name, college)
        return None

    combo = generate_best_combo(restaurant.menu, budget)
    if combo is None:
        logger.debug("skip {}: nothing under ${:.2f}", restaurant.name, budget)
        return None

    return SearchResult(
        restaurant=restaurant.name,
        address=restaurant.address,
        distance=distance,
        walk_minutes=walk_minutes(distance, speed_mph),
        combo=combo,
        combo_name=" + ".join(combo.item_names),
        tier=score_tier(combo.score),
    )


def search_restaurants(
    cfg: Configuration,
    catalog: Catalog,
    college: str,
    budget: float,
) -> List[SearchResult]:
    """Best combo per restaurant near ``college``, closest first.

    Raises ValueError for an invalid budget or an unknown college. Restaurants
    without a distance for the college or without an affordable combo are left out.
    """
    if not is_valid_budget(budget):
        logger.warning("rejected budget={!r}", budget)
        raise ValueError(INVALID_BUDGET_MESSAGE)
    if college not in catalog.colleges:
        logger.warning("rejected college={!r}", college)
        raise ValueError(f"Unknown residential college: {college}")

    results: list[SearchResult] = []
    for restaurant in catalog.restaurants:
        match = _match_restaurant(restaurant, college, budget, cfg.walking_speed_mph)
        if match is not None:
            results.append(match)

    results.sort(key=lambda r: (r.distance, -r.combo.score))
    results = results[: cfg.max_results]

    logger.info(
        "search college={} budget={:.2f} restaurants={} results={}",
        college,
        budget,
        len(catalog.restaurants),
        len(results),
    )
    return results
