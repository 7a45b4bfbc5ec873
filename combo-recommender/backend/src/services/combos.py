from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence

from models import ComboCandidate, ComboTemplate, GeneratedCombo, MenuItem
from utils import is_valid_budget, round_half_up


TEMPLATE_WEIGHT: Mapping[ComboTemplate, int] = MappingProxyType(
    {
        ComboTemplate.MAIN_SIDE_DRINK: 4,
        ComboTemplate.MAIN_DRINK: 3,
        ComboTemplate.MAIN_SIDE: 3,
        ComboTemplate.MAIN: 2,
    }
)


def total_price(items: Iterable[MenuItem]) -> float:
    return sum(item.price for item in items)


def average_rating(items: Sequence[MenuItem]) -> float:
    # unrated items count as 0 and stay in the denominator
    if not items:
        return 0.0
    return sum(item.rating or 0 for item in items) / len(items)


def score_combo(items: Sequence[MenuItem], template: ComboTemplate, budget: float) -> float:
    budget_fit = min(total_price(items) / budget, 1.0)
    return TEMPLATE_WEIGHT[template] + budget_fit + average_rating(items)


def _build_candidate(items: List[MenuItem], template: ComboTemplate, budget: float) -> ComboCandidate:
    return ComboCandidate(
        items=items,
        template=template,
        total_price=total_price(items),
        score=score_combo(items, template, budget),
    )


def _by_category(menu_items: Iterable[MenuItem], category: str) -> List[MenuItem]:
    return [item for item in menu_items if item.category == category]


def generate_candidates(menu_items: Sequence[MenuItem], budget: float) -> List[ComboCandidate]:
    """Enumerate every affordable combo, one item per category, main first."""
    mains = _by_category(menu_items, "main")
    sides = _by_category(menu_items, "side")
    drinks = _by_category(menu_items, "drink")

    shapes: list[tuple[ComboTemplate, List[MenuItem]]] = []
    shapes.extend((ComboTemplate.MAIN, [main]) for main in mains)
    shapes.extend((ComboTemplate.MAIN_SIDE, [main, side]) for main in mains for side in sides)
    shapes.extend((ComboTemplate.MAIN_DRINK, [main, drink]) for main in mains for drink in drinks)
    shapes.extend(
        (ComboTemplate.MAIN_SIDE_DRINK, [main, side, drink])
        for main in mains
        for side in sides
        for drink in drinks
    )

    return [
        _build_candidate(items, template, budget)
        for template, items in shapes
        if total_price(items) <= budget
    ]


def _rank_key(candidate: ComboCandidate) -> tuple[float, float, int]:
    return (candidate.score, candidate.total_price, -len(candidate.items))


def select_best(candidates: Sequence[ComboCandidate]) -> Optional[ComboCandidate]:
    """Highest score, then highest total price, then fewest items."""
    if not candidates:
        return None
    return max(candidates, key=_rank_key)


def generate_best_combo(menu_items: Sequence[MenuItem], budget: float) -> Optional[GeneratedCombo]:
    if not is_valid_budget(budget):
        return None

    best = select_best(generate_candidates(menu_items, budget))
    if best is None:
        return None

    return GeneratedCombo(
        item_names=[item.name for item in best.items],
        total_price=round_half_up(best.total_price, 2),
        score=round_half_up(best.score, 2),
        template=best.template,
    )
