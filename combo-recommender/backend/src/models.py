"""Data models for the YGrubs combo recommender."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class ComboTemplate(str, Enum):
    MAIN = "main"
    MAIN_SIDE = "main+side"
    MAIN_DRINK = "main+drink"
    MAIN_SIDE_DRINK = "main+side+drink"


@dataclass(frozen=True)
class MenuItem:
    name: str
    category: str  # main | side | drink
    price: float
    rating: Optional[float] = None


@dataclass
class ComboCandidate:
    items: List[MenuItem]
    template: ComboTemplate
    total_price: float
    score: float


@dataclass(frozen=True)
class GeneratedCombo:
    item_names: List[str]
    total_price: float
    score: float
    template: ComboTemplate


@dataclass
class Restaurant:
    name: str
    address: str
    distances: Dict[str, float] = field(default_factory=dict)  # college -> miles
    menu: List[MenuItem] = field(default_factory=list)


@dataclass
class Catalog:
    colleges: List[str]
    restaurants: List[Restaurant]


@dataclass
class SearchResult:
    restaurant: str
    address: str
    distance: float
    walk_minutes: int
    combo: GeneratedCombo
    combo_name: str
    tier: str
