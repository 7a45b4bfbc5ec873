from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from config import Configuration
from models import GeneratedCombo, MenuItem, SearchResult
from services.catalog import CatalogError, get_catalog
from services.combos import generate_best_combo
from services.report import build_report
from services.search import search_restaurants


app = FastAPI(title="YGrubs Combo Recommender")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MenuItemPayload(BaseModel):
    name: str
    category: str
    price: float = Field(..., ge=0)
    rating: Optional[float] = None


class ComboPayload(BaseModel):
    item_names: List[str]
    total_price: float
    score: float
    template: str


class ComboRequest(BaseModel):
    menu: List[MenuItemPayload] = Field(default_factory=list)
    budget: float = Field(..., description="Budget in dollars; must be > 0")


class ComboResponse(BaseModel):
    combo: Optional[ComboPayload] = None


class SearchRequest(BaseModel):
    college: str = Field(..., description="Residential college name")
    budget: float = Field(..., description="Budget in dollars; must be > 0")


class SearchResultPayload(BaseModel):
    restaurant: str
    address: str
    distance: float
    walk_minutes: int
    combo_name: str
    combo: ComboPayload
    tier: str


class SearchResponse(BaseModel):
    college: str
    budget: float
    results: List[SearchResultPayload]
    report_markdown: Optional[str] = None


class RestaurantSummary(BaseModel):
    name: str
    address: str
    distances: Dict[str, float]


def _combo_payload(combo: GeneratedCombo) -> ComboPayload:
    return ComboPayload(
        item_names=list(combo.item_names),
        total_price=combo.total_price,
        score=combo.score,
        template=combo.template.value,
    )


def _result_payload(r: SearchResult) -> SearchResultPayload:
    return SearchResultPayload(
        restaurant=r.restaurant,
        address=r.address,
        distance=r.distance,
        walk_minutes=r.walk_minutes,
        combo_name=r.combo_name,
        combo=_combo_payload(r.combo),
        tier=r.tier,
    )


def _config() -> Configuration:
    try:
        return Configuration.from_env()
    except ValidationError as exc:
        logger.exception("invalid configuration: {}", exc)
        raise HTTPException(status_code=500, detail="invalid configuration")


@app.get("/healthz")
def healthz() -> dict:
    cfg = _config()
    logger.info("cfg: {}", cfg.log_summary())
    return {"status": "ok"}


@app.get("/colleges")
def colleges() -> dict:
    try:
        catalog = get_catalog(_config())
    except CatalogError as exc:
        logger.exception("catalog unavailable: {}", exc)
        raise HTTPException(status_code=500, detail="catalog unavailable")
    return {"colleges": catalog.colleges}


@app.get("/restaurants", response_model=List[RestaurantSummary])
def restaurants() -> List[RestaurantSummary]:
    try:
        catalog = get_catalog(_config())
    except CatalogError as exc:
        logger.exception("catalog unavailable: {}", exc)
        raise HTTPException(status_code=500, detail="catalog unavailable")
    return [
        RestaurantSummary(name=r.name, address=r.address, distances=dict(r.distances))
        for r in catalog.restaurants
    ]


@app.post("/combo", response_model=ComboResponse)
def combo(req: ComboRequest) -> ComboResponse:
    menu = [MenuItem(name=i.name, category=i.category, price=i.price, rating=i.rating) for i in req.menu]
    best = generate_best_combo(menu, req.budget)
    if best is None:
        logger.info("no combo items={} budget={}", len(menu), req.budget)
        return ComboResponse(combo=None)
    return ComboResponse(combo=_combo_payload(best))


@app.post("/search", response_model=SearchResponse)
def search(req: SearchRequest) -> SearchResponse:
    cfg = _config()
    try:
        catalog = get_catalog(cfg)
        results = search_restaurants(cfg, catalog, req.college, req.budget)
    except CatalogError as exc:
        logger.exception("catalog unavailable: {}", exc)
        raise HTTPException(status_code=500, detail="catalog unavailable")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        logger.exception("search failed: {}", exc)
        raise HTTPException(status_code=500, detail="internal error")

    md = build_report(req.college, req.budget, results) if cfg.include_report else None
    return SearchResponse(
        college=req.college,
        budget=req.budget,
        results=[_result_payload(r) for r in results],
        report_markdown=md,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8010, reload=True)
