from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .corpus.loader import load_sample_corpus
from .search.engine import SearchEngine
from .search.errors import CorpusUnavailableError, QueryValidationError
from .search.models import (
    PopularRecipesResponse,
    RecipeResponse,
    SearchRequest,
    SearchResult,
    SuggestionsResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Recipe Finder API", version="1.0.0")


def get_engine() -> SearchEngine:
    return SearchEngine(load_sample_corpus())


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "statusCode": status_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# ── Error mapping ────────────────────────────────────────────────────────


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    return _error(400, "ValidationError", str(first.get("msg", "Invalid request format")))


@app.exception_handler(QueryValidationError)
async def query_validation_error(request: Request, exc: QueryValidationError) -> JSONResponse:
    return _error(400, "ValidationError", str(exc))


@app.exception_handler(CorpusUnavailableError)
async def corpus_unavailable(request: Request, exc: CorpusUnavailableError) -> JSONResponse:
    logger.error("Corpus store failed during %s", request.url.path, exc_info=exc)
    return _error(500, "InternalServerError", "Recipe corpus is unavailable")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/recipes/search", response_model=SearchResult)
async def search_recipes(
    body: SearchRequest,
    engine: SearchEngine = Depends(get_engine),
):
    try:
        return await asyncio.wait_for(
            engine.search_recipes(body), timeout=engine.config.search_timeout,
        )
    except asyncio.TimeoutError:
        logger.warning("Search timed out after %.1fs", engine.config.search_timeout)
        return _error(504, "TimeoutError", "Recipe search timed out")


@app.get("/api/v1/recipes/popular", response_model=PopularRecipesResponse)
async def popular_recipes(
    limit: int | None = None,
    engine: SearchEngine = Depends(get_engine),
) -> PopularRecipesResponse:
    return PopularRecipesResponse(recipes=await engine.get_popular_recipes(limit))


@app.get("/api/v1/recipes/{recipe_id}", response_model=RecipeResponse)
async def recipe_detail(
    recipe_id: str,
    engine: SearchEngine = Depends(get_engine),
):
    recipe = await engine.get_recipe_by_id(recipe_id)
    if recipe is None:
        return _error(404, "NotFoundError", f"Recipe {recipe_id} not found")
    return RecipeResponse(recipe=recipe)


@app.get("/api/v1/ingredients/suggestions", response_model=SuggestionsResponse)
async def ingredient_suggestions(
    query: str | None = None,
    engine: SearchEngine = Depends(get_engine),
) -> SuggestionsResponse:
    if not query or not query.strip():
        raise QueryValidationError("Query parameter is required and must be a non-empty string")
    if query.strip().isdigit():
        raise QueryValidationError("Query parameter must contain text, not just numbers")
    return SuggestionsResponse(suggestions=await engine.get_ingredient_suggestions(query))
