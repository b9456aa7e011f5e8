from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from fridge_friend.api.deps import client_identifier, get_rate_limiter
from fridge_friend.errors import RateLimitError
from fridge_friend.rate_limit import InMemoryRateLimiter
from fridge_friend.schemas.recipe import ErrorOut, GenerateRecipeOut
from fridge_friend.services.recipe_generator import RecipeGenerator, get_recipe_generator
from fridge_friend.services.sanitize import validate_ingredients

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])


async def _read_json(request: Request):
    raw = await request.body()
    try:
        return json.loads(raw)
    except ValueError:
        return None


@router.post(
    "/generate-recipe",
    response_model=GenerateRecipeOut,
    responses={400: {"model": ErrorOut}, 429: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def generate_recipe(
    request: Request,
    limiter: InMemoryRateLimiter = Depends(get_rate_limiter),
    generator: RecipeGenerator = Depends(get_recipe_generator),
):
    identifier = client_identifier(request)
    decision = limiter.allow(identifier)
    if not decision.allowed:
        logger.warning("Rate limit exceeded (retry_after=%s)", decision.retry_after)
        raise RateLimitError(decision.retry_after)

    ingredients = validate_ingredients(await _read_json(request))
    recipe = await run_in_threadpool(generator.generate, ingredients)
    return {"recipe": recipe}
