import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fridge_friend.api.routers.recipes import router as recipes_router
from fridge_friend.errors import RateLimitError, RecipeServiceError
from fridge_friend.rate_limit import InMemoryRateLimiter

logger = logging.getLogger(__name__)


def create_app(rate_limiter: InMemoryRateLimiter | None = None) -> FastAPI:
    app = FastAPI(title="Fridge Friend API")
    app.state.rate_limiter = rate_limiter if rate_limiter is not None else InMemoryRateLimiter()

    app.include_router(recipes_router)

    @app.exception_handler(RecipeServiceError)
    async def recipe_error_handler(request: Request, exc: RecipeServiceError):
        headers = None
        if isinstance(exc, RateLimitError):
            headers = {"Retry-After": str(exc.retry_after)}
        return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Error generating recipe: %s", exc)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app
