from __future__ import annotations

import logging
from typing import Any

import httpx

from fridge_friend.client.ingredients import IngredientInput, IngredientList
from fridge_friend.client.voice import RecognizerFactory, VoiceInput

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-recipe"
GENERIC_FAILURE = "Failed to generate recipe"
EMPTY_LIST_ERROR = "Please add at least one ingredient"


class GenerationFailed(Exception):
    pass


class RecipeSession:
    """Page state for one user: ingredients, the last recipe, loading and error.

    ``http`` is any httpx.Client pointed at the broker; a FastAPI TestClient
    works as well.
    """

    def __init__(self, http: httpx.Client, recognizer_factory: RecognizerFactory | None = None) -> None:
        self.http = http
        self.ingredients = IngredientList()
        self.recipe: dict[str, Any] | None = None
        self.loading = False
        self.error: str | None = None
        self.input = IngredientInput(
            self.ingredients,
            on_add=self.add_ingredient,
            on_remove=self.remove_ingredient,
            on_clear_all=self.clear_all,
        )
        self.voice = VoiceInput(self.add_ingredient, recognizer_factory)

    def add_ingredient(self, ingredient: str) -> None:
        self.ingredients.add(ingredient)
        self.error = None

    def remove_ingredient(self, ingredient: str) -> None:
        self.ingredients.remove(ingredient)

    def clear_all(self) -> None:
        self.ingredients.clear()
        self.recipe = None
        self.error = None

    def generate(self) -> dict[str, Any] | None:
        if self.loading:
            return None
        if not self.ingredients:
            self.error = EMPTY_LIST_ERROR
            return None

        self.loading = True
        self.error = None
        self.recipe = None
        try:
            resp = self.http.post(GENERATE_PATH, json={"ingredients": self.ingredients.as_list()})
            try:
                data = resp.json()
            except ValueError as exc:
                raise GenerationFailed(GENERIC_FAILURE) from exc
            if not isinstance(data, dict):
                data = {}
            if resp.is_error:
                raise GenerationFailed(data.get("error") or GENERIC_FAILURE)
            self.recipe = data.get("recipe")
        except (httpx.HTTPError, GenerationFailed) as exc:
            logger.warning("Recipe generation failed: %s", exc)
            self.error = str(exc) or GENERIC_FAILURE
        finally:
            self.loading = False
        return self.recipe
