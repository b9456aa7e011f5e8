from __future__ import annotations

import json
import logging
import re
from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, OpenAI
from pydantic import ValidationError as SchemaValidationError

from fridge_friend.errors import ConfigurationError, NetworkError, ParseError, UpstreamError
from fridge_friend.schemas.recipe import Recipe
from fridge_friend.services.prompts import build_recipe_prompt
from fridge_friend.settings import settings

logger = logging.getLogger(__name__)

# Greedy: first "{" through the last "}", which also strips markdown fences.
JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def extract_recipe(text: str, *, strict: bool | None = None) -> dict[str, Any]:
    strict = settings.STRICT_RECIPE_SCHEMA if strict is None else strict
    match = JSON_OBJECT_RE.search(text)
    candidate = match.group(0) if match else text
    try:
        data = json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as exc:
        if settings.is_development:
            logger.error("Error parsing recipe JSON: %s", exc)
            logger.error("Recipe text preview: %s", text[:200])
        raise ParseError() from exc

    if not isinstance(data, dict):
        raise ParseError()

    if strict:
        try:
            Recipe.model_validate(data)
        except SchemaValidationError as exc:
            if settings.is_development:
                logger.error("Recipe does not match schema: %s", exc)
            raise ParseError() from exc
    return data


class RecipeGenerator:
    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or settings.GROQ_BASE_URL
        self.model = model or settings.GROQ_MODEL
        self.temperature = settings.GROQ_TEMPERATURE if temperature is None else temperature
        self.max_tokens = settings.GROQ_MAX_TOKENS if max_tokens is None else max_tokens
        self._http_client = http_client

    def _client(self) -> OpenAI:
        if not self.api_key:
            raise ConfigurationError()
        return OpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            max_retries=0,
            http_client=self._http_client,
        )

    def complete(self, prompt: str) -> str:
        client = self._client()
        try:
            resp = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIStatusError as exc:
            logger.warning("Completion API returned status %s", exc.status_code)
            if settings.is_development:
                logger.error("Completion API error: %s", exc.body)
            raise UpstreamError(status_code=exc.status_code) from exc
        except APIConnectionError as exc:
            logger.warning("Completion API unreachable: %s", exc)
            raise NetworkError() from exc

        choices = resp.choices or []
        content = choices[0].message.content if choices and choices[0].message else None
        if not content:
            raise UpstreamError("No recipe generated", status_code=500)
        return content

    def generate(self, ingredients: list[str]) -> dict[str, Any]:
        content = self.complete(build_recipe_prompt(ingredients))
        return extract_recipe(content)


def get_recipe_generator() -> RecipeGenerator:
    return RecipeGenerator(settings.GROQ_API_KEY)
