from __future__ import annotations

import re
from typing import Any

from fridge_friend.errors import ValidationError
from fridge_friend.settings import settings


# Letters, digits, spaces, hyphens, apostrophes and periods survive; anything
# else could be used to steer the prompt.
DISALLOWED_CHARS_RE = re.compile(r"[^a-z0-9 \-'.]", re.IGNORECASE | re.ASCII)


def sanitize_ingredient(ingredient: str, max_length: int | None = None) -> str:
    max_length = settings.MAX_INGREDIENT_LENGTH if max_length is None else max_length
    cleaned = DISALLOWED_CHARS_RE.sub("", ingredient.strip().lower())
    return cleaned[:max_length]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, dict)):
        return False
    return not value


def validate_ingredients(body: Any) -> list[str]:
    """Check a decoded request body and return its sanitized ingredient list.

    Checks run in order and the first failure raises ValidationError:
    missing field, non-array, empty array, too many items, and finally no
    usable string left after sanitizing.
    """
    ingredients = body.get("ingredients") if isinstance(body, dict) else None

    if _is_missing(ingredients):
        raise ValidationError("No ingredients provided")

    if not isinstance(ingredients, list):
        raise ValidationError("Ingredients must be an array")

    if not ingredients:
        raise ValidationError("No ingredients provided")

    if len(ingredients) > settings.MAX_INGREDIENTS:
        raise ValidationError(f"Too many ingredients. Maximum is {settings.MAX_INGREDIENTS}")

    sanitized = [sanitize_ingredient(item) for item in ingredients if isinstance(item, str)]
    sanitized = [item for item in sanitized if item]

    if not sanitized:
        raise ValidationError("No valid ingredients provided")

    return sanitized
