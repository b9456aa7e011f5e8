from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str
    description: str
    ingredients_used: list[str] = Field(alias="ingredientsUsed")
    ingredients: list[str]
    instructions: list[str]
    prep_time: str = Field(alias="prepTime")
    cook_time: str = Field(alias="cookTime")
    servings: str


class GenerateRecipeOut(BaseModel):
    recipe: dict[str, Any]


class ErrorOut(BaseModel):
    error: str
