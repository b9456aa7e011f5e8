from __future__ import annotations


PANTRY_STAPLES = ("salt", "black pepper", "water", "cooking oil")

RECIPE_JSON_FORMAT = """{
  "title": "Creative Recipe Name",
  "description": "Brief mouth-watering description",
  "ingredientsUsed": ["list", "of", "my", "ingredients", "you", "used"],
  "ingredients": ["full ingredient list with measurements"],
  "instructions": ["step 1", "step 2", "etc"],
  "prepTime": "X minutes",
  "cookTime": "X minutes",
  "servings": "X servings"
}"""


def build_recipe_prompt(ingredients: list[str]) -> str:
    staples = ", ".join(PANTRY_STAPLES[:-1]) + f", and {PANTRY_STAPLES[-1]}"
    return f"""You are a creative and talented chef. Create an INCREDIBLY DELICIOUS recipe using ONLY the ingredients I have.

MY INGREDIENTS: {", ".join(ingredients)}

CRITICAL RULES:
- You MUST use AS MANY of my ingredients AS POSSIBLE
- You can ONLY use ingredients from my list above
- The ONLY exceptions are: {staples} (these are assumed to be in every kitchen)
- DO NOT add ANY other ingredients, even common ones like garlic, onion, herbs, spices, etc., unless I explicitly listed them
- Make the recipe AS TASTY AS POSSIBLE using only what I have
- Be creative with cooking techniques (grilling, sauteing, baking, etc.) to maximize flavor
- Include proper seasoning with salt and pepper to enhance taste

Recipe Requirements:
- Include prep time, cook time, and servings
- Provide clear, detailed step-by-step instructions
- Make it practical and achievable

Return the recipe in the following JSON format:
{RECIPE_JSON_FORMAT}

Return ONLY the JSON, no additional text."""
