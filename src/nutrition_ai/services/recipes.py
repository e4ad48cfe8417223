"""Recipe generation service."""

from dataclasses import dataclass

from nutrition_ai.domain.recipes import Recipe
from nutrition_ai.errors import InvalidArgumentError, translate_errors
from nutrition_ai.services.completions import RECIPE_SAMPLING, CompletionClient
from nutrition_ai.services.json_extraction import parse_reply
from nutrition_ai.services.meal_plans import join_or_none

SYSTEM_PROMPT = """You are an expert chef and nutritionist. Create detailed \
recipes with nutritional information.

Return as valid JSON:
{
  "name": "Recipe Name",
  "description": "Brief description",
  "cuisine": "Italian",
  "difficulty": "easy|medium|hard",
  "prepTime": 15,
  "cookTime": 30,
  "totalTime": 45,
  "servings": 4,
  "caloriesPerServing": 350,
  "nutritionPerServing": {
    "calories": 350,
    "protein": 25,
    "carbs": 30,
    "fat": 15,
    "fiber": 5,
    "sugar": 8,
    "sodium": 500
  },
  "ingredients": [
    {"item": "ingredient", "amount": "1 cup", "notes": "optional notes"}
  ],
  "instructions": [
    {"step": 1, "instruction": "Step description", "duration": 5}
  ],
  "tips": ["Helpful tip"],
  "substitutions": [
    {"original": "ingredient", "substitute": "alternative", "notes": "why"}
  ],
  "storage": "Storage instructions",
  "tags": ["healthy", "quick", "high-protein"]
}"""


@dataclass(frozen=True)
class RecipeRequest:
    recipe_name: str | None = None
    target_calories: float = 400
    dietary_restrictions: tuple[str, ...] = ()
    servings: int = 4
    cuisine: str | None = None
    difficulty: str = "medium"


@dataclass
class RecipeService:
    """Generates a single structured recipe; nothing is stored."""

    client: CompletionClient
    model: str

    async def generate(self, request: RecipeRequest) -> Recipe:
        if request.servings < 1:
            raise InvalidArgumentError("servings must be at least 1")
        if request.target_calories < 0:
            raise InvalidArgumentError("targetCalories must not be negative")
        with translate_errors("Failed to generate recipe"):
            content = await self.client.complete(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": _user_prompt(request)},
                ],
                max_tokens=RECIPE_SAMPLING.max_tokens,
                temperature=RECIPE_SAMPLING.temperature,
            )
            return parse_reply(content, Recipe)


def _user_prompt(request: RecipeRequest) -> str:
    return "\n".join(
        [
            f"Create a recipe for: {request.recipe_name or 'a healthy meal'}",
            f"- Target calories per serving: {request.target_calories:g}",
            f"- Servings: {request.servings}",
            f"- Cuisine: {request.cuisine or 'Any'}",
            f"- Difficulty: {request.difficulty or 'medium'}",
            f"- Dietary restrictions: {join_or_none(request.dietary_restrictions)}",
        ]
    )
