"""Models for generated recipes."""

from pydantic import BaseModel, ConfigDict, Field


class RecipeNutrition(BaseModel):
    model_config = ConfigDict(extra="allow")

    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)


class RecipeIngredient(BaseModel):
    model_config = ConfigDict(extra="allow")

    item: str
    amount: str | None = None
    notes: str | None = None


class RecipeStep(BaseModel):
    model_config = ConfigDict(extra="allow")

    step: int = Field(ge=1)
    instruction: str
    duration: int | None = Field(default=None, ge=0)


class Substitution(BaseModel):
    model_config = ConfigDict(extra="allow")

    original: str
    substitute: str
    notes: str | None = None


class Recipe(BaseModel):
    """Structured recipe with per-serving nutrition."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    description: str | None = None
    cuisine: str | None = None
    difficulty: str | None = None
    prep_time: int | None = Field(default=None, alias="prepTime", ge=0)
    cook_time: int | None = Field(default=None, alias="cookTime", ge=0)
    total_time: int | None = Field(default=None, alias="totalTime", ge=0)
    servings: int = Field(default=1, ge=1)
    calories_per_serving: float | None = Field(
        default=None, alias="caloriesPerServing", ge=0
    )
    nutrition_per_serving: RecipeNutrition | None = Field(
        default=None, alias="nutritionPerServing"
    )
    ingredients: list[RecipeIngredient] = Field(min_length=1)
    instructions: list[RecipeStep] = Field(min_length=1)
    tips: list[str] = Field(default_factory=list)
    substitutions: list[Substitution] = Field(default_factory=list)
    storage: str | None = None
    tags: list[str] = Field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase representation sent to clients."""
        return self.model_dump(by_alias=True)
