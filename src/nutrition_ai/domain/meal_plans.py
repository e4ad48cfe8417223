"""Models for generated meal plans."""

from pydantic import BaseModel, ConfigDict, Field


class PlannedMeal(BaseModel):
    """Single meal inside a day plan."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    meal_type: str = Field(alias="mealType")
    name: str
    description: str | None = None
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    prep_time: int | None = Field(default=None, alias="prepTime", ge=0)
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)


class DayPlan(BaseModel):
    """Meals and nutrient totals for one plan day."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    day: int = Field(ge=1)
    day_name: str | None = Field(default=None, alias="dayName")
    meals: list[PlannedMeal] = Field(default_factory=list)
    total_calories: float = Field(default=0.0, alias="totalCalories", ge=0)
    total_protein: float = Field(default=0.0, alias="totalProtein", ge=0)
    total_carbs: float = Field(default=0.0, alias="totalCarbs", ge=0)
    total_fat: float = Field(default=0.0, alias="totalFat", ge=0)


class MealPlan(BaseModel):
    """Multi-day plan with a categorized shopping list."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    plan_name: str | None = Field(default=None, alias="planName")
    description: str | None = None
    days: list[DayPlan] = Field(min_length=1)
    shopping_list: dict[str, list[str]] = Field(
        default_factory=dict, alias="shoppingList"
    )
    tips: list[str] = Field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase representation sent to clients."""
        return self.model_dump(by_alias=True)
