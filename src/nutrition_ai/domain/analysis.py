"""Models for model-generated food analysis results."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

CORRECTABLE_FIELDS = frozenset(
    {
        "foodName",
        "description",
        "servingSize",
        "servingSizeGrams",
        "calories",
        "protein",
        "carbohydrates",
        "fat",
        "fiber",
        "sugar",
        "sodium",
        "saturatedFat",
        "transFat",
        "cholesterol",
        "potassium",
        "vitaminA",
        "vitaminC",
        "calcium",
        "iron",
        "glycemicIndex",
        "glycemicLoad",
        "ingredients",
        "healthScore",
        "healthNotes",
        "warnings",
    }
)


class AnalysisResult(BaseModel):
    """Nutrition facts for a single food item or meal."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    food_name: str = Field(alias="foodName", min_length=1)
    description: str | None = None
    serving_size: str | None = Field(default=None, alias="servingSize")
    serving_size_grams: float | None = Field(
        default=None, alias="servingSizeGrams", ge=0
    )
    calories: float = Field(ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbohydrates: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    fiber: float = Field(default=0.0, ge=0)
    sugar: float = Field(default=0.0, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    saturated_fat: float | None = Field(default=None, alias="saturatedFat", ge=0)
    trans_fat: float | None = Field(default=None, alias="transFat", ge=0)
    cholesterol: float | None = Field(default=None, ge=0)
    potassium: float | None = Field(default=None, ge=0)
    vitamin_a: float | None = Field(default=None, alias="vitaminA", ge=0)
    vitamin_c: float | None = Field(default=None, alias="vitaminC", ge=0)
    calcium: float | None = Field(default=None, ge=0)
    iron: float | None = Field(default=None, ge=0)
    glycemic_index: float | None = Field(
        default=None, alias="glycemicIndex", ge=0, le=100
    )
    glycemic_load: float | None = Field(default=None, alias="glycemicLoad", ge=0)
    ingredients: list[str] = Field(default_factory=list)
    health_score: float = Field(alias="healthScore", ge=0, le=10)
    health_notes: str | None = Field(default=None, alias="healthNotes")
    warnings: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.5, ge=0, le=1)

    @model_validator(mode="after")
    def _derive_glycemic_load(self) -> "AnalysisResult":
        if self.glycemic_load is None and self.glycemic_index is not None:
            self.glycemic_load = round(
                self.glycemic_index * self.carbohydrates / 100, 1
            )
        return self

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase representation sent to clients."""
        return self.model_dump(by_alias=True)
