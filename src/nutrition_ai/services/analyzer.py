"""Food analysis service using LLM completions."""

from dataclasses import dataclass

from nutrition_ai.domain.analysis import AnalysisResult
from nutrition_ai.errors import InvalidArgumentError, translate_errors
from nutrition_ai.services.completions import ANALYSIS_SAMPLING, CompletionClient
from nutrition_ai.services.json_extraction import parse_reply
from nutrition_ai.services.usage import UsageService

DEFAULT_MIME_TYPE = "image/jpeg"

_RESPONSE_SHAPE = """Return your response as a valid JSON object with this exact \
structure:
{
  "foodName": "Name of the food/dish",
  "description": "Brief description of the food",
  "servingSize": "Estimated serving size (e.g., '1 cup', '150g')",
  "servingSizeGrams": 150,
  "calories": 250,
  "protein": 12.5,
  "carbohydrates": 30.0,
  "fat": 8.5,
  "fiber": 3.0,
  "sugar": 5.0,
  "sodium": 400,
  "saturatedFat": 2.5,
  "transFat": 0,
  "cholesterol": 25,
  "potassium": 300,
  "vitaminA": 10,
  "vitaminC": 15,
  "calcium": 8,
  "iron": 12,
  "glycemicIndex": 55,
  "glycemicLoad": 10,
  "ingredients": ["ingredient1", "ingredient2"],
  "healthScore": 7.5,
  "healthNotes": "Brief health assessment",
  "warnings": ["Any dietary warnings or allergens"],
  "confidence": 0.85
}

All numeric values should be numbers (not strings). Percentages for \
vitamins/minerals are daily value percentages.
healthScore is a number from 0-10.
glycemicIndex should be a number from 0-100 indicating how quickly the food \
raises blood sugar.
glycemicLoad is glycemicIndex * carbohydrates / 100 (low: 0-10, medium: 11-19, \
high: 20+).
confidence is a number from 0-1."""

TEXT_SYSTEM_PROMPT = (
    "You are an expert nutritionist and food analyst. Analyze the food "
    "description and provide detailed nutritional information.\n\n"
    f"{_RESPONSE_SHAPE}\n"
    "Be as accurate as possible with nutritional estimates based on typical "
    "serving sizes."
)

IMAGE_SYSTEM_PROMPT = (
    "You are an expert nutritionist and food analyst. Analyze the food in the "
    "image and provide detailed nutritional information.\n\n"
    f"{_RESPONSE_SHAPE}\n"
    "If you cannot identify the food, still return the JSON structure with "
    "reasonable estimates and lower confidence."
)


@dataclass
class FoodAnalyzerService:
    """Analyzes a food description or photo into nutrition facts."""

    client: CompletionClient
    model: str
    usage_service: UsageService

    async def analyze(
        self,
        user_id: str,
        *,
        image_base64: str | None = None,
        mime_type: str | None = None,
        user_context: str | None = None,
    ) -> AnalysisResult:
        """Return validated nutrition facts and count the scan."""
        context = (user_context or "").strip()
        if not image_base64 and not context:
            raise InvalidArgumentError(
                "Either image data or food description is required"
            )

        with translate_errors("Failed to analyze food"):
            if image_base64:
                messages = _image_messages(
                    image_base64, mime_type or DEFAULT_MIME_TYPE, context
                )
            else:
                messages = _text_messages(context)
            content = await self.client.complete(
                model=self.model,
                messages=messages,
                max_tokens=ANALYSIS_SAMPLING.max_tokens,
                temperature=ANALYSIS_SAMPLING.temperature,
            )
            result = parse_reply(content, AnalysisResult)

        self.usage_service.record_scan(user_id)
        return result


def _text_messages(context: str) -> list[dict[str, object]]:
    return [
        {"role": "system", "content": TEXT_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": (
                f"Analyze this food and provide nutritional information: {context}"
            ),
        },
    ]


def _image_messages(
    image_base64: str, mime_type: str, context: str
) -> list[dict[str, object]]:
    """Build an image prompt; low detail keeps latency down."""
    text = (
        f"Analyze this food. Additional context: {context}"
        if context
        else "Analyze this food and provide nutritional information."
    )
    return [
        {"role": "system", "content": IMAGE_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": [
                {
                    "type": "image_url",
                    "image_url": {
                        "url": f"data:{mime_type};base64,{image_base64}",
                        "detail": "low",
                    },
                },
                {"type": "text", "text": text},
            ],
        },
    ]

