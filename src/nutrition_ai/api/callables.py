"""Authenticated callable endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from nutrition_ai.api.models import (
    AnalyzeFoodRequest,
    ChatRequest,
    CorrectFoodAnalysisRequest,
    DailySummaryRequest,
    GenerateMealPlanRequest,
    GenerateRecipeRequest,
)
from nutrition_ai.errors import UnauthenticatedError
from nutrition_ai.services.meal_plans import MealPlanTargets
from nutrition_ai.services.recipes import RecipeRequest

if TYPE_CHECKING:
    from nutrition_ai.containers import AppContainer

router = APIRouter(tags=["callables"])

_BEARER_PREFIX = "bearer "


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def resolve_caller(request: Request) -> str:
    """Resolve the verified caller id from the bearer token."""
    authorization = request.headers.get("authorization")
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        raise UnauthenticatedError()
    token = authorization[len(_BEARER_PREFIX) :].strip()
    if not token:
        raise UnauthenticatedError()
    user_id = _container(request).identity_verifier.verify(token)
    if not user_id:
        raise UnauthenticatedError()
    return user_id


async def require_caller(request: Request) -> str:
    return resolve_caller(request)


@router.post("/analyzeFood")
async def analyze_food(
    body: AnalyzeFoodRequest,
    request: Request,
    user_id: str = Depends(require_caller),
) -> dict[str, object]:
    """Analyze a food photo or description into nutrition facts."""
    result = await _container(request).analyzer_service.analyze(
        user_id,
        image_base64=body.image_base64,
        mime_type=body.mime_type,
        user_context=body.user_context,
    )
    return {"success": True, "data": result.to_payload()}


@router.post("/generateMealPlan")
async def generate_meal_plan(
    request: Request,
    body: GenerateMealPlanRequest | None = None,
    user_id: str = Depends(require_caller),
) -> dict[str, object]:
    """Generate and store a multi-day meal plan."""
    body = body or GenerateMealPlanRequest()
    defaults = MealPlanTargets()
    targets = MealPlanTargets(
        calories=_or_default(body.target_calories, defaults.calories),
        protein=_or_default(body.target_protein, defaults.protein),
        carbs=_or_default(body.target_carbs, defaults.carbs),
        fat=_or_default(body.target_fat, defaults.fat),
        dietary_restrictions=tuple(body.dietary_restrictions),
        preferences=tuple(body.preferences),
        days=_or_default(body.days_count, defaults.days),
    )
    plan = await _container(request).meal_plan_service.generate(user_id, targets)
    return {"success": True, "data": plan}


@router.post("/generateRecipe")
async def generate_recipe(
    request: Request,
    body: GenerateRecipeRequest | None = None,
    user_id: str = Depends(require_caller),
) -> dict[str, object]:
    """Generate a structured recipe."""
    body = body or GenerateRecipeRequest()
    defaults = RecipeRequest()
    recipe = await _container(request).recipe_service.generate(
        RecipeRequest(
            recipe_name=body.recipe_name,
            target_calories=_or_default(
                body.target_calories, defaults.target_calories
            ),
            dietary_restrictions=tuple(body.dietary_restrictions),
            servings=_or_default(body.servings, defaults.servings),
            cuisine=body.cuisine,
            difficulty=body.difficulty or defaults.difficulty,
        )
    )
    return {"success": True, "data": recipe.to_payload()}


@router.post("/chat")
async def chat(
    body: ChatRequest,
    request: Request,
    user_id: str = Depends(require_caller),
) -> dict[str, object]:
    """Reply to a message from the nutrition assistant."""
    reply = await _container(request).chat_service.reply(
        user_id,
        body.message,
        history=body.conversation_history,
        session_id=body.session_id,
        profile=body.user_profile,
    )
    return {"success": True, "data": {"message": reply}}


@router.post("/correctFoodAnalysis")
async def correct_food_analysis(
    body: CorrectFoodAnalysisRequest,
    request: Request,
    user_id: str = Depends(require_caller),
) -> dict[str, object]:
    """Record a correction and patch the corrected food log."""
    outcome = _container(request).correction_service.record(
        user_id,
        body.correction,
        food_log_id=body.food_log_id,
        original_analysis=body.original_analysis,
    )
    return {
        "success": True,
        "message": "Correction saved successfully",
        "data": {
            "id": outcome.correction_id,
            "foodLogUpdated": outcome.food_log_updated,
        },
    }


@router.post("/getDailySummary")
async def get_daily_summary(
    request: Request,
    body: DailySummaryRequest | None = None,
    user_id: str = Depends(require_caller),
) -> dict[str, object]:
    """Return the caller's nutrition totals and goal progress for a day."""
    body = body or DailySummaryRequest()
    summary = _container(request).summary_service.get_summary(user_id, body.date)
    return {"success": True, "data": summary.to_payload()}


def _or_default(value, default):  # type: ignore[no-untyped-def]
    return default if value is None else value
