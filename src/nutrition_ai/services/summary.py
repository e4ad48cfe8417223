"""Daily nutrition summary for a user's food logs."""

import math
from dataclasses import asdict, dataclass
from datetime import date, datetime, time, tzinfo

from nutrition_ai.domain.summary import DailySummary, Goals, NutrientTotals
from nutrition_ai.errors import InvalidArgumentError, translate_errors
from nutrition_ai.services.food_logs import FoodLogRepository
from nutrition_ai.services.profiles import ProfileRepository

DEFAULT_GOALS = Goals(calories=2000, protein=100, carbs=250, fat=70)

# Summary field -> stored food log field.
_LOG_FIELDS = {
    "calories": "calories",
    "protein": "protein",
    "carbs": "carbohydrates",
    "fat": "fat",
    "fiber": "fiber",
    "sugar": "sugar",
}


@dataclass
class DailySummaryService:
    """Aggregates a calendar day of food logs against the user's goals."""

    food_log_repository: FoodLogRepository
    profile_repository: ProfileRepository
    timezone: tzinfo | None = None

    def get_summary(self, user_id: str, raw_date: str | None = None) -> DailySummary:
        """Return totals, goals, remaining, and progress for one day."""
        day = _parse_day(raw_date, self.timezone)
        start, end = _day_bounds(day, self.timezone)

        with translate_errors("Failed to get summary"):
            logs = self.food_log_repository.list_food_logs(user_id, start, end)
            goals = self._goals(user_id)

        totals = aggregate_totals(logs)
        return DailySummary(
            day=day,
            food_logs=logs,
            totals=totals,
            goals=goals,
            remaining={
                name: goal - getattr(totals, name)
                for name, goal in asdict(goals).items()
            },
            progress={
                name: progress_percent(getattr(totals, name), goal)
                for name, goal in asdict(goals).items()
            },
        )

    def _goals(self, user_id: str) -> Goals:
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return DEFAULT_GOALS
        return Goals(
            calories=_or_default(profile.daily_calorie_target, DEFAULT_GOALS.calories),
            protein=_or_default(profile.daily_protein_target, DEFAULT_GOALS.protein),
            carbs=_or_default(profile.daily_carbs_target, DEFAULT_GOALS.carbs),
            fat=_or_default(profile.daily_fat_target, DEFAULT_GOALS.fat),
        )


def aggregate_totals(logs: list[dict[str, object]]) -> NutrientTotals:
    """Sum nutrient fields; missing or non-numeric values count as zero."""
    sums = dict.fromkeys(_LOG_FIELDS, 0.0)
    for log in logs:
        for name, field_name in _LOG_FIELDS.items():
            sums[name] += _number(log.get(field_name))
    return NutrientTotals(**sums)


def progress_percent(total: float, goal: float) -> int:
    """Return total as a rounded percentage of goal; 0 when goal is not positive."""
    if goal <= 0:
        return 0
    return math.floor(total / goal * 100 + 0.5)


def _parse_day(raw: str | None, tz: tzinfo | None) -> date:
    if not raw:
        return datetime.now(tz=tz).date()
    try:
        parsed = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid date: {raw}") from exc
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz)
    return parsed.date()


def _day_bounds(day: date, tz: tzinfo | None) -> tuple[datetime, datetime]:
    """Return the first and last instant of a calendar day.

    Without a configured zone the bounds are resolved in server-local time for
    that date, so daylight-saving offsets follow the day rather than today.
    """
    if tz is None:
        return (
            datetime.combine(day, time.min).astimezone(),
            datetime.combine(day, time.max).astimezone(),
        )
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(day, time.max, tzinfo=tz),
    )


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)


def _or_default(value: float | None, default: float) -> float:
    return default if value is None else value
