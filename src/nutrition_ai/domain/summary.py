"""Domain models for daily nutrition summaries."""

from dataclasses import asdict, dataclass
from datetime import date


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrients for a set of food logs."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0


@dataclass(frozen=True)
class Goals:
    """Daily per-nutrient targets."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DailySummary:
    """Totals, goals, and progress for one calendar day."""

    day: date
    food_logs: list[dict[str, object]]
    totals: NutrientTotals
    goals: Goals
    remaining: dict[str, float]
    progress: dict[str, int]

    def to_payload(self) -> dict[str, object]:
        return {
            "date": self.day.isoformat(),
            "foodLogs": self.food_logs,
            "totals": asdict(self.totals),
            "goals": asdict(self.goals),
            "remaining": self.remaining,
            "progress": self.progress,
        }
