"""
Strength Service - one-rep-max estimation and rep-max tables.
"""
import math
from .base import HTTPException, logging

logger = logging.getLogger("fitness_app")

FORMULAS = {
    "brzycki": lambda w, r: w * 36 / (37 - r),
    "epley": lambda w, r: w * (1 + 0.0333 * r),
    "lander": lambda w, r: (100 * w) / (101.3 - 2.67123 * r),
    "lombardi": lambda w, r: w * math.pow(r, 0.1),
    "oconner": lambda w, r: w * (1 + 0.025 * r),
    "wathan": lambda w, r: (100 * w) / (48.8 + 53.8 * math.exp(-0.075 * r)),
}

# % of 1RM you can lift for 1..12 reps
REP_PERCENTAGES = [100, 95, 90, 88, 85, 83, 80, 78, 76, 75, 72, 70]

MAX_REPS = 36


class StrengthService:
    """Pure calculations, no database access."""

    def _validate(self, weight: float, reps: int, formula: str):
        if formula not in FORMULAS:
            raise HTTPException(status_code=400, detail=f"Unknown formula '{formula}'. Use one of: {', '.join(FORMULAS)}")
        if weight is None or weight <= 0:
            raise HTTPException(status_code=400, detail="Weight must be greater than 0")
        if reps is None or reps < 1 or reps > MAX_REPS:
            raise HTTPException(status_code=400, detail=f"Reps must be between 1 and {MAX_REPS}")

    def estimate_one_rep_max(self, weight: float, reps: int, formula: str = "brzycki") -> float:
        self._validate(weight, reps, formula)
        if reps == 1:
            return round(float(weight), 1)
        return round(FORMULAS[formula](weight, reps), 1)

    def rep_max_table(self, weight: float, reps: int, formula: str = "brzycki") -> dict:
        """Estimated 1RM plus the weight for 1..12 reps. The entered rep count keeps the entered weight."""
        one_rm = self.estimate_one_rep_max(weight, reps, formula)
        table = []
        for i, pct in enumerate(REP_PERCENTAGES):
            rep_count = i + 1
            table.append({
                "reps": rep_count,
                "percentage": pct,
                "weight": weight if rep_count == reps else round(one_rm * pct / 100)
            })
        return {"one_rep_max": one_rm, "formula": formula, "table": table}

    def best_set_estimate(self, sets: list, formula: str = "brzycki") -> float:
        """Best estimated 1RM across logged sets, ignoring sets that cannot be estimated."""
        best = 0.0
        for s in sets:
            weight = s.get("weight") or 0
            reps = s.get("reps") or 0
            if weight <= 0 or reps < 1 or reps > MAX_REPS:
                continue
            best = max(best, self.estimate_one_rep_max(weight, reps, formula))
        return best


# Singleton instance
strength_service = StrengthService()

def get_strength_service() -> StrengthService:
    """Dependency injection helper."""
    return strength_service
