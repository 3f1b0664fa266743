"""
Insights Service - simulated AI displays (wellness score, exercise form analysis).

Both are placeholders for models that do not exist yet: the numbers are drawn
from a random source, which callers may inject for reproducible output.
"""
import random
from .base import logging, datetime
from data import FORM_ISSUE_DESCRIPTIONS

logger = logging.getLogger("fitness_app")

_rng = random.Random()

TRENDS = ["up", "down", "stable"]
ISSUE_TYPES = ["posture", "range_of_motion", "tempo", "alignment"]
SEVERITIES = ["low", "medium", "high"]


def _score(rng: random.Random) -> int:
    return rng.randint(70, 99)


class InsightsService:

    def wellness_score(self, rng: random.Random = None) -> dict:
        rng = rng or _rng
        return {
            "overall": _score(rng),
            "physical": _score(rng),
            "mental": _score(rng),
            "recovery": _score(rng),
            "readiness": _score(rng),
            "trend": rng.choice(TRENDS),
        }

    def analyze_form(self, exercise_id: str, exercise_name: str, rng: random.Random = None) -> dict:
        rng = rng or _rng
        form_score = _score(rng)
        now = datetime.utcnow().isoformat()

        issues = []
        for _ in range(rng.randint(0, 2)):
            issue_type = rng.choice(ISSUE_TYPES)
            issues.append({
                "type": issue_type,
                "severity": rng.choice(SEVERITIES),
                "description": FORM_ISSUE_DESCRIPTIONS[issue_type],
                "timestamp": now,
            })

        if form_score >= 90:
            feedback = "Excellent form! Keep that technique."
        elif form_score >= 80:
            feedback = "Good form. Small adjustments would sharpen your technique."
        else:
            feedback = "Acceptable form. Review the points above to improve."

        return {
            "exercise_id": exercise_id,
            "exercise_name": exercise_name,
            "form_score": form_score,
            "repetitions": rng.randint(1, 5),
            "issues": issues,
            "feedback": feedback,
            "timestamp": now,
        }


# Singleton instance
insights_service = InsightsService()

def get_insights_service() -> InsightsService:
    """Dependency injection helper."""
    return insights_service
