"""
Food Service - search over the static Spanish food catalog.
"""
from .base import HTTPException, logging
from data import SPANISH_FOODS

logger = logging.getLogger("fitness_app")


class FoodService:
    """Read-only access to the in-memory catalog."""

    def search_foods(self, query: str = None, category: str = None, region: str = None,
                     supermarket: str = None, vegan: bool = None, gluten_free: bool = None,
                     limit: int = 20) -> list:
        results = SPANISH_FOODS
        if query:
            term = query.lower()
            results = [
                f for f in results
                if term in f["name"].lower()
                or term in (f["brand"] or "").lower()
                or term in f["category"].lower()
                or term in (f["region"] or "").lower()
            ]
        if category:
            results = [f for f in results if f["category"].lower() == category.lower()]
        if region:
            results = [f for f in results if (f["region"] or "").lower() == region.lower()]
        if supermarket:
            results = [f for f in results if supermarket.lower() in [s.lower() for s in f["supermarkets"]]]
        if vegan is not None:
            results = [f for f in results if f["is_vegan"] == vegan]
        if gluten_free is not None:
            results = [f for f in results if f["is_gluten_free"] == gluten_free]
        return results[:limit]

    def get_food(self, food_id: str) -> dict:
        for food in SPANISH_FOODS:
            if food["id"] == food_id:
                return food
        raise HTTPException(status_code=404, detail="Food not found")

    def get_categories(self) -> list:
        return sorted({f["category"] for f in SPANISH_FOODS})


# Singleton instance
food_service = FoodService()

def get_food_service() -> FoodService:
    """Dependency injection helper."""
    return food_service
