"""In-memory food catalog seeded with common foods."""

from dataclasses import dataclass, field

from fittracker.domain.nutrition import FoodItem
from fittracker.services.catalog import FoodCatalogRepository


def _food(  # noqa: PLR0913
    food_id: str,
    name: str,
    calories: float,
    protein_g: float,
    carbs_g: float,
    fat_g: float,
    fiber_g: float,
    category: str,
    sugar_g: float | None = None,
) -> FoodItem:
    return FoodItem(
        id=food_id,
        name=name,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        fiber_g=fiber_g,
        sugar_g=sugar_g,
        category=category,
    )


SAMPLE_FOODS: tuple[FoodItem, ...] = (
    _food("chicken-breast", "Chicken Breast", 165, 31, 0, 3.6, 0, "Protein"),
    _food("salmon", "Salmon", 208, 25, 0, 12, 0, "Protein"),
    _food("eggs", "Eggs", 155, 13, 1.1, 11, 0, "Protein"),
    _food("ground-beef", "Ground Beef (85% lean)", 250, 25, 0, 17, 0, "Protein"),
    _food("greek-yogurt", "Greek Yogurt (Plain)", 59, 10, 3.6, 0.4, 0, "Dairy"),
    _food("brown-rice", "Brown Rice", 112, 2.6, 22, 0.9, 1.8, "Carbohydrates"),
    _food("sweet-potato", "Sweet Potato", 86, 1.6, 20, 0.1, 3, "Carbohydrates"),
    _food("oats", "Oats", 389, 16.9, 66, 6.9, 10.6, "Carbohydrates"),
    _food("quinoa", "Quinoa", 120, 4.4, 22, 1.9, 2.8, "Carbohydrates"),
    _food("banana", "Banana", 89, 1.1, 23, 0.3, 2.6, "Fruits", sugar_g=12),
    _food("apple", "Apple", 52, 0.3, 14, 0.2, 2.4, "Fruits", sugar_g=10),
    _food("berries", "Mixed Berries", 57, 0.7, 14, 0.3, 2.4, "Fruits"),
    _food("broccoli", "Broccoli", 34, 2.8, 7, 0.4, 2.6, "Vegetables"),
    _food("spinach", "Spinach", 23, 2.9, 3.6, 0.4, 2.2, "Vegetables"),
    _food("carrots", "Carrots", 41, 0.9, 10, 0.2, 2.8, "Vegetables"),
    _food("avocado", "Avocado", 160, 2, 9, 15, 7, "Fats"),
    _food("almonds", "Almonds", 579, 21, 22, 50, 12, "Nuts & Seeds"),
    _food("olive-oil", "Olive Oil", 884, 0, 0, 100, 0, "Fats"),
    _food("peanut-butter", "Peanut Butter", 588, 25, 20, 50, 6, "Nuts & Seeds"),
    _food("milk", "Milk (2%)", 50, 3.3, 4.8, 2, 0, "Dairy"),
    _food("cheese", "Cheddar Cheese", 403, 25, 1.3, 33, 0, "Dairy"),
    _food("bread", "Whole Wheat Bread", 247, 13, 41, 4.2, 7, "Grains"),
    _food("pasta", "Whole Wheat Pasta", 124, 5.3, 25, 1.1, 3.9, "Grains"),
)


@dataclass
class InMemoryFoodCatalogRepository(FoodCatalogRepository):
    """Food catalog held in process memory."""

    foods: dict[str, FoodItem] = field(default_factory=dict)

    @classmethod
    def with_sample_foods(cls) -> "InMemoryFoodCatalogRepository":
        return cls(foods={food.id: food for food in SAMPLE_FOODS})

    def get_food(self, food_id: str) -> FoodItem | None:
        return self.foods.get(food_id)

    def list_foods(self) -> list[FoodItem]:
        return list(self.foods.values())

    def add_food(self, food: FoodItem) -> None:
        self.foods[food.id] = food
