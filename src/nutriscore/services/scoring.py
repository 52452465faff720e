"""Nutri-Score computation and grading."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutriscore.domain import thresholds
from nutriscore.domain.scoring import (
    Grade,
    NutritionalInput,
    ProductCategory,
    ScoreReport,
    ScoreResult,
)

_GRADES = (Grade.A, Grade.B, Grade.C, Grade.D, Grade.E)

_logger = logging.getLogger(__name__)


def points_from_thresholds(value: float, steps: Sequence[float]) -> int:
    """Return points for the first breakpoint strictly exceeded by value."""
    for index, step in enumerate(steps):
        if value > step:
            return len(steps) - index
    return 0


def energy_from_kcal(kcal: float) -> float:
    """Convert energy density from kcal to kJ."""
    return kcal * thresholds.KJ_PER_KCAL


def sodium_from_salt(salt_mg: float) -> float:
    """Convert salt content in mg to sodium content in mg."""
    return salt_mg / thresholds.SALT_TO_SODIUM_RATIO


def energy_points(energy_kj: float, category: ProductCategory) -> int:
    if category is ProductCategory.BEVERAGE:
        return points_from_thresholds(energy_kj, thresholds.ENERGY_KJ_BEVERAGE)
    return points_from_thresholds(energy_kj, thresholds.ENERGY_KJ)


def sugars_points(sugars_g: float, category: ProductCategory) -> int:
    if category is ProductCategory.BEVERAGE:
        return points_from_thresholds(sugars_g, thresholds.SUGARS_G_BEVERAGE)
    return points_from_thresholds(sugars_g, thresholds.SUGARS_G)


def saturated_fat_points(saturated_fat_g: float, category: ProductCategory) -> int:
    return points_from_thresholds(saturated_fat_g, thresholds.SATURATED_FAT_G)


def sodium_points(sodium_mg: float, category: ProductCategory) -> int:
    return points_from_thresholds(sodium_mg, thresholds.SODIUM_MG)


def fruit_points(fruit_percent: float, category: ProductCategory) -> int:
    """Return points for the fruit, vegetable and nut share."""
    buckets = (
        thresholds.FRUIT_BUCKETS_BEVERAGE
        if category is ProductCategory.BEVERAGE
        else thresholds.FRUIT_BUCKETS
    )
    for lower_bound, points in buckets:
        if fruit_percent > lower_bound:
            return points
    return 0


def fibre_points(fibre_g: float, category: ProductCategory) -> int:
    return points_from_thresholds(fibre_g, thresholds.FIBRE_G)


def protein_points(protein_g: float, category: ProductCategory) -> int:
    return points_from_thresholds(protein_g, thresholds.PROTEIN_G)


def compute_score(
    nutrients: NutritionalInput, category: ProductCategory
) -> ScoreResult:
    """Compute the nutritional score of a product in the given category.

    Water is never scored and always comes out at zero. Cheese subtracts all
    positive points. Food and beverages with at least 11 negative points and
    fewer than 5 fruit points do not get credit for protein.
    """
    if category is ProductCategory.WATER:
        _logger.debug("Water is not scored")
        return ScoreResult(value=0, positive=0, negative=0, category=category)

    fruit = fruit_points(nutrients.fruit_percent, category)
    fibre = fibre_points(nutrients.fibre_g, category)
    protein = protein_points(nutrients.protein_g, category)
    negative = (
        energy_points(nutrients.energy_kj, category)
        + sugars_points(nutrients.sugars_g, category)
        + saturated_fat_points(nutrients.saturated_fat_g, category)
        + sodium_points(nutrients.sodium_mg, category)
    )
    positive = fruit + fibre + protein

    if category is ProductCategory.CHEESE:
        value = negative - positive
    elif (
        negative >= thresholds.PROTEIN_CAP_NEGATIVE_POINTS
        and fruit < thresholds.PROTEIN_CAP_FRUIT_POINTS
    ):
        _logger.debug(
            "Protein excluded: negative=%s fruit_points=%s", negative, fruit
        )
        value = negative - fibre - fruit
    else:
        value = negative - positive

    return ScoreResult(
        value=value, positive=positive, negative=negative, category=category
    )


def grade_of(result: ScoreResult) -> Grade:
    """Map a nutritional score to its Nutri-Score letter."""
    if result.category is ProductCategory.WATER:
        return Grade.A
    if result.category is ProductCategory.BEVERAGE:
        steps = thresholds.GRADE_BEVERAGE
    else:
        steps = thresholds.GRADE_FOOD
    return _GRADES[points_from_thresholds(result.value, steps)]


@dataclass
class ScoringService:
    """Service that scores and grades products."""

    default_category: ProductCategory = ProductCategory.FOOD
    debug: bool = False

    def evaluate(
        self,
        nutrients: NutritionalInput,
        category: ProductCategory | None = None,
    ) -> ScoreReport:
        """Score a product and attach its letter grade."""
        resolved_category = category or self.default_category
        result = compute_score(nutrients, resolved_category)
        grade = grade_of(result)
        if self.debug:
            _logger.info(
                "Nutri-Score: category=%s value=%s positive=%s negative=%s grade=%s",
                resolved_category.value,
                result.value,
                result.positive,
                result.negative,
                grade.value,
            )
        return ScoreReport(result=result, grade=grade)
