"""Domain models for Nutri-Score computation."""

from dataclasses import dataclass
from enum import Enum


class ProductCategory(Enum):
    """Kind of product being scored; selects tables and combination rule."""

    FOOD = "food"
    BEVERAGE = "beverage"
    WATER = "water"
    CHEESE = "cheese"


class Grade(str, Enum):
    """Nutri-Score letter, best to worst."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"


@dataclass(frozen=True)
class NutritionalInput:
    """Per-100g nutrient measurements for a single product.

    Fruit covers fruits, vegetables, pulses, nuts and rapeseed, walnut and
    olive oils, as a percentage of the total.
    """

    energy_kj: float
    sugars_g: float
    saturated_fat_g: float
    sodium_mg: float
    fruit_percent: float
    fibre_g: float
    protein_g: float


@dataclass(frozen=True)
class ScoreResult:
    """Numeric nutritional score; lower is healthier."""

    value: int
    positive: int
    negative: int
    category: ProductCategory


@dataclass(frozen=True)
class ScoreReport:
    """Score together with its letter grade."""

    result: ScoreResult
    grade: Grade
