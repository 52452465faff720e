"""Shared test fixtures."""

import pytest

from nutriscore.config import Settings
from nutriscore.domain.scoring import NutritionalInput


@pytest.fixture
def reference_product() -> NutritionalInput:
    return NutritionalInput(
        energy_kj=0,
        sugars_g=10,
        saturated_fat_g=2,
        sodium_mg=500,
        fruit_percent=60,
        fibre_g=4,
        protein_g=2,
    )


@pytest.fixture
def high_protein_product() -> NutritionalInput:
    """Product with 15 negative points, no fruit or fibre and 5 protein points."""
    return NutritionalInput(
        energy_kj=3400,
        sugars_g=0,
        saturated_fat_g=5.5,
        sodium_mg=0,
        fruit_percent=0,
        fibre_g=0,
        protein_g=9,
    )


@pytest.fixture
def settings(monkeypatch) -> Settings:
    for name in ("LOG_LEVEL", "DEBUG", "DEFAULT_CATEGORY"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)
